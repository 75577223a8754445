from django.contrib import admin

from .models import Income


@admin.register(Income)
class IncomeAdmin(admin.ModelAdmin):
    list_display = ['date', 'source', 'payee', 'amount', 'payment_mode', 'owner']
    list_filter = ['payment_mode', 'date']
    search_fields = ['description', 'source', 'payee', 'cheque_number', 'transaction_id']
    readonly_fields = ['id', 'created_at', 'updated_at']
    date_hierarchy = 'date'
