from django.contrib import admin

from .models import Expense


@admin.register(Expense)
class ExpenseAdmin(admin.ModelAdmin):
    list_display = ['date', 'description', 'amount', 'category', 'subcategory', 'project', 'payment_mode', 'owner']
    list_filter = ['payment_mode', 'category', 'date']
    search_fields = ['description', 'cheque_number', 'transaction_id']
    readonly_fields = ['id', 'created_at', 'updated_at']
    raw_id_fields = ['employee', 'landlord']
    date_hierarchy = 'date'
