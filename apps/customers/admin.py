from django.contrib import admin

from .models import Customer, CustomerPayment


@admin.register(Customer)
class CustomerAdmin(admin.ModelAdmin):
    list_display = ['name', 'plot_number', 'project', 'sale_price', 'construction_price', 'owner']
    list_filter = ['project']
    search_fields = ['name', 'plot_number', 'phone', 'email']
    readonly_fields = ['id', 'created_at', 'updated_at']


@admin.register(CustomerPayment)
class CustomerPaymentAdmin(admin.ModelAdmin):
    list_display = ['date', 'customer_name', 'plot_number', 'amount', 'payment_category', 'payment_mode', 'owner']
    list_filter = ['payment_category', 'payment_mode', 'date']
    search_fields = ['customer_name', 'plot_number', 'invoice_number', 'description']
    readonly_fields = ['id', 'created_at', 'updated_at']
    date_hierarchy = 'date'
