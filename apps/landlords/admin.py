from django.contrib import admin

from .models import Landlord


@admin.register(Landlord)
class LandlordAdmin(admin.ModelAdmin):
    list_display = ['name', 'price_per_acre', 'total_extent', 'total_land_price', 'amount', 'status', 'owner']
    list_filter = ['status']
    search_fields = ['name', 'phone', 'email', 'address']
    readonly_fields = ['id', 'total_land_price', 'created_at', 'updated_at']
