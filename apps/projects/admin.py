from django.contrib import admin

from .models import Project


@admin.register(Project)
class ProjectAdmin(admin.ModelAdmin):
    list_display = ['name', 'location', 'commence_date', 'owner', 'created_at']
    search_fields = ['name', 'location']
    list_filter = ['commence_date']
    readonly_fields = ['id', 'created_at', 'updated_at']
