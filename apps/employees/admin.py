from django.contrib import admin

from .models import Employee


@admin.register(Employee)
class EmployeeAdmin(admin.ModelAdmin):
    list_display = ['employee_id', 'name', 'job_title', 'salary', 'status', 'joining_date', 'owner']
    list_filter = ['status', 'joining_date']
    search_fields = ['employee_id', 'name', 'job_title', 'email', 'phone']
    readonly_fields = ['id', 'created_at', 'updated_at']
