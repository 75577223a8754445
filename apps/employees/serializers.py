from rest_framework import serializers

from apps.core.filters import ListQuerySerializer
from apps.core.models import RecordStatus
from .models import Employee


class EmployeeFilterSerializer(ListQuerySerializer):
    """
    Validate query parameters for employee listing.

    Query Parameters:
        search (str): Name, employee ID, job title, email or phone contains
        status (str): active or inactive
        job_title (str): Job title contains
        start_date / end_date (date): Joining date range
        sort_by (str): name, salary, joining_date or created
    """

    search_fields = ('name', 'employee_id', 'job_title', 'email', 'phone')
    sort_fields = {
        'name': 'name',
        'salary': 'salary',
        'joining_date': 'joining_date',
        'created': 'created_at',
    }
    date_field = 'joining_date'

    status = serializers.ChoiceField(choices=RecordStatus.choices, required=False)
    job_title = serializers.CharField(max_length=100, required=False)

    def apply_filters(self, queryset, params):
        if 'status' in params:
            queryset = queryset.filter(status=params['status'])
        if params.get('job_title'):
            queryset = queryset.filter(job_title__icontains=params['job_title'])
        return queryset


class EmployeeSerializer(serializers.ModelSerializer):
    """Main serializer for employees."""

    email = serializers.EmailField(required=False, allow_blank=True, default='')

    class Meta:
        model = Employee
        fields = [
            'id',
            'employee_id',
            'name',
            'job_title',
            'salary',
            'phone',
            'email',
            'address',
            'joining_date',
            'status',
            'created_at',
            'updated_at',
        ]
        read_only_fields = ['id', 'created_at', 'updated_at']

    def validate_employee_id(self, value):
        value = value.strip()
        if len(value) < 2:
            raise serializers.ValidationError('Employee ID must be at least 2 characters')
        return value

    def validate_name(self, value):
        value = value.strip()
        if len(value) < 2:
            raise serializers.ValidationError('Name must be at least 2 characters')
        return value

    def validate_email(self, value):
        return value.strip().lower()


class RecentEmployeeSerializer(serializers.Serializer):
    id = serializers.UUIDField()
    name = serializers.CharField()
    job_title = serializers.CharField()
    created_at = serializers.DateTimeField()


class EmployeeStatsSerializer(serializers.Serializer):
    total_employees = serializers.IntegerField()
    active_employees = serializers.IntegerField()
    inactive_employees = serializers.IntegerField()
    total_salary_expense = serializers.DecimalField(max_digits=14, decimal_places=2)
    average_salary = serializers.DecimalField(max_digits=14, decimal_places=2)
    recent_employees = RecentEmployeeSerializer(many=True)
