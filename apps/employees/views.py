from drf_spectacular.utils import extend_schema
from rest_framework.decorators import action
from rest_framework.response import Response

from apps.audit.models import EntityType
from apps.core.exports import CURRENCY, DATE, TEXT, ExportColumn
from apps.core.viewsets import LedgerViewSet
from .models import Employee
from .serializers import (
    EmployeeFilterSerializer,
    EmployeeSerializer,
    EmployeeStatsSerializer,
)
from .services import (
    create_employee,
    update_employee,
    delete_employee,
    get_employee_stats,
)


class EmployeeViewSet(LedgerViewSet):
    """
    ViewSet for Employee CRUD operations.

    list: Filtered, sorted, paginated employees
    create: Create an employee (employee IDs are unique per user)
    retrieve: Get an employee
    update / partial_update: Edit an employee
    destroy: Delete an employee
    """

    queryset = Employee.objects.all()
    serializer_class = EmployeeSerializer
    filter_serializer_class = EmployeeFilterSerializer
    audit_entity_type = EntityType.EMPLOYEE

    export_title = 'Employees'
    export_columns = (
        ExportColumn('Employee ID', 'employee_id'),
        ExportColumn('Name', 'name'),
        ExportColumn('Job Title', 'job_title'),
        ExportColumn('Salary', 'salary', CURRENCY),
        ExportColumn('Phone', 'phone'),
        ExportColumn('Email', 'email'),
        ExportColumn('Joining Date', 'joining_date', DATE),
        ExportColumn('Status', 'status'),
    )

    def create_record(self, validated_data):
        return create_employee(owner=self.request.user, **validated_data)

    def update_record(self, instance, validated_data):
        return update_employee(pk=instance.id, owner=self.request.user, **validated_data)

    def delete_record(self, instance):
        delete_employee(pk=instance.id, owner=self.request.user)

    def get_export_stats(self, queryset):
        stats = get_employee_stats(queryset)
        return [
            ('Total Employees', stats['total_employees'], TEXT),
            ('Active', stats['active_employees'], TEXT),
            ('Monthly Salaries', stats['total_salary_expense'], CURRENCY),
        ]

    @extend_schema(responses=EmployeeStatsSerializer)
    @action(detail=False, methods=['get'], url_path='stats/summary', url_name='stats-summary')
    def summary(self, request):
        """
        GET /api/employees/stats/summary/
        """
        return Response(get_employee_stats(self.get_queryset()))
