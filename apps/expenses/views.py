from drf_spectacular.utils import extend_schema
from rest_framework.decorators import action
from rest_framework.response import Response

from apps.audit.models import EntityType
from apps.core.exports import CURRENCY, DATE, TEXT, ExportColumn
from apps.core.viewsets import LedgerViewSet
from .models import Expense
from .serializers import (
    ExpenseFilterSerializer,
    ExpenseSerializer,
    ExpenseStatsSerializer,
)
from .services import (
    create_expense,
    update_expense,
    delete_expense,
    get_expense_stats,
)


class ExpenseViewSet(LedgerViewSet):
    """
    ViewSet for Expense CRUD operations.

    list: Filtered, sorted, paginated expenses
    create: Record an expense; salary and land sections follow the category
    retrieve: Get an expense
    update / partial_update: Edit an expense
    destroy: Delete an expense
    """

    queryset = Expense.objects.select_related(
        'project', 'category', 'subcategory', 'employee', 'landlord'
    )
    serializer_class = ExpenseSerializer
    filter_serializer_class = ExpenseFilterSerializer
    audit_entity_type = EntityType.EXPENSE

    export_title = 'Expenses'
    export_columns = (
        ExportColumn('Date', 'date', DATE),
        ExportColumn('Description', 'description'),
        ExportColumn('Project', 'project.name'),
        ExportColumn('Category', 'category.name'),
        ExportColumn('Subcategory', 'subcategory.name'),
        ExportColumn('Payment Mode', 'payment_mode'),
        ExportColumn('Reference', 'payment_reference'),
        ExportColumn('Amount', 'amount', CURRENCY),
    )

    def create_record(self, validated_data):
        return create_expense(owner=self.request.user, **validated_data)

    def update_record(self, instance, validated_data):
        return update_expense(expense_id=instance.id, owner=self.request.user, **validated_data)

    def delete_record(self, instance):
        delete_expense(expense_id=instance.id, owner=self.request.user)

    def get_export_stats(self, queryset):
        stats = get_expense_stats(queryset)
        return [
            ('Total Expenses', stats['total_amount'], CURRENCY),
            ('Records', stats['count'], TEXT),
        ]

    @extend_schema(responses=ExpenseStatsSerializer)
    @action(detail=False, methods=['get'], url_path='stats/summary', url_name='stats-summary')
    def summary(self, request):
        """
        GET /api/expenses/stats/summary/
        """
        return Response(get_expense_stats(self.get_queryset()))
