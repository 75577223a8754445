from drf_spectacular.utils import extend_schema
from rest_framework.decorators import action
from rest_framework.response import Response

from apps.audit.models import EntityType
from apps.core.exports import CURRENCY, DATE, TEXT, ExportColumn
from apps.core.serializers import MoneyStatsSerializer
from apps.core.viewsets import LedgerViewSet
from .models import Income
from .serializers import (
    IncomeFilterSerializer,
    IncomeSerializer,
)
from .services import (
    create_income,
    update_income,
    delete_income,
    get_income_stats,
)


class IncomeViewSet(LedgerViewSet):
    """
    ViewSet for Income CRUD operations.

    list: Filtered, sorted, paginated incomes
    create: Record an income
    retrieve: Get an income
    update / partial_update: Edit an income
    destroy: Delete an income
    """

    queryset = Income.objects.all()
    serializer_class = IncomeSerializer
    filter_serializer_class = IncomeFilterSerializer
    audit_entity_type = EntityType.INCOME

    export_title = 'Incomes'
    export_columns = (
        ExportColumn('Date', 'date', DATE),
        ExportColumn('Source', 'source'),
        ExportColumn('Payee', 'payee'),
        ExportColumn('Description', 'description'),
        ExportColumn('Payment Mode', 'payment_mode'),
        ExportColumn('Reference', 'payment_reference'),
        ExportColumn('Amount', 'amount', CURRENCY),
    )

    def create_record(self, validated_data):
        return create_income(owner=self.request.user, **validated_data)

    def update_record(self, instance, validated_data):
        return update_income(income_id=instance.id, owner=self.request.user, **validated_data)

    def delete_record(self, instance):
        delete_income(income_id=instance.id, owner=self.request.user)

    def get_export_stats(self, queryset):
        stats = get_income_stats(queryset)
        return [
            ('Total Income', stats['total_amount'], CURRENCY),
            ('Records', stats['count'], TEXT),
        ]

    @extend_schema(responses=MoneyStatsSerializer)
    @action(detail=False, methods=['get'], url_path='stats/summary', url_name='stats-summary')
    def summary(self, request):
        """
        GET /api/incomes/stats/summary/
        """
        return Response(get_income_stats(self.get_queryset()))
