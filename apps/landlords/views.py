from drf_spectacular.utils import extend_schema
from rest_framework.decorators import action
from rest_framework.response import Response

from apps.audit.models import EntityType
from apps.core.exports import CURRENCY, TEXT, ExportColumn
from apps.core.viewsets import LedgerViewSet
from .models import Landlord
from .serializers import (
    LandlordFilterSerializer,
    LandlordSerializer,
    LandlordStatsSerializer,
)
from .services import (
    create_landlord,
    update_landlord,
    delete_landlord,
    get_landlord_stats,
)


class LandlordViewSet(LedgerViewSet):
    """
    ViewSet for Landlord CRUD operations.

    list: Filtered, sorted, paginated landlords
    create: Create a landlord (total land price is derived)
    retrieve: Get a landlord
    update / partial_update: Edit a landlord and recompute the total
    destroy: Delete a landlord
    """

    queryset = Landlord.objects.all()
    serializer_class = LandlordSerializer
    filter_serializer_class = LandlordFilterSerializer
    audit_entity_type = EntityType.LANDLORD

    export_title = 'Landlords'
    export_columns = (
        ExportColumn('Name', 'name'),
        ExportColumn('Price / Acre', 'price_per_acre', CURRENCY),
        ExportColumn('Extent (acres)', 'total_extent'),
        ExportColumn('Total Land Price', 'total_land_price', CURRENCY),
        ExportColumn('Advance Paid', 'amount', CURRENCY),
        ExportColumn('Phone', 'phone'),
        ExportColumn('Email', 'email'),
        ExportColumn('Status', 'status'),
    )

    def create_record(self, validated_data):
        return create_landlord(owner=self.request.user, **validated_data)

    def update_record(self, instance, validated_data):
        return update_landlord(landlord_id=instance.id, owner=self.request.user, **validated_data)

    def delete_record(self, instance):
        delete_landlord(landlord_id=instance.id, owner=self.request.user)

    def get_export_stats(self, queryset):
        stats = get_landlord_stats(queryset)
        return [
            ('Landlords', stats['total_landlords'], TEXT),
            ('Total Land Value', stats['total_land_value'], CURRENCY),
            ('Advance Paid', stats['total_advance_amount'], CURRENCY),
        ]

    @extend_schema(responses=LandlordStatsSerializer)
    @action(detail=False, methods=['get'], url_path='stats/summary', url_name='stats-summary')
    def summary(self, request):
        """
        GET /api/landlords/stats/summary/
        """
        return Response(get_landlord_stats(self.get_queryset()))
