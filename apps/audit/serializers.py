from rest_framework import serializers

from apps.core.filters import ListQuerySerializer
from .models import AuditAction, AuditLog, EntityType


class AuditLogFilterSerializer(ListQuerySerializer):
    """
    Validate query parameters for the audit-log viewer.

    Query Parameters:
        entity_type (str): Filter by entity type
        action (str): CREATE, UPDATE or DELETE
        entity_id (str): History of one record
        start_date / end_date (date): Inclusive by day
        search (str): Description contains
    """

    search_fields = ('metadata__description',)
    sort_fields = {'timestamp': 'timestamp'}
    default_sort = 'timestamp'
    date_field = 'timestamp__date'

    entity_type = serializers.ChoiceField(choices=EntityType.choices, required=False)
    action = serializers.ChoiceField(choices=AuditAction.choices, required=False)
    entity_id = serializers.CharField(max_length=100, required=False)

    def apply_filters(self, queryset, params):
        if 'entity_type' in params:
            queryset = queryset.filter(entity_type=params['entity_type'])
        if 'action' in params:
            queryset = queryset.filter(action=params['action'])
        if 'entity_id' in params:
            queryset = queryset.filter(entity_id=params['entity_id'])
        return queryset


class AuditUserSerializer(serializers.Serializer):
    id = serializers.UUIDField(read_only=True)
    username = serializers.CharField(read_only=True)
    email = serializers.EmailField(read_only=True)


class AuditLogListSerializer(serializers.ModelSerializer):
    """Lightweight rows for the viewer table."""

    user = AuditUserSerializer(read_only=True)
    description = serializers.CharField(read_only=True)

    class Meta:
        model = AuditLog
        fields = [
            'id',
            'user',
            'action',
            'entity_type',
            'entity_id',
            'description',
            'timestamp',
        ]
        read_only_fields = fields


class AuditLogSerializer(serializers.ModelSerializer):
    """Full row including the old/new snapshots."""

    user = AuditUserSerializer(read_only=True)

    class Meta:
        model = AuditLog
        fields = [
            'id',
            'user',
            'action',
            'entity_type',
            'entity_id',
            'changes',
            'metadata',
            'timestamp',
        ]
        read_only_fields = fields


class DailyActivitySerializer(serializers.Serializer):
    date = serializers.DateField()
    count = serializers.IntegerField()


class AuditStatsSerializer(serializers.Serializer):
    total = serializers.IntegerField()
    action_breakdown = serializers.DictField(child=serializers.IntegerField())
    entity_breakdown = serializers.DictField(child=serializers.IntegerField())
    daily_activity = DailyActivitySerializer(many=True)
