from django.conf import settings
from drf_spectacular.utils import extend_schema
from rest_framework import viewsets
from rest_framework.decorators import action
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response

from apps.core.pagination import PageRangePagination
from .models import AuditLog
from .serializers import (
    AuditLogFilterSerializer,
    AuditLogListSerializer,
    AuditLogSerializer,
    AuditStatsSerializer,
)
from .services import get_audit_stats


class AuditLogPagination(PageRangePagination):
    """Numbered pages with an ellipsis strip for the viewer."""

    def __init__(self):
        super().__init__()
        self.page_size = settings.AUDIT_LOG_PAGE_SIZE


class AuditLogViewSet(viewsets.ReadOnlyModelViewSet):
    """
    Read-only access to the requesting user's audit trail.

    list: Filtered, newest-first, 20 per page
    retrieve: One entry with its old/new snapshots
    stats: Totals by action and entity plus 30 days of activity
    """

    queryset = AuditLog.objects.select_related('user')
    serializer_class = AuditLogSerializer
    permission_classes = [IsAuthenticated]
    pagination_class = AuditLogPagination

    def get_queryset(self):
        queryset = super().get_queryset()
        if getattr(self, 'swagger_fake_view', False):
            return queryset.none()

        queryset = queryset.filter(user=self.request.user)
        if self.action == 'list':
            filter_serializer = AuditLogFilterSerializer(data=self.request.query_params)
            filter_serializer.is_valid(raise_exception=True)
            queryset = filter_serializer.filter_queryset(queryset)
        return queryset

    def get_serializer_class(self):
        if self.action == 'list':
            return AuditLogListSerializer
        return AuditLogSerializer

    @extend_schema(responses=AuditStatsSerializer)
    @action(detail=False, methods=['get'])
    def stats(self, request):
        """
        GET /api/audit-logs/stats/?start_date=&end_date=
        """
        filter_serializer = AuditLogFilterSerializer(data=request.query_params)
        filter_serializer.is_valid(raise_exception=True)
        params = filter_serializer.validated_data

        stats = get_audit_stats(
            user=request.user,
            start_date=params.get('start_date'),
            end_date=params.get('end_date'),
        )
        return Response(stats)
