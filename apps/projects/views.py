from drf_spectacular.utils import extend_schema
from rest_framework.decorators import action
from rest_framework.response import Response

from apps.audit.models import EntityType
from apps.core.exports import DATE, TEXT, ExportColumn
from apps.core.viewsets import LedgerViewSet
from .models import Project
from .serializers import (
    ProjectFilterSerializer,
    ProjectSerializer,
    ProjectStatsSerializer,
)
from .services import (
    create_project,
    update_project,
    delete_project,
    get_project_stats,
)


class ProjectViewSet(LedgerViewSet):
    """
    ViewSet for Project CRUD operations.

    list: Filtered, sorted, paginated projects
    create: Create a project (names are unique per user)
    retrieve: Get a project
    update / partial_update: Edit a project
    destroy: Delete a project no expense, customer or payment references
    """

    queryset = Project.objects.all()
    serializer_class = ProjectSerializer
    filter_serializer_class = ProjectFilterSerializer
    audit_entity_type = EntityType.PROJECT

    export_title = 'Projects'
    export_columns = (
        ExportColumn('Name', 'name'),
        ExportColumn('Location', 'location'),
        ExportColumn('Commence Date', 'commence_date', DATE),
        ExportColumn('Color', 'color'),
        ExportColumn('Created', 'created_at', DATE),
    )

    def create_record(self, validated_data):
        return create_project(owner=self.request.user, **validated_data)

    def update_record(self, instance, validated_data):
        return update_project(project_id=instance.id, owner=self.request.user, **validated_data)

    def delete_record(self, instance):
        delete_project(project_id=instance.id, owner=self.request.user)

    def get_export_stats(self, queryset):
        stats = get_project_stats(queryset)
        return [
            ('Total Projects', stats['total_projects'], TEXT),
            ('Added This Month', stats['projects_this_month'], TEXT),
        ]

    @extend_schema(responses=ProjectStatsSerializer)
    @action(detail=False, methods=['get'], url_path='stats/summary', url_name='stats-summary')
    def summary(self, request):
        """
        GET /api/projects/stats/summary/
        """
        return Response(get_project_stats(self.get_queryset()))
