from rest_framework import serializers

from apps.core.filters import ListQuerySerializer
from .models import Project


class ProjectFilterSerializer(ListQuerySerializer):
    """
    Validate query parameters for project listing.

    Query Parameters:
        search (str): Name or location contains
        start_date / end_date (date): Commence date range
        sort_by (str): name, commence_date or created
    """

    search_fields = ('name', 'location')
    sort_fields = {
        'name': 'name',
        'commence_date': 'commence_date',
        'created': 'created_at',
    }
    date_field = 'commence_date'


class ProjectSerializer(serializers.ModelSerializer):
    """Main serializer for projects."""

    class Meta:
        model = Project
        fields = [
            'id',
            'name',
            'color',
            'location',
            'commence_date',
            'created_at',
            'updated_at',
        ]
        read_only_fields = ['id', 'created_at', 'updated_at']

    def validate_name(self, value):
        value = value.strip()
        if not value:
            raise serializers.ValidationError('Project name is required')
        return value


class ProjectStatsSerializer(serializers.Serializer):
    total_projects = serializers.IntegerField()
    projects_this_month = serializers.IntegerField()
    active_projects = serializers.IntegerField()
