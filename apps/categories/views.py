from django.db.models import Prefetch
from drf_spectacular.utils import extend_schema
from rest_framework import status
from rest_framework.decorators import action
from rest_framework.response import Response

from apps.audit.models import AuditAction, EntityType
from apps.core.exports import DATE, TEXT, ExportColumn
from apps.core.viewsets import LedgerViewSet
from .models import Category, Subcategory
from .serializers import (
    CategoryFilterSerializer,
    CategorySerializer,
    CategoryStatsSerializer,
)
from .services import (
    create_category,
    update_category,
    delete_category,
    get_category_stats,
    init_default_categories,
    CategoriesAlreadyInitializedError,
)


def subcategory_names(category):
    return ', '.join(sub.name for sub in category.subcategories.all())


class CategoryViewSet(LedgerViewSet):
    """
    ViewSet for Category CRUD operations.

    Categories are addressed by their ID (slug), not the database key.

    list: Categories with nested subcategories
    create: Create a category and its subcategories
    retrieve: Get a category
    update / partial_update: Edit name, icon and the subcategory list
    destroy: Delete a category no expense references
    init_defaults: Seed the default trees for a new user
    """

    queryset = Category.objects.prefetch_related(
        Prefetch('subcategories', queryset=Subcategory.objects.order_by('position', 'name'))
    )
    serializer_class = CategorySerializer
    filter_serializer_class = CategoryFilterSerializer
    lookup_field = 'slug'
    audit_entity_type = EntityType.CATEGORY

    export_title = 'Categories'
    export_columns = (
        ExportColumn('ID', 'slug'),
        ExportColumn('Name', 'name'),
        ExportColumn('Icon', 'icon'),
        ExportColumn('Subcategories', subcategory_names),
        ExportColumn('Created', 'created_at', DATE),
    )

    def create_record(self, validated_data):
        return create_category(owner=self.request.user, **validated_data)

    def update_record(self, instance, validated_data):
        validated_data.pop('slug', None)
        return update_category(slug=instance.slug, owner=self.request.user, **validated_data)

    def delete_record(self, instance):
        delete_category(slug=instance.slug, owner=self.request.user)

    def get_export_stats(self, queryset):
        stats = get_category_stats(queryset)
        return [
            ('Categories', stats['total_categories'], TEXT),
            ('Subcategories', stats['total_subcategories'], TEXT),
        ]

    @extend_schema(responses=CategoryStatsSerializer)
    @action(detail=False, methods=['get'], url_path='stats/summary', url_name='stats-summary')
    def summary(self, request):
        """
        GET /api/categories/stats/summary/
        """
        return Response(get_category_stats(self.get_queryset()))

    @extend_schema(request=None, responses={201: CategorySerializer(many=True)})
    @action(detail=False, methods=['post'], url_path='init-defaults', url_name='init-defaults')
    def init_defaults(self, request):
        """
        POST /api/categories/init-defaults/

        Seed the default Office Expenses and Site & Construction trees.
        """
        try:
            categories = init_default_categories(owner=request.user)
        except CategoriesAlreadyInitializedError as e:
            return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)

        data = [self.represent(category) for category in categories]
        for item in data:
            self.audit(AuditAction.CREATE, item['id'], new=item)
        return Response(data, status=status.HTTP_201_CREATED)
