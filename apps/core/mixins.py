from drf_spectacular.types import OpenApiTypes
from drf_spectacular.utils import extend_schema
from rest_framework.decorators import action

from .exports import render_csv, render_pdf, render_print

# Actions that work on the filtered, sorted collection
COLLECTION_ACTIONS = ('list', 'summary', 'export_csv', 'export_pdf', 'print_table')


class OwnedQuerysetMixin:
    """
    Restrict a viewset to the requesting user's records.

    For collection actions the query parameters are validated with
    ``filter_serializer_class`` and applied to the queryset.
    """

    filter_serializer_class = None

    def get_queryset(self):
        queryset = super().get_queryset()
        if getattr(self, 'swagger_fake_view', False):
            return queryset.none()

        queryset = queryset.filter(owner=self.request.user)
        if self.filter_serializer_class is not None and self.action in COLLECTION_ACTIONS:
            queryset = self.get_filter_serializer().filter_queryset(queryset)
        return queryset

    def get_filter_serializer(self):
        serializer = self.filter_serializer_class(
            data=self.request.query_params,
            context=self.get_serializer_context(),
        )
        serializer.is_valid(raise_exception=True)
        return serializer


class ExportMixin:
    """
    Adds ``export/csv``, ``export/pdf`` and ``print`` list actions.

    Exports cover the whole filtered set, not just the current page.
    """

    export_title = ''
    export_columns = ()

    def get_export_stats(self, queryset):
        """Stat tiles for the printable page as ``(label, value, kind)``."""
        return None

    @extend_schema(responses={200: OpenApiTypes.BINARY})
    @action(detail=False, methods=['get'], url_path='export/csv', url_name='export-csv')
    def export_csv(self, request, *args, **kwargs):
        return render_csv(self.export_title, self.export_columns, self.get_queryset())

    @extend_schema(responses={200: OpenApiTypes.BINARY})
    @action(detail=False, methods=['get'], url_path='export/pdf', url_name='export-pdf')
    def export_pdf(self, request, *args, **kwargs):
        return render_pdf(self.export_title, self.export_columns, self.get_queryset())

    @extend_schema(responses={200: OpenApiTypes.STR})
    @action(detail=False, methods=['get'], url_path='print', url_name='print')
    def print_table(self, request, *args, **kwargs):
        queryset = self.get_queryset()
        return render_print(
            request,
            self.export_title,
            self.export_columns,
            queryset,
            stats=self.get_export_stats(queryset),
        )
