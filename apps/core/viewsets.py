"""
Base viewset for owner-scoped ledger entities.

Writes go through the app's services layer; the base class handles the
HTTP side: validation, translating service errors, re-reading the saved
record and writing the audit trail.
"""
from rest_framework import status, viewsets
from rest_framework.response import Response

from apps.audit.models import AuditAction
from apps.audit.services import record_change

from .exceptions import LedgerServiceError, RecordNotFoundError
from .mixins import ExportMixin, OwnedQuerysetMixin
from .pagination import StandardPagination


class LedgerViewSet(OwnedQuerysetMixin, ExportMixin, viewsets.ModelViewSet):
    """
    CRUD over one entity type.

    Subclasses implement ``create_record``, ``update_record`` and
    ``delete_record`` by calling their services, and set
    ``audit_entity_type``.
    """

    pagination_class = StandardPagination
    audit_entity_type = None

    def create_record(self, validated_data):
        raise NotImplementedError

    def update_record(self, instance, validated_data):
        raise NotImplementedError

    def delete_record(self, instance):
        raise NotImplementedError

    def service_error_response(self, error):
        if isinstance(error, RecordNotFoundError):
            code = status.HTTP_404_NOT_FOUND
        else:
            code = status.HTTP_400_BAD_REQUEST
        return Response({'error': str(error)}, status=code)

    def represent(self, instance):
        """Serialize a freshly written record as the list would show it."""
        instance = self.get_queryset().get(pk=instance.pk)
        return self.get_serializer(instance).data

    def audit(self, action, entity_id, old=None, new=None):
        record_change(
            user=self.request.user,
            action=action,
            entity_type=self.audit_entity_type,
            entity_id=entity_id,
            old=old,
            new=new,
            request=self.request,
        )

    def create(self, request, *args, **kwargs):
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        try:
            instance = self.create_record(serializer.validated_data)
        except LedgerServiceError as e:
            return self.service_error_response(e)

        data = self.represent(instance)
        self.audit(AuditAction.CREATE, data['id'], new=data)
        return Response(data, status=status.HTTP_201_CREATED)

    def update(self, request, *args, **kwargs):
        partial = kwargs.pop('partial', False)
        instance = self.get_object()
        old = self.get_serializer(instance).data

        serializer = self.get_serializer(instance, data=request.data, partial=partial)
        serializer.is_valid(raise_exception=True)

        try:
            instance = self.update_record(instance, serializer.validated_data)
        except LedgerServiceError as e:
            return self.service_error_response(e)

        data = self.represent(instance)
        self.audit(AuditAction.UPDATE, data['id'], old=old, new=data)
        return Response(data)

    def destroy(self, request, *args, **kwargs):
        instance = self.get_object()
        old = self.get_serializer(instance).data

        try:
            self.delete_record(instance)
        except LedgerServiceError as e:
            return self.service_error_response(e)

        self.audit(AuditAction.DELETE, old['id'], old=old)
        return Response(status=status.HTTP_204_NO_CONTENT)
