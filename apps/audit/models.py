from django.conf import settings
from django.core.serializers.json import DjangoJSONEncoder
from django.db import models
import uuid


class AuditAction(models.TextChoices):
    CREATE = 'CREATE', 'Create'
    UPDATE = 'UPDATE', 'Update'
    DELETE = 'DELETE', 'Delete'


class EntityType(models.TextChoices):
    EXPENSE = 'expense', 'Expense'
    INCOME = 'income', 'Income'
    CUSTOMER_PAYMENT = 'customer-payment', 'Customer payment'
    CUSTOMER = 'customer', 'Customer'
    EMPLOYEE = 'employee', 'Employee'
    LANDLORD = 'landlord', 'Landlord'
    PROJECT = 'project', 'Project'
    CATEGORY = 'category', 'Category'


class AuditLog(models.Model):
    """
    One create, update or delete of a ledger record.

    Rows are append-only. ``changes`` holds the serialized record before
    and after the write (``old`` is null for creates, ``new`` for deletes).
    """

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name='audit_logs'
    )
    action = models.CharField(max_length=10, choices=AuditAction.choices)
    entity_type = models.CharField(max_length=30, choices=EntityType.choices)
    entity_id = models.CharField(max_length=100)
    changes = models.JSONField(default=dict, encoder=DjangoJSONEncoder)
    metadata = models.JSONField(default=dict, encoder=DjangoJSONEncoder)
    timestamp = models.DateTimeField(auto_now_add=True, db_index=True)

    class Meta:
        db_table = 'audit_logs'
        ordering = ['-timestamp']
        indexes = [
            models.Index(fields=['user', '-timestamp']),
            models.Index(fields=['user', 'entity_type', '-timestamp']),
            models.Index(fields=['user', 'action', '-timestamp']),
            models.Index(fields=['user', 'entity_id', '-timestamp']),
        ]

    def __str__(self):
        return f"{self.action} {self.entity_type} {self.entity_id}"

    @property
    def description(self):
        return self.metadata.get('description', '')
