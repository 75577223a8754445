from django.core.validators import MinLengthValidator, MinValueValidator
from django.db import models
from decimal import Decimal

from apps.core.models import OwnedModel, RecordStatus


class Employee(OwnedModel):
    """Staff member whose monthly salary salary expenses follow."""

    employee_id = models.CharField(max_length=50, validators=[MinLengthValidator(2)])
    name = models.CharField(max_length=200, validators=[MinLengthValidator(2)])
    job_title = models.CharField(max_length=100)
    salary = models.DecimalField(
        max_digits=12,
        decimal_places=2,
        validators=[MinValueValidator(Decimal('0'))]
    )
    phone = models.CharField(max_length=20)
    email = models.EmailField(blank=True)
    address = models.TextField()
    joining_date = models.DateField()
    status = models.CharField(
        max_length=10,
        choices=RecordStatus.choices,
        default=RecordStatus.ACTIVE
    )

    class Meta:
        db_table = 'employees'
        ordering = ['-created_at']
        constraints = [
            models.UniqueConstraint(fields=['owner', 'employee_id'], name='unique_employee_id_per_owner'),
        ]
        indexes = [
            models.Index(fields=['owner', 'status']),
        ]

    def __str__(self):
        return f"{self.name} ({self.employee_id})"

    @property
    def is_active(self):
        return self.status == RecordStatus.ACTIVE
