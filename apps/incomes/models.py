from decimal import Decimal

from django.core.validators import MinValueValidator
from django.db import models

from apps.core.models import OwnedModel, PaymentDetails


class Income(OwnedModel, PaymentDetails):
    """Money received from a source other than a plot customer."""

    amount = models.DecimalField(
        max_digits=14, decimal_places=2,
        validators=[MinValueValidator(Decimal('0.01'))]
    )
    date = models.DateField()
    description = models.TextField()
    source = models.CharField(max_length=200)
    payee = models.CharField(max_length=200)

    class Meta:
        db_table = 'incomes'
        ordering = ['-date', '-created_at']
        indexes = [
            models.Index(fields=['owner', 'date']),
            models.Index(fields=['owner', 'payment_mode']),
        ]

    def __str__(self):
        return f"{self.source} - {self.amount} ({self.date})"
