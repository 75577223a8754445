from decimal import Decimal

from django.core.validators import MinValueValidator, RegexValidator
from django.db import models

from apps.core.models import OwnedModel, PaymentDetails

salary_month_validator = RegexValidator(
    regex=r'^\d{4}-(0[1-9]|1[0-2])$',
    message='Salary month must be in YYYY-MM format'
)


class Expense(OwnedModel, PaymentDetails):
    """
    Money spent on a project.

    Two optional sections depend on the (category, subcategory) pair:
    salary details for salary payments and land details for land
    purchases. Outside their pair those fields stay empty.
    """

    project = models.ForeignKey(
        'projects.Project',
        on_delete=models.RESTRICT,
        related_name='expenses'
    )
    amount = models.DecimalField(
        max_digits=14, decimal_places=2,
        validators=[MinValueValidator(Decimal('0.01'))]
    )
    date = models.DateField()
    category = models.ForeignKey(
        'categories.Category',
        on_delete=models.RESTRICT,
        related_name='expenses'
    )
    subcategory = models.ForeignKey(
        'categories.Subcategory',
        on_delete=models.RESTRICT,
        related_name='expenses'
    )
    description = models.TextField()

    # Salary section
    employee = models.ForeignKey(
        'employees.Employee',
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='expenses'
    )
    salary_month = models.CharField(max_length=7, blank=True, validators=[salary_month_validator])
    override_salary = models.DecimalField(
        max_digits=12, decimal_places=2, null=True, blank=True,
        validators=[MinValueValidator(Decimal('0'))],
        help_text='When set, the amount no longer follows the employee salary'
    )

    # Land purchase section
    landlord = models.ForeignKey(
        'landlords.Landlord',
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='expenses'
    )
    land_purchase_amount = models.DecimalField(
        max_digits=16, decimal_places=2, null=True, blank=True,
        validators=[MinValueValidator(Decimal('0'))]
    )
    land_details = models.TextField(blank=True)

    class Meta:
        db_table = 'expenses'
        ordering = ['-date', '-created_at']
        indexes = [
            models.Index(fields=['owner', 'date']),
            models.Index(fields=['owner', 'category']),
            models.Index(fields=['owner', 'payment_mode']),
        ]

    def __str__(self):
        return f"{self.description} - {self.amount} ({self.date})"
