from django.core.validators import MinLengthValidator, MinValueValidator, RegexValidator
from django.db import models
from decimal import Decimal, ROUND_HALF_UP

from apps.core.models import OwnedModel, RecordStatus

phone_validator = RegexValidator(
    regex=r'^\d{10}$',
    message='Invalid phone number format (10 digits required)',
)

non_negative = MinValueValidator(Decimal('0'))


class Landlord(OwnedModel):
    """
    Seller of land to a project.

    ``total_land_price`` is derived from the price per acre and the extent
    and is recomputed on every save.
    """

    name = models.CharField(max_length=200, validators=[MinLengthValidator(2)])
    amount = models.DecimalField(
        max_digits=14,
        decimal_places=2,
        default=Decimal('0'),
        validators=[non_negative],
        help_text='Advance paid to the landlord'
    )
    price_per_acre = models.DecimalField(
        max_digits=14,
        decimal_places=2,
        default=Decimal('0'),
        validators=[non_negative]
    )
    total_extent = models.DecimalField(
        max_digits=10,
        decimal_places=4,
        default=Decimal('0'),
        validators=[non_negative],
        help_text='Extent in acres'
    )
    total_land_price = models.DecimalField(
        max_digits=16,
        decimal_places=2,
        default=Decimal('0'),
        editable=False
    )
    phone = models.CharField(max_length=10, blank=True, validators=[phone_validator])
    email = models.EmailField(blank=True)
    address = models.TextField(blank=True)
    notes = models.TextField(blank=True)
    status = models.CharField(
        max_length=10,
        choices=RecordStatus.choices,
        default=RecordStatus.ACTIVE
    )

    class Meta:
        db_table = 'landlords'
        ordering = ['-created_at']

    def __str__(self):
        return self.name

    def calculate_total_land_price(self) -> Decimal:
        total = Decimal(self.price_per_acre or 0) * Decimal(self.total_extent or 0)
        return total.quantize(Decimal('0.01'), rounding=ROUND_HALF_UP)

    def save(self, *args, **kwargs):
        self.total_land_price = self.calculate_total_land_price()
        update_fields = kwargs.get('update_fields')
        if update_fields is not None and (
            'price_per_acre' in update_fields or 'total_extent' in update_fields
        ):
            kwargs['update_fields'] = set(update_fields) | {'total_land_price'}
        super().save(*args, **kwargs)
