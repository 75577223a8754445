from django.core.validators import MinLengthValidator, MinValueValidator
from django.db import models
from django.db.models import DecimalField, ExpressionWrapper, F, OuterRef, Subquery, Sum, Value
from django.db.models.functions import Coalesce
from decimal import Decimal, ROUND_HALF_UP

from apps.core.models import OwnedModel, PaymentDetails

non_negative = MinValueValidator(Decimal('0'))

MONEY = DecimalField(max_digits=16, decimal_places=2)


class PaymentCategory(models.TextChoices):
    TOKEN = 'token', 'Token'
    ADVANCE = 'advance', 'Advance'
    BOOKING = 'booking', 'Booking'
    CONSTRUCTION = 'construction', 'Construction'
    DEVELOPMENT = 'development', 'Development'
    CLUBHOUSE = 'clubhouse', 'Clubhouse'
    FINAL = 'final', 'Final'


class CustomerQuerySet(models.QuerySet):

    def with_balances(self):
        """
        Annotate total_price, total_paid and balance.

        Payments are attributed by customer name within the same owner.
        """
        paid = (
            CustomerPayment.objects
            .filter(owner=OuterRef('owner'), customer_name=OuterRef('name'))
            .order_by()
            .values('customer_name')
            .annotate(total=Sum('amount'))
            .values('total')
        )
        return self.annotate(
            total_price=ExpressionWrapper(
                F('sale_price') + F('construction_price'),
                output_field=MONEY,
            ),
            total_paid=Coalesce(
                Subquery(paid, output_field=MONEY),
                Value(Decimal('0'), output_field=MONEY),
            ),
        ).annotate(
            balance=ExpressionWrapper(F('total_price') - F('total_paid'), output_field=MONEY),
        )


class Customer(OwnedModel):
    """Buyer of a plot within a project."""

    name = models.CharField(max_length=200, validators=[MinLengthValidator(2)])
    plot_number = models.CharField(max_length=50)
    plot_size = models.DecimalField(
        max_digits=12, decimal_places=2, validators=[non_negative],
        help_text='Plot size in square yards'
    )
    built_up_area = models.DecimalField(
        max_digits=12, decimal_places=2, validators=[non_negative],
        help_text='Built-up area in square feet'
    )
    project = models.ForeignKey(
        'projects.Project',
        on_delete=models.RESTRICT,
        related_name='customers'
    )
    sale_price = models.DecimalField(max_digits=14, decimal_places=2, validators=[non_negative])
    price_per_yard = models.DecimalField(max_digits=12, decimal_places=2, validators=[non_negative])
    construction_price = models.DecimalField(max_digits=14, decimal_places=2, validators=[non_negative])
    construction_price_per_sqft = models.DecimalField(
        max_digits=12, decimal_places=2, validators=[non_negative]
    )
    phone = models.CharField(max_length=20, blank=True)
    email = models.EmailField(blank=True)
    address = models.TextField(blank=True)

    objects = CustomerQuerySet.as_manager()

    class Meta:
        db_table = 'customers'
        ordering = ['-created_at']
        constraints = [
            models.UniqueConstraint(fields=['owner', 'plot_number'], name='unique_plot_number_per_owner'),
        ]

    def __str__(self):
        return f"{self.name} (Plot {self.plot_number})"

    @property
    def payment_progress(self) -> Decimal:
        """Percentage of the total price paid, to one decimal place."""
        total_price = getattr(self, 'total_price', None)
        if total_price is None:
            total_price = self.sale_price + self.construction_price
        if not total_price:
            return Decimal('0.0')
        total_paid = getattr(self, 'total_paid', Decimal('0'))
        progress = Decimal(total_paid) / Decimal(total_price) * 100
        return progress.quantize(Decimal('0.1'), rounding=ROUND_HALF_UP)


class CustomerPayment(OwnedModel, PaymentDetails):
    """
    Money received from a customer.

    ``customer_name`` is what ties a payment to a customer's balance; the
    optional ``customer`` link only drives auto-filling.
    """

    amount = models.DecimalField(
        max_digits=14, decimal_places=2,
        validators=[MinValueValidator(Decimal('0.01'))]
    )
    date = models.DateField()
    description = models.TextField()
    customer = models.ForeignKey(
        Customer,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='payments'
    )
    customer_name = models.CharField(max_length=200)
    invoice_number = models.CharField(max_length=50, blank=True)
    project = models.ForeignKey(
        'projects.Project',
        on_delete=models.RESTRICT,
        related_name='customer_payments'
    )
    plot_number = models.CharField(max_length=50)
    payment_category = models.CharField(max_length=20, choices=PaymentCategory.choices)
    total_price = models.DecimalField(max_digits=14, decimal_places=2, validators=[non_negative])
    development_charges = models.DecimalField(
        max_digits=14, decimal_places=2, default=Decimal('0'), validators=[non_negative]
    )
    clubhouse_charges = models.DecimalField(
        max_digits=14, decimal_places=2, default=Decimal('0'), validators=[non_negative]
    )
    construction_charges = models.DecimalField(
        max_digits=14, decimal_places=2, default=Decimal('0'), validators=[non_negative]
    )

    class Meta:
        db_table = 'customer_payments'
        ordering = ['-date', '-created_at']
        indexes = [
            models.Index(fields=['owner', 'date']),
            models.Index(fields=['owner', 'customer_name']),
            models.Index(fields=['owner', 'payment_category']),
        ]

    def __str__(self):
        return f"{self.customer_name} - {self.amount} ({self.date})"
