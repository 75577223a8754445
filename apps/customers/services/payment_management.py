"""
Customer payment service.

A payment may point at a customer record. When it does, the customer's
name, plot, project and prices fill whatever the caller left out.
"""

import logging
from decimal import Decimal
from uuid import UUID

from django.db import transaction
from django.db.models import Count, DecimalField, Sum, Value
from django.db.models.functions import Coalesce

from apps.accounts.models import User
from apps.customers.models import CustomerPayment

from .exceptions import PaymentNotFoundError, InvalidPaymentError

logger = logging.getLogger(__name__)

EDITABLE_FIELDS = (
    'amount', 'date', 'description', 'payment_mode', 'cheque_number',
    'transaction_id', 'customer', 'customer_name', 'invoice_number',
    'project', 'plot_number', 'payment_category', 'total_price',
    'development_charges', 'clubhouse_charges', 'construction_charges',
)

# Payment field <- customer attribute
CUSTOMER_DEFAULTS = (
    ('customer_name', 'name'),
    ('plot_number', 'plot_number'),
    ('project', 'project'),
    ('total_price', 'sale_price'),
    ('construction_charges', 'construction_price'),
)

REQUIRED_WITHOUT_CUSTOMER = ('customer_name', 'plot_number', 'project', 'total_price')


def fill_from_customer(fields: dict) -> dict:
    """Copy customer details into ``fields`` for every key not supplied."""
    customer = fields.get('customer')
    if customer is None:
        return fields
    for field, attribute in CUSTOMER_DEFAULTS:
        if fields.get(field) in (None, ''):
            fields[field] = getattr(customer, attribute)
    return fields


def _clean(fields: dict) -> dict:
    for field in ('customer_name', 'plot_number', 'invoice_number', 'description'):
        if fields.get(field) is not None:
            fields[field] = fields[field].strip()
    return {field: value for field, value in fields.items() if field in EDITABLE_FIELDS}


def get_payment_by_id(*, payment_id: UUID, owner: User, for_update: bool = False) -> CustomerPayment:
    """
    Raises:
        PaymentNotFoundError: If the payment doesn't exist for this owner
    """
    payments = CustomerPayment.objects.filter(owner=owner)
    if for_update:
        payments = payments.select_for_update()
    try:
        return payments.get(id=payment_id)
    except CustomerPayment.DoesNotExist:
        raise PaymentNotFoundError(f"Customer payment with ID {payment_id} not found")


@transaction.atomic
def create_payment(*, owner: User, **fields) -> CustomerPayment:
    """
    Record a customer payment.

    Raises:
        InvalidPaymentError: If neither the request nor a customer supplies
            the customer name, plot number, project or total price
        InvalidPaymentDetailsError: If the payment mode lacks its reference
    """
    fields = fill_from_customer(_clean(fields))
    missing = [field for field in REQUIRED_WITHOUT_CUSTOMER if fields.get(field) in (None, '')]
    if missing:
        raise InvalidPaymentError(
            f"Missing payment details: {', '.join(missing)}. Select a customer or enter them."
        )

    payment = CustomerPayment(owner=owner, **fields)
    payment.check_payment_details()
    payment.save()
    logger.info("Recorded payment %s of %s from %s", payment.id, payment.amount, payment.customer_name)
    return payment


@transaction.atomic
def update_payment(*, payment_id: UUID, owner: User, **changes) -> CustomerPayment:
    """
    Update a payment. Choosing a customer refills the derived fields the
    request does not set itself.

    Raises:
        PaymentNotFoundError: If the payment doesn't exist for this owner
        InvalidPaymentDetailsError: If the payment mode lacks its reference
    """
    payment = get_payment_by_id(payment_id=payment_id, owner=owner, for_update=True)
    changes = fill_from_customer(_clean(changes))

    for field, value in changes.items():
        setattr(payment, field, value)
    payment.check_payment_details()
    payment.save()
    return payment


@transaction.atomic
def delete_payment(*, payment_id: UUID, owner: User) -> None:
    """
    Raises:
        PaymentNotFoundError: If the payment doesn't exist for this owner
    """
    payment = get_payment_by_id(payment_id=payment_id, owner=owner, for_update=True)
    payment.delete()
    logger.info("Deleted payment %s for %s", payment_id, owner)


def get_payment_stats(payments) -> dict:
    """
    Due, received and pending totals over a payment queryset.

    ``total_due`` adds up the total price recorded on each payment.
    """
    zero = Value(Decimal('0'), output_field=DecimalField(max_digits=16, decimal_places=2))
    payments = payments.order_by()
    totals = payments.aggregate(
        total_due=Coalesce(Sum('total_price'), zero),
        total_received=Coalesce(Sum('amount'), zero),
        unique_customers=Count('customer_name', distinct=True),
    )
    totals['total_pending'] = totals['total_due'] - totals['total_received']
    totals['by_category'] = {
        row['payment_category']: row['total']
        for row in payments.values('payment_category').annotate(total=Sum('amount'))
    }
    return totals
