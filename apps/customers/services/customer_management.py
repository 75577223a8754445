"""
Customer management service.

Balances are never stored: ``Customer.objects.with_balances()`` derives
them from the payments recorded under the customer's name.
"""

import logging
from decimal import Decimal
from typing import Optional
from uuid import UUID

from django.db import transaction

from apps.accounts.models import User
from apps.customers.models import Customer, CustomerPayment

from .exceptions import (
    CustomerNotFoundError,
    CustomerInUseError,
    DuplicateCustomerError,
)

logger = logging.getLogger(__name__)

EDITABLE_FIELDS = (
    'name', 'plot_number', 'plot_size', 'built_up_area', 'project',
    'sale_price', 'price_per_yard', 'construction_price',
    'construction_price_per_sqft', 'phone', 'email', 'address',
)


def _clean(changes: dict) -> dict:
    for field in ('name', 'plot_number', 'phone', 'address'):
        if changes.get(field) is not None:
            changes[field] = changes[field].strip()
    if 'email' in changes:
        changes['email'] = (changes['email'] or '').strip().lower()
    return {field: value for field, value in changes.items() if field in EDITABLE_FIELDS}


def _check_plot_available(*, owner: User, plot_number: str, exclude_id: Optional[UUID] = None) -> None:
    customers = Customer.objects.filter(owner=owner, plot_number__iexact=plot_number)
    if exclude_id is not None:
        customers = customers.exclude(id=exclude_id)
    if customers.exists():
        raise DuplicateCustomerError("A customer with this plot number already exists")


def get_customer_by_id(*, customer_id: UUID, owner: User, for_update: bool = False) -> Customer:
    """
    Raises:
        CustomerNotFoundError: If the customer doesn't exist for this owner
    """
    customers = Customer.objects.filter(owner=owner)
    if for_update:
        customers = customers.select_for_update()
    try:
        return customers.get(id=customer_id)
    except Customer.DoesNotExist:
        raise CustomerNotFoundError(f"Customer with ID {customer_id} not found")


@transaction.atomic
def create_customer(*, owner: User, **fields) -> Customer:
    """
    Create a customer.

    Raises:
        DuplicateCustomerError: If the plot number is already taken
    """
    fields = _clean(fields)
    _check_plot_available(owner=owner, plot_number=fields['plot_number'])

    customer = Customer.objects.create(owner=owner, **fields)
    logger.info("Created customer %s for %s", customer.id, owner)
    return customer


@transaction.atomic
def update_customer(*, customer_id: UUID, owner: User, **changes) -> Customer:
    """
    Update a customer.

    Payments are attributed by name, so a rename carries the payments
    linked to this customer along with it.

    Raises:
        CustomerNotFoundError: If the customer doesn't exist for this owner
        DuplicateCustomerError: If the new plot number is already taken
    """
    customer = get_customer_by_id(customer_id=customer_id, owner=owner, for_update=True)
    changes = _clean(changes)

    if 'plot_number' in changes:
        _check_plot_available(owner=owner, plot_number=changes['plot_number'], exclude_id=customer.id)

    old_name = customer.name
    for field, value in changes.items():
        setattr(customer, field, value)
    customer.save()

    if customer.name != old_name:
        moved = CustomerPayment.objects.filter(
            owner=owner,
            customer=customer,
            customer_name=old_name,
        ).update(customer_name=customer.name)
        logger.info("Renamed customer %s; moved %d payments", customer.id, moved)

    return customer


@transaction.atomic
def delete_customer(*, customer_id: UUID, owner: User) -> None:
    """
    Delete a customer without recorded payments.

    Raises:
        CustomerNotFoundError: If the customer doesn't exist for this owner
        CustomerInUseError: If payments are recorded under the customer's name
    """
    customer = get_customer_by_id(customer_id=customer_id, owner=owner, for_update=True)

    if CustomerPayment.objects.filter(owner=owner, customer_name=customer.name).exists():
        raise CustomerInUseError("Cannot delete customer with existing payments")

    customer.delete()
    logger.info("Deleted customer %s for %s", customer_id, owner)


def get_customer_stats(customers) -> dict:
    """
    Totals over a customer queryset.

    Accepts a plain queryset or one already annotated by ``with_balances``.
    """
    if 'balance' not in customers.query.annotations:
        customers = customers.with_balances()

    stats = {
        'total_customers': 0,
        'total_value': Decimal('0'),
        'total_paid': Decimal('0'),
        'total_outstanding': Decimal('0'),
        'outstanding_customers': 0,
    }
    for row in customers.values('total_price', 'total_paid', 'balance'):
        stats['total_customers'] += 1
        stats['total_value'] += row['total_price']
        stats['total_paid'] += row['total_paid']
        if row['balance'] > 0:
            stats['outstanding_customers'] += 1
    stats['total_outstanding'] = stats['total_value'] - stats['total_paid']
    return stats
