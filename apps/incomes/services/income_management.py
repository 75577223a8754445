"""Income management service."""

import logging
from decimal import Decimal
from uuid import UUID

from django.db import transaction
from django.db.models import Count, DecimalField, Sum, Value
from django.db.models.functions import Coalesce

from apps.accounts.models import User
from apps.incomes.models import Income

from .exceptions import IncomeNotFoundError

logger = logging.getLogger(__name__)

EDITABLE_FIELDS = (
    'amount', 'date', 'description', 'payment_mode', 'cheque_number',
    'transaction_id', 'source', 'payee',
)


def _clean(fields: dict) -> dict:
    for field in ('description', 'source', 'payee'):
        if fields.get(field) is not None:
            fields[field] = fields[field].strip()
    return {field: value for field, value in fields.items() if field in EDITABLE_FIELDS}


def get_income_by_id(*, income_id: UUID, owner: User, for_update: bool = False) -> Income:
    """
    Raises:
        IncomeNotFoundError: If the income doesn't exist for this owner
    """
    incomes = Income.objects.filter(owner=owner)
    if for_update:
        incomes = incomes.select_for_update()
    try:
        return incomes.get(id=income_id)
    except Income.DoesNotExist:
        raise IncomeNotFoundError(f"Income with ID {income_id} not found")


@transaction.atomic
def create_income(*, owner: User, **fields) -> Income:
    """
    Raises:
        InvalidPaymentDetailsError: If the payment mode lacks its reference
    """
    income = Income(owner=owner, **_clean(fields))
    income.check_payment_details()
    income.save()
    logger.info("Created income %s of %s for %s", income.id, income.amount, owner)
    return income


@transaction.atomic
def update_income(*, income_id: UUID, owner: User, **changes) -> Income:
    """
    Raises:
        IncomeNotFoundError: If the income doesn't exist for this owner
        InvalidPaymentDetailsError: If the payment mode lacks its reference
    """
    income = get_income_by_id(income_id=income_id, owner=owner, for_update=True)
    for field, value in _clean(changes).items():
        setattr(income, field, value)
    income.check_payment_details()
    income.save()
    return income


@transaction.atomic
def delete_income(*, income_id: UUID, owner: User) -> None:
    """
    Raises:
        IncomeNotFoundError: If the income doesn't exist for this owner
    """
    income = get_income_by_id(income_id=income_id, owner=owner, for_update=True)
    income.delete()
    logger.info("Deleted income %s for %s", income_id, owner)


def get_income_stats(incomes) -> dict:
    zero = Value(Decimal('0'), output_field=DecimalField(max_digits=16, decimal_places=2))
    incomes = incomes.order_by()
    stats = incomes.aggregate(
        total_amount=Coalesce(Sum('amount'), zero),
        count=Count('id'),
    )
    stats['by_payment_mode'] = {
        row['payment_mode']: row['total']
        for row in incomes.values('payment_mode').annotate(total=Sum('amount'))
    }
    return stats
