"""
Expense management service.

Besides plain CRUD this is where the salary and land-purchase rules live:
which section applies, what the amount follows and which fields get
cleared.
"""

import logging
from datetime import datetime
from decimal import Decimal
from uuid import UUID

from django.conf import settings
from django.db import transaction
from django.db.models import Count, DecimalField, Sum, Value
from django.db.models.functions import Coalesce

from apps.accounts.models import User
from apps.expenses.models import Expense

from .exceptions import ExpenseNotFoundError, InvalidExpenseError

logger = logging.getLogger(__name__)

EDITABLE_FIELDS = (
    'project', 'amount', 'date', 'category', 'subcategory', 'description',
    'payment_mode', 'cheque_number', 'transaction_id', 'employee',
    'salary_month', 'override_salary', 'landlord', 'land_purchase_amount',
    'land_details',
)

SALARY_FIELDS = ('employee', 'salary_month', 'override_salary')
LAND_FIELDS = ('landlord', 'land_purchase_amount', 'land_details')


def is_salary_pair(category_slug: str, subcategory_slug: str) -> bool:
    return (category_slug, subcategory_slug) == tuple(settings.SALARY_EXPENSE_CATEGORY)


def is_land_purchase_pair(category_slug: str, subcategory_slug: str) -> bool:
    return (category_slug, subcategory_slug) == tuple(settings.LAND_PURCHASE_CATEGORY)


def salary_description(employee_name: str, salary_month: str) -> str:
    """
    Example:
        >>> salary_description('Ravi Kumar', '2024-03')
        'Salary payment for Ravi Kumar - March 2024'
    """
    month = datetime.strptime(salary_month, '%Y-%m').strftime('%B %Y')
    return f"Salary payment for {employee_name} - {month}"


def _clear(expense: Expense, fields) -> None:
    for field in fields:
        if field in ('employee', 'landlord', 'override_salary', 'land_purchase_amount'):
            setattr(expense, field, None)
        else:
            setattr(expense, field, '')


def apply_section_rules(expense: Expense) -> Expense:
    """
    Bring an unsaved expense in line with its category pair.

    Salary expenses take the employee's salary as amount unless
    ``override_salary`` is set. Land purchases default the purchase amount
    to the landlord's total land price.

    Raises:
        InvalidExpenseError: If a salary expense lacks employee or month
    """
    category_slug = expense.category.slug
    subcategory_slug = expense.subcategory.slug

    if is_salary_pair(category_slug, subcategory_slug):
        if expense.employee is None or not expense.salary_month:
            raise InvalidExpenseError("Salary expenses need an employee and a salary month")
        if expense.override_salary is None:
            expense.amount = expense.employee.salary
        else:
            expense.amount = expense.override_salary
        if not (expense.description or '').strip():
            expense.description = salary_description(expense.employee.name, expense.salary_month)
    else:
        _clear(expense, SALARY_FIELDS)

    if is_land_purchase_pair(category_slug, subcategory_slug):
        if expense.landlord is not None and expense.land_purchase_amount is None:
            expense.land_purchase_amount = expense.landlord.total_land_price
    else:
        _clear(expense, LAND_FIELDS)

    return expense


def _clean(fields: dict) -> dict:
    for field in ('description', 'land_details', 'salary_month'):
        if fields.get(field) is not None:
            fields[field] = fields[field].strip()
    return {field: value for field, value in fields.items() if field in EDITABLE_FIELDS}


def get_expense_by_id(*, expense_id: UUID, owner: User, for_update: bool = False) -> Expense:
    """
    Raises:
        ExpenseNotFoundError: If the expense doesn't exist for this owner
    """
    expenses = Expense.objects.filter(owner=owner).select_related(
        'category', 'subcategory', 'employee', 'landlord'
    )
    if for_update:
        expenses = expenses.select_for_update(of=('self',))
    try:
        return expenses.get(id=expense_id)
    except Expense.DoesNotExist:
        raise ExpenseNotFoundError(f"Expense with ID {expense_id} not found")


@transaction.atomic
def create_expense(*, owner: User, **fields) -> Expense:
    """
    Create an expense.

    Raises:
        InvalidExpenseError: If a salary expense lacks employee or month
        InvalidPaymentDetailsError: If the payment mode lacks its reference
    """
    expense = Expense(owner=owner, **_clean(fields))
    apply_section_rules(expense)
    expense.check_payment_details()
    expense.save()
    logger.info("Created expense %s of %s for %s", expense.id, expense.amount, owner)
    return expense


@transaction.atomic
def update_expense(*, expense_id: UUID, owner: User, **changes) -> Expense:
    """
    Update an expense and re-apply the section rules.

    Choosing another landlord without sending a purchase amount resets the
    amount to the new landlord's total land price.

    Raises:
        ExpenseNotFoundError: If the expense doesn't exist for this owner
        InvalidExpenseError: If a salary expense lacks employee or month
        InvalidPaymentDetailsError: If the payment mode lacks its reference
    """
    expense = get_expense_by_id(expense_id=expense_id, owner=owner, for_update=True)
    changes = _clean(changes)

    if 'landlord' in changes and 'land_purchase_amount' not in changes:
        if changes['landlord'] != expense.landlord:
            changes['land_purchase_amount'] = None

    for field, value in changes.items():
        setattr(expense, field, value)
    apply_section_rules(expense)
    expense.check_payment_details()
    expense.save()
    return expense


@transaction.atomic
def delete_expense(*, expense_id: UUID, owner: User) -> None:
    """
    Raises:
        ExpenseNotFoundError: If the expense doesn't exist for this owner
    """
    expense = get_expense_by_id(expense_id=expense_id, owner=owner, for_update=True)
    expense.delete()
    logger.info("Deleted expense %s for %s", expense_id, owner)


def get_expense_stats(expenses) -> dict:
    """Totals over an expense queryset, split by payment mode and category."""
    zero = Value(Decimal('0'), output_field=DecimalField(max_digits=16, decimal_places=2))
    expenses = expenses.order_by()
    stats = expenses.aggregate(
        total_amount=Coalesce(Sum('amount'), zero),
        count=Count('id'),
    )
    stats['by_payment_mode'] = {
        row['payment_mode']: row['total']
        for row in expenses.values('payment_mode').annotate(total=Sum('amount'))
    }
    stats['by_category'] = {
        row['category__slug']: row['total']
        for row in expenses.values('category__slug').annotate(total=Sum('amount'))
    }
    return stats
