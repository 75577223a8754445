from decimal import Decimal

import pytest
from django.test import override_settings

from apps.core.exceptions import InvalidPaymentDetailsError
from apps.expenses.models import Expense
from apps.expenses.services import (
    ExpenseNotFoundError,
    InvalidExpenseError,
    apply_section_rules,
    delete_expense,
    is_land_purchase_pair,
    is_salary_pair,
    salary_description,
    update_expense,
)


def test_salary_description():
    assert salary_description('Ravi Kumar', '2024-03') == 'Salary payment for Ravi Kumar - March 2024'


def test_default_pairs():
    assert is_salary_pair('office', 'salaries')
    assert not is_salary_pair('construction', 'salaries')
    assert is_land_purchase_pair('construction', 'land')


@override_settings(SALARY_EXPENSE_CATEGORY=('payroll', 'monthly'))
def test_salary_pair_is_configurable():
    assert is_salary_pair('payroll', 'monthly')
    assert not is_salary_pair('office', 'salaries')


@pytest.mark.django_db
class TestSectionRules:

    def test_salary_without_employee(self, user, project, categories):
        office = categories['office']
        expense = Expense(
            owner=user,
            project=project,
            category=office,
            subcategory=office.subcategories.get(slug='salaries'),
            salary_month='2024-03',
        )
        with pytest.raises(InvalidExpenseError):
            apply_section_rules(expense)

    def test_zero_override_is_respected(self, make_expense, employee):
        expense = make_expense(
            category='office',
            subcategory='salaries',
            employee=employee,
            salary_month='2024-03',
            override_salary=Decimal('0'),
        )
        assert expense.amount == Decimal('0')

    def test_land_without_landlord_keeps_amount_empty(self, make_expense):
        expense = make_expense(subcategory='land', description='Registration')
        assert expense.land_purchase_amount is None

    def test_same_landlord_keeps_custom_amount(self, user, make_expense, landlord):
        expense = make_expense(
            subcategory='land',
            landlord=landlord,
            land_purchase_amount=Decimal('200000'),
        )
        updated = update_expense(expense_id=expense.id, owner=user, landlord=landlord)
        assert updated.land_purchase_amount == Decimal('200000')


@pytest.mark.django_db
class TestExpenseLookup:

    def test_delete_other_owner(self, other_user, make_expense):
        expense = make_expense()
        with pytest.raises(ExpenseNotFoundError):
            delete_expense(expense_id=expense.id, owner=other_user)


@pytest.mark.django_db
class TestPaymentReference:

    def test_online_needs_transaction_id(self, user, make_expense):
        with pytest.raises(InvalidPaymentDetailsError):
            make_expense(payment_mode='online')
        assert not Expense.objects.filter(owner=user).exists()

    def test_cash_drops_references(self, make_expense):
        expense = make_expense(cheque_number='12', transaction_id='UTR1')
        assert (expense.cheque_number, expense.transaction_id) == ('', '')
