"""Services for expenses business logic."""

from .exceptions import (
    ExpensesServiceError,
    ExpenseNotFoundError,
    InvalidExpenseError,
)
from .expense_management import (
    is_salary_pair,
    is_land_purchase_pair,
    salary_description,
    apply_section_rules,
    create_expense,
    update_expense,
    delete_expense,
    get_expense_by_id,
    get_expense_stats,
)

__all__ = [
    # Exceptions
    'ExpensesServiceError',
    'ExpenseNotFoundError',
    'InvalidExpenseError',
    # Rules
    'is_salary_pair',
    'is_land_purchase_pair',
    'salary_description',
    'apply_section_rules',
    # Services
    'create_expense',
    'update_expense',
    'delete_expense',
    'get_expense_by_id',
    'get_expense_stats',
]
