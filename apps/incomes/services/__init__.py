"""Services for incomes business logic."""

from .exceptions import (
    IncomesServiceError,
    IncomeNotFoundError,
)
from .income_management import (
    create_income,
    update_income,
    delete_income,
    get_income_by_id,
    get_income_stats,
)

__all__ = [
    # Exceptions
    'IncomesServiceError',
    'IncomeNotFoundError',
    # Services
    'create_income',
    'update_income',
    'delete_income',
    'get_income_by_id',
    'get_income_stats',
]
