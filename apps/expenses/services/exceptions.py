"""Domain-specific exceptions for expenses services."""

from apps.core.exceptions import LedgerServiceError, RecordNotFoundError


class ExpensesServiceError(LedgerServiceError):
    """Base exception for expenses services."""
    pass


class ExpenseNotFoundError(ExpensesServiceError, RecordNotFoundError):
    """Raised when an expense does not exist for the owner."""
    pass


class InvalidExpenseError(ExpensesServiceError):
    """Raised when a salary expense has no employee or salary month."""
    pass
