"""Domain-specific exceptions for incomes services."""

from apps.core.exceptions import LedgerServiceError, RecordNotFoundError


class IncomesServiceError(LedgerServiceError):
    """Base exception for incomes services."""
    pass


class IncomeNotFoundError(IncomesServiceError, RecordNotFoundError):
    """Raised when an income does not exist for the owner."""
    pass
