"""Domain-specific exceptions for employees services."""

from apps.core.exceptions import (
    LedgerServiceError,
    RecordNotFoundError,
    DuplicateRecordError,
)


class EmployeesServiceError(LedgerServiceError):
    """Base exception for employees services."""
    pass


class EmployeeNotFoundError(EmployeesServiceError, RecordNotFoundError):
    """Raised when an employee does not exist for the owner."""
    pass


class DuplicateEmployeeError(EmployeesServiceError, DuplicateRecordError):
    """Raised when the employee ID is already used by the owner."""
    pass
