"""
Domain-specific exceptions for customers app.

These exceptions represent business rule violations and should be
caught in views and converted to appropriate HTTP responses.
"""

from apps.core.exceptions import (
    LedgerServiceError,
    RecordNotFoundError,
    RecordInUseError,
    DuplicateRecordError,
)


class CustomersServiceError(LedgerServiceError):
    """Base exception for all customers service errors."""
    pass


class CustomerNotFoundError(CustomersServiceError, RecordNotFoundError):
    """Raised when a customer does not exist for the owner."""
    pass


class CustomerInUseError(CustomersServiceError, RecordInUseError):
    """Raised when deleting a customer that still has payments."""
    pass


class DuplicateCustomerError(CustomersServiceError, DuplicateRecordError):
    """Raised when the plot number is already taken by another customer."""
    pass


class PaymentNotFoundError(CustomersServiceError, RecordNotFoundError):
    """Raised when a customer payment does not exist for the owner."""
    pass


class InvalidPaymentError(CustomersServiceError):
    """Raised when a payment lacks details that no customer can supply."""
    pass
