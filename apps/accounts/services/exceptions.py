"""Domain-specific exceptions for accounts services."""

from apps.core.exceptions import DuplicateRecordError, LedgerServiceError


class AccountsServiceError(LedgerServiceError):
    """Base exception for accounts services."""
    pass


class UserRegistrationError(AccountsServiceError, DuplicateRecordError):
    """Raised when the username or e-mail is already taken."""
    pass


class InvalidCredentialsError(AccountsServiceError):
    """Raised for an unknown login or a wrong password."""
    pass


class InactiveAccountError(AccountsServiceError):
    """Raised when a deactivated account tries to log in."""
    pass
