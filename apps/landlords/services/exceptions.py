"""Domain-specific exceptions for landlords services."""

from apps.core.exceptions import LedgerServiceError, RecordNotFoundError


class LandlordsServiceError(LedgerServiceError):
    """Base exception for landlords services."""
    pass


class LandlordNotFoundError(LandlordsServiceError, RecordNotFoundError):
    """Raised when a landlord does not exist for the owner."""
    pass
