"""
Domain exceptions for dashboard app.

Exception Hierarchy:
    DashboardServiceError (base)
    ├── InvalidDateRangeError
    └── InvalidReportError
"""

from apps.core.exceptions import LedgerServiceError


class DashboardServiceError(LedgerServiceError):
    """Base exception for all dashboard service errors."""

    pass


class InvalidDateRangeError(DashboardServiceError):
    """
    Raised when a date range is unusable.

    Example:
        raise InvalidDateRangeError("Start date must be on or before end date")
    """

    pass


class InvalidReportError(DashboardServiceError):
    """
    Raised for an unknown report type or time range.

    Example:
        raise InvalidReportError("Invalid report type: 'sales'")
    """

    pass
