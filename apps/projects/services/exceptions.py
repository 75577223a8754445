"""
Domain-specific exceptions for projects app.

These exceptions represent business rule violations and should be
caught in views and converted to appropriate HTTP responses.
"""

from apps.core.exceptions import (
    LedgerServiceError,
    RecordNotFoundError,
    RecordInUseError,
    DuplicateRecordError,
)


class ProjectsServiceError(LedgerServiceError):
    """Base exception for all projects service errors."""
    pass


class ProjectNotFoundError(ProjectsServiceError, RecordNotFoundError):
    """Raised when a project does not exist for the owner."""
    pass


class ProjectInUseError(ProjectsServiceError, RecordInUseError):
    """Raised when deleting a project that other records reference."""
    pass


class DuplicateProjectError(ProjectsServiceError, DuplicateRecordError):
    """Raised when the owner already has a project with that name."""
    pass
