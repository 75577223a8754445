"""
Domain-specific exceptions for categories app.

These exceptions represent business rule violations and should be
caught in views and converted to appropriate HTTP responses.
"""

from apps.core.exceptions import (
    LedgerServiceError,
    RecordNotFoundError,
    RecordInUseError,
    DuplicateRecordError,
)


class CategoriesServiceError(LedgerServiceError):
    """Base exception for all categories service errors."""
    pass


class CategoryNotFoundError(CategoriesServiceError, RecordNotFoundError):
    """Raised when a category does not exist for the owner."""
    pass


class SubcategoryNotFoundError(CategoriesServiceError, RecordNotFoundError):
    """Raised when a subcategory is not part of the given category."""
    pass


class CategoryInUseError(CategoriesServiceError, RecordInUseError):
    """Raised when deleting a category or subcategory that expenses reference."""
    pass


class DuplicateCategoryError(CategoriesServiceError, DuplicateRecordError):
    """Raised when the owner already has a category with that ID."""
    pass


class CategoriesAlreadyInitializedError(CategoriesServiceError):
    """Raised when seeding defaults for a user who already has categories."""
    pass


class InvalidCategoryError(CategoriesServiceError):
    """Raised for a malformed ID, a blank name or a bad subcategory list."""
    pass
