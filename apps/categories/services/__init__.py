"""
Categories app services layer.

Services contain business logic and orchestrate operations across models.
All state-changing operations use transactions and concurrency protection.
"""

from .exceptions import (
    CategoriesServiceError,
    CategoryNotFoundError,
    SubcategoryNotFoundError,
    CategoryInUseError,
    DuplicateCategoryError,
    InvalidCategoryError,
    CategoriesAlreadyInitializedError,
)

from .category_management import (
    normalize_slug,
    check_slug,
    check_subcategories,
    create_category,
    update_category,
    delete_category,
    get_category_by_slug,
    get_subcategory,
    get_category_stats,
)

from .default_categories import (
    init_default_categories,
)


__all__ = [
    # Exceptions
    'CategoriesServiceError',
    'CategoryNotFoundError',
    'SubcategoryNotFoundError',
    'CategoryInUseError',
    'DuplicateCategoryError',
    'InvalidCategoryError',
    'CategoriesAlreadyInitializedError',

    # Category Management
    'normalize_slug',
    'check_slug',
    'check_subcategories',
    'create_category',
    'update_category',
    'delete_category',
    'get_category_by_slug',
    'get_subcategory',
    'get_category_stats',

    # Defaults
    'init_default_categories',
]
