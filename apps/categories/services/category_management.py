"""
Category management service.

Categories and their subcategories are written together: the caller always
sends the complete subcategory list, and the service reconciles it against
what is stored. Subcategories are matched by slug so that expenses keep
pointing at the same rows across edits.
"""

import logging
from typing import List, Optional

from django.core.exceptions import ValidationError as DjangoValidationError
from django.db import transaction

from apps.accounts.models import User
from apps.categories.models import Category, Subcategory, slug_validator

from .exceptions import (
    CategoryNotFoundError,
    SubcategoryNotFoundError,
    CategoryInUseError,
    DuplicateCategoryError,
    InvalidCategoryError,
)

logger = logging.getLogger(__name__)


def normalize_slug(value: str) -> str:
    """Saved IDs are the trimmed, lower-cased input."""
    return (value or '').strip().lower()


def get_category_by_slug(*, slug: str, owner: User, for_update: bool = False) -> Category:
    """
    Get one of the owner's categories by its ID.

    Raises:
        CategoryNotFoundError: If the category doesn't exist for this owner
    """
    categories = Category.objects.filter(owner=owner)
    if for_update:
        categories = categories.select_for_update()
    try:
        return categories.get(slug=normalize_slug(slug))
    except Category.DoesNotExist:
        raise CategoryNotFoundError(f"Category '{slug}' not found")


def get_subcategory(*, category: Category, slug: str) -> Subcategory:
    """
    Raises:
        SubcategoryNotFoundError: If the category has no such subcategory
    """
    try:
        return category.subcategories.get(slug=normalize_slug(slug))
    except Subcategory.DoesNotExist:
        raise SubcategoryNotFoundError(
            f"Subcategory '{slug}' not found in category '{category.slug}'"
        )


def check_slug(slug: str) -> str:
    """
    Normalise an ID and check its characters.

    Raises:
        InvalidCategoryError: If the ID is empty or has characters outside [a-z0-9-]
    """
    slug = normalize_slug(slug)
    try:
        slug_validator(slug)
    except DjangoValidationError as e:
        raise InvalidCategoryError(f"Invalid ID '{slug}': {e.messages[0]}")
    return slug


def check_name(name: str) -> str:
    name = (name or '').strip()
    if not name:
        raise InvalidCategoryError("Category name is required")
    return name


def check_subcategories(subcategories: List[dict]) -> List[dict]:
    """
    Validate a complete subcategory list and return it normalised.

    Raises:
        InvalidCategoryError: If the list is empty, an ID is malformed or
            repeated, or a name is blank
    """
    if not subcategories:
        raise InvalidCategoryError("At least one subcategory is required")

    cleaned, seen = [], set()
    for sub in subcategories:
        sub_slug = check_slug(sub.get('slug'))
        if sub_slug in seen:
            raise InvalidCategoryError(f"Duplicate subcategory ID '{sub_slug}'")
        seen.add(sub_slug)
        name = (sub.get('name') or '').strip()
        if not name:
            raise InvalidCategoryError(f"Subcategory '{sub_slug}' needs a name")
        cleaned.append({**sub, 'slug': sub_slug, 'name': name})
    return cleaned


def _create_subcategories(category: Category, subcategories: List[dict]) -> None:
    Subcategory.objects.bulk_create([
        Subcategory(
            category=category,
            slug=normalize_slug(sub['slug']),
            name=sub['name'].strip(),
            icon=sub['icon'],
            position=index,
        )
        for index, sub in enumerate(subcategories)
    ])


@transaction.atomic
def create_category(
    *,
    owner: User,
    slug: str,
    name: str,
    icon: str,
    subcategories: List[dict]
) -> Category:
    """
    Create a category with its subcategories.

    Args:
        owner: User who owns the category
        slug: Category ID (normalised to lower case)
        name: Display name
        icon: Icon identifier
        subcategories: List of {slug, name, icon}

    Raises:
        InvalidCategoryError: If the ID, name or subcategory list is invalid
        DuplicateCategoryError: If the owner already uses this ID
    """
    slug = check_slug(slug)
    name = check_name(name)
    subcategories = check_subcategories(subcategories)
    if Category.objects.filter(owner=owner, slug=slug).exists():
        raise DuplicateCategoryError(f"A category with ID '{slug}' already exists")

    category = Category.objects.create(
        owner=owner,
        slug=slug,
        name=name,
        icon=icon,
    )
    _create_subcategories(category, subcategories)

    logger.info("Created category %s for %s", slug, owner)
    return category


@transaction.atomic
def update_category(
    *,
    slug: str,
    owner: User,
    name: Optional[str] = None,
    icon: Optional[str] = None,
    subcategories: Optional[List[dict]] = None
) -> Category:
    """
    Update a category. The category ID itself never changes.

    When ``subcategories`` is given it replaces the stored list: matching
    slugs are updated in place, new ones are added and missing ones are
    removed.

    Raises:
        CategoryNotFoundError: If the category doesn't exist for this owner
        InvalidCategoryError: If the name or subcategory list is invalid
        CategoryInUseError: If a removed subcategory is referenced by expenses
    """
    category = get_category_by_slug(slug=slug, owner=owner, for_update=True)

    if name is not None:
        category.name = check_name(name)
    if subcategories is not None:
        subcategories = check_subcategories(subcategories)
    if icon is not None:
        category.icon = icon
    category.save()

    if subcategories is not None:
        existing = {sub.slug: sub for sub in category.subcategories.all()}
        incoming = [normalize_slug(sub['slug']) for sub in subcategories]

        removed = [sub for sub_slug, sub in existing.items() if sub_slug not in incoming]
        for sub in removed:
            if sub.expenses.exists():
                raise CategoryInUseError(
                    f"Cannot remove subcategory '{sub.slug}' with existing expenses"
                )

        Subcategory.objects.filter(id__in=[sub.id for sub in removed]).delete()

        new_subcategories = []
        for index, data in enumerate(subcategories):
            sub_slug = normalize_slug(data['slug'])
            sub = existing.get(sub_slug)
            if sub is None:
                new_subcategories.append(
                    Subcategory(
                        category=category,
                        slug=sub_slug,
                        name=data['name'].strip(),
                        icon=data['icon'],
                        position=index,
                    )
                )
                continue
            sub.name = data['name'].strip()
            sub.icon = data['icon']
            sub.position = index
            sub.save(update_fields=['name', 'icon', 'position'])
        Subcategory.objects.bulk_create(new_subcategories)

    return category


@transaction.atomic
def delete_category(*, slug: str, owner: User) -> None:
    """
    Delete a category and its subcategories.

    Raises:
        CategoryNotFoundError: If the category doesn't exist for this owner
        CategoryInUseError: If any expense references the category
    """
    category = get_category_by_slug(slug=slug, owner=owner, for_update=True)

    if category.expenses.exists():
        raise CategoryInUseError("Cannot delete category with existing expenses")

    category.delete()
    logger.info("Deleted category %s for %s", category.slug, owner)


def get_category_stats(categories) -> dict:
    """
    Summary figures over a category queryset.

    Every category counts as active.
    """
    total = categories.count()
    subcategories = Subcategory.objects.filter(category__in=categories.values('pk'))
    return {
        'total_categories': total,
        'total_subcategories': subcategories.count(),
        'active_categories': total,
    }
