"""Seeding of the default category trees."""

from typing import List

from django.db import transaction

from apps.accounts.models import User
from apps.categories.defaults import DEFAULT_CATEGORIES
from apps.categories.models import Category

from .category_management import create_category
from .exceptions import CategoriesAlreadyInitializedError


@transaction.atomic
def init_default_categories(*, owner: User) -> List[Category]:
    """
    Create the default Office and Site & Construction trees.

    Raises:
        CategoriesAlreadyInitializedError: If the user already has categories
    """
    if Category.objects.filter(owner=owner).exists():
        raise CategoriesAlreadyInitializedError("Categories already exist for this user")

    return [
        create_category(
            owner=owner,
            slug=tree['slug'],
            name=tree['name'],
            icon=tree['icon'],
            subcategories=tree['subcategories'],
        )
        for tree in DEFAULT_CATEGORIES
    ]
