import pytest

from apps.categories.models import Icon
from apps.categories.services import (
    CategoryNotFoundError,
    InvalidCategoryError,
    SubcategoryNotFoundError,
    create_category,
    get_category_by_slug,
    get_subcategory,
    normalize_slug,
    update_category,
)


def test_normalize_slug():
    assert normalize_slug('  Site-Prep ') == 'site-prep'
    assert normalize_slug(None) == ''


@pytest.mark.django_db
class TestCategoryLookup:

    def test_lookup_is_case_insensitive(self, user, categories):
        assert get_category_by_slug(slug='OFFICE', owner=user) == categories['office']

    def test_lookup_is_owner_scoped(self, other_user, categories):
        with pytest.raises(CategoryNotFoundError):
            get_category_by_slug(slug='office', owner=other_user)

    def test_subcategory_lookup(self, categories):
        sub = get_subcategory(category=categories['construction'], slug='land')
        assert sub.name == 'Land Purchase'

        with pytest.raises(SubcategoryNotFoundError):
            get_subcategory(category=categories['office'], slug='land')

    def test_subcategories_keep_given_order(self, user):
        category = create_category(
            owner=user,
            slug='misc',
            name='Misc',
            icon=Icon.TAG,
            subcategories=[
                {'slug': 'zeta', 'name': 'Zeta', 'icon': Icon.TAG},
                {'slug': 'alpha', 'name': 'Alpha', 'icon': Icon.TAG},
            ],
        )
        assert [sub.slug for sub in category.subcategories.all()] == ['zeta', 'alpha']


@pytest.mark.django_db
class TestCategoryValidation:

    def _create(self, user, **overrides):
        data = {
            'owner': user,
            'slug': 'misc',
            'name': 'Misc',
            'icon': Icon.TAG,
            'subcategories': [{'slug': 'general', 'name': 'General', 'icon': Icon.TAG}],
        }
        data.update(overrides)
        return create_category(**data)

    def test_rejects_id_with_invalid_characters(self, user):
        with pytest.raises(InvalidCategoryError):
            self._create(user, slug='Office Expenses!')

    def test_rejects_invalid_subcategory_id(self, user):
        with pytest.raises(InvalidCategoryError):
            self._create(user, subcategories=[
                {'slug': 'Rent & Bills', 'name': 'Rent', 'icon': Icon.TAG},
            ])

    def test_rejects_empty_subcategory_list(self, user):
        with pytest.raises(InvalidCategoryError, match='At least one subcategory'):
            self._create(user, subcategories=[])

    def test_rejects_duplicate_subcategory_ids(self, user):
        with pytest.raises(InvalidCategoryError, match='Duplicate'):
            self._create(user, subcategories=[
                {'slug': 'rent', 'name': 'Rent', 'icon': Icon.TAG},
                {'slug': 'RENT', 'name': 'Rent again', 'icon': Icon.TAG},
            ])

    def test_rejects_blank_name(self, user):
        with pytest.raises(InvalidCategoryError):
            self._create(user, name='   ')

    def test_update_rejects_empty_subcategory_list(self, user, categories):
        with pytest.raises(InvalidCategoryError):
            update_category(slug='office', owner=user, subcategories=[])

        assert categories['office'].subcategories.exists()
