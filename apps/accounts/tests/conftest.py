import pytest
from apps.accounts.models import User


@pytest.fixture
def user_inactive(db):
    """Create and return an inactive user."""
    return User.objects.create_user(
        username='inactive',
        email='inactive@example.com',
        password='TestPass123!',
        is_active=False,
    )
