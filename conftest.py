from datetime import date
from decimal import Decimal

import pytest
from rest_framework.test import APIClient
from rest_framework_simplejwt.tokens import RefreshToken

from apps.accounts.models import User
from apps.categories.services import init_default_categories
from apps.core.models import PaymentMode
from apps.employees.models import Employee
from apps.expenses.services import create_expense
from apps.landlords.models import Landlord
from apps.projects.models import Project


def jwt_client(user):
    client = APIClient()
    refresh = RefreshToken.for_user(user)
    client.credentials(HTTP_AUTHORIZATION=f'Bearer {refresh.access_token}')
    return client


@pytest.fixture
def api_client():
    """Return an unauthenticated API client."""
    return APIClient()


@pytest.fixture
def user(db):
    """Create and return a test user."""
    return User.objects.create_user(
        username='testuser',
        email='testuser@example.com',
        password='TestPass123!',
    )


@pytest.fixture
def other_user(db):
    """Create and return another test user."""
    return User.objects.create_user(
        username='otheruser',
        email='otheruser@example.com',
        password='OtherPass123!',
    )


@pytest.fixture
def authenticated_client(user):
    """Return an API client authenticated as ``user`` using JWT."""
    return jwt_client(user)


@pytest.fixture
def other_client(other_user):
    """Return an API client authenticated as ``other_user``."""
    return jwt_client(other_user)


@pytest.fixture
def project(user):
    return Project.objects.create(
        owner=user,
        name='Green Meadows',
        color='#10B981',
        location='Shamshabad',
        commence_date=date(2024, 1, 15),
    )


@pytest.fixture
def other_project(user):
    return Project.objects.create(
        owner=user,
        name='Lake View',
        color='#3B82F6',
        location='Gandipet',
        commence_date=date(2024, 6, 1),
    )


@pytest.fixture
def categories(user):
    """The default Office and Site & Construction trees for ``user``."""
    return {category.slug: category for category in init_default_categories(owner=user)}


@pytest.fixture
def employee(user):
    return Employee.objects.create(
        owner=user,
        employee_id='EMP001',
        name='Ravi Kumar',
        job_title='Site Engineer',
        salary=Decimal('45000.00'),
        phone='9848000001',
        address='Hyderabad',
        joining_date=date(2023, 4, 1),
    )


@pytest.fixture
def landlord(user):
    return Landlord.objects.create(
        owner=user,
        name='Narasimha Rao',
        amount=Decimal('500000'),
        price_per_acre=Decimal('100000'),
        total_extent=Decimal('2.5'),
        phone='9849012345',
        address='Shamshabad',
    )


@pytest.fixture
def make_expense(user, project, categories):
    """
    Factory for expenses of ``user``.

    ``category`` and ``subcategory`` are IDs from the default trees;
    everything else overrides the defaults below.
    """
    def make(category='construction', subcategory='materials', **fields):
        parent = categories[category]
        data = {
            'project': project,
            'amount': Decimal('1000.00'),
            'date': date(2024, 3, 10),
            'description': 'Cement bags',
            'payment_mode': PaymentMode.CASH,
        }
        data.update(fields)
        return create_expense(
            owner=user,
            category=parent,
            subcategory=parent.subcategories.get(slug=subcategory),
            **data
        )
    return make
