from datetime import date
from decimal import Decimal

import pytest

from apps.core.models import PaymentMode
from apps.customers.models import Customer, PaymentCategory
from apps.customers.services import create_payment


@pytest.fixture
def customer(user, project):
    """Plot A-101: 10,00,000 sale plus 5,00,000 construction."""
    return Customer.objects.create(
        owner=user,
        name='Priya Sharma',
        plot_number='A-101',
        plot_size=Decimal('200'),
        built_up_area=Decimal('1500'),
        project=project,
        sale_price=Decimal('1000000'),
        price_per_yard=Decimal('5000'),
        construction_price=Decimal('500000'),
        construction_price_per_sqft=Decimal('333.33'),
        phone='9000012345',
        email='priya@example.com',
        address='Banjara Hills',
    )


@pytest.fixture
def second_customer(user, other_project):
    return Customer.objects.create(
        owner=user,
        name='Rahul Verma',
        plot_number='B-7',
        plot_size=Decimal('150'),
        built_up_area=Decimal('1200'),
        project=other_project,
        sale_price=Decimal('600000'),
        price_per_yard=Decimal('4000'),
        construction_price=Decimal('0'),
        construction_price_per_sqft=Decimal('0'),
    )


@pytest.fixture
def make_payment(user):
    """Factory recording a payment for ``user`` through the service."""
    def make(**fields):
        data = {
            'amount': Decimal('100000'),
            'date': date(2024, 3, 1),
            'description': 'Instalment',
            'payment_mode': PaymentMode.CASH,
            'payment_category': PaymentCategory.ADVANCE,
        }
        data.update(fields)
        return create_payment(owner=user, **data)
    return make
