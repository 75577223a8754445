from datetime import date
from decimal import Decimal

import pytest

from apps.core.models import PaymentMode
from apps.customers.models import PaymentCategory
from apps.customers.services import create_payment
from apps.incomes.models import Income


@pytest.fixture
def make_income(user):
    def make(**fields):
        data = {
            'amount': Decimal('15000'),
            'date': date(2024, 3, 15),
            'description': 'Scrap sale',
            'source': 'Scrap',
            'payee': 'Sri Traders',
            'payment_mode': PaymentMode.CASH,
        }
        data.update(fields)
        return Income.objects.create(owner=user, **data)
    return make


@pytest.fixture
def make_payment(user, project):
    """Walk-in payments without a customer record."""
    def make(**fields):
        data = {
            'amount': Decimal('200000'),
            'date': date(2024, 3, 20),
            'description': 'Booking amount',
            'customer_name': 'Anil Reddy',
            'plot_number': 'C-12',
            'project': project,
            'total_price': Decimal('1500000'),
            'payment_mode': PaymentMode.CASH,
            'payment_category': PaymentCategory.BOOKING,
        }
        data.update(fields)
        return create_payment(owner=user, **data)
    return make
