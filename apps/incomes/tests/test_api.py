from datetime import date
from decimal import Decimal

import pytest
from django.urls import reverse
from rest_framework import status

from apps.incomes.models import Income
from apps.incomes.services import create_income


@pytest.fixture
def incomes(user):
    rows = [
        ('2024-01-01', '15000', 'cash', 'Scrap sale', 'Metal Traders'),
        ('2024-01-31', '42000', 'online', 'Interest credit', 'HDFC Bank'),
        ('2024-02-01', '8000', 'cheque', 'Deposit refund', 'Electricity Board'),
    ]
    return [
        create_income(
            owner=user,
            date=date.fromisoformat(day),
            amount=Decimal(amount),
            payment_mode=mode,
            description=description,
            source=source,
            payee='Site Ledger Builders',
            transaction_id='UTR9' if mode == 'online' else '',
            cheque_number='000111' if mode == 'cheque' else '',
        )
        for day, amount, mode, description, source in rows
    ]


@pytest.mark.django_db
class TestIncomeCreate:
    """Tests for POST /api/incomes/"""

    def test_create_income(self, authenticated_client, user):
        data = {
            'amount': '25000.50',
            'date': '2024-03-15',
            'description': ' Rent from hoarding ',
            'payment_mode': 'cash',
            'cheque_number': 'should be dropped',
            'source': 'Ad Agency',
            'payee': 'Company account',
        }
        response = authenticated_client.post(reverse('incomes:income-list'), data)

        assert response.status_code == status.HTTP_201_CREATED
        assert response.data['amount'] == Decimal('25000.50')
        assert response.data['description'] == 'Rent from hoarding'
        assert response.data['cheque_number'] == ''
        assert Income.objects.filter(owner=user).count() == 1

    def test_cheque_needs_number(self, authenticated_client):
        data = {
            'amount': '100',
            'date': '2024-03-15',
            'description': 'Refund',
            'payment_mode': 'cheque',
            'source': 'Vendor',
            'payee': 'Company',
        }
        response = authenticated_client.post(reverse('incomes:income-list'), data)

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.data['cheque_number'] == ['Cheque number is required for cheque payments']

    def test_required_fields(self, authenticated_client):
        response = authenticated_client.post(reverse('incomes:income-list'), {'amount': '-1'})

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        for field in ('amount', 'date', 'description', 'payment_mode', 'source', 'payee'):
            assert field in response.data

    def test_switching_mode_clears_old_reference(self, authenticated_client, incomes):
        online = incomes[1]
        url = reverse('incomes:income-detail', kwargs={'pk': online.id})
        response = authenticated_client.patch(url, {'payment_mode': 'cash'})

        assert response.status_code == status.HTTP_200_OK
        assert response.data['transaction_id'] == ''


@pytest.mark.django_db
class TestIncomeList:

    def test_default_order_is_newest_first(self, authenticated_client, incomes):
        response = authenticated_client.get(reverse('incomes:income-list'))
        assert [row['date'] for row in response.data['results']] == ['2024-02-01', '2024-01-31', '2024-01-01']

    def test_january_inclusive(self, authenticated_client, incomes):
        response = authenticated_client.get(
            reverse('incomes:income-list'),
            {'start_date': '2024-01-01', 'end_date': '2024-01-31'},
        )
        assert response.data['count'] == 2

    def test_amount_range(self, authenticated_client, incomes):
        response = authenticated_client.get(
            reverse('incomes:income-list'),
            {'min_amount': '8000', 'max_amount': '15000'},
        )
        assert response.data['count'] == 2

    def test_bad_amount_range(self, authenticated_client, incomes):
        response = authenticated_client.get(
            reverse('incomes:income-list'),
            {'min_amount': '20000', 'max_amount': '100'},
        )
        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert 'max_amount' in response.data

    def test_search_covers_references(self, authenticated_client, incomes):
        response = authenticated_client.get(reverse('incomes:income-list'), {'search': 'utr9'})
        assert [row['source'] for row in response.data['results']] == ['HDFC Bank']

    def test_summary_uses_filters(self, authenticated_client, incomes):
        response = authenticated_client.get(
            reverse('incomes:income-stats-summary'), {'start_date': '2024-01-15'}
        )

        assert response.status_code == status.HTTP_200_OK
        assert response.data['total_amount'] == Decimal('50000')
        assert response.data['count'] == 2
        assert response.data['by_payment_mode'] == {
            'online': Decimal('42000'),
            'cheque': Decimal('8000'),
        }

    def test_print_page_totals(self, authenticated_client, incomes):
        response = authenticated_client.get(reverse('incomes:income-print'))
        html = response.content.decode('utf-8')

        assert '₹65,000' in html
        assert 'Metal Traders' in html

    def test_other_user_cannot_update(self, other_client, incomes):
        url = reverse('incomes:income-detail', kwargs={'pk': incomes[0].id})
        response = other_client.patch(url, {'amount': '1'})

        assert response.status_code == status.HTTP_404_NOT_FOUND
