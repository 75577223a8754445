import csv
import io
from datetime import date
from decimal import Decimal

import pytest
from django.urls import reverse
from django.utils import timezone
from rest_framework import status


MARCH = {'start_date': '2024-03-01', 'end_date': '2024-03-31'}


# =============================================================================
# Summary Cards
# =============================================================================

@pytest.mark.django_db
class TestDashboardSummary:
    """Tests for GET /api/dashboard/summary/"""

    @pytest.fixture
    def ledger(self, make_expense, make_income, make_payment, employee, landlord):
        make_expense()
        make_expense(
            category='office',
            subcategory='salaries',
            employee=employee,
            salary_month='2024-03',
            date=date(2024, 3, 31),
        )
        make_expense(amount=Decimal('7000'), date=date(2024, 4, 2))
        make_income()
        make_payment()
        make_payment(amount=Decimal('50000'), date=date(2024, 2, 10))

    def test_in_range_cards(self, authenticated_client, ledger):
        response = authenticated_client.get(reverse('dashboard:summary'), MARCH)

        assert response.status_code == status.HTTP_200_OK
        assert response.data['start_date'] == date(2024, 3, 1)
        assert response.data['in_range'] == {
            'expenses': Decimal('46000'),
            'incomes': Decimal('15000'),
            'payments': Decimal('200000'),
            'total_received': Decimal('215000'),
            'net_balance': Decimal('169000'),
            'salary_expenses': Decimal('45000'),
        }

    def test_all_time_cards_ignore_dates(self, authenticated_client, ledger):
        response = authenticated_client.get(reverse('dashboard:summary'), MARCH)
        all_time = response.data['all_time']

        assert all_time['scope'] == 'all_time'
        assert all_time['customer_payments']['total_received'] == Decimal('250000')
        assert all_time['customer_payments']['total_due'] == Decimal('3000000')
        assert all_time['customer_payments']['unique_customers'] == 1
        assert 'by_category' not in all_time['customer_payments']
        assert all_time['employees'] == {
            'total_employees': 1,
            'active_employees': 1,
            'total_salary': Decimal('45000'),
        }
        assert all_time['landlords']['total_land_value'] == Decimal('250000')

    def test_default_range_is_last_and_this_month(self, authenticated_client):
        response = authenticated_client.get(reverse('dashboard:summary'))

        today = timezone.localdate()
        assert response.status_code == status.HTTP_200_OK
        assert response.data['start_date'].day == 1
        assert response.data['end_date'].month == today.month
        assert response.data['in_range']['expenses'] == Decimal('0')

    def test_start_after_end(self, authenticated_client):
        response = authenticated_client.get(
            reverse('dashboard:summary'),
            {'start_date': '2024-04-01', 'end_date': '2024-03-01'},
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert 'end_date' in response.data

    def test_other_users_records_excluded(self, other_client, ledger):
        response = other_client.get(reverse('dashboard:summary'), MARCH)

        assert response.data['in_range']['expenses'] == Decimal('0')
        assert response.data['all_time']['employees']['total_employees'] == 0

    def test_requires_authentication(self, api_client):
        response = api_client.get(reverse('dashboard:summary'))
        assert response.status_code == status.HTTP_401_UNAUTHORIZED


# =============================================================================
# Charts
# =============================================================================

@pytest.mark.django_db
class TestDashboardCharts:

    def test_monthly_buckets_include_empty_months(self, authenticated_client, make_expense):
        make_expense(amount=Decimal('500'), date=date(2024, 1, 10))
        make_expense(amount=Decimal('700'), date=date(2024, 3, 5))

        response = authenticated_client.get(
            reverse('dashboard:monthly-expenses'),
            {'start_date': '2024-01-15', 'end_date': '2024-03-01'},
        )

        assert response.status_code == status.HTTP_200_OK
        assert [(row['month'], row['label'], row['total']) for row in response.data] == [
            ('2024-01', 'Jan 2024', Decimal('500')),
            ('2024-02', 'Feb 2024', Decimal('0')),
            ('2024-03', 'Mar 2024', Decimal('700')),
        ]

    def test_expense_categories(self, authenticated_client, make_expense):
        make_expense(amount=Decimal('2000'))
        make_expense(subcategory='labor', amount=Decimal('1000'))
        make_expense(category='office', subcategory='rent', amount=Decimal('1000'))

        response = authenticated_client.get(reverse('dashboard:expense-categories'), MARCH)

        assert response.data == [
            {
                'category': 'construction',
                'name': 'Site & Construction',
                'total': Decimal('3000'),
                'percentage': Decimal('75.00'),
            },
            {
                'category': 'office',
                'name': 'Office Expenses',
                'total': Decimal('1000'),
                'percentage': Decimal('25.00'),
            },
        ]

    def test_expense_categories_empty(self, authenticated_client):
        response = authenticated_client.get(reverse('dashboard:expense-categories'), MARCH)
        assert response.data == []


# =============================================================================
# Reports
# =============================================================================

@pytest.mark.django_db
class TestReports:
    """Tests for GET /api/dashboard/reports/"""

    def report(self, client, **params):
        params.setdefault('time_range', 'custom')
        params.setdefault('start_date', '2024-03-01')
        params.setdefault('end_date', '2024-03-31')
        return client.get(reverse('dashboard:reports'), params)

    def test_expenses_report(self, authenticated_client, make_expense):
        make_expense(amount=Decimal('3000'))
        make_expense(subcategory='labor', amount=Decimal('1000'))
        make_expense(category='office', subcategory='rent', amount=Decimal('1000'))
        make_expense(amount=Decimal('9999'), date=date(2024, 5, 1))

        response = self.report(authenticated_client, report_type='expenses')

        assert response.status_code == status.HTTP_200_OK
        assert response.data['total'] == Decimal('5000')
        category, subcategory = response.data['breakdowns']
        assert category['rows'][0] == {
            'label': 'Site & Construction',
            'amount': Decimal('4000'),
            'percentage': Decimal('80.00'),
        }
        assert subcategory['rows'][0]['label'] == 'Site & Construction / Material Purchase'
        assert subcategory['rows'][0]['percentage'] == Decimal('60.00')

    def test_expenses_report_by_category(self, authenticated_client, make_expense):
        make_expense(amount=Decimal('3000'))
        make_expense(category='office', subcategory='rent', amount=Decimal('1000'))

        response = self.report(authenticated_client, category='Office')

        assert response.data['total'] == Decimal('1000')

    def test_expenses_report_by_project(self, authenticated_client, make_expense, other_project):
        make_expense(amount=Decimal('3000'))
        make_expense(amount=Decimal('1000'), project=other_project)

        response = self.report(authenticated_client, project=str(other_project.id))

        assert response.data['total'] == Decimal('1000')

    def test_income_report(self, authenticated_client, make_income):
        make_income()
        make_income(amount=Decimal('5000'), source='Rental', payee='Sri Traders')

        response = self.report(authenticated_client, report_type='income')

        payee, source = response.data['breakdowns']
        assert payee['rows'] == [
            {'label': 'Sri Traders', 'amount': Decimal('20000'), 'percentage': Decimal('100.00')},
        ]
        assert [row['label'] for row in source['rows']] == ['Scrap', 'Rental']

    def test_payments_report(self, authenticated_client, make_payment):
        make_payment()
        make_payment(amount=Decimal('100000'), payment_category='token')

        response = self.report(authenticated_client, report_type='payments')

        customer, category = response.data['breakdowns']
        assert customer['rows'][0]['label'] == 'Anil Reddy'
        assert customer['rows'][0]['amount'] == Decimal('300000')
        assert [row['label'] for row in category['rows']] == ['Booking', 'Token']

    def test_landlords_report(self, authenticated_client, landlord, make_expense):
        today = timezone.localdate()
        make_expense(subcategory='land', landlord=landlord, amount=Decimal('100000'), date=today)
        make_expense(
            subcategory='land',
            amount=Decimal('20000'),
            date=today,
            description='Registration charges',
        )

        response = authenticated_client.get(
            reverse('dashboard:reports'),
            {'report_type': 'landlords', 'time_range': 'monthly'},
        )

        assert response.data['total'] == Decimal('620000')
        by_landlord = {row['label']: row['amount'] for row in response.data['breakdowns'][0]['rows']}
        assert by_landlord == {
            'Narasimha Rao': Decimal('600000'),
            'Land Purchase Expenses': Decimal('20000'),
        }

    def test_defaults_to_monthly_expenses(self, authenticated_client):
        response = authenticated_client.get(reverse('dashboard:reports'), {'time_range': 'all'})

        assert response.data['report_type'] == 'expenses'
        assert response.data['time_range'] == 'monthly'

    def test_invalid_report_type(self, authenticated_client):
        response = self.report(authenticated_client, report_type='salaries')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert 'report_type' in response.data

    def test_custom_range_reversed(self, authenticated_client):
        response = self.report(authenticated_client, start_date='2024-04-01')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert 'end_date' in response.data

    def test_csv_export(self, authenticated_client, make_expense):
        make_expense(amount=Decimal('3000'))
        make_expense(subcategory='labor', amount=Decimal('1000'))

        response = authenticated_client.get(
            reverse('dashboard:reports-export-csv'),
            {'time_range': 'custom', **MARCH},
        )

        assert response.status_code == status.HTTP_200_OK
        assert response['Content-Type'].startswith('text/csv')
        rows = list(csv.reader(io.StringIO(response.content.decode('utf-8'))))
        assert rows[0] == ['Report Type', 'EXPENSES']
        assert rows[1] == ['Period', '01/03/2024 to 31/03/2024']
        assert rows[2] == ['Total Amount', '4000.00']
        assert rows[3] == []
        assert rows[4] == ['Category Breakdown']
        assert rows[5] == ['Category', 'Amount', 'Percentage']
        assert rows[6] == ['Site & Construction', '4000.00', '100.00']
