from datetime import date
from decimal import Decimal

import pytest
from django.urls import reverse
from rest_framework import status

from apps.core.exports import (
    CURRENCY,
    ExportColumn,
    build_pdf,
    format_currency,
    format_date,
    group_indian,
    raw_value,
    resolve,
)
from apps.projects.models import Project


class TestFormatting:

    def test_indian_grouping(self):
        assert group_indian('999') == '999'
        assert group_indian('1000') == '1,000'
        assert group_indian('100000') == '1,00,000'
        assert group_indian('12345678') == '1,23,45,678'

    def test_currency_rounds_to_whole_rupees(self):
        assert format_currency(Decimal('250000')) == '₹2,50,000'
        assert format_currency(Decimal('1234.5')) == '₹1,235'
        assert format_currency(None) == '₹0'

    def test_negative_currency(self):
        assert format_currency(Decimal('-1500'), symbol='Rs.') == '-Rs.1,500'

    def test_date(self):
        assert format_date(date(2024, 3, 5)) == '05 Mar 2024'
        assert format_date(None) == ''

    def test_raw_currency_keeps_two_places(self):
        assert str(raw_value(Decimal('1500000'), CURRENCY)) == '1500000.00'
        assert str(raw_value(Decimal('12.345'), CURRENCY)) == '12.35'
        assert raw_value(None, CURRENCY) == ''

    def test_resolve_dotted_and_callable(self):
        record = {'project': {'name': 'Green Meadows'}, 'amount': 10}
        assert resolve(record, 'project.name') == 'Green Meadows'
        assert resolve(record, 'missing.name') is None
        assert resolve(record, lambda r: r['amount'] * 2) == 20


class TestPdf:

    def test_pdf_document(self):
        columns = (ExportColumn('Name', 'name'), ExportColumn('Amount', 'amount', CURRENCY))
        content = build_pdf('Expenses', columns, [{'name': 'Cement & <steel>', 'amount': Decimal('1500')}])
        assert content.startswith(b'%PDF')

    def test_empty_pdf(self):
        content = build_pdf('Expenses', (ExportColumn('Name', 'name'),), [])
        assert content.startswith(b'%PDF')


@pytest.mark.django_db
class TestExportEndpoints:

    @pytest.fixture
    def projects(self, user, other_user):
        Project.objects.create(owner=user, name='Alpha', color='#000000', location='A', commence_date=date(2024, 1, 1))
        Project.objects.create(owner=user, name='Bravo', color='#000000', location='B', commence_date=date(2024, 2, 1))
        Project.objects.create(owner=other_user, name='Hidden', color='#000000', location='C', commence_date=date(2024, 3, 1))

    def test_csv_covers_filtered_set(self, authenticated_client, projects):
        response = authenticated_client.get(reverse('projects:project-export-csv'), {'search': 'alp'})

        assert response.status_code == status.HTTP_200_OK
        assert response['Content-Type'].startswith('text/csv')
        assert 'attachment' in response['Content-Disposition']
        lines = response.content.decode('utf-8').strip().splitlines()
        assert lines[0].startswith('Name,Location')
        assert len(lines) == 2
        assert 'Alpha' in lines[1]

    def test_csv_is_owner_scoped(self, authenticated_client, projects):
        response = authenticated_client.get(reverse('projects:project-export-csv'))
        assert 'Hidden' not in response.content.decode('utf-8')

    def test_pdf_download(self, authenticated_client, projects):
        response = authenticated_client.get(reverse('projects:project-export-pdf'))

        assert response.status_code == status.HTTP_200_OK
        assert response['Content-Type'] == 'application/pdf'
        assert response.content.startswith(b'%PDF')

    def test_print_page(self, authenticated_client, projects):
        response = authenticated_client.get(reverse('projects:project-print'))

        assert response.status_code == status.HTTP_200_OK
        html = response.content.decode('utf-8')
        assert '<h1>Projects</h1>' in html
        assert 'Alpha' in html and 'Bravo' in html
        assert 'Total Projects' in html

    def test_exports_require_authentication(self, api_client):
        response = api_client.get(reverse('projects:project-export-csv'))
        assert response.status_code == status.HTTP_401_UNAUTHORIZED
