from decimal import Decimal

import pytest
from django.urls import reverse
from rest_framework import status

from apps.employees.models import Employee
from apps.expenses.models import Expense


@pytest.fixture
def employee_payload():
    return {
        'employee_id': 'EMP002',
        'name': 'Lakshmi Devi',
        'job_title': 'Accountant',
        'salary': '38000.00',
        'phone': '9848000002',
        'email': ' Lakshmi@Example.com ',
        'address': 'Madhapur, Hyderabad',
        'joining_date': '2024-02-01',
    }


# =============================================================================
# Employee CRUD Tests
# =============================================================================

@pytest.mark.django_db
class TestEmployeeCreate:
    """Tests for POST /api/employees/"""

    def test_create_employee(self, authenticated_client, user, employee_payload):
        response = authenticated_client.post(reverse('employees:employee-list'), employee_payload)

        assert response.status_code == status.HTTP_201_CREATED
        assert response.data['status'] == 'active'
        assert response.data['email'] == 'lakshmi@example.com'
        assert response.data['salary'] == Decimal('38000.00')
        assert Employee.objects.filter(owner=user, employee_id='EMP002').exists()

    def test_email_is_optional(self, authenticated_client, employee_payload):
        del employee_payload['email']
        response = authenticated_client.post(reverse('employees:employee-list'), employee_payload)

        assert response.status_code == status.HTTP_201_CREATED
        assert response.data['email'] == ''

    def test_duplicate_employee_id(self, authenticated_client, employee, employee_payload):
        employee_payload['employee_id'] = 'emp001'
        response = authenticated_client.post(reverse('employees:employee-list'), employee_payload)

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.data['error'] == "Employee ID 'emp001' already exists"

    def test_negative_salary(self, authenticated_client, employee_payload):
        employee_payload['salary'] = '-1'
        response = authenticated_client.post(reverse('employees:employee-list'), employee_payload)

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert 'salary' in response.data

    def test_short_name(self, authenticated_client, employee_payload):
        employee_payload['name'] = ' A '
        response = authenticated_client.post(reverse('employees:employee-list'), employee_payload)

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert 'name' in response.data


@pytest.mark.django_db
class TestEmployeeUpdateDelete:

    def test_deactivate(self, authenticated_client, employee):
        url = reverse('employees:employee-detail', kwargs={'pk': employee.id})
        response = authenticated_client.patch(url, {'status': 'inactive'})

        assert response.status_code == status.HTTP_200_OK
        employee.refresh_from_db()
        assert not employee.is_active

    def test_salary_change_leaves_saved_expenses_alone(self, authenticated_client, employee, make_expense):
        expense = make_expense(
            category='office',
            subcategory='salaries',
            employee=employee,
            salary_month='2024-03',
            description='',
        )
        url = reverse('employees:employee-detail', kwargs={'pk': employee.id})
        authenticated_client.patch(url, {'salary': '50000.00'})

        expense.refresh_from_db()
        assert expense.amount == Decimal('45000.00')

    def test_delete_keeps_salary_expenses(self, authenticated_client, employee, make_expense):
        expense = make_expense(
            category='office',
            subcategory='salaries',
            employee=employee,
            salary_month='2024-03',
        )
        url = reverse('employees:employee-detail', kwargs={'pk': employee.id})
        response = authenticated_client.delete(url)

        assert response.status_code == status.HTTP_204_NO_CONTENT
        expense = Expense.objects.get(id=expense.id)
        assert expense.employee is None
        assert expense.amount == Decimal('45000.00')


@pytest.mark.django_db
class TestEmployeeListAndStats:

    @pytest.fixture
    def staff(self, user, employee):
        Employee.objects.create(
            owner=user,
            employee_id='EMP003',
            name='Suresh Babu',
            job_title='Site Supervisor',
            salary=Decimal('32000.00'),
            phone='9848000003',
            address='Gachibowli',
            joining_date='2022-07-15',
            status='inactive',
        )

    def test_filter_by_status(self, authenticated_client, staff):
        response = authenticated_client.get(reverse('employees:employee-list'), {'status': 'inactive'})

        assert response.data['count'] == 1
        assert response.data['results'][0]['employee_id'] == 'EMP003'

    def test_filter_by_job_title(self, authenticated_client, staff):
        response = authenticated_client.get(reverse('employees:employee-list'), {'job_title': 'site'})
        assert {row['employee_id'] for row in response.data['results']} == {'EMP001', 'EMP003'}

    def test_sort_by_salary(self, authenticated_client, staff):
        response = authenticated_client.get(
            reverse('employees:employee-list'), {'sort_by': 'salary', 'sort_order': 'asc'}
        )
        assert [row['employee_id'] for row in response.data['results']] == ['EMP003', 'EMP001']

    def test_summary(self, authenticated_client, staff):
        response = authenticated_client.get(reverse('employees:employee-stats-summary'))

        assert response.status_code == status.HTTP_200_OK
        assert response.data['total_employees'] == 2
        assert response.data['active_employees'] == 1
        assert response.data['inactive_employees'] == 1
        assert response.data['total_salary_expense'] == Decimal('77000.00')
        assert response.data['average_salary'] == Decimal('38500.00')
        assert len(response.data['recent_employees']) == 2

    def test_summary_follows_filters(self, authenticated_client, staff):
        response = authenticated_client.get(
            reverse('employees:employee-stats-summary'), {'status': 'active'}
        )
        assert response.data['total_employees'] == 1
        assert response.data['total_salary_expense'] == Decimal('45000.00')
