from datetime import date
from decimal import Decimal

import pytest

from apps.employees.models import Employee
from apps.employees.services import (
    DuplicateEmployeeError,
    EmployeeNotFoundError,
    create_employee,
    delete_employee,
    get_employee_stats,
    update_employee,
)


@pytest.mark.django_db
class TestEmployeeServices:

    def test_create_cleans_fields(self, user):
        employee = create_employee(
            owner=user,
            employee_id=' EMP010 ',
            name=' Anil ',
            job_title='Driver',
            salary=Decimal('18000'),
            phone=' 9000000000 ',
            email=' Anil@Example.COM ',
            address='Kukatpally',
            joining_date=date(2024, 1, 1),
        )
        assert employee.employee_id == 'EMP010'
        assert employee.name == 'Anil'
        assert employee.email == 'anil@example.com'

    def test_update_onto_existing_id(self, user, employee):
        other = Employee.objects.create(
            owner=user,
            employee_id='EMP002',
            name='Other',
            job_title='Helper',
            salary=Decimal('10000'),
            phone='1',
            address='x',
            joining_date=date(2024, 1, 1),
        )
        with pytest.raises(DuplicateEmployeeError):
            update_employee(pk=other.id, owner=user, employee_id='EMP001')

    def test_delete_other_owners_employee(self, other_user, employee):
        with pytest.raises(EmployeeNotFoundError):
            delete_employee(pk=employee.id, owner=other_user)

    def test_stats_of_empty_set(self, user):
        stats = get_employee_stats(Employee.objects.filter(owner=user))

        assert stats['total_employees'] == 0
        assert stats['total_salary_expense'] == Decimal('0')
        assert stats['average_salary'] == Decimal('0.00')
        assert stats['recent_employees'] == []
