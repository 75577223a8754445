"""Employee management service."""

import logging
from decimal import Decimal
from typing import Optional
from uuid import UUID

from django.db import transaction
from django.db.models import Avg, Count, DecimalField, Q, Sum, Value
from django.db.models.functions import Coalesce

from apps.accounts.models import User
from apps.core.models import RecordStatus
from apps.employees.models import Employee

from .exceptions import EmployeeNotFoundError, DuplicateEmployeeError

logger = logging.getLogger(__name__)

EDITABLE_FIELDS = (
    'employee_id', 'name', 'job_title', 'salary', 'phone',
    'email', 'address', 'joining_date', 'status',
)

RECENT_EMPLOYEES = 5


def _check_employee_id_available(*, owner: User, employee_id: str, exclude_id: Optional[UUID] = None) -> None:
    employees = Employee.objects.filter(owner=owner, employee_id__iexact=employee_id)
    if exclude_id is not None:
        employees = employees.exclude(id=exclude_id)
    if employees.exists():
        raise DuplicateEmployeeError(f"Employee ID '{employee_id}' already exists")


def _clean(changes: dict) -> dict:
    for field in ('employee_id', 'name', 'job_title', 'phone', 'address'):
        if field in changes and changes[field] is not None:
            changes[field] = changes[field].strip()
    if 'email' in changes:
        changes['email'] = (changes['email'] or '').strip().lower()
    return changes


def get_employee_by_id(*, pk: UUID, owner: User, for_update: bool = False) -> Employee:
    """
    Raises:
        EmployeeNotFoundError: If the employee doesn't exist for this owner
    """
    employees = Employee.objects.filter(owner=owner)
    if for_update:
        employees = employees.select_for_update()
    try:
        return employees.get(id=pk)
    except Employee.DoesNotExist:
        raise EmployeeNotFoundError(f"Employee with ID {pk} not found")


@transaction.atomic
def create_employee(*, owner: User, **fields) -> Employee:
    """
    Create an employee.

    Raises:
        DuplicateEmployeeError: If the owner already uses the employee ID
    """
    fields = _clean(fields)
    _check_employee_id_available(owner=owner, employee_id=fields['employee_id'])

    employee = Employee.objects.create(
        owner=owner,
        **{field: value for field, value in fields.items() if field in EDITABLE_FIELDS}
    )
    logger.info("Created employee %s for %s", employee.employee_id, owner)
    return employee


@transaction.atomic
def update_employee(*, pk: UUID, owner: User, **changes) -> Employee:
    """
    Update an employee.

    Salary changes do not rewrite past expenses; only salary expenses saved
    afterwards pick up the new figure.

    Raises:
        EmployeeNotFoundError: If the employee doesn't exist for this owner
        DuplicateEmployeeError: If changing onto another employee's ID
    """
    employee = get_employee_by_id(pk=pk, owner=owner, for_update=True)
    changes = _clean(changes)

    if 'employee_id' in changes:
        _check_employee_id_available(
            owner=owner,
            employee_id=changes['employee_id'],
            exclude_id=employee.id,
        )

    for field in EDITABLE_FIELDS:
        if field in changes:
            setattr(employee, field, changes[field])
    employee.save()
    return employee


@transaction.atomic
def delete_employee(*, pk: UUID, owner: User) -> None:
    """
    Delete an employee. Their salary expenses stay, without the link.

    Raises:
        EmployeeNotFoundError: If the employee doesn't exist for this owner
    """
    employee = get_employee_by_id(pk=pk, owner=owner, for_update=True)
    employee.delete()
    logger.info("Deleted employee %s for %s", pk, owner)


def get_employee_stats(employees) -> dict:
    """Head counts, salary totals and the five most recently added employees."""
    zero = Value(Decimal('0'), output_field=DecimalField(max_digits=14, decimal_places=2))
    totals = employees.aggregate(
        total_employees=Count('id'),
        active_employees=Count('id', filter=Q(status=RecordStatus.ACTIVE)),
        inactive_employees=Count('id', filter=Q(status=RecordStatus.INACTIVE)),
        total_salary_expense=Coalesce(Sum('salary'), zero),
        average_salary=Coalesce(Avg('salary'), zero),
    )
    totals['average_salary'] = Decimal(totals['average_salary']).quantize(Decimal('0.01'))

    recent = employees.order_by('-created_at')[:RECENT_EMPLOYEES]
    totals['recent_employees'] = [
        {
            'id': employee.id,
            'name': employee.name,
            'job_title': employee.job_title,
            'created_at': employee.created_at,
        }
        for employee in recent
    ]
    return totals
