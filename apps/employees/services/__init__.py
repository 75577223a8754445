"""Services for employees business logic."""

from .exceptions import (
    EmployeesServiceError,
    EmployeeNotFoundError,
    DuplicateEmployeeError,
)
from .employee_management import (
    create_employee,
    update_employee,
    delete_employee,
    get_employee_by_id,
    get_employee_stats,
)

__all__ = [
    # Exceptions
    'EmployeesServiceError',
    'EmployeeNotFoundError',
    'DuplicateEmployeeError',
    # Services
    'create_employee',
    'update_employee',
    'delete_employee',
    'get_employee_by_id',
    'get_employee_stats',
]
