"""Services for customers and customer payments business logic."""

from .exceptions import (
    CustomersServiceError,
    CustomerNotFoundError,
    CustomerInUseError,
    DuplicateCustomerError,
    PaymentNotFoundError,
    InvalidPaymentError,
)
from .customer_management import (
    create_customer,
    update_customer,
    delete_customer,
    get_customer_by_id,
    get_customer_stats,
)
from .payment_management import (
    fill_from_customer,
    create_payment,
    update_payment,
    delete_payment,
    get_payment_by_id,
    get_payment_stats,
)

__all__ = [
    # Exceptions
    'CustomersServiceError',
    'CustomerNotFoundError',
    'CustomerInUseError',
    'DuplicateCustomerError',
    'PaymentNotFoundError',
    'InvalidPaymentError',
    # Customers
    'create_customer',
    'update_customer',
    'delete_customer',
    'get_customer_by_id',
    'get_customer_stats',
    # Payments
    'fill_from_customer',
    'create_payment',
    'update_payment',
    'delete_payment',
    'get_payment_by_id',
    'get_payment_stats',
]
