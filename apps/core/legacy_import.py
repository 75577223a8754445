"""
Import of data exported from the browser-only version of the app.

That version kept each entity list as JSON under its own ``localStorage``
key with camelCase fields and client-generated ids. ``LocalStorageImporter``
maps those records onto the services layer in dependency order and keeps a
table of legacy id -> new record so later lists can resolve references.

Every record is written in its own savepoint: a bad record is reported and
skipped, the rest still import.
"""

import logging
from datetime import date
from decimal import Decimal, InvalidOperation

from django.db import DatabaseError, transaction

from apps.categories.models import Icon
from apps.categories.services import create_category, get_category_by_slug, get_subcategory
from apps.core.exceptions import LedgerServiceError
from apps.core.models import PaymentMode, RecordStatus
from apps.customers.models import PaymentCategory
from apps.customers.services import create_customer, create_payment
from apps.employees.services import create_employee
from apps.expenses.services import create_expense
from apps.incomes.services import create_income
from apps.landlords.services import create_landlord
from apps.projects.services import create_project

logger = logging.getLogger(__name__)

# Dependency order; references only point at keys imported earlier
LEGACY_KEYS = (
    'projects',
    'categories',
    'employees',
    'landlords',
    'customers',
    'incomes',
    'customerPayments',
    'expenses',
)


class LegacyRecordError(ValueError):
    """A legacy record that cannot be mapped."""


def legacy_id(record):
    return str(record.get('id') or record.get('_id') or '')


def to_decimal(value, field, default=None):
    if value in (None, ''):
        if default is None:
            raise LegacyRecordError(f"{field} is required")
        return default
    try:
        return Decimal(str(value))
    except InvalidOperation:
        raise LegacyRecordError(f"{field} is not a number: {value!r}")


def to_date(value, field):
    if not value:
        raise LegacyRecordError(f"{field} is required")
    try:
        return date.fromisoformat(str(value)[:10])
    except ValueError:
        raise LegacyRecordError(f"{field} is not a date: {value!r}")


def to_choice(value, choices, default):
    return value if value in choices.values else default


def text(record, key, default=''):
    return str(record.get(key) or default).strip()


def optional_amount(value):
    """Legacy forms stored 0 for "not set"."""
    if value in (None, '', 0, '0'):
        return None
    return to_decimal(value, 'amount')


class LocalStorageImporter:
    """
    Import one user's legacy dump.

    Example:
        >>> importer = LocalStorageImporter(owner=user)
        >>> report = importer.run(json.load(fh))
        >>> report['counts']['expenses']
        12
    """

    def __init__(self, *, owner):
        self.owner = owner
        self.projects = {}
        self.employees = {}
        self.landlords = {}
        self.customers = {}
        self.counts = {key: 0 for key in LEGACY_KEYS}
        self.errors = []

    def run(self, dump: dict) -> dict:
        for key in LEGACY_KEYS:
            records = dump.get(key) or []
            if not isinstance(records, list):
                self.errors.append(f"{key}: expected a list")
                continue
            handler = getattr(self, f'import_{key}')
            for index, record in enumerate(records):
                self._import_one(key, index, handler, record)

        logger.info(
            "Legacy import for %s: %s, %d errors",
            self.owner, self.counts, len(self.errors)
        )
        return {'counts': self.counts, 'errors': self.errors}

    def _import_one(self, key, index, handler, record):
        try:
            with transaction.atomic():
                handler(record)
        except (LedgerServiceError, LegacyRecordError, DatabaseError, TypeError, AttributeError) as e:
            self.errors.append(f"{key}[{index}]: {e}")
        else:
            self.counts[key] += 1

    def _resolve(self, table, value, label):
        if not value:
            return None
        try:
            return table[str(value)]
        except KeyError:
            raise LegacyRecordError(f"unknown {label} {value!r}")

    def import_projects(self, record):
        project = create_project(
            owner=self.owner,
            name=text(record, 'name'),
            color=text(record, 'color', '#3B82F6'),
            location=text(record, 'location'),
            commence_date=to_date(record.get('commenceDate'), 'commenceDate'),
        )
        self.projects[legacy_id(record)] = project

    def import_categories(self, record):
        create_category(
            owner=self.owner,
            slug=text(record, 'id'),
            name=text(record, 'name'),
            icon=to_choice(record.get('icon'), Icon, Icon.TAG),
            subcategories=[
                {
                    'slug': text(sub, 'id'),
                    'name': text(sub, 'name'),
                    'icon': to_choice(sub.get('icon'), Icon, Icon.LAYERS),
                }
                for sub in record.get('subcategories') or []
            ],
        )

    def import_employees(self, record):
        employee = create_employee(
            owner=self.owner,
            employee_id=text(record, 'employeeId') or legacy_id(record),
            name=text(record, 'name'),
            job_title=text(record, 'jobTitle', 'Employee'),
            salary=to_decimal(record.get('salary'), 'salary', Decimal('0')),
            phone=text(record, 'phone'),
            email=text(record, 'email'),
            address=text(record, 'address'),
            joining_date=to_date(record.get('joiningDate'), 'joiningDate'),
            status=to_choice(record.get('status'), RecordStatus, RecordStatus.ACTIVE),
        )
        self.employees[legacy_id(record)] = employee

    def import_landlords(self, record):
        landlord = create_landlord(
            owner=self.owner,
            name=text(record, 'name'),
            amount=to_decimal(record.get('amount'), 'amount', Decimal('0')),
            price_per_acre=to_decimal(record.get('pricePerAcre'), 'pricePerAcre'),
            total_extent=to_decimal(record.get('totalExtent'), 'totalExtent'),
            phone=text(record, 'phone'),
            email=text(record, 'email'),
            address=text(record, 'address'),
            status=to_choice(record.get('status'), RecordStatus, RecordStatus.ACTIVE),
        )
        self.landlords[legacy_id(record)] = landlord

    def import_customers(self, record):
        customer = create_customer(
            owner=self.owner,
            name=text(record, 'name'),
            plot_number=text(record, 'plotNumber'),
            plot_size=to_decimal(record.get('plotSize'), 'plotSize', Decimal('0')),
            built_up_area=to_decimal(record.get('builtUpArea'), 'builtUpArea', Decimal('0')),
            project=self._resolve(self.projects, record.get('projectId'), 'project'),
            sale_price=to_decimal(record.get('salePrice'), 'salePrice'),
            price_per_yard=to_decimal(record.get('pricePerYard'), 'pricePerYard', Decimal('0')),
            construction_price=to_decimal(record.get('constructionPrice'), 'constructionPrice', Decimal('0')),
            construction_price_per_sqft=to_decimal(
                record.get('constructionPricePerSqft'), 'constructionPricePerSqft', Decimal('0')
            ),
            phone=text(record, 'phone'),
            email=text(record, 'email'),
            address=text(record, 'address'),
        )
        self.customers[legacy_id(record)] = customer

    def _payment_details(self, record):
        mode = to_choice(record.get('paymentMode'), PaymentMode, PaymentMode.CASH)
        return {
            'payment_mode': mode,
            'cheque_number': text(record, 'chequeNumber') if mode == PaymentMode.CHEQUE else '',
            'transaction_id': text(record, 'transactionId') if mode == PaymentMode.ONLINE else '',
        }

    def import_incomes(self, record):
        create_income(
            owner=self.owner,
            amount=to_decimal(record.get('amount'), 'amount'),
            date=to_date(record.get('date'), 'date'),
            description=text(record, 'description', 'Imported income'),
            source=text(record, 'source', 'Unknown'),
            payee=text(record, 'payee', 'Unknown'),
            **self._payment_details(record),
        )

    def import_customerPayments(self, record):
        customer_name = text(record, 'customerName')
        customer = next(
            (c for c in self.customers.values() if c.name == customer_name),
            None,
        )
        create_payment(
            owner=self.owner,
            amount=to_decimal(record.get('amount'), 'amount'),
            date=to_date(record.get('date'), 'date'),
            description=text(record, 'description', 'Imported payment'),
            customer=customer,
            customer_name=customer_name,
            invoice_number=text(record, 'invoiceNumber'),
            project=self._resolve(self.projects, record.get('projectId'), 'project'),
            plot_number=text(record, 'plotNumber'),
            payment_category=to_choice(record.get('paymentCategory'), PaymentCategory, PaymentCategory.TOKEN),
            total_price=optional_amount(record.get('totalPrice')),
            development_charges=to_decimal(record.get('developmentCharges'), 'developmentCharges', Decimal('0')),
            clubhouse_charges=to_decimal(record.get('clubhouseCharges'), 'clubhouseCharges', Decimal('0')),
            construction_charges=to_decimal(
                record.get('constructionCharges'), 'constructionCharges', Decimal('0')
            ),
            **self._payment_details(record),
        )

    def import_expenses(self, record):
        project = self._resolve(self.projects, record.get('projectId'), 'project')
        if project is None:
            raise LegacyRecordError("projectId is required")
        category = get_category_by_slug(slug=text(record, 'category'), owner=self.owner)
        subcategory = get_subcategory(category=category, slug=text(record, 'subcategory'))

        create_expense(
            owner=self.owner,
            project=project,
            amount=to_decimal(record.get('amount'), 'amount'),
            date=to_date(record.get('date'), 'date'),
            category=category,
            subcategory=subcategory,
            description=text(record, 'description'),
            employee=self._resolve(self.employees, record.get('employeeId'), 'employee'),
            salary_month=text(record, 'salaryMonth'),
            override_salary=optional_amount(record.get('overrideSalary')),
            landlord=self._resolve(self.landlords, record.get('landlordId'), 'landlord'),
            land_purchase_amount=optional_amount(record.get('landPurchaseAmount')),
            land_details=text(record, 'landDetails'),
            **self._payment_details(record),
        )
