"""
Dashboard Module
================

Aggregations behind the dashboard cards and charts.

Classes:
    DashboardQueries: Static methods for the dashboard summary and charts.

Example:
    Getting the summary cards::

        from apps.dashboard.analytics import DashboardQueries

        start, end = DashboardQueries.default_range()
        data = DashboardQueries.summary(owner=user, start_date=start, end_date=end)
        print(data['in_range']['net_balance'])

Note:
    The in-range cards use the requested dates. The customer payment,
    employee and landlord cards cover all records regardless of dates and
    are returned under ``all_time``.
"""

from datetime import date
from decimal import Decimal

from dateutil.relativedelta import relativedelta
from django.conf import settings
from django.db.models import DecimalField, Sum, Value
from django.db.models.functions import Coalesce, TruncMonth
from django.utils import timezone

from apps.customers.models import CustomerPayment
from apps.customers.services import get_payment_stats
from apps.employees.models import Employee
from apps.employees.services import get_employee_stats
from apps.expenses.models import Expense
from apps.incomes.models import Income
from apps.landlords.models import Landlord
from apps.landlords.services import get_landlord_stats

from .exceptions import InvalidDateRangeError

ZERO = Decimal('0')


def _sum_amount(queryset) -> Decimal:
    zero = Value(ZERO, output_field=DecimalField(max_digits=16, decimal_places=2))
    return queryset.aggregate(total=Coalesce(Sum('amount'), zero))['total']


def month_start(value: date) -> date:
    return value.replace(day=1)


def month_end(value: date) -> date:
    return month_start(value) + relativedelta(months=1, days=-1)


class DashboardQueries:
    """
    Read-only queries for the dashboard.

    Methods:
        default_range: First day of last month to last day of this month.
        summary: In-range money cards plus the all-time entity cards.
        monthly_expenses: Expense totals per calendar month.
        expense_categories: Expense totals per category.

    Note:
        All methods return plain dictionaries or lists, ready for
        ``Response``.
    """

    @staticmethod
    def default_range(today=None):
        """
        Returns:
            tuple: ``(start, end)`` covering the previous and current month.
        """
        today = today or timezone.localdate()
        start = month_start(today) - relativedelta(months=1)
        return start, month_end(today)

    @staticmethod
    def check_range(start_date, end_date):
        if start_date > end_date:
            raise InvalidDateRangeError("Start date must be on or before end date")

    @staticmethod
    def summary(owner, start_date, end_date):
        """
        Dashboard cards.

        Args:
            owner (User): Whose records to aggregate.
            start_date (date): First day included.
            end_date (date): Last day included.

        Returns:
            dict: ``in_range`` money totals for the period, ``all_time``
            customer payment, employee and landlord statistics, and the
            resolved period.
        """
        DashboardQueries.check_range(start_date, end_date)
        period = {'date__gte': start_date, 'date__lte': end_date}

        expenses = Expense.objects.filter(owner=owner, **period)
        expense_total = _sum_amount(expenses)
        income_total = _sum_amount(Income.objects.filter(owner=owner, **period))
        payments_total = _sum_amount(CustomerPayment.objects.filter(owner=owner, **period))

        salary_category, salary_subcategory = settings.SALARY_EXPENSE_CATEGORY
        salary_total = _sum_amount(expenses.filter(
            category__slug=salary_category,
            subcategory__slug=salary_subcategory,
        ))

        total_received = income_total + payments_total

        payment_stats = get_payment_stats(CustomerPayment.objects.filter(owner=owner))
        payment_stats.pop('by_category')
        employee_stats = get_employee_stats(Employee.objects.filter(owner=owner))

        return {
            'start_date': start_date,
            'end_date': end_date,
            'in_range': {
                'expenses': expense_total,
                'incomes': income_total,
                'payments': payments_total,
                'total_received': total_received,
                'net_balance': total_received - expense_total,
                'salary_expenses': salary_total,
            },
            'all_time': {
                'scope': 'all_time',
                'customer_payments': payment_stats,
                'employees': {
                    'total_employees': employee_stats['total_employees'],
                    'active_employees': employee_stats['active_employees'],
                    'total_salary': employee_stats['total_salary_expense'],
                },
                'landlords': get_landlord_stats(Landlord.objects.filter(owner=owner)),
            },
        }

    @staticmethod
    def monthly_expenses(owner, start_date, end_date):
        """
        Expense totals for every calendar month touched by the range.

        Buckets run from the first day of the start month to the last day
        of the end month, so partial months are counted whole. Months
        without expenses are included with a zero total.

        Returns:
            list: ``[{'month': 'YYYY-MM', 'label': 'Mon YYYY', 'total': Decimal}]``
        """
        DashboardQueries.check_range(start_date, end_date)
        first = month_start(start_date)
        last = month_end(end_date)

        rows = (
            Expense.objects
            .filter(owner=owner, date__gte=first, date__lte=last)
            .annotate(month=TruncMonth('date'))
            .order_by()
            .values('month')
            .annotate(total=Sum('amount'))
        )
        totals = {row['month'].strftime('%Y-%m'): row['total'] for row in rows}

        buckets = []
        current = first
        while current <= last:
            key = current.strftime('%Y-%m')
            buckets.append({
                'month': key,
                'label': current.strftime('%b %Y'),
                'total': totals.get(key, ZERO),
            })
            current += relativedelta(months=1)
        return buckets

    @staticmethod
    def expense_categories(owner, start_date, end_date):
        """
        In-range expense totals per category, largest first.

        Categories without spending in the range are left out.

        Returns:
            list: ``[{'category': slug, 'name': str, 'total': Decimal,
            'percentage': Decimal}]``
        """
        DashboardQueries.check_range(start_date, end_date)
        rows = (
            Expense.objects
            .filter(owner=owner, date__gte=start_date, date__lte=end_date)
            .order_by()
            .values('category__slug', 'category__name')
            .annotate(total=Sum('amount'))
            .order_by('-total', 'category__name')
        )
        grand_total = sum((row['total'] for row in rows), ZERO)
        return [
            {
                'category': row['category__slug'],
                'name': row['category__name'],
                'total': row['total'],
                'percentage': percentage(row['total'], grand_total),
            }
            for row in rows
            if row['total'] > 0
        ]


def percentage(amount, total) -> Decimal:
    """Share of ``total`` in percent, two decimals; 0 for an empty total."""
    if not total:
        return Decimal('0.00')
    return (Decimal(amount) / Decimal(total) * 100).quantize(Decimal('0.01'))
