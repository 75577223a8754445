"""
Period reports.

A report picks one kind of record (expenses, income, customer payments or
land), restricts it to a resolved date range and breaks the total down by
two dimensions. Each breakdown row carries its share of the total.
"""

import csv
from datetime import timedelta
from decimal import Decimal

from dateutil.relativedelta import relativedelta, SU, SA
from django.conf import settings
from django.http import HttpResponse
from django.utils import timezone

from apps.core.exports import CURRENCY, export_filename, raw_value
from apps.customers.models import CustomerPayment
from apps.expenses.models import Expense
from apps.incomes.models import Income
from apps.landlords.models import Landlord

from .analytics import month_end, month_start, percentage
from .exceptions import InvalidDateRangeError, InvalidReportError

REPORT_TYPES = ('expenses', 'income', 'payments', 'landlords')
TIME_RANGES = (
    'daily', 'weekly', 'monthly', 'quarterly', 'half-yearly',
    'yearly', 'till-date', 'custom',
)

ZERO = Decimal('0')

LAND_PURCHASE_LABEL = 'Land Purchase Expenses'


def resolve_time_range(time_range, start_date=None, end_date=None, today=None):
    """
    Turn a named time range into ``(start, end)``, both inclusive.

    Weeks run Sunday to Saturday. ``half-yearly`` is the six months up to
    today and ``till-date`` the last ten years. ``custom`` uses the given
    dates, defaulting to the last 30 days.

    Raises:
        InvalidReportError: If the time range is unknown
        InvalidDateRangeError: If a custom start is after its end
    """
    today = today or timezone.localdate()

    if time_range == 'daily':
        return today, today
    if time_range == 'weekly':
        return today + relativedelta(weekday=SU(-1)), today + relativedelta(weekday=SA(+1))
    if time_range == 'monthly':
        return month_start(today), month_end(today)
    if time_range == 'quarterly':
        first_month = 3 * ((today.month - 1) // 3) + 1
        start = today.replace(month=first_month, day=1)
        return start, start + relativedelta(months=3, days=-1)
    if time_range == 'half-yearly':
        return today - relativedelta(months=6), today
    if time_range == 'yearly':
        return today.replace(month=1, day=1), today.replace(month=12, day=31)
    if time_range == 'till-date':
        return today - relativedelta(years=10), today
    if time_range == 'custom':
        start = start_date or today - timedelta(days=30)
        end = end_date or today
        if start > end:
            raise InvalidDateRangeError("Start date must be on or before end date")
        return start, end
    raise InvalidReportError(f"Invalid time range: '{time_range}'")


def _add(totals, key, amount):
    totals[key] = totals.get(key, ZERO) + amount


def _section(name, title, columns, totals, grand_total):
    return {
        'name': name,
        'title': title,
        'columns': columns,
        'rows': [
            {
                'label': label,
                'amount': amount,
                'percentage': percentage(amount, grand_total),
            }
            for label, amount in sorted(totals.items(), key=lambda item: (-item[1], item[0]))
        ],
    }


def _expenses_report(owner, start, end, project=None, category=None):
    expenses = Expense.objects.filter(
        owner=owner, date__gte=start, date__lte=end
    ).select_related('category', 'subcategory')
    if project:
        expenses = expenses.filter(project_id=project)
    if category:
        expenses = expenses.filter(category__slug=category)

    by_category, by_subcategory = {}, {}
    total = ZERO
    for expense in expenses:
        total += expense.amount
        _add(by_category, expense.category.name, expense.amount)
        _add(by_subcategory, f"{expense.category.name} / {expense.subcategory.name}", expense.amount)

    return total, [
        _section('category', 'Category Breakdown', ['Category', 'Amount', 'Percentage'], by_category, total),
        _section(
            'subcategory', 'Subcategory Breakdown',
            ['Category / Subcategory', 'Amount', 'Percentage'], by_subcategory, total,
        ),
    ]


def _income_report(owner, start, end, project=None, category=None):
    by_payee, by_source = {}, {}
    total = ZERO
    for income in Income.objects.filter(owner=owner, date__gte=start, date__lte=end):
        total += income.amount
        _add(by_payee, income.payee, income.amount)
        _add(by_source, income.source, income.amount)

    return total, [
        _section('payee', 'Payee Breakdown', ['Payee', 'Amount', 'Percentage'], by_payee, total),
        _section('source', 'Source Breakdown', ['Source', 'Amount', 'Percentage'], by_source, total),
    ]


def _payments_report(owner, start, end, project=None, category=None):
    payments = CustomerPayment.objects.filter(owner=owner, date__gte=start, date__lte=end)
    if project:
        payments = payments.filter(project_id=project)

    by_customer, by_category = {}, {}
    total = ZERO
    for payment in payments:
        total += payment.amount
        _add(by_customer, payment.customer_name, payment.amount)
        _add(by_category, payment.get_payment_category_display(), payment.amount)

    return total, [
        _section('customer', 'Customer Breakdown', ['Customer', 'Amount', 'Percentage'], by_customer, total),
        _section(
            'payment_category', 'Payment Category Breakdown',
            ['Category', 'Amount', 'Percentage'], by_category, total,
        ),
    ]


def _landlords_report(owner, start, end, project=None, category=None):
    """
    Advances of landlords added in the range plus land-purchase expenses
    dated in the range.
    """
    by_landlord, by_property = {}, {}
    total = ZERO

    for landlord in Landlord.objects.filter(
        owner=owner, created_at__date__gte=start, created_at__date__lte=end
    ):
        total += landlord.amount
        _add(by_landlord, landlord.name, landlord.amount)
        _add(by_property, landlord.address or landlord.name, landlord.amount)

    land_category, land_subcategory = settings.LAND_PURCHASE_CATEGORY
    purchases = Expense.objects.filter(
        owner=owner,
        date__gte=start,
        date__lte=end,
        category__slug=land_category,
        subcategory__slug=land_subcategory,
    ).select_related('landlord')
    for expense in purchases:
        total += expense.amount
        name = expense.landlord.name if expense.landlord else LAND_PURCHASE_LABEL
        _add(by_landlord, name, expense.amount)
        _add(by_property, expense.land_details or expense.description, expense.amount)

    return total, [
        _section('landlord', 'Landlord Breakdown', ['Landlord', 'Amount', 'Percentage'], by_landlord, total),
        _section('property', 'Property Breakdown', ['Property', 'Amount', 'Percentage'], by_property, total),
    ]


REPORT_BUILDERS = {
    'expenses': _expenses_report,
    'income': _income_report,
    'payments': _payments_report,
    'landlords': _landlords_report,
}


def build_report(*, owner, report_type, time_range='monthly', start_date=None,
                 end_date=None, project=None, category=None, today=None):
    """
    Build a report for one record type over a named time range.

    Args:
        owner (User): Whose records to report on.
        report_type (str): expenses, income, payments or landlords.
        time_range (str): One of ``TIME_RANGES``.
        start_date, end_date (date, optional): For the custom range.
        project (UUID, optional): Restricts expenses and payments.
        category (str, optional): Category ID; restricts expenses.

    Returns:
        dict: report_type, time_range, start_date, end_date, total and
        ``breakdowns``, a list of titled sections with
        ``{label, amount, percentage}`` rows.

    Raises:
        InvalidReportError: For an unknown report type or time range
        InvalidDateRangeError: If a custom start is after its end
    """
    builder = REPORT_BUILDERS.get(report_type)
    if builder is None:
        raise InvalidReportError(f"Invalid report type: '{report_type}'")

    start, end = resolve_time_range(time_range, start_date, end_date, today=today)
    total, breakdowns = builder(owner, start, end, project=project, category=category)
    return {
        'report_type': report_type,
        'time_range': time_range,
        'start_date': start,
        'end_date': end,
        'total': total,
        'breakdowns': breakdowns,
    }


def render_report_csv(report) -> HttpResponse:
    """Spreadsheet layout: header block, then one table per breakdown."""
    title = f"{report['report_type']} report"
    response = HttpResponse(content_type='text/csv; charset=utf-8')
    response['Content-Disposition'] = f'attachment; filename="{export_filename(title, "csv")}"'

    writer = csv.writer(response)
    writer.writerow(['Report Type', report['report_type'].upper()])
    writer.writerow([
        'Period',
        f"{report['start_date'].strftime('%d/%m/%Y')} to {report['end_date'].strftime('%d/%m/%Y')}",
    ])
    writer.writerow(['Total Amount', raw_value(report['total'], CURRENCY)])
    for section in report['breakdowns']:
        writer.writerow([])
        writer.writerow([section['title']])
        writer.writerow(section['columns'])
        for row in section['rows']:
            writer.writerow([row['label'], raw_value(row['amount'], CURRENCY), row['percentage']])
    return response
