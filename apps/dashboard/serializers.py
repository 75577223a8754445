"""
Serializers for dashboard app.

Input Serializers:
    DateRangeQuerySerializer - Dashboard period, defaulting to last + this month
    ReportQuerySerializer - Report type, time range and filters

Response Serializers:
    DashboardSummarySerializer - Summary cards
    MonthlyExpenseSerializer - One bar of the monthly chart
    CategoryExpenseSerializer - One slice of the category chart
    ReportSerializer - Report totals and breakdowns
"""

from rest_framework import serializers

from apps.categories.services import normalize_slug
from .analytics import DashboardQueries
from .reports import REPORT_TYPES, TIME_RANGES

MONEY = {'max_digits': 16, 'decimal_places': 2}


# =============================================================================
# Input Serializers (Query Parameter Validation)
# =============================================================================

class DateRangeQuerySerializer(serializers.Serializer):
    """
    Validate the dashboard period.

    Query Parameters:
        start_date (date): First day included (default: first day of last month)
        end_date (date): Last day included (default: last day of this month)
    """

    start_date = serializers.DateField(required=False)
    end_date = serializers.DateField(required=False)

    def validate(self, attrs):
        default_start, default_end = DashboardQueries.default_range()
        attrs.setdefault('start_date', default_start)
        attrs.setdefault('end_date', default_end)
        if attrs['start_date'] > attrs['end_date']:
            raise serializers.ValidationError({
                'end_date': 'End date must be on or after start date'
            })
        return attrs


class ReportQuerySerializer(serializers.Serializer):
    """
    Validate report parameters.

    Query Parameters:
        report_type (str): expenses, income, payments or landlords
        time_range (str): daily, weekly, monthly, quarterly, half-yearly,
            yearly, till-date or custom
        project (uuid): Restrict expenses and payments to one project
        category (str): Restrict expenses to one category ID
        start_date / end_date (date): Only used with the custom range
    """

    report_type = serializers.ChoiceField(choices=REPORT_TYPES, default='expenses')
    time_range = serializers.ChoiceField(choices=TIME_RANGES, default='monthly')
    project = serializers.UUIDField(required=False)
    category = serializers.CharField(max_length=50, required=False)
    start_date = serializers.DateField(required=False)
    end_date = serializers.DateField(required=False)

    def to_internal_value(self, data):
        cleaned = {key: value for key, value in data.items() if value not in ('', 'all')}
        return super().to_internal_value(cleaned)

    def validate_category(self, value):
        return normalize_slug(value)

    def validate(self, attrs):
        start_date = attrs.get('start_date')
        end_date = attrs.get('end_date')
        if start_date and end_date and start_date > end_date:
            raise serializers.ValidationError({
                'end_date': 'End date must be on or after start date'
            })
        return attrs


# =============================================================================
# Response Serializers
# =============================================================================

class InRangeTotalsSerializer(serializers.Serializer):
    expenses = serializers.DecimalField(**MONEY)
    incomes = serializers.DecimalField(**MONEY)
    payments = serializers.DecimalField(**MONEY)
    total_received = serializers.DecimalField(**MONEY)
    net_balance = serializers.DecimalField(**MONEY)
    salary_expenses = serializers.DecimalField(**MONEY)


class PaymentCardSerializer(serializers.Serializer):
    total_due = serializers.DecimalField(**MONEY)
    total_received = serializers.DecimalField(**MONEY)
    total_pending = serializers.DecimalField(**MONEY)
    unique_customers = serializers.IntegerField()


class EmployeeCardSerializer(serializers.Serializer):
    total_employees = serializers.IntegerField()
    active_employees = serializers.IntegerField()
    total_salary = serializers.DecimalField(**MONEY)


class LandlordCardSerializer(serializers.Serializer):
    total_landlords = serializers.IntegerField()
    active_landlords = serializers.IntegerField()
    total_land_value = serializers.DecimalField(**MONEY)
    total_advance_amount = serializers.DecimalField(**MONEY)
    total_acres = serializers.DecimalField(max_digits=12, decimal_places=4)


class AllTimeCardsSerializer(serializers.Serializer):
    scope = serializers.CharField()
    customer_payments = PaymentCardSerializer()
    employees = EmployeeCardSerializer()
    landlords = LandlordCardSerializer()


class DashboardSummarySerializer(serializers.Serializer):
    start_date = serializers.DateField()
    end_date = serializers.DateField()
    in_range = InRangeTotalsSerializer()
    all_time = AllTimeCardsSerializer()


class MonthlyExpenseSerializer(serializers.Serializer):
    month = serializers.CharField()
    label = serializers.CharField()
    total = serializers.DecimalField(**MONEY)


class CategoryExpenseSerializer(serializers.Serializer):
    category = serializers.CharField()
    name = serializers.CharField()
    total = serializers.DecimalField(**MONEY)
    percentage = serializers.DecimalField(max_digits=5, decimal_places=2)


class ReportRowSerializer(serializers.Serializer):
    label = serializers.CharField()
    amount = serializers.DecimalField(**MONEY)
    percentage = serializers.DecimalField(max_digits=5, decimal_places=2)


class ReportSectionSerializer(serializers.Serializer):
    name = serializers.CharField()
    title = serializers.CharField()
    columns = serializers.ListField(child=serializers.CharField())
    rows = ReportRowSerializer(many=True)


class ReportSerializer(serializers.Serializer):
    report_type = serializers.CharField()
    time_range = serializers.CharField()
    start_date = serializers.DateField()
    end_date = serializers.DateField()
    total = serializers.DecimalField(**MONEY)
    breakdowns = ReportSectionSerializer(many=True)


class ErrorSerializer(serializers.Serializer):
    error = serializers.CharField()
