"""
Query-parameter validation and filtering for list endpoints.

Each entity declares a ``ListQuerySerializer`` subclass describing which
fields the free-text search covers, which fields may be sorted on and which
exact-match filters it accepts. Views validate ``request.query_params`` with
it and hand the queryset to ``filter_queryset``; exports and stats reuse the
same path so they always agree with what the list shows.
"""
from functools import reduce
import operator

from django.db.models import Q
from rest_framework import serializers

# Values a filter control sends when it means "don't filter on this"
NO_FILTER_VALUES = ('', 'all')

SORT_ORDERS = ('asc', 'desc')


def apply_search(queryset, term, fields):
    """Case-insensitive substring match of ``term`` over any of ``fields``."""
    term = (term or '').strip()
    if not term or not fields:
        return queryset
    conditions = [Q(**{f'{field}__icontains': term}) for field in fields]
    return queryset.filter(reduce(operator.or_, conditions))


def apply_date_range(queryset, field, start=None, end=None):
    """Inclusive ``start <= field <= end``; either bound may be missing."""
    if start is not None:
        queryset = queryset.filter(**{f'{field}__gte': start})
    if end is not None:
        queryset = queryset.filter(**{f'{field}__lte': end})
    return queryset


def apply_sorting(queryset, field, order='asc'):
    """
    Order by a single field, breaking ties on the primary key.

    The tie-break follows the same direction so that ``desc`` is the exact
    reverse of ``asc``.
    """
    prefix = '-' if order == 'desc' else ''
    return queryset.order_by(f'{prefix}{field}', f'{prefix}pk')


class ListQuerySerializer(serializers.Serializer):
    """
    Validate the parameters every list endpoint understands.

    Query Parameters:
        search (str): Case-insensitive substring over ``search_fields``
        start_date (date): Only records on or after this date
        end_date (date): Only records on or before this date
        sort_by (str): One of the keys of ``sort_fields``
        sort_order (str): ``asc`` or ``desc``

    Subclasses set the class attributes below and override
    ``apply_filters`` for their exact-match parameters.
    """

    search_fields = ()
    sort_fields = {'created': 'created_at'}
    default_sort = 'created'
    default_order = 'desc'
    date_field = 'date'

    search = serializers.CharField(required=False, max_length=200)
    start_date = serializers.DateField(required=False)
    end_date = serializers.DateField(required=False)
    sort_order = serializers.ChoiceField(choices=SORT_ORDERS, required=False)

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.fields['sort_by'] = serializers.ChoiceField(
            choices=sorted(self.sort_fields),
            required=False,
        )

    def to_internal_value(self, data):
        # Query dicts carry lists; only the last value of each key counts
        cleaned = {
            key: value for key, value in data.items()
            if value not in NO_FILTER_VALUES
        }
        return super().to_internal_value(cleaned)

    def validate(self, attrs):
        start_date = attrs.get('start_date')
        end_date = attrs.get('end_date')
        if start_date and end_date and start_date > end_date:
            raise serializers.ValidationError({
                'end_date': 'End date must be on or after start date'
            })
        return attrs

    def apply_filters(self, queryset, params):
        """Hook for entity-specific exact-match filters."""
        return queryset

    def filter_queryset(self, queryset):
        params = self.validated_data
        queryset = apply_search(queryset, params.get('search'), self.search_fields)
        if self.date_field:
            queryset = apply_date_range(
                queryset,
                self.date_field,
                params.get('start_date'),
                params.get('end_date'),
            )
        queryset = self.apply_filters(queryset, params)

        sort_by = params.get('sort_by', self.default_sort)
        sort_order = params.get('sort_order', self.default_order)
        return apply_sorting(queryset, self.sort_fields[sort_by], sort_order)


class AmountRangeQuerySerializer(ListQuerySerializer):
    """
    List parameters plus an inclusive amount range.

    Query Parameters:
        min_amount (decimal): Only records with amount >= this value
        max_amount (decimal): Only records with amount <= this value
    """

    amount_field = 'amount'

    min_amount = serializers.DecimalField(max_digits=14, decimal_places=2, required=False)
    max_amount = serializers.DecimalField(max_digits=14, decimal_places=2, required=False)

    def validate(self, attrs):
        attrs = super().validate(attrs)
        min_amount = attrs.get('min_amount')
        max_amount = attrs.get('max_amount')
        if min_amount is not None and max_amount is not None and min_amount > max_amount:
            raise serializers.ValidationError({
                'max_amount': 'Maximum amount must be greater than or equal to minimum amount'
            })
        return attrs

    def filter_queryset(self, queryset):
        params = self.validated_data
        if params.get('min_amount') is not None:
            queryset = queryset.filter(**{f'{self.amount_field}__gte': params['min_amount']})
        if params.get('max_amount') is not None:
            queryset = queryset.filter(**{f'{self.amount_field}__lte': params['max_amount']})
        return super().filter_queryset(queryset)
