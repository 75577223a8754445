from rest_framework import serializers

from apps.core.filters import AmountRangeQuerySerializer
from apps.core.models import PaymentMode
from apps.core.serializers import PaymentDetailsSerializerMixin
from .models import Income


class IncomeFilterSerializer(AmountRangeQuerySerializer):
    """
    Validate query parameters for income listing.

    Query Parameters:
        search (str): Description, source, payee, cheque number or
            transaction ID contains
        payment_mode (str): cash, online or cheque
        start_date / end_date (date): Income date range
        min_amount / max_amount (decimal): Amount range
        sort_by (str): date, amount or created
    """

    search_fields = ('description', 'source', 'payee', 'cheque_number', 'transaction_id')
    sort_fields = {
        'date': 'date',
        'amount': 'amount',
        'created': 'created_at',
    }
    default_sort = 'date'

    payment_mode = serializers.ChoiceField(choices=PaymentMode.choices, required=False)

    def apply_filters(self, queryset, params):
        if 'payment_mode' in params:
            queryset = queryset.filter(payment_mode=params['payment_mode'])
        return queryset


class IncomeSerializer(PaymentDetailsSerializerMixin, serializers.ModelSerializer):
    """Main serializer for incomes."""

    class Meta:
        model = Income
        fields = [
            'id',
            'amount',
            'date',
            'description',
            'payment_mode',
            'cheque_number',
            'transaction_id',
            'source',
            'payee',
            'created_at',
            'updated_at',
        ]
        read_only_fields = ['id', 'created_at', 'updated_at']

    def validate_amount(self, value):
        if value <= 0:
            raise serializers.ValidationError('Amount must be greater than 0')
        return value

    def validate_description(self, value):
        value = value.strip()
        if not value:
            raise serializers.ValidationError('Description is required')
        return value

    def validate_source(self, value):
        value = value.strip()
        if not value:
            raise serializers.ValidationError('Source is required')
        return value

    def validate_payee(self, value):
        value = value.strip()
        if not value:
            raise serializers.ValidationError('Payee is required')
        return value
