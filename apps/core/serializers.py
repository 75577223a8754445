from rest_framework import serializers

from .models import PaymentMode


class OwnedPrimaryKeyRelatedField(serializers.PrimaryKeyRelatedField):
    """
    Primary-key reference restricted to records of the requesting user.

    A UUID belonging to somebody else validates exactly like a UUID that
    does not exist.
    """

    def get_queryset(self):
        queryset = super().get_queryset()
        request = self.context.get('request')
        if request is None or not request.user.is_authenticated:
            return queryset.none()
        return queryset.filter(owner=request.user)


class PaymentDetailsSerializerMixin:
    """
    Cross-field checks for ``payment_mode`` and its reference numbers.

    Cheque payments need a cheque number and online payments a transaction
    id. The reference that does not belong to the chosen mode is cleared.
    """

    def validate(self, attrs):
        attrs = super().validate(attrs)
        instance = getattr(self, 'instance', None)

        def current(field):
            if field in attrs:
                return attrs[field]
            return getattr(instance, field, '') if instance is not None else ''

        mode = current('payment_mode')
        cheque_number = (current('cheque_number') or '').strip()
        transaction_id = (current('transaction_id') or '').strip()

        errors = {}
        if mode == PaymentMode.CHEQUE and not cheque_number:
            errors['cheque_number'] = 'Cheque number is required for cheque payments'
        if mode == PaymentMode.ONLINE and not transaction_id:
            errors['transaction_id'] = 'Transaction ID is required for online payments'
        if errors:
            raise serializers.ValidationError(errors)

        attrs['cheque_number'] = cheque_number if mode == PaymentMode.CHEQUE else ''
        attrs['transaction_id'] = transaction_id if mode == PaymentMode.ONLINE else ''
        return attrs


class MoneyStatsSerializer(serializers.Serializer):
    """Shared shape for the ``stats/summary`` figures of a money ledger."""

    total_amount = serializers.DecimalField(max_digits=14, decimal_places=2)
    count = serializers.IntegerField()
    by_payment_mode = serializers.DictField(
        child=serializers.DecimalField(max_digits=14, decimal_places=2)
    )
