from rest_framework import serializers

from apps.core.filters import ListQuerySerializer
from apps.core.models import RecordStatus
from .models import Landlord


class LandlordFilterSerializer(ListQuerySerializer):
    """
    Validate query parameters for landlord listing.

    Query Parameters:
        search (str): Name, phone, email or address contains
        status (str): active or inactive
        sort_by (str): name, total_land_price, amount or created
    """

    search_fields = ('name', 'phone', 'email', 'address')
    sort_fields = {
        'name': 'name',
        'total_land_price': 'total_land_price',
        'amount': 'amount',
        'created': 'created_at',
    }
    date_field = 'created_at__date'

    status = serializers.ChoiceField(choices=RecordStatus.choices, required=False)

    def apply_filters(self, queryset, params):
        if 'status' in params:
            queryset = queryset.filter(status=params['status'])
        return queryset


class LandlordSerializer(serializers.ModelSerializer):
    """Main serializer for landlords; total_land_price is derived."""

    class Meta:
        model = Landlord
        fields = [
            'id',
            'name',
            'amount',
            'price_per_acre',
            'total_extent',
            'total_land_price',
            'phone',
            'email',
            'address',
            'notes',
            'status',
            'created_at',
            'updated_at',
        ]
        read_only_fields = ['id', 'total_land_price', 'created_at', 'updated_at']

    def validate_name(self, value):
        value = value.strip()
        if len(value) < 2:
            raise serializers.ValidationError('Name is required')
        return value

    def validate_phone(self, value):
        return value.strip()


class LandlordStatsSerializer(serializers.Serializer):
    total_landlords = serializers.IntegerField()
    active_landlords = serializers.IntegerField()
    total_land_value = serializers.DecimalField(max_digits=16, decimal_places=2)
    total_advance_amount = serializers.DecimalField(max_digits=16, decimal_places=2)
    total_acres = serializers.DecimalField(max_digits=12, decimal_places=4)
