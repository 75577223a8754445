from decimal import Decimal

import pytest

from apps.landlords.models import Landlord
from apps.landlords.services import (
    LandlordNotFoundError,
    create_landlord,
    get_landlord_stats,
    update_landlord,
)


class TestTotalLandPrice:

    def test_rounds_half_up_to_paise(self):
        landlord = Landlord(price_per_acre=Decimal('33333.33'), total_extent=Decimal('1.5'))
        assert landlord.calculate_total_land_price() == Decimal('50000.00')

    def test_missing_values_count_as_zero(self):
        landlord = Landlord(price_per_acre=None, total_extent=Decimal('2'))
        assert landlord.calculate_total_land_price() == Decimal('0.00')


@pytest.mark.django_db
class TestLandlordServices:

    def test_create_derives_price(self, user):
        landlord = create_landlord(
            owner=user,
            name=' Ramaiah ',
            price_per_acre=Decimal('80000'),
            total_extent=Decimal('0.75'),
        )
        assert landlord.name == 'Ramaiah'
        assert landlord.total_land_price == Decimal('60000.00')

    def test_update_ignores_derived_field(self, user, landlord):
        updated = update_landlord(
            landlord_id=landlord.id,
            owner=user,
            total_land_price=Decimal('1'),
            price_per_acre=Decimal('200000'),
        )
        assert updated.total_land_price == Decimal('500000.00')

    def test_update_other_owner(self, other_user, landlord):
        with pytest.raises(LandlordNotFoundError):
            update_landlord(landlord_id=landlord.id, owner=other_user, name='Nope')

    def test_stats_of_empty_set(self, user):
        stats = get_landlord_stats(Landlord.objects.filter(owner=user))
        assert stats['total_landlords'] == 0
        assert stats['total_land_value'] == Decimal('0')
