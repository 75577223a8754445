"""Landlord management service."""

import logging
from decimal import Decimal
from uuid import UUID

from django.db import transaction
from django.db.models import Count, DecimalField, Q, Sum, Value
from django.db.models.functions import Coalesce

from apps.accounts.models import User
from apps.core.models import RecordStatus
from apps.landlords.models import Landlord

from .exceptions import LandlordNotFoundError

logger = logging.getLogger(__name__)

EDITABLE_FIELDS = (
    'name', 'amount', 'price_per_acre', 'total_extent', 'phone',
    'email', 'address', 'notes', 'status',
)


def _clean(changes: dict) -> dict:
    for field in ('name', 'phone', 'address', 'notes'):
        if field in changes and changes[field] is not None:
            changes[field] = changes[field].strip()
    if 'email' in changes:
        changes['email'] = (changes['email'] or '').strip().lower()
    return {field: value for field, value in changes.items() if field in EDITABLE_FIELDS}


def get_landlord_by_id(*, landlord_id: UUID, owner: User, for_update: bool = False) -> Landlord:
    """
    Raises:
        LandlordNotFoundError: If the landlord doesn't exist for this owner
    """
    landlords = Landlord.objects.filter(owner=owner)
    if for_update:
        landlords = landlords.select_for_update()
    try:
        return landlords.get(id=landlord_id)
    except Landlord.DoesNotExist:
        raise LandlordNotFoundError(f"Landlord with ID {landlord_id} not found")


@transaction.atomic
def create_landlord(*, owner: User, **fields) -> Landlord:
    """Create a landlord; the total land price is derived on save."""
    landlord = Landlord.objects.create(owner=owner, **_clean(fields))
    logger.info("Created landlord %s for %s", landlord.id, owner)
    return landlord


@transaction.atomic
def update_landlord(*, landlord_id: UUID, owner: User, **changes) -> Landlord:
    """
    Update a landlord and recompute the total land price.

    Raises:
        LandlordNotFoundError: If the landlord doesn't exist for this owner
    """
    landlord = get_landlord_by_id(landlord_id=landlord_id, owner=owner, for_update=True)
    for field, value in _clean(changes).items():
        setattr(landlord, field, value)
    landlord.save()
    return landlord


@transaction.atomic
def delete_landlord(*, landlord_id: UUID, owner: User) -> None:
    """
    Delete a landlord. Land-purchase expenses stay, without the link.

    Raises:
        LandlordNotFoundError: If the landlord doesn't exist for this owner
    """
    landlord = get_landlord_by_id(landlord_id=landlord_id, owner=owner, for_update=True)
    landlord.delete()
    logger.info("Deleted landlord %s for %s", landlord_id, owner)


def get_landlord_stats(landlords) -> dict:
    zero = Value(Decimal('0'), output_field=DecimalField(max_digits=16, decimal_places=4))
    return landlords.aggregate(
        total_landlords=Count('id'),
        active_landlords=Count('id', filter=Q(status=RecordStatus.ACTIVE)),
        total_land_value=Coalesce(Sum('total_land_price'), zero),
        total_advance_amount=Coalesce(Sum('amount'), zero),
        total_acres=Coalesce(Sum('total_extent'), zero),
    )
