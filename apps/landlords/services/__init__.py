"""Services for landlords business logic."""

from .exceptions import (
    LandlordsServiceError,
    LandlordNotFoundError,
)
from .landlord_management import (
    create_landlord,
    update_landlord,
    delete_landlord,
    get_landlord_by_id,
    get_landlord_stats,
)

__all__ = [
    # Exceptions
    'LandlordsServiceError',
    'LandlordNotFoundError',
    # Services
    'create_landlord',
    'update_landlord',
    'delete_landlord',
    'get_landlord_by_id',
    'get_landlord_stats',
]
