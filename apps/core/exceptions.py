"""
Shared exception types and the project-wide DRF exception handler.

Each app defines its own service exception hierarchy rooted at
``LedgerServiceError``. Views translate those into ``{'error': ...}``
responses; everything DRF raises itself goes through
``api_exception_handler`` so that clients always find the message in the
same place.
"""
import logging

from rest_framework import status
from rest_framework.exceptions import ValidationError
from rest_framework.views import exception_handler

logger = logging.getLogger(__name__)


class LedgerServiceError(Exception):
    """Base exception for all ledger service errors."""
    pass


class RecordNotFoundError(LedgerServiceError):
    """Raised when a record does not exist for the requesting owner."""
    pass


class RecordInUseError(LedgerServiceError):
    """Raised when a delete would orphan records that reference the target."""
    pass


class DuplicateRecordError(LedgerServiceError):
    """Raised when a natural key is already taken for the owner."""
    pass


class InvalidPaymentDetailsError(LedgerServiceError):
    """Raised when a payment mode is missing its reference number."""
    pass


def api_exception_handler(exc, context):
    """
    Normalise DRF error responses.

    Validation errors keep DRF's field -> messages map so forms can show
    them inline. Every other API error is flattened to
    ``{'error': <message>, 'status': <code>}``, the same shape the JSON
    404/500 handlers produce.
    """
    response = exception_handler(exc, context)

    if response is None:
        view = context.get('view')
        logger.exception(
            'Unhandled error in %s',
            view.__class__.__name__ if view is not None else 'unknown view',
        )
        return None

    if isinstance(exc, ValidationError):
        return response

    detail = response.data.get('detail') if isinstance(response.data, dict) else None
    if detail is not None:
        response.data = {
            'error': str(detail),
            'status': response.status_code,
        }

    if response.status_code >= status.HTTP_500_INTERNAL_SERVER_ERROR:
        logger.error('API error %s: %s', response.status_code, detail)

    return response
