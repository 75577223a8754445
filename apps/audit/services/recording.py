"""
Audit trail writer.

A failed audit insert must never undo or fail the write it describes, so
database errors are logged and swallowed here. The insert runs in its own
savepoint so a broken row leaves the surrounding transaction usable.
"""

import logging
from typing import Optional

from django.db import DatabaseError, transaction

from apps.audit.models import AuditAction, AuditLog

logger = logging.getLogger(__name__)

DESCRIPTION_VERBS = {
    AuditAction.CREATE: 'Created',
    AuditAction.UPDATE: 'Updated',
    AuditAction.DELETE: 'Deleted',
}


def client_metadata(request) -> dict:
    """User agent and client address of the request, if there is one."""
    if request is None:
        return {'user_agent': '', 'ip_address': ''}

    forwarded = request.META.get('HTTP_X_FORWARDED_FOR', '')
    if forwarded:
        ip_address = forwarded.split(',')[0].strip()
    else:
        ip_address = request.META.get('REMOTE_ADDR', '')

    return {
        'user_agent': request.META.get('HTTP_USER_AGENT', ''),
        'ip_address': ip_address,
    }


def record_change(
    *,
    user,
    action: str,
    entity_type: str,
    entity_id,
    old: Optional[dict] = None,
    new: Optional[dict] = None,
    request=None,
    description: str = '',
) -> Optional[AuditLog]:
    """
    Append one audit row.

    Args:
        user: User who performed the write
        action: One of AuditAction
        entity_type: One of EntityType
        entity_id: Identifier of the record that changed
        old: Serialized record before the write (None for creates)
        new: Serialized record after the write (None for deletes)
        request: Originating request, for client metadata
        description: Human readable summary; generated when empty

    Returns:
        The AuditLog row, or None when it could not be written
    """
    entity_id = str(entity_id)
    if not description:
        verb = DESCRIPTION_VERBS.get(action, action.title())
        description = f"{verb} {entity_type} with ID {entity_id}"

    metadata = client_metadata(request)
    metadata['description'] = description

    try:
        with transaction.atomic():
            log = AuditLog.objects.create(
                user=user,
                action=action,
                entity_type=entity_type,
                entity_id=entity_id,
                changes={'old': old, 'new': new},
                metadata=metadata,
            )
    except DatabaseError:
        logger.exception(
            "Failed to write audit log for %s %s %s",
            action, entity_type, entity_id
        )
        return None

    logger.debug("Audit log saved: %s %s %s", action, entity_type, entity_id)
    return log
