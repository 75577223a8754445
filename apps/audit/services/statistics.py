"""
Aggregates for the audit-log viewer.
"""

from datetime import timedelta

from django.db.models import Count
from django.db.models.functions import TruncDate
from django.utils import timezone

from apps.audit.models import AuditLog

ACTIVITY_WINDOW_DAYS = 30


def get_audit_stats(*, user, start_date=None, end_date=None) -> dict:
    """
    Totals of a user's audit trail.

    Args:
        user: Owner of the audit rows
        start_date: Optional inclusive lower bound (date)
        end_date: Optional inclusive upper bound (date)

    Returns:
        Dict with total, action_breakdown, entity_breakdown and
        daily_activity (one entry per active day over the last 30 days,
        oldest first)
    """
    logs = AuditLog.objects.filter(user=user)
    if start_date:
        logs = logs.filter(timestamp__date__gte=start_date)
    if end_date:
        logs = logs.filter(timestamp__date__lte=end_date)

    action_breakdown = {
        row['action']: row['count']
        for row in logs.order_by().values('action').annotate(count=Count('id'))
    }
    entity_breakdown = {
        row['entity_type']: row['count']
        for row in logs.order_by().values('entity_type').annotate(count=Count('id'))
    }

    since = timezone.now() - timedelta(days=ACTIVITY_WINDOW_DAYS)
    daily = (
        logs.filter(timestamp__gte=since)
        .annotate(day=TruncDate('timestamp'))
        .order_by()
        .values('day')
        .annotate(count=Count('id'))
        .order_by('day')
    )

    return {
        'total': logs.count(),
        'action_breakdown': action_breakdown,
        'entity_breakdown': entity_breakdown,
        'daily_activity': [
            {'date': row['day'].isoformat(), 'count': row['count']}
            for row in daily
        ],
    }
