"""
Audit app services layer.

``record_change`` is called by the entity viewsets after every successful
write; the statistics helpers back the audit-log viewer.
"""

from .recording import (
    record_change,
    client_metadata,
)

from .statistics import (
    get_audit_stats,
)


__all__ = [
    # Recording
    'record_change',
    'client_metadata',

    # Statistics
    'get_audit_stats',
]
