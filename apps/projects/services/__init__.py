"""
Projects app services layer.

Services contain business logic and orchestrate operations across models.
All state-changing operations use transactions and concurrency protection.
"""

from .exceptions import (
    ProjectsServiceError,
    ProjectNotFoundError,
    ProjectInUseError,
    DuplicateProjectError,
)

from .project_management import (
    create_project,
    update_project,
    delete_project,
    get_project_by_id,
    get_project_stats,
)


__all__ = [
    # Exceptions
    'ProjectsServiceError',
    'ProjectNotFoundError',
    'ProjectInUseError',
    'DuplicateProjectError',

    # Project Management
    'create_project',
    'update_project',
    'delete_project',
    'get_project_by_id',
    'get_project_stats',
]
