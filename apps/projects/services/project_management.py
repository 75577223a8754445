"""
Project management service.

Handles project CRUD with the referential checks that guard deletes.
"""

import logging
from datetime import date
from typing import Optional
from uuid import UUID

from django.db import transaction
from django.utils import timezone

from apps.accounts.models import User
from apps.projects.models import Project

from .exceptions import (
    ProjectNotFoundError,
    ProjectInUseError,
    DuplicateProjectError,
)

logger = logging.getLogger(__name__)


def _check_name_available(*, owner: User, name: str, exclude_id: Optional[UUID] = None) -> None:
    projects = Project.objects.filter(owner=owner, name__iexact=name)
    if exclude_id is not None:
        projects = projects.exclude(id=exclude_id)
    if projects.exists():
        raise DuplicateProjectError("A project with this name already exists")


def get_project_by_id(*, project_id: UUID, owner: User, for_update: bool = False) -> Project:
    """
    Get one of the owner's projects.

    Raises:
        ProjectNotFoundError: If the project doesn't exist for this owner
    """
    projects = Project.objects.filter(owner=owner)
    if for_update:
        projects = projects.select_for_update()
    try:
        return projects.get(id=project_id)
    except Project.DoesNotExist:
        raise ProjectNotFoundError(f"Project with ID {project_id} not found")


@transaction.atomic
def create_project(
    *,
    owner: User,
    name: str,
    color: str,
    location: str,
    commence_date: date
) -> Project:
    """
    Create a project.

    Raises:
        DuplicateProjectError: If the owner already has a project with this name
    """
    name = name.strip()
    _check_name_available(owner=owner, name=name)

    project = Project.objects.create(
        owner=owner,
        name=name,
        color=color,
        location=location.strip(),
        commence_date=commence_date,
    )
    logger.info("Created project %s for %s", project.id, owner)
    return project


@transaction.atomic
def update_project(*, project_id: UUID, owner: User, **changes) -> Project:
    """
    Update a project's fields.

    Uses select_for_update to prevent concurrent modifications.

    Raises:
        ProjectNotFoundError: If the project doesn't exist for this owner
        DuplicateProjectError: If renaming onto another project's name
    """
    project = get_project_by_id(project_id=project_id, owner=owner, for_update=True)

    if 'name' in changes:
        changes['name'] = changes['name'].strip()
        _check_name_available(owner=owner, name=changes['name'], exclude_id=project.id)

    for field in ('name', 'color', 'location', 'commence_date'):
        if field in changes:
            setattr(project, field, changes[field])
    project.save()
    return project


@transaction.atomic
def delete_project(*, project_id: UUID, owner: User) -> None:
    """
    Delete a project nothing references.

    Raises:
        ProjectNotFoundError: If the project doesn't exist for this owner
        ProjectInUseError: If expenses, customers or customer payments reference it
    """
    project = get_project_by_id(project_id=project_id, owner=owner, for_update=True)

    if project.expenses.exists():
        raise ProjectInUseError("Cannot delete project with existing expenses")
    if project.customers.exists():
        raise ProjectInUseError("Cannot delete project with existing customers")
    if project.customer_payments.exists():
        raise ProjectInUseError("Cannot delete project with existing customer payments")

    project.delete()
    logger.info("Deleted project %s for %s", project_id, owner)


def get_project_stats(projects) -> dict:
    """
    Summary figures over a project queryset.

    Every project counts as active; there is no archived state.
    """
    today = timezone.localdate()
    total = projects.count()
    return {
        'total_projects': total,
        'projects_this_month': projects.filter(
            created_at__year=today.year,
            created_at__month=today.month,
        ).count(),
        'active_projects': total,
    }
