import pytest
from django.urls import reverse
from rest_framework import status

from apps.audit.models import AuditLog
from apps.projects.models import Project


# =============================================================================
# Project CRUD Tests
# =============================================================================

@pytest.mark.django_db
class TestProjectCreate:
    """Tests for POST /api/projects/"""

    def test_create_project(self, authenticated_client, user):
        url = reverse('projects:project-list')
        data = {
            'name': '  Sunrise Villas ',
            'color': '#F59E0B',
            'location': 'Kokapet',
            'commence_date': '2024-05-01',
        }
        response = authenticated_client.post(url, data)

        assert response.status_code == status.HTTP_201_CREATED
        assert response.data['name'] == 'Sunrise Villas'
        assert Project.objects.filter(owner=user, name='Sunrise Villas').exists()

    def test_duplicate_name_is_rejected(self, authenticated_client, project):
        url = reverse('projects:project-list')
        data = {
            'name': 'green meadows',
            'color': '#F59E0B',
            'location': 'Elsewhere',
            'commence_date': '2024-05-01',
        }
        response = authenticated_client.post(url, data)

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.data['error'] == 'A project with this name already exists'

    def test_same_name_for_another_user(self, other_client, project):
        url = reverse('projects:project-list')
        data = {
            'name': project.name,
            'color': '#F59E0B',
            'location': 'Elsewhere',
            'commence_date': '2024-05-01',
        }
        response = other_client.post(url, data)

        assert response.status_code == status.HTTP_201_CREATED

    def test_invalid_color(self, authenticated_client):
        url = reverse('projects:project-list')
        data = {
            'name': 'Bad Color',
            'color': 'green',
            'location': 'Kokapet',
            'commence_date': '2024-05-01',
        }
        response = authenticated_client.post(url, data)

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert 'color' in response.data

    def test_create_writes_audit_log(self, authenticated_client, user):
        url = reverse('projects:project-list')
        data = {
            'name': 'Audited',
            'color': '#000',
            'location': 'Kokapet',
            'commence_date': '2024-05-01',
        }
        response = authenticated_client.post(url, data)

        log = AuditLog.objects.get(user=user, entity_id=response.data['id'])
        assert log.action == 'CREATE'
        assert log.entity_type == 'project'
        assert log.changes['old'] is None
        assert log.changes['new']['name'] == 'Audited'


@pytest.mark.django_db
class TestProjectReadUpdateDelete:

    def test_list_only_own_projects(self, other_client, project):
        response = other_client.get(reverse('projects:project-list'))

        assert response.status_code == status.HTTP_200_OK
        assert response.data['count'] == 0

    def test_retrieve_other_users_project(self, other_client, project):
        url = reverse('projects:project-detail', kwargs={'pk': project.id})
        response = other_client.get(url)

        assert response.status_code == status.HTTP_404_NOT_FOUND

    def test_partial_update(self, authenticated_client, project):
        url = reverse('projects:project-detail', kwargs={'pk': project.id})
        response = authenticated_client.patch(url, {'location': 'Shamshabad Phase 2'})

        assert response.status_code == status.HTTP_200_OK
        project.refresh_from_db()
        assert project.location == 'Shamshabad Phase 2'
        assert project.name == 'Green Meadows'

    def test_rename_onto_existing_name(self, authenticated_client, project, other_project):
        url = reverse('projects:project-detail', kwargs={'pk': other_project.id})
        response = authenticated_client.patch(url, {'name': 'GREEN MEADOWS'})

        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_delete_unused_project(self, authenticated_client, project):
        url = reverse('projects:project-detail', kwargs={'pk': project.id})
        response = authenticated_client.delete(url)

        assert response.status_code == status.HTTP_204_NO_CONTENT
        assert not Project.objects.filter(id=project.id).exists()

    def test_delete_project_with_expenses(self, authenticated_client, project, make_expense):
        make_expense()
        url = reverse('projects:project-detail', kwargs={'pk': project.id})
        response = authenticated_client.delete(url)

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.data['error'] == 'Cannot delete project with existing expenses'
        assert Project.objects.filter(id=project.id).exists()

    def test_summary(self, authenticated_client, project, other_project):
        response = authenticated_client.get(reverse('projects:project-stats-summary'))

        assert response.status_code == status.HTTP_200_OK
        assert response.data['total_projects'] == 2
        assert response.data['active_projects'] == 2
        assert response.data['projects_this_month'] == 2

    def test_requires_authentication(self, api_client):
        response = api_client.get(reverse('projects:project-list'))
        assert response.status_code == status.HTTP_401_UNAUTHORIZED
