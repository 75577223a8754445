import pytest
from django.urls import reverse
from rest_framework import status

from apps.audit.models import AuditAction, AuditLog, EntityType
from apps.audit.services import record_change


@pytest.fixture
def many_logs(user):
    for index in range(45):
        record_change(
            user=user,
            action=AuditAction.CREATE if index % 3 else AuditAction.DELETE,
            entity_type=EntityType.EXPENSE if index % 2 else EntityType.INCOME,
            entity_id=f'record-{index}',
            new={'index': index},
        )


# =============================================================================
# Recording Through Entity Endpoints
# =============================================================================

@pytest.mark.django_db
class TestAuditTrailOfWrites:
    """Every successful create, update and delete leaves one row."""

    def test_full_lifecycle(self, authenticated_client, user):
        list_url = reverse('projects:project-list')
        response = authenticated_client.post(list_url, {
            'name': 'Tracked',
            'color': '#111111',
            'location': 'Kokapet',
            'commence_date': '2024-01-01',
        })
        project_id = response.data['id']
        detail_url = reverse('projects:project-detail', kwargs={'pk': project_id})

        authenticated_client.patch(detail_url, {'location': 'Narsingi'})
        authenticated_client.delete(detail_url)

        logs = AuditLog.objects.filter(user=user, entity_id=project_id).order_by('timestamp')
        assert [log.action for log in logs] == ['CREATE', 'UPDATE', 'DELETE']

        update = logs[1]
        assert update.changes['old']['location'] == 'Kokapet'
        assert update.changes['new']['location'] == 'Narsingi'
        assert logs[2].changes['new'] is None
        assert update.description == f'Updated project with ID {project_id}'

    def test_failed_write_is_not_logged(self, authenticated_client, user, project):
        authenticated_client.post(reverse('projects:project-list'), {
            'name': project.name,
            'color': '#111111',
            'location': 'Kokapet',
            'commence_date': '2024-01-01',
        })

        assert not AuditLog.objects.filter(user=user).exists()

    def test_client_metadata_is_stored(self, authenticated_client, user):
        authenticated_client.post(
            reverse('projects:project-list'),
            {
                'name': 'Tracked',
                'color': '#111111',
                'location': 'Kokapet',
                'commence_date': '2024-01-01',
            },
            HTTP_USER_AGENT='ledger-tests',
            HTTP_X_FORWARDED_FOR='203.0.113.9, 10.0.0.1',
        )

        log = AuditLog.objects.get(user=user)
        assert log.metadata['user_agent'] == 'ledger-tests'
        assert log.metadata['ip_address'] == '203.0.113.9'


# =============================================================================
# Viewer Tests
# =============================================================================

@pytest.mark.django_db
class TestAuditLogViewer:
    """Tests for GET /api/audit-logs/"""

    def test_pages_of_twenty_with_page_strip(self, authenticated_client, many_logs):
        response = authenticated_client.get(reverse('audit:auditlog-list'), {'page': 2})

        assert response.status_code == status.HTTP_200_OK
        assert response.data['count'] == 45
        assert response.data['total_pages'] == 3
        assert len(response.data['results']) == 20
        assert response.data['has_next'] is True
        assert response.data['has_previous'] is True
        assert response.data['page_range'] == [1, 2, 3]

    def test_filter_by_action_and_entity(self, authenticated_client, many_logs):
        response = authenticated_client.get(
            reverse('audit:auditlog-list'),
            {'action': 'DELETE', 'entity_type': 'income', 'page_size': 100},
        )

        results = response.data['results']
        assert results
        assert all(row['action'] == 'DELETE' for row in results)
        assert all(row['entity_type'] == 'income' for row in results)

    def test_history_of_one_record(self, authenticated_client, many_logs):
        response = authenticated_client.get(reverse('audit:auditlog-list'), {'entity_id': 'record-7'})

        assert response.data['count'] == 1
        assert response.data['results'][0]['description'] == 'Created expense with ID record-7'

    def test_newest_first(self, authenticated_client, many_logs):
        response = authenticated_client.get(reverse('audit:auditlog-list'))
        timestamps = [row['timestamp'] for row in response.data['results']]
        assert timestamps == sorted(timestamps, reverse=True)

    def test_detail_has_snapshots(self, authenticated_client, many_logs, user):
        log = AuditLog.objects.filter(user=user).first()
        response = authenticated_client.get(reverse('audit:auditlog-detail', kwargs={'pk': log.id}))

        assert response.status_code == status.HTTP_200_OK
        assert 'index' in response.data['changes']['new']

    def test_other_users_cannot_see_logs(self, other_client, many_logs):
        response = other_client.get(reverse('audit:auditlog-list'))
        assert response.data['count'] == 0

    def test_trail_is_read_only(self, authenticated_client, many_logs, user):
        log = AuditLog.objects.filter(user=user).first()
        detail_url = reverse('audit:auditlog-detail', kwargs={'pk': log.id})

        assert authenticated_client.delete(detail_url).status_code == status.HTTP_405_METHOD_NOT_ALLOWED
        assert authenticated_client.post(reverse('audit:auditlog-list'), {}).status_code == \
            status.HTTP_405_METHOD_NOT_ALLOWED

    def test_stats(self, authenticated_client, many_logs):
        response = authenticated_client.get(reverse('audit:auditlog-stats'))

        assert response.status_code == status.HTTP_200_OK
        assert response.data['total'] == 45
        assert response.data['action_breakdown'] == {'CREATE': 30, 'DELETE': 15}
        assert response.data['entity_breakdown'] == {'expense': 22, 'income': 23}
        assert sum(day['count'] for day in response.data['daily_activity']) == 45
