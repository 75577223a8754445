from unittest import mock

import pytest
from django.db import DatabaseError

from apps.audit.models import AuditAction, AuditLog, EntityType
from apps.audit.services import client_metadata, record_change


@pytest.mark.django_db
class TestRecordChange:

    def test_default_description(self, user):
        log = record_change(
            user=user,
            action=AuditAction.DELETE,
            entity_type=EntityType.LANDLORD,
            entity_id='abc',
            old={'name': 'Narasimha Rao'},
        )

        assert log.description == 'Deleted landlord with ID abc'
        assert log.changes == {'old': {'name': 'Narasimha Rao'}, 'new': None}

    def test_database_failure_is_swallowed(self, user):
        with mock.patch.object(AuditLog.objects, 'create', side_effect=DatabaseError('boom')):
            log = record_change(
                user=user,
                action=AuditAction.CREATE,
                entity_type=EntityType.INCOME,
                entity_id='abc',
            )

        assert log is None
        assert not AuditLog.objects.exists()


class TestClientMetadata:

    def test_without_request(self):
        assert client_metadata(None) == {'user_agent': '', 'ip_address': ''}

    def test_remote_addr(self, rf):
        request = rf.get('/', HTTP_USER_AGENT='curl/8.0', REMOTE_ADDR='198.51.100.4')
        assert client_metadata(request) == {'user_agent': 'curl/8.0', 'ip_address': '198.51.100.4'}
