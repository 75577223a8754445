import uuid

import pytest
from django.conf import settings
from django.urls import reverse
from rest_framework import status


@pytest.mark.django_db
class TestErrorShape:

    def test_unauthenticated(self, api_client):
        response = api_client.get(reverse('projects:project-list'))

        assert response.status_code == status.HTTP_401_UNAUTHORIZED
        assert response.data['status'] == 401
        assert 'error' in response.data

    def test_missing_record(self, authenticated_client):
        url = reverse('projects:project-detail', kwargs={'pk': uuid.uuid4()})
        response = authenticated_client.get(url)

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.data['status'] == 404

    def test_validation_errors_keep_field_map(self, authenticated_client):
        response = authenticated_client.post(reverse('projects:project-list'), {})

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert 'name' in response.data
        assert 'status' not in response.data

    def test_method_not_allowed(self, authenticated_client):
        response = authenticated_client.delete(reverse('audit:auditlog-list'))

        assert response.status_code == status.HTTP_405_METHOD_NOT_ALLOWED
        assert response.data['error'] == 'Method "DELETE" not allowed.'


@pytest.mark.django_db
def test_unknown_route_is_json(client):
    response = client.get('/no-such-page/')

    assert response.status_code == 404
    assert response.json() == {'error': 'Not found', 'status': 404}


@pytest.mark.django_db
def test_plain_http_is_served(authenticated_client):
    assert settings.SECURE_SSL_REDIRECT is False

    response = authenticated_client.get(reverse('projects:project-list'), secure=False)

    assert response.status_code == status.HTTP_200_OK
