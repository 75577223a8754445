from datetime import date

import pytest
from django.urls import reverse
from rest_framework import status

from apps.core.pagination import ELLIPSIS, page_range
from apps.projects.models import Project


class TestPageRange:
    """Tests for the ellipsis page strip."""

    def test_no_pages(self):
        assert page_range(1, 0) == []

    def test_single_page(self):
        assert page_range(1, 1) == [1]

    def test_few_pages_have_no_ellipsis(self):
        assert page_range(1, 3) == [1, 2, 3]
        assert page_range(3, 5) == [1, 2, 3, 4, 5]

    def test_middle_page_collapses_both_sides(self):
        assert page_range(6, 12) == [1, ELLIPSIS, 4, 5, 6, 7, 8, ELLIPSIS, 12]

    def test_near_start(self):
        assert page_range(3, 12) == [1, 2, 3, 4, 5, ELLIPSIS, 12]

    def test_near_end(self):
        assert page_range(11, 12) == [1, ELLIPSIS, 9, 10, 11, 12]


@pytest.fixture
def many_projects(user):
    return [
        Project.objects.create(
            owner=user,
            name=f'Project {index:02d}',
            color='#10B981',
            location='Hyderabad',
            commence_date=date(2024, 1, index),
        )
        for index in range(1, 24)
    ]


@pytest.mark.django_db
class TestListPagination:
    """23 records at 10 per page give exactly 3 pages."""

    def test_first_page(self, authenticated_client, many_projects):
        response = authenticated_client.get(reverse('projects:project-list'))

        assert response.status_code == status.HTTP_200_OK
        assert response.data['count'] == 23
        assert response.data['total_pages'] == 3
        assert response.data['current_page'] == 1
        assert len(response.data['results']) == 10
        assert response.data['previous'] is None

    def test_last_page_holds_remainder(self, authenticated_client, many_projects):
        response = authenticated_client.get(reverse('projects:project-list'), {'page': 3})

        assert response.data['current_page'] == 3
        assert len(response.data['results']) == 3
        assert response.data['next'] is None

    def test_past_last_page_stays_on_last(self, authenticated_client, many_projects):
        last = authenticated_client.get(reverse('projects:project-list'), {'page': 3})
        beyond = authenticated_client.get(reverse('projects:project-list'), {'page': 4})

        assert beyond.status_code == status.HTTP_200_OK
        assert beyond.data['current_page'] == 3
        assert [p['id'] for p in beyond.data['results']] == [p['id'] for p in last.data['results']]

    def test_invalid_page_falls_back_to_first(self, authenticated_client, many_projects):
        response = authenticated_client.get(reverse('projects:project-list'), {'page': 'abc'})

        assert response.status_code == status.HTTP_200_OK
        assert response.data['current_page'] == 1

    def test_last_keyword(self, authenticated_client, many_projects):
        response = authenticated_client.get(reverse('projects:project-list'), {'page': 'last'})
        assert response.data['current_page'] == 3

    def test_page_size_parameter(self, authenticated_client, many_projects):
        response = authenticated_client.get(reverse('projects:project-list'), {'page_size': 5})

        assert response.data['total_pages'] == 5
        assert response.data['page_size'] == 5
        assert len(response.data['results']) == 5

    def test_empty_list(self, authenticated_client):
        response = authenticated_client.get(reverse('projects:project-list'))

        assert response.status_code == status.HTTP_200_OK
        assert response.data['count'] == 0
        assert response.data['total_pages'] == 1
        assert response.data['results'] == []
