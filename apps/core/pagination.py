"""
Page-number pagination shared by every list endpoint.

Pages are 1-indexed. Asking for a page beyond the last one yields the last
page and anything below 1 (or not a number) yields the first, so a client
pressing "next" on the final page simply gets the same page back.
"""
from django.conf import settings
from rest_framework.pagination import PageNumberPagination
from rest_framework.response import Response

ELLIPSIS = '...'


def page_range(current_page, total_pages, delta=2):
    """
    Build the page-number strip shown under a paginated table.

    The first and last pages are always present; pages further than
    ``delta`` from the current page collapse into ``'...'``.

    Example:
        >>> page_range(6, 12)
        [1, '...', 4, 5, 6, 7, 8, '...', 12]
        >>> page_range(1, 3)
        [1, 2, 3]
    """
    if total_pages < 1:
        return []

    middle = list(range(
        max(2, current_page - delta),
        min(total_pages - 1, current_page + delta) + 1,
    ))

    pages = [1]
    if current_page - delta > 2:
        pages.append(ELLIPSIS)
    pages.extend(middle)
    if current_page + delta < total_pages - 1:
        pages.append(ELLIPSIS)
    if total_pages > 1:
        pages.append(total_pages)
    return pages


class StandardPagination(PageNumberPagination):
    """Clamped page-number pagination with page totals in the payload."""

    page_size_query_param = 'page_size'

    def __init__(self):
        self.page_size = settings.DEFAULT_PAGE_SIZE
        self.max_page_size = settings.MAX_PAGE_SIZE

    def get_page_number(self, request, paginator):
        raw = request.query_params.get(self.page_query_param, 1)
        if raw in self.last_page_strings:
            return paginator.num_pages
        try:
            number = int(raw)
        except (TypeError, ValueError):
            number = 1
        return min(max(number, 1), paginator.num_pages)

    def get_paginated_response(self, data):
        return Response({
            'count': self.page.paginator.count,
            'total_pages': self.page.paginator.num_pages,
            'current_page': self.page.number,
            'page_size': self.page.paginator.per_page,
            'next': self.get_next_link(),
            'previous': self.get_previous_link(),
            'results': data,
        })

    def get_paginated_response_schema(self, schema):
        response_schema = super().get_paginated_response_schema(schema)
        response_schema['properties'].update({
            'total_pages': {'type': 'integer', 'example': 3},
            'current_page': {'type': 'integer', 'example': 1},
            'page_size': {'type': 'integer', 'example': 10},
        })
        return response_schema


class PageRangePagination(StandardPagination):
    """Adds navigation hints (has_next / page_range) for numbered pagers."""

    def get_paginated_response(self, data):
        response = super().get_paginated_response(data)
        current = self.page.number
        total = self.page.paginator.num_pages
        response.data['has_next'] = self.page.has_next()
        response.data['has_previous'] = self.page.has_previous()
        response.data['page_range'] = page_range(current, total)
        return response
