"""
Route Pagination for Django REST framework
Page number comes from the route, links come from the page URL rewriter
"""

from rest_framework.pagination import (
    PageNumberPagination,
    _get_displayed_page_numbers,
    _get_page_links,
)
from rest_framework.utils.urls import replace_query_param

from .routing import PaginateRoute


class RoutePageNumberPagination(PageNumberPagination):
    """
    Page number pagination addressed by ``<route>/page/<n>/`` URLs

    Views using it must be registered with ``paginateroute.urls.paginate``.
    The page size can still be picked with the ``page_size`` query parameter.
    """

    page_size = 20
    page_size_query_param = 'page_size'
    max_page_size = 100

    def get_page_number(self, request, paginator):
        return PaginateRoute(request).current_page

    def get_next_link(self):
        if not self.page.has_next():
            return None
        return self._with_page_size(PaginateRoute(self.request).next_page_url(True))

    def get_previous_link(self):
        if not self.page.has_previous():
            return None
        return self._with_page_size(PaginateRoute(self.request).previous_page_url())

    def get_html_context(self):
        route = PaginateRoute(self.request)
        current = self.page.number
        final = self.page.paginator.num_pages
        page_numbers = _get_displayed_page_numbers(current, final)
        page_links = _get_page_links(
            page_numbers, current, lambda page: self._with_page_size(route.page_url(page))
        )

        return {
            'previous_url': self.get_previous_link(),
            'next_url': self.get_next_link(),
            'page_links': page_links
        }

    def _with_page_size(self, url):
        """Keep a client chosen page size on generated page links"""
        if self.page_size_query_param not in self.request.query_params:
            return url
        return replace_query_param(url, self.page_size_query_param, self.get_page_size(self.request))

    def get_schema_operation_parameters(self, view):
        parameters = super().get_schema_operation_parameters(view)
        return [p for p in parameters if p['name'] != self.page_query_param]

    def get_paginated_response_schema(self, schema):
        """Standard paginated envelope with route style page links"""
        return {
            'type': 'object',
            'required': ['count', 'results'],
            'properties': {
                'count': {
                    'type': 'integer',
                    'example': 123
                },
                'next': {
                    'type': 'string',
                    'nullable': True,
                    'format': 'uri',
                    'example': 'http://api.example.org/accounts/page/4/'
                },
                'previous': {
                    'type': 'string',
                    'nullable': True,
                    'format': 'uri',
                    'example': 'http://api.example.org/accounts/page/2/'
                },
                'results': schema
            }
        }
