"""
Request helpers for tests
"""

from django.test import RequestFactory
from django.urls import resolve

from paginateroute.middleware import SetPageMiddleware


def build_request(path: str, bind_page: bool = True):
    """
    Build a GET request for ``path`` as Django would see it inside a view.

    The request carries its ``resolver_match`` and, unless ``bind_page`` is
    False, the ``page`` attribute set by SetPageMiddleware.
    """
    request = RequestFactory().get(path)
    match = resolve(request.path_info)
    request.resolver_match = match

    if bind_page:
        middleware = SetPageMiddleware(lambda r: None)
        middleware.process_view(request, match.func, match.args, match.kwargs)

    return request
