"""
Page binding middleware.

Binds ``request.page`` before the view runs so views, paginators and
template tags all see the same positive page number. Works either as a
project wide middleware or, through ``set_page``, on individual views.
"""

from typing import Any, Optional

from django.utils.decorators import decorator_from_middleware
from django.utils.deprecation import MiddlewareMixin

import structlog

logger = structlog.get_logger(__name__)

PAGE_KWARG = 'page'
DEFAULT_PAGE = 1


def coerce_page(value: Any) -> Optional[int]:
    """Return ``value`` as a positive int, or None when it is not one"""
    if value is None or isinstance(value, bool):
        return None

    try:
        page = int(value)
    except (TypeError, ValueError):
        return None

    return page if page >= 1 else None


class SetPageMiddleware(MiddlewareMixin):
    """
    Middleware binding the ``page`` route parameter to the request.

    Missing or invalid values fall back to page 1; they are never an error.
    """

    def process_view(self, request, view_func, view_args, view_kwargs):
        """
        Bind ``request.page`` from the resolved view kwargs.

        Args:
            request: Django request object
            view_func: View about to be called
            view_args: Positional view arguments
            view_kwargs: Keyword view arguments

        Returns:
            None, so processing continues with the view
        """
        raw_page = view_kwargs.get(PAGE_KWARG)
        page = coerce_page(raw_page)

        if page is None:
            if raw_page is not None:
                logger.debug(
                    'invalid_page_parameter',
                    path=request.path,
                    page=str(raw_page),
                    fallback=DEFAULT_PAGE
                )
            page = DEFAULT_PAGE

        request.page = page
        return None


set_page = decorator_from_middleware(SetPageMiddleware)
