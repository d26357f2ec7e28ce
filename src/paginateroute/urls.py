"""
Paginated route registration.

Usage in a URLconf::

    from paginateroute.urls import paginate

    urlpatterns = [
        *paginate('users/', views.user_list, name='user-list'),
    ]

registers ``users/page/<n>/`` and ``users/`` against the same view.
"""

from typing import Any, Callable, Dict, List, Optional

from django.urls import URLPattern, path
from django.views.decorators.http import require_safe

import structlog

from .conf import get_settings
from .converters import PAGE_CONVERTER_NAME
from .middleware import PAGE_KWARG, set_page

logger = structlog.get_logger(__name__)


def paged_route(route: str, page_keyword: str) -> str:
    """
    Build the paged variant of ``route``.

    ``'users/'`` becomes ``'users/page/<page_number:page>/'``; a trailing
    slash on the bare route is kept on the paged one.
    """
    trailing = route.endswith('/')
    base = route.rstrip('/')
    page_part = f'{page_keyword}/<{PAGE_CONVERTER_NAME}:{PAGE_KWARG}>'
    paged = f'{base}/{page_part}' if base else page_part

    return paged + '/' if trailing else paged


def paginate(route: str, view: Callable, kwargs: Optional[Dict[str, Any]] = None,
             name: Optional[str] = None) -> List[URLPattern]:
    """
    Register a paginated route.

    Args:
        route: Bare route for the first page, e.g. ``'users/'``
        view: View function or ``as_view()`` callable
        kwargs: Extra keyword arguments passed to the view
        name: URL name shared by both patterns

    Returns:
        The paged pattern followed by the bare pattern
    """
    page_keyword = get_settings().page_keyword
    handler = require_safe(set_page(view))

    patterns = [
        path(paged_route(route, page_keyword), handler, kwargs, name=name),
        path(route, handler, kwargs, name=name),
    ]

    logger.debug(
        'paginated_route_registered',
        route=route,
        paged_route=str(patterns[0].pattern),
        name=name
    )
    return patterns
