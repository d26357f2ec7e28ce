"""
Request bound access to page URLs.

``PaginateRoute`` reads the current route template and page from a resolved
request and hands them to ``PageUrlRewriter``, which stays free of any
request state.
"""

import re
from typing import Dict, Optional
from urllib.parse import quote

from django.urls import get_script_prefix
from django.urls.converters import get_converters

from .conf import get_settings
from .exceptions import RouteNotPaginatedError
from .middleware import DEFAULT_PAGE, PAGE_KWARG, coerce_page
from .rewriter import PAGE_PLACEHOLDER, PageUrlRewriter

# same shape as the parameters Django accepts in path() routes
ROUTE_PARAMETER_RE = re.compile(r'<(?:(?P<converter>[^>:]+):)?(?P<parameter>[^>]+)>')

# pchar minus the braces, so filled values can never read as the page placeholder
SEGMENT_SAFE = "!$&'()*+,;=:@"


class PaginateRoute:
    """
    Page URL helper for the route the current request resolved to.

    Example::

        route = PaginateRoute(request)
        route.next_page_url(page_obj.has_next())
        route.previous_page_url()
    """

    def __init__(self, request, rewriter: Optional[PageUrlRewriter] = None):
        resolver_match = getattr(request, 'resolver_match', None)
        if resolver_match is None or resolver_match.route is None:
            raise RouteNotPaginatedError(path=getattr(request, 'path', None))

        # re_path() routes are regular expressions, not URI templates
        if '^' in resolver_match.route or '$' in resolver_match.route:
            raise RouteNotPaginatedError(path=getattr(request, 'path', None))

        self.request = request
        self.resolver_match = resolver_match
        self.settings = get_settings()
        self.uri_template, self.trailing_slash = self._build_template(
            resolver_match.route, resolver_match.kwargs
        )
        self.rewriter = rewriter or PageUrlRewriter(
            self.settings.page_keyword, url_resolver=self._to_absolute_url
        )

    @property
    def current_page(self) -> int:
        """Page bound by SetPageMiddleware, else the route kwarg, else 1"""
        page = coerce_page(getattr(self.request, 'page', None))
        if page is None:
            page = coerce_page(self.resolver_match.kwargs.get(PAGE_KWARG))

        return page or DEFAULT_PAGE

    def is_current_page(self, page: int) -> bool:
        return self.current_page == page

    def next_page(self, has_more_pages: bool) -> Optional[int]:
        return self.rewriter.next_page(has_more_pages, self.current_page)

    def has_next_page(self, has_more_pages: bool) -> bool:
        return self.rewriter.has_next_page(has_more_pages, self.current_page)

    def next_page_url(self, has_more_pages: bool) -> Optional[str]:
        return self.rewriter.next_page_url(self.uri_template, has_more_pages, self.current_page)

    def previous_page(self) -> Optional[int]:
        return self.rewriter.previous_page(self.current_page)

    def has_previous_page(self) -> bool:
        return self.rewriter.has_previous_page(self.current_page)

    def previous_page_url(self, full: Optional[bool] = None) -> Optional[str]:
        return self.rewriter.previous_page_url(
            self.uri_template, self.current_page, self._full(full)
        )

    def page_url(self, page: int, full: Optional[bool] = None) -> str:
        return self.rewriter.page_url(self.uri_template, page, self._full(full))

    def all_urls(self, num_pages: int, full: Optional[bool] = None) -> Dict[int, str]:
        """Get the URL of every page from 1 to ``num_pages``, keyed by page number"""
        return {page: self.page_url(page, full) for page in range(1, num_pages + 1)}

    def _full(self, full: Optional[bool]) -> bool:
        return self.settings.force_full_first_page if full is None else full

    def _to_absolute_url(self, path: str) -> str:
        if path and self.trailing_slash:
            path += '/'

        return self.request.build_absolute_uri(get_script_prefix() + path)

    @staticmethod
    def _build_template(route: str, kwargs: Dict):
        """
        Turn a resolved path() route into a URI template.

        The page parameter becomes ``{page}``; every other parameter is filled
        in from the resolved kwargs, percent encoded, so only the page number is
        left to rewrite.
        """
        def fill(match):
            parameter = match.group('parameter')
            if parameter == PAGE_KWARG:
                return PAGE_PLACEHOLDER

            converter_name = match.group('converter') or 'str'
            value = get_converters()[converter_name].to_url(kwargs[parameter])
            safe = SEGMENT_SAFE + '/' if converter_name == 'path' else SEGMENT_SAFE
            return quote(value, safe=safe)

        template = ROUTE_PARAMETER_RE.sub(fill, route)
        trailing_slash = template.endswith('/')

        return template.rstrip('/'), trailing_slash
