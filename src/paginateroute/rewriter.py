"""
Page URL rewriting for paginated routes.

Works on URI templates such as ``users/page/{page}`` or ``users`` and computes
the relative path of the next, previous or any given page. There are three
cases:

- the template already holds ``<keyword>/{page}``: substitute the number in place
- the template has no page segment (clean first page URL): append one
- the target is page 1 and a clean URL is wanted: strip the page segment

Relative paths are handed to an injected URL resolver; nothing here knows
about hosts, schemes or the current request.
"""

from typing import Callable, List, Optional

from .exceptions import (
    InvalidPageError,
    InvalidTemplateError,
    PaginateRouteConfigurationError,
)

PAGE_PLACEHOLDER = '{page}'
DEFAULT_PAGE_KEYWORD = 'page'

UrlResolver = Callable[[str], str]


def get_segment(path: str, index: int) -> str:
    """
    Return the ``/`` delimited segment of ``path`` at ``index``.

    Negative indices count from the end, ``-1`` being the last segment.
    Out of range indices give an empty string.
    """
    segments = path.split('/')

    if index < 0:
        segments = list(reversed(segments))
        index = abs(index) - 1

    return segments[index] if index < len(segments) else ''


def _default_resolver(path: str) -> str:
    return '/' + path


class PageUrlRewriter:
    """
    Computes previous and next page URLs from a route's URI template.

    The page keyword is fixed at construction; every other input is passed
    explicitly, so one instance can be shared between requests.
    """

    def __init__(self, page_keyword: str = DEFAULT_PAGE_KEYWORD,
                 url_resolver: Optional[UrlResolver] = None):
        if not page_keyword or '/' in page_keyword or page_keyword == PAGE_PLACEHOLDER:
            raise PaginateRouteConfigurationError(
                "Page keyword must be a single non-empty path segment",
                config_key='PAGE_KEYWORD',
                value=page_keyword
            )

        self._page_keyword = page_keyword
        self._url_resolver = url_resolver or _default_resolver

    @property
    def page_keyword(self) -> str:
        return self._page_keyword

    @property
    def page_segment(self) -> str:
        """The two segment suffix marking a paged URI, e.g. ``page/{page}``"""
        return f'{self._page_keyword}/{PAGE_PLACEHOLDER}'

    def next_page(self, has_more_pages: bool, current_page: int) -> Optional[int]:
        """Get the next page number, or None on the last page"""
        self._check_page(current_page)

        if not has_more_pages:
            return None

        return current_page + 1

    def has_next_page(self, has_more_pages: bool, current_page: int) -> bool:
        return self.next_page(has_more_pages, current_page) is not None

    def next_page_url(self, uri_template: str, has_more_pages: bool,
                      current_page: int) -> Optional[str]:
        """
        Get the next page URL.

        Args:
            uri_template: Current route template, e.g. ``users`` or ``users/page/{page}``
            has_more_pages: Whether the paginator has pages after the current one
            current_page: Current page number

        Returns:
            Resolved URL of the next page, or None on the last page
        """
        next_page = self.next_page(has_more_pages, current_page)

        if next_page is None:
            return None

        segments = uri_template.split('/')
        position = self._placeholder_position(uri_template, segments)

        if position is None:
            path = self._append(uri_template, next_page)
        else:
            path = self._substitute(segments, position, next_page)

        return self._url_resolver(path)

    def previous_page(self, current_page: int) -> Optional[int]:
        """Get the previous page number, or None on the first page"""
        self._check_page(current_page)

        if current_page <= 1:
            return None

        return current_page - 1

    def has_previous_page(self, current_page: int) -> bool:
        return self.previous_page(current_page) is not None

    def previous_page_url(self, uri_template: str, current_page: int,
                          full: bool = False) -> Optional[str]:
        """
        Get the previous page URL.

        Args:
            uri_template: Current route template, must hold the page segment
            current_page: Current page number
            full: Return ``users/page/1`` instead of ``users`` for the first page

        Returns:
            Resolved URL of the previous page, or None on the first page

        Raises:
            InvalidTemplateError: the template has no page segment while the
                current page is past the first one
        """
        previous_page = self.previous_page(current_page)

        if previous_page is None:
            return None

        segments = uri_template.split('/')
        position = self._placeholder_position(uri_template, segments)

        if position is None:
            raise InvalidTemplateError(
                f"Template '{uri_template}' has no '{self.page_segment}' segment "
                f"but current page is {current_page}",
                template=uri_template,
                page_keyword=self._page_keyword
            )

        if previous_page == 1 and not full:
            path = self._strip(segments, position)
        else:
            path = self._substitute(segments, position, previous_page)

        return self._url_resolver(path)

    def page_url(self, uri_template: str, page: int, full: bool = False) -> str:
        """Get the URL of any page, using the clean URL for page 1 unless ``full``"""
        self._check_page(page)

        segments = uri_template.split('/')
        position = self._placeholder_position(uri_template, segments)

        if page == 1 and not full:
            path = uri_template if position is None else self._strip(segments, position)
        elif position is None:
            path = self._append(uri_template, page)
        else:
            path = self._substitute(segments, position, page)

        return self._url_resolver(path)

    def has_page_segment(self, uri_template: str) -> bool:
        return self._placeholder_position(uri_template, uri_template.split('/')) is not None

    def _placeholder_position(self, uri_template: str, segments: List[str]) -> Optional[int]:
        positions = [i for i, segment in enumerate(segments) if segment == PAGE_PLACEHOLDER]

        if not positions:
            return None

        if len(positions) > 1:
            raise InvalidTemplateError(
                f"Template '{uri_template}' holds more than one page placeholder",
                template=uri_template
            )

        position = positions[0]
        if position == 0 or get_segment(uri_template, position - 1) != self._page_keyword:
            raise InvalidTemplateError(
                f"Page placeholder in '{uri_template}' is not preceded by "
                f"'{self._page_keyword}'",
                template=uri_template,
                page_keyword=self._page_keyword
            )

        return position

    def _append(self, uri_template: str, page: int) -> str:
        suffix = f'{self._page_keyword}/{page}'
        return f'{uri_template}/{suffix}' if uri_template else suffix

    @staticmethod
    def _substitute(segments: List[str], position: int, page: int) -> str:
        return '/'.join(segments[:position] + [str(page)] + segments[position + 1:])

    @staticmethod
    def _strip(segments: List[str], position: int) -> str:
        # drops the keyword segment together with the separator before it
        return '/'.join(segments[:position - 1] + segments[position + 1:])

    @staticmethod
    def _check_page(page: int) -> None:
        if isinstance(page, bool) or not isinstance(page, int) or page < 1:
            raise InvalidPageError(page)
