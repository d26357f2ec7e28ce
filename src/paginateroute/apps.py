"""
Django app configuration for route pagination.
"""

from django.apps import AppConfig

import structlog

logger = structlog.get_logger(__name__)


class PaginateRouteConfig(AppConfig):
    """
    Configuration class for the paginateroute app.

    Resolves the page keyword once at startup, before any URLconf calls
    paginate(), so every paginated route shares the same keyword for the
    lifetime of the process.
    """

    name = 'paginateroute'
    verbose_name = 'Route Pagination'

    def ready(self) -> None:
        from paginateroute.conf import get_settings

        paginate_settings = get_settings()
        logger.info(
            'page_keyword_loaded',
            page_keyword=paginate_settings.page_keyword,
            force_full_first_page=paginate_settings.force_full_first_page
        )
