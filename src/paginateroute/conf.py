"""
Configuration Management for Route Pagination

Settings are read once per process from, in order of precedence:
the PAGINATEROUTE Django setting, the environment, the translation
catalog and finally the built-in defaults.
"""

from dataclasses import dataclass
from functools import lru_cache
from typing import Any, Dict

import environ
import structlog
from django.conf import settings
from django.core.signals import setting_changed
from django.dispatch import receiver
from django.utils import translation

from .exceptions import PaginateRouteConfigurationError
from .rewriter import DEFAULT_PAGE_KEYWORD

logger = structlog.get_logger(__name__)

SETTINGS_NAME = 'PAGINATEROUTE'
TRANSLATION_CONTEXT = 'paginateroute'
KEYWORD_ENV_VAR = 'PAGINATEROUTE_PAGE_KEYWORD'

env = environ.Env()


@dataclass(frozen=True)
class PaginateRouteSettings:
    """Immutable route pagination settings"""
    page_keyword: str = DEFAULT_PAGE_KEYWORD
    translation_context: str = TRANSLATION_CONTEXT
    force_full_first_page: bool = False

    def to_dict(self) -> Dict[str, Any]:
        return {
            'PAGE_KEYWORD': self.page_keyword,
            'TRANSLATION_CONTEXT': self.translation_context,
            'FORCE_FULL_FIRST_PAGE': self.force_full_first_page,
        }


def translate_page_keyword(context: str = TRANSLATION_CONTEXT) -> str:
    """
    Look the page keyword up in the translation catalog.

    Uses the project's LANGUAGE_CODE rather than the active language so the
    keyword does not depend on which request happens to load it first.
    Falls back to ``"page"`` when the catalog has no entry.
    """
    with translation.override(settings.LANGUAGE_CODE):
        keyword = translation.pgettext(context, DEFAULT_PAGE_KEYWORD)

    return str(keyword) or DEFAULT_PAGE_KEYWORD


def build_settings() -> PaginateRouteSettings:
    """Build settings from Django settings, environment and translations"""
    user_settings = getattr(settings, SETTINGS_NAME, {}) or {}

    if not isinstance(user_settings, dict):
        raise PaginateRouteConfigurationError(
            f"{SETTINGS_NAME} must be a dict",
            config_key=SETTINGS_NAME,
            value=type(user_settings).__name__
        )

    unknown = set(user_settings) - set(PaginateRouteSettings().to_dict())
    if unknown:
        raise PaginateRouteConfigurationError(
            f"Unknown {SETTINGS_NAME} keys: {', '.join(sorted(unknown))}",
            config_key=SETTINGS_NAME
        )

    context = user_settings.get('TRANSLATION_CONTEXT', TRANSLATION_CONTEXT)
    keyword = (
        user_settings.get('PAGE_KEYWORD')
        or env.str(KEYWORD_ENV_VAR, default=None)
        or translate_page_keyword(context)
    )

    if '/' in keyword:
        raise PaginateRouteConfigurationError(
            "Page keyword must be a single path segment",
            config_key='PAGE_KEYWORD',
            value=keyword
        )

    force_full_first_page = user_settings.get('FORCE_FULL_FIRST_PAGE', False)
    if not isinstance(force_full_first_page, bool):
        raise PaginateRouteConfigurationError(
            "FORCE_FULL_FIRST_PAGE must be a bool",
            config_key='FORCE_FULL_FIRST_PAGE',
            value=repr(force_full_first_page)
        )

    return PaginateRouteSettings(
        page_keyword=keyword,
        translation_context=context,
        force_full_first_page=force_full_first_page,
    )


@lru_cache(maxsize=None)
def get_settings() -> PaginateRouteSettings:
    """Get the process wide settings, building them on first use"""
    return build_settings()


@receiver(setting_changed)
def reload_settings(*, setting: str, **kwargs) -> None:
    """Drop cached settings when tests override the relevant Django settings"""
    if setting in (SETTINGS_NAME, 'LANGUAGE_CODE'):
        get_settings.cache_clear()
        logger.debug('paginateroute_settings_reloaded', setting=setting)
