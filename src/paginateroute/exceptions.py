"""
Custom Exceptions for Route Pagination
Contract violations raise; invalid request input never does
"""

from typing import Optional, Dict, Any

from django.core.exceptions import ImproperlyConfigured


class PaginateRouteException(Exception):
    """
    Base exception for all route pagination errors

    Carries a stable error code and a context dictionary so callers can
    report the failure without parsing the message.
    """

    def __init__(self, message: str, error_code: Optional[str] = None,
                 context: Optional[Dict[str, Any]] = None):
        """
        Initialize route pagination exception

        Args:
            message: Error message
            error_code: Unique error code
            context: Additional context information
        """
        super().__init__(message)
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.context = context or {}

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for logging and API responses"""
        return {
            'error': self.error_code,
            'message': self.message,
            'context': self.context
        }


class InvalidPageError(PaginateRouteException):
    """Exception raised when a page number is not a positive integer"""

    def __init__(self, page: Any, message: Optional[str] = None):
        super().__init__(
            message or f"Page must be a positive integer, got {page!r}",
            "INVALID_PAGE"
        )
        self.context['page'] = repr(page)


class InvalidTemplateError(PaginateRouteException):
    """Exception raised when a URI template does not carry a usable page segment"""

    def __init__(self, message: str, template: str, page_keyword: Optional[str] = None):
        super().__init__(message, "INVALID_TEMPLATE")
        self.context['template'] = template
        if page_keyword:
            self.context['page_keyword'] = page_keyword


class RouteNotPaginatedError(PaginateRouteException):
    """Exception raised when the current request was not routed through paginate()"""

    def __init__(self, message: str = "Request did not resolve through a paginated route",
                 path: Optional[str] = None):
        super().__init__(message, "ROUTE_NOT_PAGINATED")
        if path:
            self.context['path'] = path


class PaginateRouteConfigurationError(PaginateRouteException, ImproperlyConfigured):
    """Exception raised when the PAGINATEROUTE configuration is invalid"""

    def __init__(self, message: str, config_key: Optional[str] = None,
                 value: Optional[Any] = None):
        super().__init__(message, "CONFIGURATION_ERROR")
        if config_key:
            self.context['config_key'] = config_key
        if value is not None:
            self.context['value'] = str(value)
