"""
Path converter for page numbers in paginated routes
"""

from django.urls import register_converter

PAGE_CONVERTER_NAME = 'page_number'


class PageConverter:
    """Matches digit only page segments and hands them to views as int"""

    regex = '[0-9]+'

    def to_python(self, value: str) -> int:
        return int(value)

    def to_url(self, value) -> str:
        return str(value)


register_converter(PageConverter, PAGE_CONVERTER_NAME)
