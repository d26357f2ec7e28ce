"""
Route pagination for Django.

Registers ``<route>/page/<n>`` URL patterns and computes next and previous
page URLs for them.
"""

__version__ = '1.0.0'
