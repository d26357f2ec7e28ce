"""
Template tags for paginated routes.

Usage::

    {% load paginateroute %}
    {% previous_page_url as prev %}
    {% if prev %}<a href="{{ prev }}">&laquo;</a>{% endif %}
    {% all_page_urls page_obj as urls %}
    {% for number, url in urls.items %}...{% endfor %}
    {% next_page_url page_obj as next %}

The template context must hold ``request``.
"""

from django import template

from paginateroute.routing import PaginateRoute

register = template.Library()


def _route(context) -> PaginateRoute:
    return PaginateRoute(context['request'])


@register.simple_tag(takes_context=True)
def current_page(context):
    return _route(context).current_page


@register.simple_tag(takes_context=True)
def is_current_page(context, page):
    return _route(context).is_current_page(int(page))


@register.simple_tag(takes_context=True)
def next_page_url(context, page_obj):
    return _route(context).next_page_url(page_obj.has_next())


@register.simple_tag(takes_context=True)
def previous_page_url(context, full=None):
    return _route(context).previous_page_url(full)


@register.simple_tag(takes_context=True)
def page_url(context, page, full=None):
    return _route(context).page_url(int(page), full)


@register.simple_tag(takes_context=True)
def all_page_urls(context, page_obj, full=None):
    return _route(context).all_urls(page_obj.paginator.num_pages, full)
