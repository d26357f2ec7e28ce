"""
Test cases for paginated route registration and the views behind it.
"""

from django.test import SimpleTestCase
from django.urls import reverse

from paginateroute.urls import paginate, paged_route


def _view(request, **kwargs):
    return None


class PaginatePatternsTestCase(SimpleTestCase):
    """paginate() registers a paged and a bare pattern for one view"""

    def test_returns_paged_then_bare_pattern(self):
        patterns = paginate('users/', _view, name='users')

        self.assertEqual(len(patterns), 2)
        self.assertEqual(str(patterns[0].pattern), 'users/page/<page_number:page>/')
        self.assertEqual(str(patterns[1].pattern), 'users/')
        self.assertIs(patterns[0].callback, patterns[1].callback)
        self.assertEqual({p.name for p in patterns}, {'users'})

    def test_paged_route_without_trailing_slash(self):
        self.assertEqual(paged_route('users', 'page'), 'users/page/<page_number:page>')

    def test_paged_route_at_root(self):
        self.assertEqual(paged_route('', 'page'), 'page/<page_number:page>')

    def test_paged_route_with_custom_keyword(self):
        self.assertEqual(paged_route('users/', 'pagina'), 'users/pagina/<page_number:page>/')

    def test_reverse_by_shared_name(self):
        self.assertEqual(reverse('user-list'), '/users/')
        self.assertEqual(reverse('user-list', kwargs={'page': 3}), '/users/page/3/')


class PaginatedViewTestCase(SimpleTestCase):
    """End to end requests through the test project URLconf"""

    def test_first_page(self):
        response = self.client.get('/users/')

        self.assertEqual(response.status_code, 200)
        data = response.json()
        self.assertEqual(data['page'], 1)
        self.assertEqual(data['results'][0], {'name': 'user-1'})
        self.assertEqual(data['next'], 'http://testserver/users/page/2/')
        self.assertIsNone(data['previous'])

    def test_second_page_links_back_to_clean_url(self):
        data = self.client.get('/users/page/2/').json()

        self.assertEqual(data['page'], 2)
        self.assertEqual(data['results'][0], {'name': 'user-11'})
        self.assertEqual(data['next'], 'http://testserver/users/page/3/')
        self.assertEqual(data['previous'], 'http://testserver/users/')

    def test_last_page_has_no_next(self):
        data = self.client.get('/users/page/5/').json()

        self.assertIsNone(data['next'])
        self.assertEqual(data['previous'], 'http://testserver/users/page/4/')

    def test_route_with_parameters(self):
        data = self.client.get('/categories/django-tips/posts/page/2/').json()

        self.assertEqual(data['results'][0], {'name': 'django-tips-11'})
        self.assertEqual(data['next'], 'http://testserver/categories/django-tips/posts/page/3/')
        self.assertEqual(data['previous'], 'http://testserver/categories/django-tips/posts/')

    def test_page_zero_is_treated_as_first_page(self):
        data = self.client.get('/users/page/0/').json()

        self.assertEqual(data['page'], 1)

    def test_non_numeric_page_is_not_found(self):
        response = self.client.get('/users/page/abc/')

        self.assertEqual(response.status_code, 404)

    def test_negative_page_is_not_found(self):
        response = self.client.get('/users/page/-1/')

        self.assertEqual(response.status_code, 404)

    def test_only_safe_methods_are_allowed(self):
        self.assertEqual(self.client.head('/users/').status_code, 200)
        self.assertEqual(self.client.post('/users/').status_code, 405)

    def test_parameter_that_looks_like_placeholder(self):
        response = self.client.get('/tags/%7Bpage%7D/')

        self.assertEqual(response.status_code, 200)
        data = response.json()
        self.assertEqual(data['results'][0], {'name': '{page}-1'})
        self.assertEqual(data['next'], 'http://testserver/tags/%7Bpage%7D/page/2/')

    def test_parameter_with_query_character(self):
        data = self.client.get('/tags/a%3Fb/page/2/').json()

        self.assertEqual(data['next'], 'http://testserver/tags/a%3Fb/page/3/')
        self.assertEqual(data['previous'], 'http://testserver/tags/a%3Fb/')
