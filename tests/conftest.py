"""
Pytest Configuration and Fixtures
Configures Django with the bundled test project before collection
"""

import os
import sys

import pytest

# Add src directory and the test project to Python path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))
sys.path.insert(0, os.path.dirname(__file__))

import django

# Configure Django settings
os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'test_project.settings')
django.setup()

from django.test import RequestFactory

from paginateroute.rewriter import PageUrlRewriter
from test_project.utils import build_request


@pytest.fixture
def rewriter() -> PageUrlRewriter:
    """Rewriter with the default keyword resolving to root relative paths"""
    return PageUrlRewriter('page')


@pytest.fixture
def request_factory() -> RequestFactory:
    return RequestFactory()


@pytest.fixture
def routed_request():
    """Factory building requests that already went through URL resolution"""
    return build_request
