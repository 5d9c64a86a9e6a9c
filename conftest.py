import os

import django
from django.conf import settings


def pytest_configure():
    # pytest-django normally configures Django from pyproject.toml first;
    # this covers runs with the plugin disabled.
    os.environ.setdefault("DJANGO_SETTINGS_MODULE", "component_registry.settings_dev")
    os.environ.setdefault("DJANGO_SECRET_KEY", "test-secret")
    if not settings.configured:
        django.setup()
