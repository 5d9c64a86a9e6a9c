"""
WSGI config for the component_registry project.

This file exposes the WSGI callable as a module-level variable named
``application``. Hurricane builds its own handler, so this is only used
by plain WSGI servers.
"""

import os
from django.core.wsgi import get_wsgi_application

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "component_registry.settings")

application = get_wsgi_application()


__all__ = ["application"]
