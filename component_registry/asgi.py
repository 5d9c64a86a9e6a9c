"""
ASGI config for the component_registry project.

It exposes the ASGI callable as a module-level variable named ``application``.
Hurricane does not need it; it is kept for ASGI servers.

For more information on this file, see
https://docs.djangoproject.com/en/5.2/howto/deployment/asgi/
"""

import os

from django.core.asgi import get_asgi_application

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "component_registry.settings")

application = get_asgi_application()
