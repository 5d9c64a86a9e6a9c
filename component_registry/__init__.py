"""
Component Registry project package.

Holds settings, the root URLconf, the GraphQL schema entry point and the
ASGI/WSGI callables. Keep this file free of Django imports so that
``manage.py`` and the Hurricane ``serve`` command import it cheaply.
"""

__all__ = ["__version__", "__description__"]

__version__ = "0.1.0"
__description__ = "Sample Django + GraphQL service run on the Hurricane application server."
