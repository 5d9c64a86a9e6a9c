"""
Core application package.

Shared infrastructure (base models, error responses, logging helpers and the
health view). Keep this file free of side effects so imports remain
predictable in management commands, migrations, and tests.
"""

__all__: list[str] = []
