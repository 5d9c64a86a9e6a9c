"""
Component Registry Development Settings
=======================================
Overrides production `settings.py` for local development and the test suite.

- DEBUG mode enabled before the production module is evaluated
- Local-only allowed hosts
- Verbose logging for project apps
- Fast password hashing
"""

from __future__ import annotations

import os

# Must be set before the production module evaluates DEBUG / SECRET_KEY.
os.environ.setdefault("DJANGO_DEBUG", "true")

from .settings import *  # noqa: E402,F401,F403

# ============================================================
# Environment / Debug
# ============================================================
DEBUG = True
ENV = "development"

ALLOWED_HOSTS = ["127.0.0.1", "localhost", "0.0.0.0", "testserver"]

CSRF_TRUSTED_ORIGINS = [
    "http://127.0.0.1:8000",
    "http://localhost:8000",
]


# ============================================================
# Logging Configuration
# ============================================================
LOGGING["root"]["level"] = "DEBUG"
LOGGING["handlers"]["console"]["formatter"] = "simple"

for logger_name in ("apps.core", "apps.components"):
    LOGGING["loggers"].setdefault(
        logger_name,
        {
            "handlers": ["console"],
            "level": "DEBUG",
            "propagate": False,
        },
    )


# ============================================================
# Password Hashers (fast)
# ============================================================
PASSWORD_HASHERS = [
    "django.contrib.auth.hashers.MD5PasswordHasher",
]
