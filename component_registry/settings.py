# component_registry/settings.py
"""
Component Registry Settings
Django 5.x • Python 3.10+

Every deployment-specific value comes from the environment (or a ``.env``
file next to ``manage.py``). The Helm chart renders the same keys into a
ConfigMap, so local and cluster runs read identical names.
"""

from __future__ import annotations

import os
import logging
from pathlib import Path
from typing import Any

from django.core.exceptions import ImproperlyConfigured
from dotenv import load_dotenv

BASE_DIR = Path(__file__).resolve().parent.parent

load_dotenv(BASE_DIR / ".env")

logger = logging.getLogger("component_registry")


# ---------------------------
# Helper utilities
# ---------------------------
def env_str(value: Any, default: str = "") -> str:
    return str(value) if value is not None else default


def env_bool(value: Any, default: bool = False) -> bool:
    if value is None:
        return default
    return str(value).strip().lower() in ("1", "true", "yes", "on")


def env_list(value: Any, default: list | None = None) -> list:
    if value is None:
        return default or []
    return [v.strip() for v in str(value).split(",") if v.strip()]


# ---------------------------
# Core
# ---------------------------
DEBUG = env_bool(os.getenv("DJANGO_DEBUG"), False)
ENV = "development" if DEBUG else "production"

SECRET_KEY = env_str(os.getenv("DJANGO_SECRET_KEY"))
if not SECRET_KEY:
    if not DEBUG:
        raise ImproperlyConfigured("DJANGO_SECRET_KEY must be set when DJANGO_DEBUG is off.")
    SECRET_KEY = "django-insecure-development-secret"


# ---------------------------
# Allowed hosts
# ---------------------------
ALLOWED_HOSTS = env_list(os.getenv("DJANGO_ALLOWED_HOSTS"), ["127.0.0.1", "localhost"])

if not DEBUG and not ALLOWED_HOSTS:
    raise ImproperlyConfigured("ALLOWED_HOSTS cannot be empty when DEBUG=False.")


# ---------------------------
# Installed apps
# ---------------------------
DJANGO_APPS = [
    "django.contrib.admin",
    "django.contrib.auth",
    "django.contrib.contenttypes",
    "django.contrib.sessions",
    "django.contrib.messages",
    "django.contrib.staticfiles",
]

THIRD_PARTY_APPS = [
    "hurricane",
    "graphene_django",
    "import_export",
]

LOCAL_APPS = [
    "apps.core",
    "apps.components",
]

INSTALLED_APPS = DJANGO_APPS + THIRD_PARTY_APPS + LOCAL_APPS


# ---------------------------
# Middleware
# ---------------------------
MIDDLEWARE = [
    "django.middleware.security.SecurityMiddleware",
    "whitenoise.middleware.WhiteNoiseMiddleware",
    "django.contrib.sessions.middleware.SessionMiddleware",
    "django.middleware.common.CommonMiddleware",
    "django.middleware.csrf.CsrfViewMiddleware",
    "django.contrib.auth.middleware.AuthenticationMiddleware",
    "django.contrib.messages.middleware.MessageMiddleware",
    "django.middleware.clickjacking.XFrameOptionsMiddleware",
]


# ---------------------------
# Routing / ASGI / WSGI
# ---------------------------
ROOT_URLCONF = "component_registry.urls"
WSGI_APPLICATION = "component_registry.wsgi.application"
ASGI_APPLICATION = "component_registry.asgi.application"


# ---------------------------
# Database
# ---------------------------
_db_engine = env_str(os.getenv("DJANGO_DB_ENGINE"), "django.db.backends.sqlite3")
_db_name = env_str(os.getenv("DJANGO_DB_NAME"))
if not _db_name:
    _db_name = str(BASE_DIR / "db.sqlite3")

DATABASES = {
    "default": {
        "ENGINE": _db_engine,
        "NAME": _db_name,
        "USER": env_str(os.getenv("DJANGO_DB_USER")),
        "PASSWORD": env_str(os.getenv("DJANGO_DB_PASSWORD")),
        "HOST": env_str(os.getenv("DJANGO_DB_HOST")),
        "PORT": env_str(os.getenv("DJANGO_DB_PORT")),
        "ATOMIC_REQUESTS": False,
        "CONN_MAX_AGE": 60 if not DEBUG else 0,
    }
}

DEFAULT_AUTO_FIELD = "django.db.models.BigAutoField"


# ---------------------------
# Authentication
# ---------------------------
AUTH_PASSWORD_VALIDATORS = [
    {"NAME": "django.contrib.auth.password_validation.UserAttributeSimilarityValidator"},
    {"NAME": "django.contrib.auth.password_validation.MinimumLengthValidator"},
    {"NAME": "django.contrib.auth.password_validation.CommonPasswordValidator"},
    {"NAME": "django.contrib.auth.password_validation.NumericPasswordValidator"},
]


# ---------------------------
# i18n / timezone
# ---------------------------
LANGUAGE_CODE = env_str(os.getenv("DJANGO_LANGUAGE"), "en-us")
TIME_ZONE = env_str(os.getenv("DJANGO_TIME_ZONE"), "UTC")

USE_I18N = True
USE_TZ = True


# ---------------------------
# Static / Media
# ---------------------------
STATIC_URL = "/static/"
STATIC_ROOT = Path(env_str(os.getenv("DJANGO_STATIC_ROOT"), str(BASE_DIR / "static")))

MEDIA_URL = "/media/"
MEDIA_ROOT = Path(env_str(os.getenv("DJANGO_MEDIA_ROOT"), str(BASE_DIR / "media")))

STORAGES = {
    "default": {"BACKEND": "django.core.files.storage.FileSystemStorage"},
    "staticfiles": {
        "BACKEND": (
            "django.contrib.staticfiles.storage.StaticFilesStorage"
            if DEBUG else
            "whitenoise.storage.CompressedManifestStaticFilesStorage"
        ),
    },
}


# ---------------------------
# Templates
# ---------------------------
TEMPLATES = [
    {
        "BACKEND": "django.template.backends.django.DjangoTemplates",
        "DIRS": [],
        "APP_DIRS": True,
        "OPTIONS": {
            "debug": DEBUG,
            "context_processors": [
                "django.template.context_processors.debug",
                "django.template.context_processors.request",
                "django.contrib.auth.context_processors.auth",
                "django.contrib.messages.context_processors.messages",
            ],
        },
    },
]


# ---------------------------
# GraphQL
# ---------------------------
GRAPHENE = {
    "SCHEMA": "component_registry.schema.schema",
}


# ---------------------------
# Components
# ---------------------------
# Title of the component whose presence the readiness check requires.
COMPONENTS_REQUIRED_TITLE = env_str(os.getenv("COMPONENTS_REQUIRED_TITLE"), "Hurricane")


# ---------------------------
# Logging
# ---------------------------
LOG_LEVEL = env_str(os.getenv("DJANGO_LOG_LEVEL"), "INFO")

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "verbose": {"format": "{levelname} {asctime} {module} {message}", "style": "{"},
        "simple": {"format": "{levelname} {message}", "style": "{"},
    },
    "handlers": {"console": {"class": "logging.StreamHandler", "formatter": "verbose"}},
    "root": {"handlers": ["console"], "level": LOG_LEVEL},
    "loggers": {
        "django": {"handlers": ["console"], "level": LOG_LEVEL, "propagate": False},
        "hurricane": {"handlers": ["console"], "level": LOG_LEVEL, "propagate": False},
        "apps": {"handlers": ["console"], "level": LOG_LEVEL, "propagate": False},
    },
}


# ---------------------------
# Security
# ---------------------------
SESSION_COOKIE_SECURE = env_bool(os.getenv("SESSION_COOKIE_SECURE"), False)
CSRF_COOKIE_SECURE = env_bool(os.getenv("CSRF_COOKIE_SECURE"), False)
SESSION_COOKIE_HTTPONLY = True

SECURE_CONTENT_TYPE_NOSNIFF = True
X_FRAME_OPTIONS = "DENY"

CSRF_TRUSTED_ORIGINS = env_list(os.getenv("DJANGO_CSRF_TRUSTED_ORIGINS"))


logger.info("Settings loaded (DEBUG=%s, DB_ENGINE=%s)", DEBUG, _db_engine)
