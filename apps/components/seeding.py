"""
Creation of the component the readiness check depends on.

The functions take the model classes as arguments so that data migrations
can pass their historical models and the management command the live ones.
"""

from __future__ import annotations

import logging
from typing import Tuple

from django.conf import settings

logger = logging.getLogger(__name__)

DEFAULT_CATEGORY_TITLE = "Servers"
DEFAULT_DESCRIPTION = (
    "Tornado based application server for Django with liveness, "
    "readiness and startup probes."
)


def required_title() -> str:
    return getattr(settings, "COMPONENTS_REQUIRED_TITLE", "Hurricane")


def ensure_required_component(
    category_model,
    component_model,
    title: str | None = None,
    category_title: str = DEFAULT_CATEGORY_TITLE,
) -> Tuple[object, bool]:
    """
    Return ``(component, created)`` for the required component, creating it
    and its category when missing. An existing component with the title is
    left untouched, whatever its category.
    """
    title = title or required_title()

    existing = component_model.objects.filter(title=title).first()
    if existing is not None:
        return existing, False

    category, category_created = category_model.objects.get_or_create(title=category_title)
    if category_created:
        logger.info("Created category %r", category_title)

    component = component_model.objects.create(
        title=title,
        description=DEFAULT_DESCRIPTION,
        category=category,
    )
    logger.info("Created required component %r in category %r", title, category_title)
    return component, True


def remove_required_component(
    category_model,
    component_model,
    title: str | None = None,
    category_title: str = DEFAULT_CATEGORY_TITLE,
) -> None:
    """Undo ``ensure_required_component``; the category goes once empty."""
    title = title or required_title()

    component_model.objects.filter(title=title, category__title=category_title).delete()
    category_model.objects.filter(title=category_title, components__isnull=True).delete()
