"""
System checks for the components app.

``required_component_check`` is a deployment check tagged ``readiness``, so
Hurricane's readiness probe (and ``manage.py check --deploy``) reports
``components.E001`` until the required component exists.
"""

from __future__ import annotations

import logging

from django.core.checks import Error, Warning
from django.db import DatabaseError

from apps.components.seeding import required_title

logger = logging.getLogger(__name__)

APP_LABEL = "components"


def required_component_check(app_configs=None, databases=None, **kwargs):
    """Fail when no Component carries the configured required title."""
    if app_configs is not None and not any(c.label == APP_LABEL for c in app_configs):
        return []

    from apps.components.models import Component

    title = required_title()
    errors = []

    for alias in databases or ["default"]:
        try:
            exists = Component.objects.using(alias).filter(title=title).exists()
        except DatabaseError as exc:
            logger.debug("Component table unavailable on %r: %s", alias, exc)
            errors.append(
                Warning(
                    f"Components table is not available on database {alias!r}.",
                    hint="Run 'manage.py migrate'.",
                    obj=Component,
                    id="components.W001",
                )
            )
            continue

        if not exists:
            errors.append(
                Error(
                    f"Required component {title!r} does not exist.",
                    hint=(
                        f"Create a component titled {title!r} in the admin "
                        "or run 'manage.py seed_components'."
                    ),
                    obj=Component,
                    id="components.E001",
                )
            )

    return errors
