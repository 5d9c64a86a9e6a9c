from django.apps import AppConfig
from django.core import checks


class ComponentsConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "apps.components"
    label = "components"
    verbose_name = "Components"

    def ready(self):
        """
        Register the required-component check for Hurricane's readiness probe.

        Hurricane runs ``check(tags=["readiness"], include_deployment_checks=True)``;
        as a deployment check it stays out of ``migrate``, ``runserver`` and
        ``seed_components``, which would otherwise refuse to start.
        """
        from apps.components.checks import required_component_check

        checks.register(required_component_check, checks.Tags.database, "readiness", deploy=True)
