from django.core.management.base import BaseCommand

from apps.components.models import Category, Component
from apps.components.seeding import DEFAULT_CATEGORY_TITLE, ensure_required_component, required_title


class Command(BaseCommand):
    help = "Create the component required by the components.E001 readiness check."
    # Must run while components.E001 is outstanding.
    requires_system_checks = []

    def add_arguments(self, parser):
        parser.add_argument(
            "--category",
            default=DEFAULT_CATEGORY_TITLE,
            help=f"Category for a newly created component (default: {DEFAULT_CATEGORY_TITLE}).",
        )

    def handle(self, *args, **options):
        title = required_title()
        _, created = ensure_required_component(
            Category, Component, title=title, category_title=options["category"]
        )
        if created:
            self.stdout.write(self.style.SUCCESS(f"Created component {title!r}."))
        else:
            self.stdout.write(f"Component {title!r} already exists; nothing to do.")
