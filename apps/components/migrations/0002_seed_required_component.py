from django.db import migrations

from apps.components.seeding import ensure_required_component, remove_required_component


def seed(apps, schema_editor):
    ensure_required_component(
        apps.get_model("components", "Category"),
        apps.get_model("components", "Component"),
    )


def unseed(apps, schema_editor):
    remove_required_component(
        apps.get_model("components", "Category"),
        apps.get_model("components", "Component"),
    )


class Migration(migrations.Migration):
    dependencies = [
        ("components", "0001_initial"),
    ]

    operations = [
        migrations.RunPython(seed, unseed),
    ]
