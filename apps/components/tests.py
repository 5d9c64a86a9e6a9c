from __future__ import annotations

import json
import os
from io import StringIO
from unittest.mock import patch

import django

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "component_registry.settings_dev")
django.setup()

from django.apps import apps as django_apps
from django.contrib.auth import get_user_model
from django.core import checks
from django.core.management import call_command
from django.core.management.base import SystemCheckError
from django.db import OperationalError
from django.test import Client, TestCase, override_settings
from graphene_django.utils.testing import GraphQLTestCase
from hurricane.management.commands.serve import Command as ServeCommand

from apps.components.admin import ComponentResource
from apps.components.checks import required_component_check
from apps.components.models import Category, Component
from apps.components.seeding import ensure_required_component, remove_required_component

User = get_user_model()


class ModelTests(TestCase):
    def test_deleting_category_cascades_to_components(self):
        category = Category.objects.create(title="Databases")
        Component.objects.create(title="PostgreSQL", category=category)
        Component.objects.create(title="Redis", category=category)

        category.delete()

        self.assertFalse(Component.objects.filter(title__in=["PostgreSQL", "Redis"]).exists())

    def test_str_returns_title(self):
        category = Category.objects.create(title="Databases")
        component = Component.objects.create(title="PostgreSQL", category=category)
        self.assertEqual(str(category), "Databases")
        self.assertEqual(str(component), "PostgreSQL")

    def test_components_ordered_by_category_then_title(self):
        a = Category.objects.create(title="A-tools")
        z = Category.objects.create(title="Z-tools")
        Component.objects.create(title="beta", category=z)
        Component.objects.create(title="gamma", category=a)
        Component.objects.create(title="alpha", category=z)

        titles = [c.title for c in Component.objects.filter(category__in=[a, z])]
        self.assertEqual(titles, ["gamma", "alpha", "beta"])


class SchemaTests(GraphQLTestCase):
    GRAPHQL_URL = "/graphql"

    def setUp(self) -> None:
        self.category = Category.objects.create(title="Frontend")
        Component.objects.create(title="React", description="UI library", category=self.category)
        Component.objects.create(title="Vue", category=self.category)

    def test_all_components_lists_every_component_with_category(self):
        response = self.query(
            """
            query {
              allComponents { id title description category { title } }
            }
            """
        )
        self.assertResponseNoErrors(response)
        items = json.loads(response.content)["data"]["allComponents"]

        self.assertEqual(len(items), Component.objects.count())
        by_title = {item["title"]: item for item in items}
        self.assertEqual(by_title["React"]["category"]["title"], "Frontend")
        self.assertEqual(by_title["React"]["description"], "UI library")
        self.assertIn("Hurricane", by_title)

    def test_category_by_name_returns_category_and_components(self):
        response = self.query(
            """
            query ($name: String!) {
              categoryByName(name: $name) { title components { title } }
            }
            """,
            variables={"name": "Frontend"},
        )
        self.assertResponseNoErrors(response)
        category = json.loads(response.content)["data"]["categoryByName"]

        self.assertEqual(category["title"], "Frontend")
        self.assertEqual(sorted(c["title"] for c in category["components"]), ["React", "Vue"])

    def test_category_by_name_unknown_returns_null(self):
        response = self.query(
            'query { categoryByName(name: "Nope") { id } }',
        )
        self.assertResponseNoErrors(response)
        self.assertIsNone(json.loads(response.content)["data"]["categoryByName"])

    def test_category_by_name_requires_name(self):
        response = self.query("query { categoryByName { id } }")
        self.assertResponseHasErrors(response)

    def test_graphiql_is_served_to_browsers(self):
        response = self.client.get(self.GRAPHQL_URL, HTTP_ACCEPT="text/html")
        self.assertEqual(response.status_code, 200)
        self.assertIn(b"graphiql", response.content.lower())


class RequiredComponentCheckTests(TestCase):
    def test_passes_when_seeded_component_exists(self):
        self.assertEqual(required_component_check(), [])

    def test_reports_e001_when_component_missing(self):
        Component.objects.filter(title="Hurricane").delete()

        errors = required_component_check()

        self.assertEqual(len(errors), 1)
        self.assertIsInstance(errors[0], checks.Error)
        self.assertEqual(errors[0].id, "components.E001")
        self.assertIn("Hurricane", errors[0].msg)
        self.assertIn("seed_components", errors[0].hint)

    @override_settings(COMPONENTS_REQUIRED_TITLE="Tornado")
    def test_required_title_follows_settings(self):
        errors = required_component_check()
        self.assertEqual([e.id for e in errors], ["components.E001"])
        self.assertIn("Tornado", errors[0].msg)

        category = Category.objects.create(title="Libraries")
        Component.objects.create(title="Tornado", category=category)
        self.assertEqual(required_component_check(), [])

    def test_skipped_for_other_apps(self):
        Component.objects.all().delete()
        auth_config = django_apps.get_app_config("auth")
        self.assertEqual(required_component_check(app_configs=[auth_config]), [])

        own_config = django_apps.get_app_config("components")
        self.assertEqual(len(required_component_check(app_configs=[own_config])), 1)

    def test_inspects_given_databases(self):
        Component.objects.all().delete()
        errors = required_component_check(databases=["default"])
        self.assertEqual([e.id for e in errors], ["components.E001"])

    def test_unavailable_table_is_a_warning(self):
        with patch("django.db.models.query.QuerySet.exists", side_effect=OperationalError("no such table")):
            errors = required_component_check()

        self.assertEqual(len(errors), 1)
        self.assertIsInstance(errors[0], checks.Warning)
        self.assertEqual(errors[0].id, "components.W001")
        self.assertFalse(errors[0].is_serious())

    def test_registered_as_readiness_deployment_check(self):
        self.assertIn("readiness", required_component_check.tags)
        self.assertIn(
            required_component_check,
            checks.registry.registry.get_checks(include_deployment_checks=True),
        )
        self.assertNotIn(required_component_check, checks.registry.registry.get_checks())

    def test_serve_readiness_check_fails_while_component_missing(self):
        serve = ServeCommand(stdout=StringIO(), stderr=StringIO())
        serve.check(tags=["readiness"], include_deployment_checks=True)

        Component.objects.filter(title="Hurricane").delete()

        with self.assertRaises(SystemCheckError) as ctx:
            serve.check(tags=["readiness"], include_deployment_checks=True)
        self.assertIn("components.E001", str(ctx.exception))

    def test_plain_check_run_skips_database_lookup(self):
        Component.objects.filter(title="Hurricane").delete()
        ids = [m.id for m in checks.run_checks(databases=["default"])]
        self.assertNotIn("components.E001", ids)

    def test_migrate_runs_while_component_missing(self):
        Component.objects.filter(title="Hurricane").delete()
        call_command("migrate", verbosity=0, skip_checks=False, stdout=StringIO())


class SeedingTests(TestCase):
    def test_seed_command_creates_missing_component(self):
        Component.objects.all().delete()
        Category.objects.all().delete()
        out = StringIO()

        call_command("seed_components", stdout=out)

        component = Component.objects.get(title="Hurricane")
        self.assertEqual(component.category.title, "Servers")
        self.assertIn("Created", out.getvalue())

    def test_seed_command_runs_with_system_checks_while_component_missing(self):
        Component.objects.filter(title="Hurricane").delete()
        out = StringIO()

        call_command("seed_components", skip_checks=False, stdout=out)

        self.assertTrue(Component.objects.filter(title="Hurricane").exists())
        self.assertEqual(required_component_check(), [])

    def test_seed_command_is_idempotent(self):
        out = StringIO()
        call_command("seed_components", stdout=out)
        call_command("seed_components", stdout=out)

        self.assertEqual(Component.objects.filter(title="Hurricane").count(), 1)
        self.assertIn("nothing to do", out.getvalue())

    def test_seed_command_category_option(self):
        Component.objects.filter(title="Hurricane").delete()
        call_command("seed_components", "--category", "Runtimes", stdout=StringIO())
        self.assertEqual(Component.objects.get(title="Hurricane").category.title, "Runtimes")

    def test_remove_deletes_component_and_empty_category(self):
        remove_required_component(Category, Component)
        self.assertFalse(Component.objects.filter(title="Hurricane").exists())
        self.assertFalse(Category.objects.filter(title="Servers").exists())

        ensure_required_component(Category, Component)
        other = Category.objects.get(title="Servers")
        Component.objects.create(title="Gunicorn", category=other)
        remove_required_component(Category, Component)
        self.assertTrue(Category.objects.filter(title="Servers").exists())


@override_settings(ALLOWED_HOSTS=["testserver", "localhost"])
class AdminTests(TestCase):
    def setUp(self) -> None:
        self.admin = User.objects.create_superuser("admin", "admin@example.com", "pass")
        self.client = Client()
        self.client.force_login(self.admin)

    def test_component_changelist_renders(self):
        res = self.client.get("/admin/components/component/")
        self.assertEqual(res.status_code, 200)
        self.assertContains(res, "Hurricane")

    def test_category_change_page_has_inline_components(self):
        category = Category.objects.get(title="Servers")
        res = self.client.get(f"/admin/components/category/{category.pk}/change/")
        self.assertEqual(res.status_code, 200)
        self.assertContains(res, "Hurricane")

    def test_component_export_form_renders(self):
        res = self.client.get("/admin/components/component/export/")
        self.assertEqual(res.status_code, 200)


class ComponentExportTests(TestCase):
    def test_export_columns_follow_export_order(self):
        dataset = ComponentResource().export()
        self.assertEqual(dataset.headers, ["id", "title", "category__title", "description"])

    def test_export_includes_category_title(self):
        category = Category.objects.create(title="Frontend")
        Component.objects.create(title="React", description="UI library", category=category)

        rows = {row["title"]: row for row in ComponentResource().export().dict}

        self.assertEqual(rows["React"]["category__title"], "Frontend")
        self.assertEqual(rows["React"]["description"], "UI library")
        self.assertEqual(rows["Hurricane"]["category__title"], "Servers")

    def test_export_as_csv(self):
        csv_text = ComponentResource().export().csv
        self.assertTrue(csv_text.startswith("id,title,category__title,description"))
        self.assertIn("Hurricane", csv_text)
