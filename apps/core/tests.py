from __future__ import annotations

import logging
import os

import django

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "component_registry.settings_dev")
django.setup()

from django.test import Client, RequestFactory, TestCase, SimpleTestCase, override_settings

from apps.components.models import Component
from apps.core.utils.logging import log_event
from apps.core.views import error_404_view, error_500_view
from component_registry.settings import env_bool, env_list, env_str


@override_settings(ALLOWED_HOSTS=["testserver", "localhost"])
class HealthCheckViewTests(TestCase):
    def setUp(self) -> None:
        self.client = Client()

    def test_ok_when_required_component_exists(self):
        res = self.client.get("/.well-known/health")
        self.assertEqual(res.status_code, 200)
        payload = res.json()
        self.assertTrue(payload["ok"])
        self.assertEqual(payload["status"], "ok")
        self.assertNotIn("components.E001", [c["id"] for c in payload["checks"]])
        self.assertIn("no-cache", res["Cache-Control"])

    def test_service_unavailable_when_component_missing(self):
        Component.objects.filter(title="Hurricane").delete()

        with self.assertLogs("apps.core.views", level="WARNING"):
            res = self.client.get("/.well-known/health")

        self.assertEqual(res.status_code, 503)
        payload = res.json()
        self.assertFalse(payload["ok"])
        self.assertEqual(payload["status"], "error")
        failing = [c for c in payload["checks"] if c["id"] == "components.E001"]
        self.assertEqual(len(failing), 1)
        self.assertEqual(failing[0]["level"], "error")
        self.assertIn("seed_components", failing[0]["hint"])

    @override_settings(SILENCED_SYSTEM_CHECKS=["components.E001"])
    def test_silenced_checks_do_not_fail(self):
        Component.objects.filter(title="Hurricane").delete()
        res = self.client.get("/.well-known/health")
        self.assertEqual(res.status_code, 200)
        self.assertNotIn("components.E001", [c["id"] for c in res.json()["checks"]])

    def test_only_get_allowed(self):
        res = self.client.post("/.well-known/health")
        self.assertEqual(res.status_code, 405)


@override_settings(ALLOWED_HOSTS=["testserver", "localhost"], DEBUG=False)
class ErrorViewTests(TestCase):
    def setUp(self) -> None:
        self.factory = RequestFactory()

    def test_404_json_for_json_clients(self):
        res = Client().get("/does-not-exist/", HTTP_ACCEPT="application/json")
        self.assertEqual(res.status_code, 404)
        payload = res.json()
        self.assertEqual(payload["error"], "not_found")
        self.assertFalse(payload["ok"])
        self.assertEqual(payload["status"], 404)

    def test_404_plain_text_otherwise(self):
        request = self.factory.get("/missing/")
        res = error_404_view(request, Exception("secret detail"))
        self.assertEqual(res.status_code, 404)
        self.assertTrue(res["Content-Type"].startswith("text/plain"))
        self.assertNotIn(b"secret detail", res.content)

    def test_500_hides_details(self):
        request = self.factory.get("/boom/", HTTP_X_REQUESTED_WITH="XMLHttpRequest")
        with self.assertLogs("apps.core.exceptions", level="ERROR"):
            res = error_500_view(request)
        self.assertEqual(res.status_code, 500)
        self.assertEqual(res.json()["error"], "internal_error")

    @override_settings(DEBUG=True)
    def test_debug_exposes_exception_text(self):
        request = self.factory.get("/missing/")
        res = error_404_view(request, Exception("resolver detail"))
        self.assertIn(b"resolver detail", res.content)


class LogEventTests(SimpleTestCase):
    def test_event_payload_attached(self):
        logger = logging.getLogger("apps.core.tests")
        with self.assertLogs(logger, level="INFO") as captured:
            log_event(logger, "warning", "probe failed", checks=["components.E001"])

        record = captured.records[0]
        self.assertEqual(record.levelno, logging.WARNING)
        self.assertEqual(record.event, {"checks": ["components.E001"]})

    def test_unknown_level_falls_back_to_info(self):
        logger = logging.getLogger("apps.core.tests")
        with self.assertLogs(logger, level="INFO") as captured:
            log_event(logger, "loud", "hello")
        self.assertEqual(captured.records[0].levelno, logging.INFO)


class EnvHelperTests(SimpleTestCase):
    def test_env_bool(self):
        self.assertTrue(env_bool("Yes"))
        self.assertTrue(env_bool(" 1 "))
        self.assertFalse(env_bool("off"))
        self.assertTrue(env_bool(None, True))

    def test_env_list(self):
        self.assertEqual(env_list("a, b,,c "), ["a", "b", "c"])
        self.assertEqual(env_list(None, ["x"]), ["x"])

    def test_env_str(self):
        self.assertEqual(env_str(None, "fallback"), "fallback")
        self.assertEqual(env_str(5), "5")
