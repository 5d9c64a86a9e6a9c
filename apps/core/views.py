# apps/core/views.py
"""
Core views.

Hurricane answers /alive, /ready and /startup on its probe port. When the
project runs under another server (``runserver``, an ASGI/WSGI server)
``health_check`` gives the same system-check verdict on the main port.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

from django.core import checks
from django.http import HttpRequest, HttpResponse, JsonResponse
from django.views.decorators.cache import never_cache
from django.views.decorators.http import require_GET

from apps.core.exceptions import handle_view_exception
from apps.core.utils.logging import log_event

logger = logging.getLogger(__name__)

# Same tag and deployment flag Hurricane uses for its readiness probe.
HEALTH_CHECK_TAG = "readiness"

_LEVEL_NAMES = {
    checks.DEBUG: "debug",
    checks.INFO: "info",
    checks.WARNING: "warning",
    checks.ERROR: "error",
    checks.CRITICAL: "critical",
}


def _serialize_message(message: checks.CheckMessage) -> Dict[str, Any]:
    return {
        "id": message.id,
        "level": _LEVEL_NAMES.get(message.level, str(message.level)),
        "msg": message.msg,
        "hint": message.hint,
    }


@never_cache
@require_GET
def health_check(request: HttpRequest) -> JsonResponse:
    messages: List[checks.CheckMessage] = [
        m
        for m in checks.run_checks(tags=[HEALTH_CHECK_TAG], include_deployment_checks=True)
        if not m.is_silenced()
    ]
    failing = any(m.is_serious() for m in messages)

    if failing:
        log_event(
            logger,
            "warning",
            "health check failing",
            checks=[m.id for m in messages if m.is_serious()],
        )

    return JsonResponse(
        {
            "ok": not failing,
            "status": "error" if failing else "ok",
            "checks": [_serialize_message(m) for m in messages],
        },
        status=503 if failing else 200,
    )


# ============================================================
# ERROR HANDLERS
# ============================================================
def error_404_view(request: HttpRequest, exception: Optional[Exception] = None) -> HttpResponse:
    return handle_view_exception(request, exception, code=404, error="not_found")


def error_500_view(request: HttpRequest) -> HttpResponse:
    return handle_view_exception(request, None, code=500, error="internal_error")
