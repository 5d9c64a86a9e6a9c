"""
apps.core.exceptions
====================

Error responses for project views.

✓ JSON for API/AJAX callers, plain text otherwise
✓ Internal details hidden unless DEBUG
"""

from __future__ import annotations

import logging
from typing import Optional

from django.conf import settings
from django.http import (
    HttpRequest,
    HttpResponse,
    JsonResponse,
)

log = logging.getLogger(__name__)


def _is_json_request(request: Optional[HttpRequest]) -> bool:
    """Detect JSON or AJAX requests for correct response type."""
    if not request:
        return False

    content_type = (request.content_type or "").lower()
    accept = request.headers.get("accept", "").lower()

    return (
        request.headers.get("x-requested-with") == "XMLHttpRequest"
        or content_type.startswith("application/json")
        or content_type.endswith("+json")
        or accept.startswith("application/json")
    )


def json_error_response(
    exc: Optional[Exception],
    code: int = 500,
    error: str = "internal_error",
) -> JsonResponse:
    """
    JSON error body. The exception text is only exposed when DEBUG=True.
    """
    if exc is not None and settings.DEBUG:
        message = f"{exc.__class__.__name__}: {exc}"
    else:
        message = error.replace("_", " ").capitalize()

    return JsonResponse(
        {
            "ok": False,
            "error": error,
            "message": message,
            "status": code,
        },
        status=code,
        json_dumps_params={"ensure_ascii": False},
    )


def handle_view_exception(
    request: HttpRequest,
    exc: Optional[Exception],
    code: int = 500,
    error: str = "internal_error",
) -> HttpResponse:
    """
    Generic handler for standard Django views.
    Returns JSON for AJAX/JSON requests; otherwise text/plain.
    """
    if code >= 500:
        log.error("View error %s on %s: %s", code, request.path, exc, exc_info=settings.DEBUG)
    else:
        log.info("View error %s on %s", code, request.path)

    if _is_json_request(request):
        return json_error_response(exc, code=code, error=error)

    if exc is not None and settings.DEBUG:
        message = f"{exc.__class__.__name__}: {exc}"
    else:
        message = error.replace("_", " ").capitalize()

    return HttpResponse(
        message,
        status=code,
        content_type="text/plain; charset=utf-8",
    )
