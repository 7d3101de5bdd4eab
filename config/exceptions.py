"""Top-level error handling for the JSON API.

DRF keeps its own responses for API errors (validation, parse, throttling).
Anything else is logged and answered with a generic 500 body, which is also
what Django's ``handler500`` renders for non-DRF views.
"""

from __future__ import annotations

import logging
from typing import Any

from django.conf import settings
from django.http import JsonResponse
from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import exception_handler

logger = logging.getLogger(__name__)

GENERIC_ERROR = "Something went wrong!"


def error_body(exc: BaseException | None = None) -> dict[str, str]:
    detail = str(exc) if settings.DEBUG and exc is not None else "Internal server error"
    return {"error": GENERIC_ERROR, "message": detail}


def api_exception_handler(exc: Exception, context: dict[str, Any]) -> Response:
    response = exception_handler(exc, context)
    if response is not None:
        return response

    view = context.get("view")
    logger.exception(
        "Unhandled exception in %s",
        type(view).__name__ if view is not None else "API view",
        exc_info=exc,
    )
    return Response(error_body(exc), status=status.HTTP_500_INTERNAL_SERVER_ERROR)


def not_found(request, exception=None):
    return JsonResponse(
        {"error": "Not Found", "path": request.path},
        status=status.HTTP_404_NOT_FOUND,
    )


def server_error(request):
    return JsonResponse(error_body(), status=status.HTTP_500_INTERNAL_SERVER_ERROR)
