from __future__ import annotations

import time
from typing import Any

from django.conf import settings
from django.http import JsonResponse

from portfolio_backend.realtime import socketio as realtime
from portfolio_backend.utils import iso_timestamp

# Imported while the URLconf loads, i.e. at process start.
PROCESS_STARTED_AT = time.monotonic()


def uptime_seconds() -> float:
    return time.monotonic() - PROCESS_STARTED_AT


def check_realtime() -> dict[str, Any]:
    try:
        live = realtime.registry.live_count
    except Exception as exc:  # noqa: BLE001 - health must degrade, not crash
        return {"ok": False, "error": str(exc)}
    else:
        return {"ok": True, "liveConnections": live}


def health(request):
    components = {"realtime": check_realtime()}
    all_ok = all(v.get("ok", False) for v in components.values())

    return JsonResponse(
        {
            "status": "healthy" if all_ok else "degraded",
            "timestamp": iso_timestamp(),
            "uptime": uptime_seconds(),
            "environment": settings.ENVIRONMENT,
            "components": components,
        },
        status=200 if all_ok else 503,
    )
