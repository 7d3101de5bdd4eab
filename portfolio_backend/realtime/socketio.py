"""Global Socket.IO server for the portfolio frontend.

Current frontend convention:
- URL base: ws://<host>:3001
- Socket.IO path: /socket.io/ (library default)
- transports: websocket, falling back to HTTP long-polling
- No auth: every visitor is anonymous.

This module is the composition root of the realtime analytics: one registry,
one aggregator and one router per process, created at import time and kept
for the life of the process.
"""

from __future__ import annotations

import logging
from typing import Any

import socketio
from django.conf import settings

from portfolio_backend.analytics.aggregator import AnalyticsAggregator
from portfolio_backend.realtime.broadcast import Broadcaster
from portfolio_backend.realtime.registry import ConnectionRegistry
from portfolio_backend.realtime.router import EventRouter

logger = logging.getLogger(__name__)


sio = socketio.AsyncServer(
    async_mode="asgi",
    cors_allowed_origins=settings.SOCKETIO_CORS_ALLOWED_ORIGINS,
    # Send the CONNECT ack before our connect handler runs, so the new client
    # also receives the user_count broadcast emitted from it.
    always_connect=True,
    logger=False,
    engineio_logger=False,
)

registry = ConnectionRegistry()
aggregator = AnalyticsAggregator(
    recent_page_views=settings.ANALYTICS_RECENT_PAGE_VIEWS,
)
router = EventRouter(
    registry=registry,
    aggregator=aggregator,
    broadcaster=Broadcaster(sio),
)


def _asgi_scope(environ: dict[str, Any]) -> dict[str, Any]:
    inner = environ.get("asgi.scope") if isinstance(environ, dict) else None
    return inner if isinstance(inner, dict) else {}


def _header(environ: dict[str, Any], name: str) -> str:
    """Read a request header from either a WSGI environ or the ASGI scope."""

    wsgi_key = "HTTP_" + name.upper().replace("-", "_")
    value = environ.get(wsgi_key) if isinstance(environ, dict) else None
    if isinstance(value, str) and value:
        return value

    wanted = name.lower().encode("latin-1")
    for key, raw in _asgi_scope(environ).get("headers", []):
        if key.lower() == wanted:
            return raw.decode("latin-1")
    return ""


def _extract_remote_address(environ: dict[str, Any]) -> str:
    """Best-effort client address for the unique-visitor set.

    Handles python-socketio environ shapes across ASGI/WSGI servers. The
    engine.io ASGI driver hardcodes ``REMOTE_ADDR``, so the scope's
    ``client`` is preferred over it.
    """

    forwarded = _header(environ, "X-Forwarded-For")
    if forwarded:
        first_hop = forwarded.split(",")[0].strip()
        if first_hop:
            return first_hop

    client = _asgi_scope(environ).get("client")
    if client:
        return str(client[0])

    remote_addr = environ.get("REMOTE_ADDR") if isinstance(environ, dict) else None
    return str(remote_addr or "")


@sio.event
async def connect(sid: str, environ: dict[str, Any], auth: Any | None = None):
    _ = auth
    await router.handle_connect(
        sid,
        _extract_remote_address(environ),
        _header(environ, "User-Agent"),
    )


@sio.event
async def disconnect(sid: str, reason: Any | None = None):
    _ = reason
    await router.handle_disconnect(sid)


@sio.on("*")
async def any_event(event: str, sid: str, *args: Any):
    """Forward every named event to the router; unknown names are dropped there."""

    payload = args[0] if args else None
    await router.dispatch(sid, event, payload)
