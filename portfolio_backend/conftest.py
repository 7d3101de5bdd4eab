from __future__ import annotations

from typing import Any

import pytest

from portfolio_backend.analytics.aggregator import AnalyticsAggregator
from portfolio_backend.realtime.broadcast import Broadcaster
from portfolio_backend.realtime.registry import ConnectionRegistry
from portfolio_backend.realtime.router import EventRouter


class RecordingServer:
    """Stand-in for ``socketio.AsyncServer`` that records who got what.

    Broadcast targets are resolved against the registry, the same way the
    real server resolves them against its connected sessions.
    """

    def __init__(self, registry: ConnectionRegistry):
        self.registry = registry
        self.deliveries: list[tuple[str, str, Any]] = []

    async def emit(self, event, data=None, to=None, skip_sid=None, **kwargs):
        if to is not None:
            recipients = [to] if to in self.registry else []
        else:
            recipients = [sid for sid in self.registry.sids() if sid != skip_sid]
        for sid in recipients:
            self.deliveries.append((sid, event, data))

    def received(self, sid: str, event: str | None = None) -> list[Any]:
        return [
            data
            for to, name, data in self.deliveries
            if to == sid and (event is None or name == event)
        ]

    def recipients(self, event: str) -> set[str]:
        return {to for to, name, _ in self.deliveries if name == event}


@pytest.fixture
def registry() -> ConnectionRegistry:
    return ConnectionRegistry()


@pytest.fixture
def aggregator() -> AnalyticsAggregator:
    return AnalyticsAggregator(recent_page_views=10)


@pytest.fixture
def server(registry: ConnectionRegistry) -> RecordingServer:
    return RecordingServer(registry)


@pytest.fixture
def router(
    registry: ConnectionRegistry,
    aggregator: AnalyticsAggregator,
    server: RecordingServer,
) -> EventRouter:
    return EventRouter(
        registry=registry,
        aggregator=aggregator,
        broadcaster=Broadcaster(server),
    )
