"""Fan-out helpers over a Socket.IO server.

The wrapped server only needs python-socketio's ``AsyncServer.emit`` keyword
interface (``to`` and ``skip_sid``), which keeps the router testable with a
recording fake.
"""

from __future__ import annotations

from typing import Any
from typing import Protocol


class Emitter(Protocol):
    async def emit(
        self,
        event: str,
        data: Any = None,
        to: str | None = None,
        skip_sid: str | None = None,
    ) -> None: ...


class Broadcaster:
    def __init__(self, server: Emitter):
        self.server = server

    async def to_all(self, event: str, payload: dict[str, Any]) -> None:
        await self.server.emit(event, payload)

    async def to_all_except(
        self,
        sid: str,
        event: str,
        payload: dict[str, Any],
    ) -> None:
        await self.server.emit(event, payload, skip_sid=sid)

    async def to_connection(
        self,
        sid: str,
        event: str,
        payload: dict[str, Any],
    ) -> None:
        await self.server.emit(event, payload, to=sid)
