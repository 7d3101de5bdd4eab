from __future__ import annotations

from dataclasses import dataclass
from dataclasses import field
from datetime import datetime

from django.utils import timezone


@dataclass(frozen=True)
class Connection:
    sid: str
    remote_address: str
    user_agent: str = ""
    connected_at: datetime = field(default_factory=timezone.now)


class ConnectionRegistry:
    """Currently open Socket.IO sessions, keyed by sid.

    ``live_count`` is derived from the mapping, so it always equals the number
    of open connections and can never go negative.
    """

    def __init__(self):
        self._connections: dict[str, Connection] = {}

    def __contains__(self, sid: object) -> bool:
        return sid in self._connections

    @property
    def live_count(self) -> int:
        return len(self._connections)

    def connect(
        self,
        sid: str,
        remote_address: str,
        user_agent: str = "",
    ) -> Connection:
        conn = Connection(sid=sid, remote_address=remote_address, user_agent=user_agent)
        self._connections[sid] = conn
        return conn

    def disconnect(self, sid: str) -> Connection | None:
        # Unknown sids are ignored so a repeated disconnect is harmless.
        return self._connections.pop(sid, None)

    def get(self, sid: str) -> Connection | None:
        return self._connections.get(sid)

    def sids(self) -> list[str]:
        return list(self._connections)
