"""In-memory visitor analytics.

State lives for the lifetime of the process only. The page-view log is never
evicted; snapshots read a trailing slice of it.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:  # import for type checking only
    from datetime import datetime

DEFAULT_RECENT_PAGE_VIEWS = 10


@dataclass(frozen=True)
class PageViewRecord:
    connection_id: str
    page: str
    timestamp: datetime
    user_agent: str
    remote_address: str


@dataclass(frozen=True)
class AggregateSnapshot:
    total_page_views: int
    unique_visitors: int
    live_connections: int
    recent_page_views: tuple[PageViewRecord, ...]


class AnalyticsAggregator:
    """Page-view log plus the set of distinct remote addresses ever seen."""

    def __init__(self, recent_page_views: int = DEFAULT_RECENT_PAGE_VIEWS):
        self.recent_page_views = max(0, int(recent_page_views))
        self._page_views: list[PageViewRecord] = []
        self._visitors: set[str] = set()

    @property
    def total_page_views(self) -> int:
        return len(self._page_views)

    @property
    def unique_visitors(self) -> int:
        return len(self._visitors)

    def record_page_view(self, record: PageViewRecord) -> None:
        self._page_views.append(record)
        self._visitors.add(record.remote_address)

    def recent(self, limit: int | None = None) -> tuple[PageViewRecord, ...]:
        """Return the last ``limit`` records, oldest first."""
        if limit is None:
            limit = self.recent_page_views
        if limit <= 0:
            return ()
        return tuple(self._page_views[-limit:])

    def snapshot(
        self,
        live_connections: int,
        recent: int | None = None,
    ) -> AggregateSnapshot:
        return AggregateSnapshot(
            total_page_views=self.total_page_views,
            unique_visitors=self.unique_visitors,
            live_connections=live_connections,
            recent_page_views=self.recent(recent),
        )
