from __future__ import annotations

from datetime import UTC
from datetime import datetime

import pytest

from portfolio_backend.analytics.aggregator import AnalyticsAggregator
from portfolio_backend.analytics.aggregator import PageViewRecord


def _record(n: int, remote_address: str = "10.0.0.1") -> PageViewRecord:
    return PageViewRecord(
        connection_id=f"sid-{n}",
        page=f"/page-{n}",
        timestamp=datetime(2025, 1, 1, 12, 0, n % 60, tzinfo=UTC),
        user_agent="pytest",
        remote_address=remote_address,
    )


def test_empty_snapshot():
    snap = AnalyticsAggregator().snapshot(live_connections=0)
    assert snap.total_page_views == 0
    assert snap.unique_visitors == 0
    assert snap.live_connections == 0
    assert snap.recent_page_views == ()


def test_record_increments_total_by_exactly_one():
    agg = AnalyticsAggregator()
    for n in range(5):
        before = agg.total_page_views
        agg.record_page_view(_record(n))
        assert agg.total_page_views == before + 1


def test_unique_visitors_counts_distinct_addresses():
    agg = AnalyticsAggregator()
    addresses = ["10.0.0.1", "10.0.0.2", "10.0.0.1", "10.0.0.3", "10.0.0.2"]
    seen: set[str] = set()
    for n, addr in enumerate(addresses):
        before = agg.unique_visitors
        agg.record_page_view(_record(n, remote_address=addr))
        assert agg.unique_visitors - before in {0, 1}
        seen.add(addr)
        assert agg.unique_visitors == len(seen)
    assert agg.unique_visitors == 3  # noqa: PLR2004


@pytest.mark.parametrize("count", [0, 1, 9, 10, 11, 25])
def test_recent_window_length(count):
    agg = AnalyticsAggregator(recent_page_views=10)
    for n in range(count):
        agg.record_page_view(_record(n))
    snap = agg.snapshot(live_connections=1)
    assert len(snap.recent_page_views) == min(10, count)
    assert snap.total_page_views == count


def test_recent_window_keeps_arrival_order():
    agg = AnalyticsAggregator(recent_page_views=3)
    for n in range(5):
        agg.record_page_view(_record(n))
    pages = [r.page for r in agg.snapshot(live_connections=0).recent_page_views]
    assert pages == ["/page-2", "/page-3", "/page-4"]


def test_snapshot_recent_override_does_not_evict_log():
    agg = AnalyticsAggregator(recent_page_views=10)
    for n in range(30):
        agg.record_page_view(_record(n))
    assert len(agg.snapshot(0, recent=20).recent_page_views) == 20  # noqa: PLR2004
    assert len(agg.snapshot(0).recent_page_views) == 10  # noqa: PLR2004
    assert agg.total_page_views == 30  # noqa: PLR2004


def test_snapshot_reports_given_live_connections():
    agg = AnalyticsAggregator()
    assert agg.snapshot(live_connections=7).live_connections == 7  # noqa: PLR2004
