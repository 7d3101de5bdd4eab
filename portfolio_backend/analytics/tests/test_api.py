from __future__ import annotations

from http import HTTPStatus

from django.utils import timezone
from rest_framework.test import APIRequestFactory

from portfolio_backend.analytics.aggregator import AnalyticsAggregator
from portfolio_backend.analytics.aggregator import PageViewRecord
from portfolio_backend.analytics.api.views import AnalyticsView
from portfolio_backend.realtime import socketio as realtime
from portfolio_backend.realtime.registry import ConnectionRegistry


def _fill(aggregator: AnalyticsAggregator, count: int) -> None:
    for n in range(count):
        aggregator.record_page_view(
            PageViewRecord(
                connection_id="sid-a",
                page=f"/p{n}",
                timestamp=timezone.now(),
                user_agent="pytest",
                remote_address=f"10.0.0.{n % 4}",
            ),
        )


class TestAnalyticsView:
    def setup_method(self):
        self.factory = APIRequestFactory()
        self.registry = ConnectionRegistry()
        self.aggregator = AnalyticsAggregator()
        self.view = AnalyticsView.as_view(
            aggregator=self.aggregator,
            registry=self.registry,
        )

    def test_empty_state(self):
        res = self.view(self.factory.get("/api/analytics"))
        assert res.status_code == HTTPStatus.OK
        assert res.data == {
            "totalPageViews": 0,
            "uniqueVisitors": 0,
            "realtimeUsers": 0,
            "recentActivity": [],
        }

    def test_recent_activity_is_last_20(self):
        _fill(self.aggregator, 25)
        self.registry.connect("sid-a", "10.0.0.1")
        self.registry.connect("sid-b", "10.0.0.2")

        res = self.view(self.factory.get("/api/analytics"))
        assert res.status_code == HTTPStatus.OK
        assert res.data["totalPageViews"] == 25  # noqa: PLR2004
        assert res.data["uniqueVisitors"] == 4  # noqa: PLR2004
        assert res.data["realtimeUsers"] == 2  # noqa: PLR2004
        pages = [r["page"] for r in res.data["recentActivity"]]
        assert pages == [f"/p{n}" for n in range(5, 25)]

    def test_record_shape(self):
        _fill(self.aggregator, 1)
        res = self.view(self.factory.get("/api/analytics"))
        record = res.data["recentActivity"][0]
        assert set(record) == {"id", "page", "timestamp", "userAgent", "ip"}
        assert record["id"] == "sid-a"
        assert record["ip"] == "10.0.0.0"
        assert record["timestamp"].endswith("Z")


def test_url_reads_process_state(client):
    before = client.get("/api/analytics").json()["totalPageViews"]
    _fill(realtime.aggregator, 1)

    for url in ("/api/analytics", "/api/analytics/"):
        res = client.get(url)
        assert res.status_code == HTTPStatus.OK
        assert res.json()["totalPageViews"] == before + 1
