from __future__ import annotations

from rest_framework import serializers


class PageViewRecordSerializer(serializers.Serializer):
    """Read serializer for a recorded page view.

    Keys follow the camelCase shape the frontend already consumes.
    """

    id = serializers.CharField(source="connection_id")
    page = serializers.CharField()
    timestamp = serializers.DateTimeField()
    userAgent = serializers.CharField(source="user_agent", allow_blank=True)  # noqa: N815
    ip = serializers.CharField(source="remote_address")


class VisitorAnalyticsSerializer(serializers.Serializer):
    """Payload of the ``visitor_analytics`` Socket.IO event."""

    totalPageViews = serializers.IntegerField(source="total_page_views")  # noqa: N815
    uniqueVisitors = serializers.IntegerField(source="unique_visitors")  # noqa: N815
    realtimeUsers = serializers.IntegerField(source="live_connections")  # noqa: N815
    recentPageViews = PageViewRecordSerializer(  # noqa: N815
        source="recent_page_views",
        many=True,
    )


class AnalyticsSummarySerializer(serializers.Serializer):
    """Response of ``GET /api/analytics``."""

    totalPageViews = serializers.IntegerField(source="total_page_views")  # noqa: N815
    uniqueVisitors = serializers.IntegerField(source="unique_visitors")  # noqa: N815
    realtimeUsers = serializers.IntegerField(source="live_connections")  # noqa: N815
    recentActivity = PageViewRecordSerializer(  # noqa: N815
        source="recent_page_views",
        many=True,
    )
