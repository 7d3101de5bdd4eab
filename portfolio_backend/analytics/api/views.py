from __future__ import annotations

from typing import TYPE_CHECKING

from django.conf import settings
from drf_spectacular.utils import extend_schema
from rest_framework.response import Response
from rest_framework.views import APIView

from .serializers import AnalyticsSummarySerializer

if TYPE_CHECKING:  # import for type checking only
    from portfolio_backend.analytics.aggregator import AnalyticsAggregator
    from portfolio_backend.realtime.registry import ConnectionRegistry


class AnalyticsView(APIView):
    """Point-in-time analytics snapshot.

    The aggregator and registry are injected through ``as_view`` so the view
    reads the same process-wide state the Socket.IO router mutates.
    """

    aggregator: AnalyticsAggregator | None = None
    registry: ConnectionRegistry | None = None

    @extend_schema(tags=["Analytics"], responses=AnalyticsSummarySerializer)
    def get(self, request):
        snapshot = self.aggregator.snapshot(
            self.registry.live_count,
            recent=settings.ANALYTICS_RECENT_ACTIVITY,
        )
        return Response(AnalyticsSummarySerializer(snapshot).data)
