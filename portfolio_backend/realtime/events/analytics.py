from __future__ import annotations

from typing import TYPE_CHECKING
from typing import Any

from portfolio_backend.analytics.api.serializers import VisitorAnalyticsSerializer
from portfolio_backend.utils import iso_timestamp

if TYPE_CHECKING:  # import for type checking only
    from portfolio_backend.analytics.aggregator import AggregateSnapshot

USER_COUNT = "user_count"
VISITOR_ANALYTICS = "visitor_analytics"
SKILL_POPULAR = "skill_popular"
PROJECT_ACTIVITY = "project_activity"


def build_user_count_payload(count: int) -> dict[str, Any]:
    return {"count": count}


def build_visitor_analytics_payload(snapshot: AggregateSnapshot) -> dict[str, Any]:
    return dict(VisitorAnalyticsSerializer(snapshot).data)


def build_skill_popular_payload(skill: str) -> dict[str, Any]:
    return {"skill": skill, "timestamp": iso_timestamp()}


def build_project_activity_payload(project: str) -> dict[str, Any]:
    return {"project": project, "timestamp": iso_timestamp()}
