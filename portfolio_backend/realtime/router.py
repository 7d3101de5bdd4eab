"""Dispatch of inbound Socket.IO events.

Every handler finishes its state mutation before its first ``await``, so with
a single event loop no two events can interleave a partial update.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING
from typing import Any

from django.utils import timezone

from portfolio_backend.analytics.aggregator import PageViewRecord
from portfolio_backend.portfolio.api.serializers import ContactSerializer
from portfolio_backend.realtime.events import analytics as analytics_events
from portfolio_backend.realtime.events import portfolio as portfolio_events
from portfolio_backend.realtime.serializers import PageViewEventSerializer
from portfolio_backend.realtime.serializers import ProjectViewEventSerializer
from portfolio_backend.realtime.serializers import SkillInteractionEventSerializer

if TYPE_CHECKING:  # import for type checking only
    from collections.abc import Awaitable
    from collections.abc import Callable

    from rest_framework.serializers import Serializer

    from portfolio_backend.analytics.aggregator import AnalyticsAggregator
    from portfolio_backend.realtime.broadcast import Broadcaster
    from portfolio_backend.realtime.registry import ConnectionRegistry

logger = logging.getLogger(__name__)

MAX_USER_AGENT_LENGTH = 1024


class EventRouter:
    """Connection lifecycle and named-event handling for the analytics socket."""

    def __init__(
        self,
        *,
        registry: ConnectionRegistry,
        aggregator: AnalyticsAggregator,
        broadcaster: Broadcaster,
    ):
        self.registry = registry
        self.aggregator = aggregator
        self.broadcaster = broadcaster
        self.handlers: dict[str, Callable[[str, Any], Awaitable[None]]] = {
            "page_view": self.page_view,
            "skill_interaction": self.skill_interaction,
            "project_view": self.project_view,
            "contact_form": self.contact_form,
            "request_portfolio_update": self.request_portfolio_update,
        }

    # Lifecycle ---------------------------------------------------------------

    async def handle_connect(
        self,
        sid: str,
        remote_address: str,
        user_agent: str = "",
    ) -> None:
        self.registry.connect(sid, remote_address, user_agent)
        count = self.registry.live_count
        logger.info("User connected: %s, Total users: %s", sid, count)
        await self._broadcast_user_count(count)

    async def handle_disconnect(self, sid: str) -> None:
        if self.registry.disconnect(sid) is None:
            return
        count = self.registry.live_count
        logger.info("User disconnected: %s, Total users: %s", sid, count)
        await self._broadcast_user_count(count)

    async def _broadcast_user_count(self, count: int) -> None:
        await self.broadcaster.to_all(
            analytics_events.USER_COUNT,
            analytics_events.build_user_count_payload(count),
        )

    # Events ------------------------------------------------------------------

    async def dispatch(self, sid: str, event: str, payload: Any = None) -> bool:
        """Run the handler registered for ``event``.

        Returns False, without raising, when no handler matches.
        """

        handler = self.handlers.get(event)
        if handler is None:
            logger.debug("Ignoring unknown event %r from %s", event, sid)
            return False
        await handler(sid, payload)
        return True

    async def page_view(self, sid: str, payload: Any) -> None:
        data = _validated(PageViewEventSerializer, sid, "page_view", payload)
        if data is None:
            return

        conn = self.registry.get(sid)
        remote_address = conn.remote_address if conn else ""
        user_agent = _clean_user_agent(payload.get("userAgent")) or (
            conn.user_agent if conn else ""
        )
        self.aggregator.record_page_view(
            PageViewRecord(
                connection_id=sid,
                page=data["page"],
                timestamp=timezone.now(),
                user_agent=user_agent,
                remote_address=remote_address,
            ),
        )
        snapshot = self.aggregator.snapshot(self.registry.live_count)
        logger.info("Page view: %s from %s", data["page"], sid)

        await self.broadcaster.to_all(
            analytics_events.VISITOR_ANALYTICS,
            analytics_events.build_visitor_analytics_payload(snapshot),
        )

    async def skill_interaction(self, sid: str, payload: Any) -> None:
        data = _validated(SkillInteractionEventSerializer, sid, "skill_interaction", payload)
        if data is None:
            return

        logger.info("Skill interaction: %s by %s", data["skill"], sid)
        await self.broadcaster.to_all_except(
            sid,
            analytics_events.SKILL_POPULAR,
            analytics_events.build_skill_popular_payload(data["skill"]),
        )

    async def project_view(self, sid: str, payload: Any) -> None:
        data = _validated(ProjectViewEventSerializer, sid, "project_view", payload)
        if data is None:
            return

        logger.info("Project viewed: %s by %s", data["project"], sid)
        await self.broadcaster.to_all_except(
            sid,
            analytics_events.PROJECT_ACTIVITY,
            analytics_events.build_project_activity_payload(data["project"]),
        )

    async def contact_form(self, sid: str, payload: Any) -> None:
        # Always acknowledged; malformed fields only show up in the log.
        serializer = ContactSerializer(data=payload if isinstance(payload, dict) else {})
        data = serializer.validated_data if serializer.is_valid() else {}
        missing = ContactSerializer.missing_fields(data)
        if missing:
            logger.warning(
                "Contact form from %s is missing %s",
                sid,
                ", ".join(missing),
            )
        logger.info("Contact form submission from %s", sid)

        await self.broadcaster.to_connection(
            sid,
            portfolio_events.CONTACT_RESPONSE,
            portfolio_events.build_contact_response_payload(),
        )

    async def request_portfolio_update(self, sid: str, payload: Any) -> None:
        _ = payload
        await self.broadcaster.to_connection(
            sid,
            portfolio_events.PORTFOLIO_UPDATE,
            portfolio_events.build_portfolio_update_payload(),
        )


def _clean_user_agent(value: Any) -> str:
    """Payload User-Agent truncated to a sane length, or "" when unusable."""

    if not isinstance(value, str):
        return ""
    return value.strip()[:MAX_USER_AGENT_LENGTH]


def _validated(
    serializer_class: type[Serializer],
    sid: str,
    event: str,
    payload: Any,
) -> dict[str, Any] | None:
    """Return the validated payload, or None after logging why it was dropped."""

    if not isinstance(payload, dict):
        logger.warning(
            "Dropping %s from %s: payload is %s, not an object",
            event,
            sid,
            type(payload).__name__,
        )
        return None
    serializer = serializer_class(data=payload)
    if not serializer.is_valid():
        logger.warning("Dropping %s from %s: %s", event, sid, serializer.errors)
        return None
    return serializer.validated_data
