"""Shape checks for inbound Socket.IO event payloads.

Unknown keys are ignored; only the fields a handler cannot do without are
validated. Optional metadata such as a page view's ``userAgent`` is read by
the router directly so a bad value never costs the event.
"""

from __future__ import annotations

from rest_framework import serializers


class PageViewEventSerializer(serializers.Serializer):
    page = serializers.CharField(max_length=2048)


class SkillInteractionEventSerializer(serializers.Serializer):
    skill = serializers.CharField(max_length=200)


class ProjectViewEventSerializer(serializers.Serializer):
    project = serializers.CharField(max_length=200)
