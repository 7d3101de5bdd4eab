from __future__ import annotations

from typing import Any

from rest_framework import serializers

CONTACT_FIELDS = ("name", "email", "message")


class ContactSerializer(serializers.Serializer):
    """Contact form submission.

    Validation is loose: any field may be missing or blank and the
    submission is still acknowledged. ``missing_fields`` reports what was
    left out so callers can log it.
    """

    name = serializers.CharField(required=False, allow_blank=True)
    email = serializers.CharField(required=False, allow_blank=True)
    message = serializers.CharField(required=False, allow_blank=True)

    @staticmethod
    def missing_fields(data: dict[str, Any]) -> list[str]:
        return [name for name in CONTACT_FIELDS if not data.get(name)]


class ContactAcknowledgementSerializer(serializers.Serializer):
    status = serializers.CharField()
    message = serializers.CharField()
    timestamp = serializers.CharField()


class SkillCatalogSerializer(serializers.Serializer):
    categories = serializers.ListField(child=serializers.CharField())
    lastUpdated = serializers.CharField()  # noqa: N815
