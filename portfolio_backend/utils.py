from __future__ import annotations

from typing import TYPE_CHECKING

from django.utils import timezone
from rest_framework import serializers

if TYPE_CHECKING:  # import for type checking only
    from datetime import datetime

_DATETIME_FIELD = serializers.DateTimeField()


def iso_timestamp(value: datetime | None = None) -> str:
    """Render ``value`` (default: now) the way the REST API renders datetimes."""

    return _DATETIME_FIELD.to_representation(value or timezone.now())
