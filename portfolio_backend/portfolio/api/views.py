from __future__ import annotations

import logging

from drf_spectacular.utils import extend_schema
from rest_framework.response import Response
from rest_framework.views import APIView

from portfolio_backend.portfolio.catalog import CONTACT_THANKS
from portfolio_backend.portfolio.catalog import SKILL_CATEGORIES
from portfolio_backend.utils import iso_timestamp

from .serializers import ContactAcknowledgementSerializer
from .serializers import ContactSerializer
from .serializers import SkillCatalogSerializer

logger = logging.getLogger(__name__)


class SkillCatalogView(APIView):
    @extend_schema(tags=["Portfolio"], responses=SkillCatalogSerializer)
    def get(self, request):
        return Response(
            {
                "categories": list(SKILL_CATEGORIES),
                "lastUpdated": iso_timestamp(),
            },
        )


class ContactView(APIView):
    """Acknowledge a contact form.

    Nothing is stored or delivered. Missing or malformed fields are logged
    but never turn the acknowledgment into an error.
    """

    @extend_schema(
        tags=["Contact"],
        request=ContactSerializer,
        responses=ContactAcknowledgementSerializer,
    )
    def post(self, request):
        serializer = ContactSerializer(data=request.data)
        if serializer.is_valid():
            data = serializer.validated_data
        else:
            logger.warning("Malformed contact form fields: %s", serializer.errors)
            data = {}

        missing = ContactSerializer.missing_fields(data)
        if missing:
            logger.warning("Contact form is missing %s", ", ".join(missing))
        logger.info(
            "Contact form submission: %s <%s>",
            data.get("name", ""),
            data.get("email", ""),
        )

        return Response(
            {
                "status": "success",
                "message": CONTACT_THANKS,
                "timestamp": iso_timestamp(),
            },
        )
