from __future__ import annotations

from typing import Any

from portfolio_backend.portfolio.catalog import CONTACT_THANKS
from portfolio_backend.portfolio.catalog import NEW_SKILLS
from portfolio_backend.utils import iso_timestamp

CONTACT_RESPONSE = "contact_response"
PORTFOLIO_UPDATE = "portfolio_update"


def build_contact_response_payload() -> dict[str, Any]:
    """Acknowledgment for a contact form sent over the socket.

    Status is ``received`` here, unlike the REST endpoint's ``success``:
    nothing is stored or delivered on either path.
    """

    return {
        "status": "received",
        "message": CONTACT_THANKS,
        "timestamp": iso_timestamp(),
    }


def build_portfolio_update_payload() -> dict[str, Any]:
    return {
        "type": "skills_update",
        "data": {
            "newSkills": list(NEW_SKILLS),
            "updatedAt": iso_timestamp(),
        },
    }
