from django.urls import resolve
from django.urls import reverse


def test_api_routes():
    assert reverse("api:analytics") == "/api/analytics/"
    assert resolve("/api/analytics").view_name == "api:analytics-noslash"
    assert reverse("api:portfolio-skills") == "/api/portfolio/skills/"
    assert resolve("/api/portfolio/skills").view_name == "api:portfolio-skills-noslash"
    assert reverse("api:contact") == "/api/contact/"
    assert resolve("/api/contact").view_name == "api:contact-noslash"


def test_health_route():
    assert reverse("health") == "/health/"
    assert resolve("/health").view_name == "health-noslash"


def test_schema_docs_available():
    assert resolve("/api/schema/").view_name == "api-schema"
    assert resolve("/api/docs/").view_name == "api-docs"
