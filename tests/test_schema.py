from http import HTTPStatus

import pytest


@pytest.fixture
def schema(client):
    resp = client.get("/api/schema/", {"format": "json"})
    assert resp.status_code == HTTPStatus.OK
    return resp.json()


@pytest.mark.parametrize(
    ("path", "method", "tag"),
    [
        ("/api/analytics/", "get", "Analytics"),
        ("/api/analytics", "get", "Analytics"),
        ("/api/portfolio/skills/", "get", "Portfolio"),
        ("/api/contact/", "post", "Contact"),
        ("/api/contact", "post", "Contact"),
    ],
)
def test_operations_grouped_by_feature(schema, path, method, tag):
    assert schema["paths"][path][method]["tags"] == [tag]


def test_contact_request_body_documented(schema):
    body = schema["paths"]["/api/contact/"]["post"]["requestBody"]
    assert "application/json" in body["content"]
