"""Smoke checks against the real application object."""

from fastapi.testclient import TestClient

from api import app


def test_application_routes_respond():
    with TestClient(app) as client:
        assert client.get("/health").json() == {"status": "healthy"}
        assert client.get("/api/v1/stores", params={"enabled_only": "true"}).status_code == 200
        assert client.get("/api/v1/stores/myntra/bookmarklet").status_code == 200
        assert client.get("/api/v1/proxy", params={"url": "https://evil.example.com/a.jpg"}).status_code == 403


def test_openapi_schema_lists_import_routes():
    schema = app.openapi()

    assert "/api/v1/imports/parse" in schema["paths"]
    assert "/api/v1/images/compress" in schema["paths"]
