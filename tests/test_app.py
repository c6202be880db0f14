"""Tests for the application shell: docs, CORS and error shapes."""
from fastapi.testclient import TestClient

from products_api.config import Settings
from products_api.main import create_app


def test_docs_page(client, settings):
    response = client.get("/docs")

    assert response.status_code == 200
    assert "text/html" in response.headers["content-type"]
    assert settings.DOCS_TITLE in response.text


def test_openapi_document(client):
    response = client.get("/openapi.json")

    assert response.status_code == 200
    schema = response.json()
    assert schema["info"]["title"] == "Products REST API"
    paths = schema["paths"]
    assert set(paths["/api/products"]) == {"get", "post"}
    assert set(paths["/api/products/{product_id}"]) == {"get", "put", "patch", "delete"}
    post = paths["/api/products"]["post"]
    assert "requestBody" in post
    assert "400" in post["responses"]


def test_cors_allows_frontend(client, settings):
    response = client.options(
        "/api/products",
        headers={
            "Origin": settings.FRONTEND_URL,
            "Access-Control-Request-Method": "GET",
        },
    )

    assert response.status_code == 200
    assert response.headers["access-control-allow-origin"] == settings.FRONTEND_URL


def test_cors_rejects_other_origins(client):
    response = client.options(
        "/api/products",
        headers={
            "Origin": "http://evil.test",
            "Access-Control-Request-Method": "GET",
        },
    )

    assert response.status_code == 400
    assert "access-control-allow-origin" not in response.headers


def test_unknown_route_uses_error_shape(client):
    response = client.get("/api/unknown")

    assert response.status_code == 404
    assert "error" in response.json()


def test_method_not_allowed_uses_error_shape(client):
    response = client.post("/api/products/1")

    assert response.status_code == 405
    assert "error" in response.json()


def test_app_starts_without_database():
    """A store that cannot be reached is logged, the app still serves requests."""
    settings = Settings(DATABASE_URL="sqlite:////nonexistent-dir/products.db")
    app = create_app(settings)

    with TestClient(app) as client:
        assert client.get("/api/health/").status_code == 200
        assert client.get("/api/health/ready").json()["status"] == "not_ready"
