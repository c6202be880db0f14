import pytest
from fastapi.testclient import TestClient

from products_api.config import Settings
from products_api.main import create_app

FRONTEND_URL = "http://frontend.test"


@pytest.fixture(scope="function")
def settings():
    """Settings pointing at an in-memory SQLite database."""
    return Settings(DATABASE_URL="sqlite://", FRONTEND_URL=FRONTEND_URL, LOG_LEVEL="WARNING")


@pytest.fixture(scope="function")
def client(settings):
    """Create test client with fresh database for each test."""
    app = create_app(settings)

    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture(scope="function")
def db_session(client):
    """Database session bound to the test client's store."""
    session = client.app.state.database.SessionLocal()

    yield session

    session.close()


@pytest.fixture(scope="function")
def product(client):
    """A product created through the API."""
    response = client.post(
        "/api/products",
        json={"name": "Monitor curvo", "price": 350.5}
    )
    assert response.status_code == 201
    return response.json()["data"]
