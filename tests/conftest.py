"""Pytest configuration and fixtures"""
import pytest
from fastapi.testclient import TestClient
from sqlmodel import Session

from storefront.core.config import Settings
from storefront.db.session import build_engine, create_db_and_tables
from storefront.main import create_app

TEST_SECRET = "test-secret"


@pytest.fixture
def settings():
    """Settings isolated from the process environment and .env"""
    return Settings(
        _env_file=None,
        DATABASE_URL="sqlite://",
        SECRET_KEY=TEST_SECRET,
        FRONTEND_URL="https://shop.example.com",
    )


@pytest.fixture
def app(settings):
    return create_app(settings)


@pytest.fixture
def client(app):
    """Test client; entering it runs startup (tables + seed)"""
    with TestClient(app) as c:
        yield c


@pytest.fixture
def engine():
    engine = build_engine("sqlite://")
    create_db_and_tables(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session(engine):
    with Session(engine) as session:
        yield session


def register(client, name="Alice", email="alice@example.com", password="s3cret-pass"):
    return client.post(
        "/api/auth/register",
        json={"name": name, "email": email, "password": password},
    )


@pytest.fixture
def auth_headers(client):
    """Authorization header for a freshly registered user"""
    response = register(client)
    assert response.status_code == 201
    return {"Authorization": f"Bearer {response.json()['token']}"}


@pytest.fixture
def item_ids(client):
    """Seeded item ids keyed by name"""
    return {item["name"]: item["id"] for item in client.get("/api/items").json()}
