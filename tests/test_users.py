"""
Tests for the user API stub and the root routes.

Run with: python -m pytest tests/test_users.py
"""

from unittest.mock import patch

from fastapi.testclient import TestClient

from main import app

client = TestClient(app)


def test_root_welcome_banner():
    """Test that GET / returns the welcome text."""
    response = client.get("/")
    assert response.status_code == 200
    assert response.text == "Welcome to SafeSteps API"


def test_users_root():
    response = client.get("/api/users")
    assert response.status_code == 200
    assert response.text == "User route"


def test_create_user_echoes_body():
    """Test POST /api/users returns 201 and the body untouched."""
    response = client.post("/api/users", json={"name": "A"})

    assert response.status_code == 201
    assert response.json() == {"message": "User created", "user": {"name": "A"}}


def test_create_user_does_not_validate():
    """Arbitrary shapes are passed straight through."""
    body = {"name": 3, "tags": ["x", "y"], "nested": {"ok": None}}
    response = client.post("/api/users", json=body)

    assert response.status_code == 201
    assert response.json()["user"] == body


def test_create_user_without_body():
    response = client.post("/api/users")

    assert response.status_code == 201
    assert response.json() == {"message": "User created", "user": {}}


def test_create_user_ignores_form_body():
    """Non-JSON bodies are not parsed and echo as an empty user."""
    response = client.post(
        "/api/users",
        content="name=A",
        headers={"Content-Type": "application/x-www-form-urlencoded"},
    )

    assert response.status_code == 201
    assert response.json() == {"message": "User created", "user": {}}


def test_create_user_ignores_plain_text_body():
    response = client.post(
        "/api/users",
        content='{"name": "A"}',
        headers={"Content-Type": "text/plain"},
    )

    assert response.status_code == 201
    assert response.json()["user"] == {}


def test_create_user_json_with_charset():
    response = client.post(
        "/api/users",
        content='{"name": "A"}',
        headers={"Content-Type": "application/json; charset=utf-8"},
    )

    assert response.status_code == 201
    assert response.json()["user"] == {"name": "A"}


def test_create_user_invalid_json():
    """Malformed JSON is rejected by the framework default handling."""
    response = client.post(
        "/api/users",
        content='{"name": ',
        headers={"Content-Type": "application/json"},
    )
    assert response.status_code == 422


def test_list_users_is_static():
    """Test GET /api/users/all ignores the request and returns the placeholder."""
    first = client.get("/api/users/all")
    second = client.get("/api/users/all", params={"limit": 5}, headers={"X-Anything": "1"})

    assert first.status_code == 200
    assert first.json() == {"message": "List of users"}
    assert second.json() == first.json()


def test_cors_allows_any_origin():
    response = client.get("/api/users/all", headers={"Origin": "http://example.com"})
    assert response.headers["access-control-allow-origin"] == "*"


def test_health_reports_database_state():
    with patch("database.is_connected", return_value=True):
        response = client.get("/api/health")
    assert response.json() == {"status": "ok", "database": "connected"}

    with patch("database.is_connected", return_value=False):
        response = client.get("/api/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok", "database": "disconnected"}


def test_startup_survives_database_failure():
    """The app still serves requests when the database is unreachable."""
    with patch("database.load_config", return_value={"database_url": "not a url"}):
        with TestClient(app) as startup_client:
            response = startup_client.post("/api/users", json={"name": "B"})
            health = startup_client.get("/api/health")

    assert response.status_code == 201
    assert health.json()["database"] == "disconnected"
