"""
Pytest fixtures: test client on a fresh app, auth headers, user factories.
"""

from collections.abc import Callable
from typing import Any

import pytest
from fastapi.testclient import TestClient

from core.security import create_access_token
from main import create_app

USERS_URL = "/api/v1/users"
FURNITURE_URL = "/api/v1/furniture"

ADMIN_ID = "0" * 23 + "a"


def make_user_body(**overrides: Any) -> dict[str, Any]:
    body = {
        "firstName": "Ada",
        "lastName": "Lovelace",
        "email": "ada@example.com",
        "password": "analytical-engine",
        "phone": "555-0100",
        "address": [
            {
                "country": "UK",
                "state": "London",
                "street": "St James's Square",
                "city": "London",
                "roomNumber": "12",
            }
        ],
    }
    body.update(overrides)
    return body


@pytest.fixture
def client() -> TestClient:
    """Test client with its own app, so repositories start empty for every test."""
    return TestClient(create_app())


@pytest.fixture
def admin_headers() -> dict[str, str]:
    token = create_access_token(ADMIN_ID, email="admin@example.com", role="ADMIN")
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def user_body() -> Callable[..., dict[str, Any]]:
    return make_user_body


@pytest.fixture
def register(client: TestClient) -> Callable[..., dict[str, Any]]:
    """
    Create a user through the API and log in.
    Returns the created user plus bearer headers for that user.
    """

    def _register(**overrides: Any) -> dict[str, Any]:
        body = make_user_body(**overrides)
        r = client.post(USERS_URL, json=body)
        assert r.status_code == 201, r.text
        user = r.json()["result"]
        login = client.post(f"{USERS_URL}/login", json={"email": body["email"], "password": body["password"]})
        assert login.status_code == 200, login.text
        token = login.json()["result"]["token"]
        return {"user": user, "headers": {"Authorization": f"Bearer {token}"}}

    return _register
