"""
API response and contract tests: health probes, headers, error payloads.
"""

from fastapi.testclient import TestClient


def test_health_ok(client: TestClient) -> None:
    r = client.get("/health")
    assert r.status_code == 200
    data = r.json()
    assert data["status"] == "ok"
    assert "furniture-store" in data.get("service", "")


def test_health_ready_reports_stores(client: TestClient, register) -> None:
    register()
    r = client.get("/health/ready")
    assert r.status_code == 200
    data = r.json()
    assert data["ready"] is True
    assert data["checks"]["user_service"] == "ok (1 records)"
    assert data["checks"]["furniture_service"] == "ok (0 records)"


def test_health_live(client: TestClient) -> None:
    r = client.get("/health/live")
    assert r.status_code == 200


def test_secure_headers_present(client: TestClient) -> None:
    r = client.get("/health")
    assert r.headers.get("X-Content-Type-Options") == "nosniff"
    assert r.headers.get("X-Frame-Options") == "DENY"
    assert "X-Response-Time-Ms" in r.headers


def test_error_payload_shape(client: TestClient) -> None:
    r = client.get("/api/v1/furniture/5f0c1d2e3a4b5c6d7e8f9a0b")
    assert r.status_code == 404
    data = r.json()
    assert data["code"] == "id_not_found"
    assert "not found" in data["detail"]
    assert "timestamp" in data


def test_validation_error_payload(client: TestClient) -> None:
    r = client.post("/api/v1/users", json={})
    assert r.status_code == 422
    assert isinstance(r.json()["detail"], list)


def test_openapi_lists_resources(client: TestClient) -> None:
    r = client.get("/openapi.json")
    assert r.status_code == 200
    paths = r.json()["paths"]
    assert "/api/v1/users" in paths
    assert "/api/v1/users/{user_id}" in paths
    assert "/api/v1/furniture" in paths


def test_debug_flag_follows_settings(client: TestClient) -> None:
    from core.config import get_settings

    assert client.app.debug is get_settings().DEBUG
