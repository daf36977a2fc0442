"""Tests for health endpoints."""

from fastapi.testclient import TestClient


def test_health_endpoint(test_client: TestClient) -> None:
    """Test the basic health endpoint."""
    response = test_client.get("/health")

    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "healthy"
    assert "version" in data


def test_readiness_endpoint(test_client: TestClient) -> None:
    """Test the readiness endpoint reaches the database."""
    response = test_client.get("/health/ready")

    assert response.status_code == 200
    assert response.json() == {"ready": True, "database": True, "media_storage": True}


def test_liveness_endpoint(test_client: TestClient) -> None:
    """Test the liveness probe endpoint."""
    response = test_client.get("/health/live")

    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "alive"


def test_root_endpoint(test_client: TestClient) -> None:
    """Test the root endpoint."""
    response = test_client.get("/")

    assert response.status_code == 200
    data = response.json()
    assert data["name"] == "MediaShare"
    assert "version" in data
    assert "docs" in data


def test_request_id_echoed(test_client: TestClient) -> None:
    """Test a supplied request id comes back on the response."""
    response = test_client.get("/health", headers={"X-Request-ID": "abc123"})

    assert response.headers["X-Request-ID"] == "abc123"


def test_request_id_generated(test_client: TestClient) -> None:
    """Test a request id is generated when the client sends none."""
    response = test_client.get("/health/live")

    assert len(response.headers["X-Request-ID"]) == 32
