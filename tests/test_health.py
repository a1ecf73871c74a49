"""Smoke tests for health and app wiring."""

from httpx import AsyncClient


async def test_health_returns_healthy(client: AsyncClient) -> None:
    """GET /api/v1/health returns 200, healthy, and the configured backends."""
    response = await client.get("/api/v1/health")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "healthy"
    assert data["timestamp"]
    assert data["services"]["database"] == "memory"
    assert data["services"]["authentication"]


async def test_request_id_is_echoed(client: AsyncClient) -> None:
    response = await client.get("/api/v1/health", headers={"X-Request-ID": "abc-123"})
    assert response.headers["X-Request-ID"] == "abc-123"


async def test_unsafe_request_id_is_replaced(client: AsyncClient) -> None:
    response = await client.get("/api/v1/health", headers={"X-Request-ID": "bad id;drop"})
    assert response.headers["X-Request-ID"] != "bad id;drop"
    assert response.headers["X-Request-ID"]


async def test_security_headers_are_set(client: AsyncClient) -> None:
    response = await client.get("/api/v1/health")
    assert response.headers["X-Content-Type-Options"] == "nosniff"
    assert response.headers["X-Frame-Options"] == "DENY"
    assert "default-src 'none'" in response.headers["Content-Security-Policy"]


async def test_unknown_route_returns_json_404(client: AsyncClient) -> None:
    response = await client.get("/api/v1/nope")
    assert response.status_code == 404
    assert response.json()["error"] == "HTTP_ERROR"
