"""Smoke tests for health and app wiring."""

from httpx import AsyncClient


async def test_health_returns_ok(client: AsyncClient) -> None:
    """GET /api/v1/health returns 200 and status ok."""
    response = await client.get("/api/v1/health")
    assert response.status_code == 200
    assert response.json().get("status") == "ok"


async def test_ready_is_503_without_firestore(client: AsyncClient) -> None:
    """Without credentials the Firestore client is never initialized."""
    response = await client.get("/api/v1/health/ready")
    assert response.status_code == 503
    assert response.json()["status"] == "not_ready"


async def test_request_id_is_generated_or_forwarded(client: AsyncClient) -> None:
    forwarded = await client.get("/api/v1/health", headers={"X-Request-ID": "abc-123"})
    assert forwarded.headers["X-Request-ID"] == "abc-123"

    unsafe = await client.get("/api/v1/health", headers={"X-Request-ID": "bad id!"})
    assert unsafe.headers["X-Request-ID"] != "bad id!"
    assert len(unsafe.headers["X-Request-ID"]) == 36
