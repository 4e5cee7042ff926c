"""Tests for application wiring: health, middleware and unknown routes."""

from httpx import AsyncClient


async def test_health(client: AsyncClient) -> None:
    response = await client.get("/health")

    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "ok"
    assert body["database"] == "connected"
    assert body["version"] == "1.0.0"


async def test_request_id_is_echoed(client: AsyncClient) -> None:
    response = await client.get("/blogs", headers={"X-Request-ID": "abc-123"})

    assert response.headers["X-Request-ID"] == "abc-123"


async def test_request_id_is_generated(client: AsyncClient) -> None:
    response = await client.get("/blogs")

    assert response.headers["X-Request-ID"]


async def test_security_headers(client: AsyncClient) -> None:
    response = await client.get("/health")

    assert response.headers["X-Content-Type-Options"] == "nosniff"
    assert response.headers["X-Frame-Options"] == "DENY"


async def test_unknown_route(client: AsyncClient) -> None:
    response = await client.get("/nope")

    assert response.status_code == 404
