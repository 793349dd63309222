"""Smoke tests for health and app wiring."""

import logging

import pytest
from httpx import AsyncClient

from tests.firestore_stub import FirestoreStub


async def test_health_returns_ok(client: AsyncClient) -> None:
    """GET /api/health returns 200 and status ok."""
    response = await client.get("/api/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


async def test_security_headers_and_request_id(client: AsyncClient) -> None:
    """Every response carries the security headers and echoes X-Request-ID."""
    response = await client.get("/api/health", headers={"X-Request-ID": "abc-123"})
    assert response.headers.get("X-Content-Type-Options") == "nosniff"
    assert response.headers.get("X-Frame-Options") == "DENY"
    assert response.headers.get("X-Request-ID") == "abc-123"


async def test_request_id_generated_when_missing(client: AsyncClient) -> None:
    response = await client.get("/api/health")
    assert response.headers.get("X-Request-ID")


async def test_unknown_route_returns_error_envelope(client: AsyncClient) -> None:
    """Routing 404s use the same {"error": ...} envelope as the routes."""
    response = await client.get("/api/does-not-exist")
    assert response.status_code == 404
    assert response.json() == {"error": "Not found"}


async def test_malformed_request_id_is_replaced(client: AsyncClient) -> None:
    response = await client.get("/api/health", headers={"X-Request-ID": "bad id!"})
    request_id = response.headers.get("X-Request-ID")
    assert request_id
    assert request_id != "bad id!"


async def test_error_log_carries_request_id(
    client: AsyncClient, firestore_stub: FirestoreStub, caplog: pytest.LogCaptureFixture
) -> None:
    """A failing route logs the same id it echoes to the client."""
    firestore_stub.fail("videos")
    with caplog.at_level(logging.ERROR, logger="pvsf.core.api_error"):
        response = await client.get("/api/videos", headers={"X-Request-ID": "trace-42"})
    assert response.status_code == 500
    assert response.headers.get("X-Request-ID") == "trace-42"
    assert "[API Error] GET /api/videos [request_id=trace-42]:" in caplog.text


async def test_routing_error_log_carries_request_id(
    client: AsyncClient, caplog: pytest.LogCaptureFixture
) -> None:
    with caplog.at_level(logging.WARNING, logger="pvsf.core.api_error"):
        response = await client.get("/api/nope", headers={"X-Request-ID": "trace-43"})
    assert response.status_code == 404
    assert "[request_id=trace-43]" in caplog.text
