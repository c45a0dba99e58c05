"""Tests for the API health check and error responses."""

from uuid import uuid4

import pytest

from src.zenkai.core import db
from src.zenkai.core.shutdown import request_tracker

pytestmark = [pytest.mark.integration, pytest.mark.asyncio]


@pytest.fixture
async def reset_engine():
    await db.dispose_engine()
    yield
    await db.dispose_engine()


async def test_health_degraded_when_temporal_down(client, reset_engine, monkeypatch):
    async def _unavailable():
        raise RuntimeError("connection refused")

    monkeypatch.setattr("src.zenkai.main.get_temporal_client", _unavailable)

    response = await client.get("/health")

    assert response.status_code == 503
    data = response.json()
    assert data["database"] == "healthy"
    assert data["status"] == "degraded"
    assert data["temporal"].startswith("unhealthy")


async def test_health_ok(client, reset_engine, monkeypatch):
    async def _client():
        return object()

    monkeypatch.setattr("src.zenkai.main.get_temporal_client", _client)

    response = await client.get("/health")

    assert response.status_code == 200
    assert response.json()["status"] == "healthy"


async def test_errors_carry_request_id(client):
    request_id = uuid4().hex

    response = await client.get("/api/v1/projects", headers={"X-Request-ID": request_id})

    assert response.status_code == 401
    assert response.json()["request_id"] == request_id
    assert response.headers["X-Request-ID"] == request_id


@pytest.fixture
async def draining():
    await request_tracker.drain(timeout=0.1)
    yield
    request_tracker.reset()


async def test_draining_refuses_new_prompts(client, alice, draining, events):
    response = await client.post(
        "/api/v1/projects", json={"value": "Build a todo app"}, headers=alice
    )

    assert response.status_code == 503
    assert events.sent == []


async def test_health_reports_draining(client, draining):
    response = await client.get("/health")

    assert response.status_code == 503
    assert response.json()["status"] == "draining"
