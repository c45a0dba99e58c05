"""API test fixtures: a SQLite database per test and a recording event sender.

Uses polyfactory for type-safe test data generation.
"""

from collections.abc import AsyncGenerator
from pathlib import Path

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, create_async_engine
from sqlalchemy.pool import NullPool
from sqlmodel import SQLModel

from src.zenkai.api.dependencies import get_db_session, get_event_sender
from src.zenkai.core.db import get_session
from src.zenkai.core.shutdown import request_tracker
from src.zenkai.main import create_app
from src.zenkai.temporal.events import CodeAgentRunEvent, EventSender
from tests.helpers import auth_headers


class RecordingEventSender:
    """Captures emitted events instead of starting workflows."""

    def __init__(self):
        self.sent: list[tuple[CodeAgentRunEvent, str]] = []

    async def send(self, event: CodeAgentRunEvent, *, event_id: str) -> str:
        self.sent.append((event, event_id))
        return EventSender.get_workflow_id(event_id)


@pytest.fixture(autouse=True)
def _reset_request_tracker():
    """Each test gets a tracker bound to its own event loop."""
    request_tracker.reset()
    yield
    request_tracker.reset()


@pytest.fixture
async def engine(tmp_path: Path) -> AsyncGenerator[AsyncEngine]:
    """Create a fresh database with all tables."""
    test_engine = create_async_engine(
        f"sqlite+aiosqlite:///{tmp_path / 'api.db'}", poolclass=NullPool
    )
    async with test_engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)
    yield test_engine
    await test_engine.dispose()


@pytest.fixture
async def db_session(engine: AsyncEngine) -> AsyncGenerator[AsyncSession]:
    """Session for seeding and inspecting data.

    Does not auto-commit; tests must call `await session.commit()`.
    """
    async with AsyncSession(engine, expire_on_commit=False) as session:
        yield session


@pytest.fixture
def events() -> RecordingEventSender:
    return RecordingEventSender()


@pytest.fixture
async def client(engine: AsyncEngine, events: RecordingEventSender) -> AsyncGenerator[AsyncClient]:
    """Test client with the database and event sender overridden."""
    app = create_app()

    async def _get_db_session() -> AsyncGenerator[AsyncSession]:
        async with get_session(engine) as session:
            yield session

    async def _get_event_sender() -> RecordingEventSender:
        return events

    app.dependency_overrides[get_db_session] = _get_db_session
    app.dependency_overrides[get_event_sender] = _get_event_sender

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        yield client


@pytest.fixture
def alice() -> dict[str, str]:
    """Auth headers for one caller."""
    return auth_headers("user_alice")


@pytest.fixture
def bob() -> dict[str, str]:
    """Auth headers for a second, unrelated caller."""
    return auth_headers("user_bob")
