"""Root test fixtures shared across all test types.

Environment variables are set before any app import; settings are cached.
API fixtures are in tests/integration/conftest.py.
"""

import os
import tempfile
from pathlib import Path

os.environ.setdefault("APP_ENV", "testing")
os.environ.setdefault(
    "DATABASE_URL",
    f"sqlite+aiosqlite:///{Path(tempfile.gettempdir()) / 'zenkai-test.db'}",
)
os.environ.setdefault("JWT_SECRET_KEY", "test-secret-key-with-at-least-32-characters")

# ruff: noqa: E402 - Imports must be after env var setup
from collections.abc import Generator

import pytest
from sqlalchemy import Engine, create_engine
from sqlmodel import SQLModel

from src.zenkai import models  # noqa: F401 - registers tables on the metadata
from src.zenkai.core.config import get_settings

# Clear settings cache to ensure test environment variables are picked up
get_settings.cache_clear()


@pytest.fixture
def sync_engine(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Generator[Engine]:
    """File-backed SQLite engine standing in for the worker's sync engine.

    Patched into the write-back activities so they run against a fresh schema.
    """
    engine = create_engine(f"sqlite:///{tmp_path / 'worker.db'}")
    SQLModel.metadata.create_all(engine)
    monkeypatch.setattr("src.zenkai.temporal.activities.results.get_sync_engine", lambda: engine)
    yield engine
    engine.dispose()
