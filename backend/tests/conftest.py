"""Root conftest: app wired to a throwaway SQLite store per test."""

import pytest
from fastapi.testclient import TestClient

from daily_tracker.config import get_settings
from daily_tracker.main import create_app


@pytest.fixture()
def app(tmp_path, monkeypatch):
    monkeypatch.setenv(
        "DATABASE_URL", f"sqlite+aiosqlite:///{tmp_path / 'tracker.db'}",
    )
    monkeypatch.setenv("CREATE_TABLES", "true")
    monkeypatch.setenv("STORAGE_TIMEZONE", "UTC")
    monkeypatch.setenv("LOG_FORMAT", "text")
    get_settings.cache_clear()
    yield create_app()
    get_settings.cache_clear()


@pytest.fixture()
def client(app):
    with TestClient(app) as c:
        yield c
