from __future__ import annotations

from collections.abc import AsyncIterator

import pytest
from httpx import ASGITransport, AsyncClient

from userlookup.config import get_settings
from userlookup.db.seed import create_schema, seed_sample_users
from userlookup.db.session import get_sessionmaker, reset_engine
from userlookup.main import app
from userlookup.observability.visitors import reset_visitor_counter


@pytest.fixture(autouse=True)
def test_environment(monkeypatch: pytest.MonkeyPatch, tmp_path) -> None:
    monkeypatch.setenv("DATABASE_URL", f"sqlite:///{tmp_path / 'users.db'}")
    monkeypatch.setenv("USER_BACKEND", "database")
    monkeypatch.setenv("ENABLE_METRICS_ENDPOINT", "true")
    get_settings.cache_clear()
    reset_engine()
    reset_visitor_counter()

    create_schema()
    with get_sessionmaker()() as db:
        seed_sample_users(db)

    yield

    app.dependency_overrides.clear()
    reset_engine()
    reset_visitor_counter()
    get_settings.cache_clear()


@pytest.fixture
def static_backend(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("USER_BACKEND", "static")
    get_settings.cache_clear()


@pytest.fixture
async def api_client() -> AsyncIterator[AsyncClient]:
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
