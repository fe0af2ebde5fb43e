"""
Shared fixtures for jsonstore tests.

- Storage fixtures: a file-backed aiosqlite database per test, a shared
  lock table and a factory that opens one service per session.
- API fixtures: the FastAPI app with its lifespan running and an httpx client.
"""

from __future__ import annotations

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from jsonstore.core.config import Settings
from jsonstore.core.db import create_engine, create_session_factory, init_db
from jsonstore.core.security import create_password_context
from jsonstore.domains.documents.entities import OwnerScope
from jsonstore.domains.documents.locks import KeyedLock
from jsonstore.domains.documents.services import DocumentService
from jsonstore.main import create_app

ADMIN_KEY = "test-admin-key"


# =============================================================================
# STORAGE
# =============================================================================


@pytest.fixture
def settings(tmp_path) -> Settings:
    return Settings(
        database_url=f"sqlite+aiosqlite:///{tmp_path / 'jsonstore.db'}",
        api_key=ADMIN_KEY,
        bcrypt_rounds=4,
        storage_timeout=5.0,
        log_level="WARNING",
    )


@pytest_asyncio.fixture
async def engine(settings):
    engine = create_engine(settings)
    await init_db(engine)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(engine):
    return create_session_factory(engine)


@pytest_asyncio.fixture
async def session(session_factory):
    async with session_factory() as session:
        yield session


@pytest.fixture
def locks() -> KeyedLock:
    return KeyedLock()


@pytest.fixture
def pwd_context():
    return create_password_context(rounds=4)


@pytest_asyncio.fixture
async def new_documents(session_factory, locks):
    """Factory returning a DocumentService bound to a fresh session."""
    opened = []

    def factory(timeout=None) -> DocumentService:
        session = session_factory()
        opened.append(session)
        return DocumentService(session, locks=locks, timeout=timeout)

    yield factory

    for session in opened:
        await session.close()


@pytest.fixture
def admin() -> OwnerScope:
    return OwnerScope.unscoped()


# =============================================================================
# API
# =============================================================================


@pytest_asyncio.fixture
async def app(settings):
    app = create_app(settings)
    async with app.router.lifespan_context(app):
        yield app


@pytest_asyncio.fixture
async def client(app):
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://testserver") as client:
        yield client


@pytest.fixture
def admin_headers() -> dict:
    return {"X-API-Key": ADMIN_KEY}


@pytest.fixture
def register(client):
    """Register an account over HTTP and return its public data."""

    async def _register(email: str, password: str = "secret1") -> dict:
        resp = await client.post("/auth/register", json={"email": email, "password": password})
        assert resp.status_code == 201, resp.text
        return resp.json()["data"]

    return _register
