"""Health check, startup and the error envelope for protocol-level failures."""

import pytest
from sqlalchemy.exc import SQLAlchemyError

from jsonstore.core.config import Settings
from jsonstore.main import create_app


@pytest.mark.asyncio
class TestHealth:
    async def test_health_needs_no_key(self, client, settings):
        resp = await client.get("/health")

        assert resp.status_code == 200
        body = resp.json()
        assert body["success"] is True
        assert body["message"] == "JSON API Server is running"
        assert body["data"]["version"] == settings.app_version
        assert body["data"]["storage"] == "sqlite"
        assert body["data"]["timestamp"]


@pytest.mark.asyncio
class TestErrorEnvelope:
    async def test_unsupported_method(self, client, admin_headers):
        resp = await client.patch("/api/documents/some-id", json={}, headers=admin_headers)

        assert resp.status_code == 405
        assert resp.json() == {"success": False, "error": "Method not allowed"}

    async def test_malformed_json_body(self, client, admin_headers):
        resp = await client.post(
            "/api/documents",
            content=b'{"name": "broken",',
            headers={**admin_headers, "Content-Type": "application/json"},
        )

        assert resp.status_code == 400
        assert resp.json() == {"success": False, "error": "Invalid JSON"}

    async def test_unknown_route(self, client):
        resp = await client.get("/nowhere")

        assert resp.status_code == 404
        assert resp.json()["success"] is False

    async def test_cors_preflight(self, client):
        resp = await client.options(
            "/api/documents",
            headers={
                "Origin": "http://example.com",
                "Access-Control-Request-Method": "POST",
                "Access-Control-Request-Headers": "X-API-Key",
            },
        )

        assert resp.status_code == 200
        assert resp.headers["access-control-allow-origin"] == "*"


@pytest.mark.asyncio
class TestStartup:
    async def test_unreachable_storage_aborts_startup(self, tmp_path):
        settings = Settings(
            database_url=f"sqlite+aiosqlite:///{tmp_path / 'missing' / 'jsonstore.db'}",
            log_level="WARNING",
        )
        app = create_app(settings)

        with pytest.raises(SQLAlchemyError):
            async with app.router.lifespan_context(app):
                pass

        assert not hasattr(app.state, "session_factory")
