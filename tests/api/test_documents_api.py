"""HTTP scenarios for the document endpoints and the public projection."""

import uuid

import pytest
import pytest_asyncio


@pytest_asyncio.fixture
async def account(register):
    data = await register(f"{uuid.uuid4().hex[:8]}@example.com")
    return {"X-API-Key": data["api_key"]}


@pytest.mark.asyncio
class TestDocumentsCrud:
    async def test_full_lifecycle(self, client, account):
        created = await client.post(
            "/api/documents", json={"name": "settings", "data": {"theme": "dark"}}, headers=account
        )
        assert created.status_code == 201
        doc = created.json()["data"]
        assert doc["name"] == "settings"
        assert doc["data"] == {"theme": "dark"}
        assert {"id", "user_id", "created_at", "updated_at"} <= doc.keys()

        fetched = await client.get(f"/api/documents/{doc['id']}", headers=account)
        assert fetched.status_code == 200
        assert fetched.json()["data"]["data"] == {"theme": "dark"}

        updated = await client.put(
            f"/api/documents/{doc['id']}", json={"data": {"theme": "light"}}, headers=account
        )
        assert updated.status_code == 200
        assert updated.json()["data"]["name"] == "settings"
        assert updated.json()["data"]["data"] == {"theme": "light"}

        deleted = await client.delete(f"/api/documents/{doc['id']}", headers=account)
        assert deleted.status_code == 200
        assert deleted.json() == {"success": True, "message": "Document deleted"}

        gone = await client.get(f"/api/documents/{doc['id']}", headers=account)
        assert gone.status_code == 404
        assert gone.json() == {"success": False, "error": "Document not found"}

    async def test_key_in_query_parameter(self, client, account):
        key = account["X-API-Key"]

        created = await client.post(f"/api/documents?api_key={key}", json={"name": "q"})
        listed = await client.get("/api/documents", params={"api_key": key})

        assert created.status_code == 201
        assert [d["name"] for d in listed.json()["data"]] == ["q"]

    async def test_missing_data_defaults_to_empty_object(self, client, account):
        resp = await client.post("/api/documents", json={"name": "blank"}, headers=account)

        assert resp.json()["data"]["data"] == {}

    async def test_name_is_required(self, client, account):
        resp = await client.post("/api/documents", json={"data": {"x": 1}}, headers=account)

        assert resp.status_code == 400
        assert resp.json()["success"] is False

    async def test_name_longer_than_column_is_rejected(self, client, account):
        resp = await client.post("/api/documents", json={"name": "n" * 256}, headers=account)

        assert resp.status_code == 400
        assert resp.json()["success"] is False

    async def test_empty_name_update_keeps_old_name(self, client, account):
        doc = (await client.post("/api/documents", json={"name": "keep"}, headers=account)).json()["data"]

        resp = await client.put(f"/api/documents/{doc['id']}", json={"name": ""}, headers=account)

        assert resp.json()["data"]["name"] == "keep"

    async def test_list_contains_only_own_documents(self, client, account, register, admin_headers):
        other = {"X-API-Key": (await register("other@example.com"))["api_key"]}
        for name in ("one", "two"):
            await client.post("/api/documents", json={"name": name}, headers=account)
        await client.post("/api/documents", json={"name": "theirs"}, headers=other)

        mine = await client.get("/api/documents", headers=account)
        everything = await client.get("/api/documents", headers=admin_headers)

        assert sorted(d["name"] for d in mine.json()["data"]) == ["one", "two"]
        assert sorted(d["name"] for d in everything.json()["data"]) == ["one", "theirs", "two"]

    async def test_empty_list_is_an_array(self, client, account):
        resp = await client.get("/api/documents", headers=account)

        assert resp.json() == {"success": True, "data": []}


@pytest.mark.asyncio
class TestDocumentsAccess:
    async def test_no_key_is_unauthorized(self, client):
        resp = await client.get("/api/documents")

        assert resp.status_code == 401
        assert resp.json() == {"success": False, "error": "API key is required"}

    async def test_unknown_key_is_unauthorized(self, client):
        resp = await client.get("/api/documents", headers={"X-API-Key": "bogus"})

        assert resp.status_code == 401
        assert resp.json() == {"success": False, "error": "Invalid API key"}

    async def test_foreign_document_is_not_found(self, client, account, register):
        doc = (await client.post("/api/documents", json={"name": "mine"}, headers=account)).json()["data"]
        intruder = {"X-API-Key": (await register("intruder@example.com"))["api_key"]}

        for method in ("get", "delete"):
            resp = await getattr(client, method)(f"/api/documents/{doc['id']}", headers=intruder)
            assert resp.status_code == 404
        resp = await client.put(f"/api/documents/{doc['id']}", json={"name": "x"}, headers=intruder)
        assert resp.status_code == 404

        still_there = await client.get(f"/api/documents/{doc['id']}", headers=account)
        assert still_there.json()["data"]["name"] == "mine"

    async def test_admin_reaches_account_documents(self, client, account, admin_headers):
        doc = (await client.post("/api/documents", json={"name": "mine"}, headers=account)).json()["data"]

        resp = await client.put(
            f"/api/documents/{doc['id']}", json={"name": "by-admin"}, headers=admin_headers
        )

        assert resp.status_code == 200
        assert resp.json()["data"]["user_id"] == doc["user_id"]


@pytest.mark.asyncio
class TestPublicDocuments:
    async def test_public_returns_raw_content(self, client, admin_headers):
        created = await client.post(
            "/api/documents", json={"name": "cfg", "data": {"x": 1}}, headers=admin_headers
        )
        assert created.status_code == 201
        doc_id = created.json()["data"]["id"]

        resp = await client.get(f"/public/{doc_id}")

        assert resp.status_code == 200
        assert resp.json() == {"x": 1}
        assert resp.headers["cache-control"] == "public, max-age=60"

    async def test_public_missing_document(self, client):
        resp = await client.get(f"/public/{uuid.uuid4()}")

        assert resp.status_code == 404
        assert resp.json() == {"success": False, "error": "Document not found"}
