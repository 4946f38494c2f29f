"""Tests for HTTP routes."""

from fastapi.testclient import TestClient

import settings
from app.container import container
from web.server import app


class TestPostcodeLookup:
    def test_get(self, client):
        resp = client.get("/api/postcode_lookup/3000")
        assert resp.status_code == 200
        assert resp.json() == {
            "success": True,
            "data": {
                "postcode": 3000,
                "districts": [
                    {
                        "name": "Melbourne",
                        "id": 1,
                        "mp": {"name": "A. Smith", "party": "ALP", "phoneNumber": "0312345678"},
                    }
                ],
            },
        }

    def test_post(self, client):
        resp = client.post("/api/postcode_lookup", json={"postcode": "3002"})
        assert resp.status_code == 200
        assert [d["id"] for d in resp.json()["data"]["districts"]] == [1, 2]

    def test_post_numeric_postcode(self, client):
        resp = client.post("/api/postcode_lookup", json={"postcode": 3056})
        assert resp.status_code == 200
        assert resp.json()["data"]["districts"][0]["mp"] is None

    def test_unassigned_postcode(self, client):
        resp = client.get("/api/postcode_lookup/3999")
        assert resp.status_code == 200
        assert resp.json()["data"] == {"postcode": 3999, "districts": []}

    def test_not_found(self, client):
        resp = client.get("/api/postcode_lookup/1234")
        assert resp.status_code == 404
        assert resp.json() == {"success": False, "error": "Postcode not found"}

    def test_invalid_format(self, client):
        resp = client.get("/api/postcode_lookup/30a0")
        assert resp.status_code == 400
        assert resp.json()["error"] == "Postcode must be a 4-digit number"

    def test_missing_postcode(self, client):
        resp = client.post("/api/postcode_lookup", json={})
        assert resp.status_code == 400
        assert resp.json()["error"] == "Postcode is required"

    def test_malformed_body(self, client):
        resp = client.post("/api/postcode_lookup", content=b"not json", headers={"content-type": "application/json"})
        assert resp.status_code == 400
        assert resp.json()["success"] is False

    def test_server_error_hides_detail(self, lookup_service, guard, monkeypatch):
        def boom(_postcode):
            raise RuntimeError("database exploded")

        container.override(lookup=lookup_service, rate_limit=guard)
        monkeypatch.setattr(lookup_service, "lookup", boom)
        try:
            resp = TestClient(app, raise_server_exceptions=False).get("/api/postcode_lookup/3000")
        finally:
            container.reset()

        assert resp.status_code == 500
        assert resp.json() == {"success": False, "error": "Internal server error"}


class TestRateLimit:
    def test_rejects_after_budget(self, client, clock):
        for _ in range(3):
            assert client.get("/api/postcode_lookup/3000").status_code == 200

        clock.now = 30_000
        resp = client.get("/api/postcode_lookup/3000")
        assert resp.status_code == 429
        assert resp.headers["Retry-After"] == "30"
        assert resp.json()["retryAfter"] == 30

        clock.now = 60_000
        assert client.get("/api/postcode_lookup/3000").status_code == 200

    def test_api_keys_have_separate_budgets(self, client):
        for _ in range(3):
            client.get("/api/postcode_lookup/3000", headers={"X-API-Key": "client-one"})
        assert client.get("/api/postcode_lookup/3000", headers={"X-API-Key": "client-one"}).status_code == 429
        assert client.get("/api/postcode_lookup/3000", headers={"X-API-Key": "client-two"}).status_code == 200

    def test_invalid_requests_count(self, client):
        for _ in range(3):
            client.get("/api/postcode_lookup/abcd")
        assert client.get("/api/postcode_lookup/3000").status_code == 429

    def test_directory_is_not_limited(self, client):
        for _ in range(5):
            assert client.get("/mps/data").status_code == 200


class TestApiKeyAuth:
    def test_missing_key(self, client, monkeypatch):
        monkeypatch.setattr(settings, "API_KEY", "secret-key-123")
        resp = client.get("/api/postcode_lookup/3000")
        assert resp.status_code == 401
        assert "X-API-Key" in resp.json()["requiredHeaders"]

    def test_wrong_key(self, client, monkeypatch):
        monkeypatch.setattr(settings, "API_KEY", "secret-key-123")
        resp = client.get("/api/postcode_lookup/3000", headers={"X-API-Key": "nope-nope-nope"})
        assert resp.status_code == 403

    def test_bearer_key(self, client, monkeypatch):
        monkeypatch.setattr(settings, "API_KEY", "secret-key-123")
        resp = client.get("/api/postcode_lookup/3000", headers={"Authorization": "Bearer secret-key-123"})
        assert resp.status_code == 200

    def test_public_routes_need_no_key(self, client, monkeypatch):
        monkeypatch.setattr(settings, "API_KEY", "secret-key-123")
        assert client.get("/mps/data").status_code == 200
        assert client.get("/health").status_code == 200


class TestPublicRoutes:
    def test_directory(self, client):
        resp = client.get("/mps/data")
        body = resp.json()
        assert body["success"] is True
        assert [mp["name"] for mp in body["data"]] == ["A. Smith", "B. Jones", "C. Brown"]
        assert body["data"][0]["phoneNumber"] == "0312345678"
        assert body["data"][1]["district"] == {"id": 2, "name": "Richmond", "number": 2, "postcodes": [3002, 3121]}
        assert body["data"][2]["district"] is None

    def test_summary(self, client):
        resp = client.get("/mps/summary")
        assert resp.json()["data"] == {"totalMps": 3, "totalDistricts": 2, "totalPostcodes": 5}

    def test_health(self, client):
        client.get("/api/postcode_lookup/3000")
        body = client.get("/health").json()
        assert body["success"] is True
        assert body["version"] == settings.API_VERSION
        assert body["rateLimit"] == {"admitted": 1, "rejected": 0, "trackedClients": 1}

    def test_root(self, client):
        body = client.get("/").json()
        assert body["rateLimit"]["requests"] == settings.RATE_LIMIT_MAX_REQUESTS
        assert "GET /health" in body["endpoints"]

    def test_unknown_endpoint(self, client):
        resp = client.get("/nope")
        assert resp.status_code == 404
        assert resp.json()["error"] == "Endpoint not found"
