"""Integration tests for the /api endpoints, driven in-process over ASGI."""

from datetime import datetime, timedelta, timezone

import pytest
from httpx import ASGITransport, AsyncClient

from athlete_minds.kernel.models import EventType
from athlete_minds.main import create_app


class TestResourcesAPI:
    """GET /api/resources and POST /api/resources/{id}/like."""

    @pytest.fixture(autouse=True)
    def _resources(self, store, make_resource):
        store.create_resource(make_resource("mindfulness", title="Breathing"))
        store.create_resource(make_resource("crisis", title="Helplines", url="https://example.org"))
        store.create_resource(make_resource("crisis", title="Support Groups", likes=3))

    @pytest.mark.asyncio
    async def test_list_all(self, client: AsyncClient):
        r = await client.get("/api/resources")
        assert r.status_code == 200
        assert [x["title"] for x in r.json()] == ["Breathing", "Helplines", "Support Groups"]

    @pytest.mark.asyncio
    async def test_filter_by_category(self, client: AsyncClient):
        r = await client.get("/api/resources", params={"category": "crisis"})
        assert r.status_code == 200
        data = r.json()
        assert len(data) == 2
        assert all(x["category"] == "crisis" for x in data)

    @pytest.mark.asyncio
    async def test_empty_category_means_all(self, client: AsyncClient):
        r = await client.get("/api/resources?category=")
        assert r.status_code == 200
        assert len(r.json()) == 3

    @pytest.mark.asyncio
    async def test_resource_shape(self, client: AsyncClient):
        r = await client.get("/api/resources")
        first = r.json()[0]
        assert set(first) == {"id", "title", "description", "category", "icon", "url", "rating", "likes"}
        assert first["url"] is None

    @pytest.mark.asyncio
    async def test_like_sets_total(self, client: AsyncClient, event_store):
        r = await client.post("/api/resources/3/like", json={"likes": 4})
        assert r.status_code == 200, r.text
        assert r.json()["likes"] == 4

        history = event_store.get_entity_history("resource", 3)
        assert history[0].event_type == EventType.RESOURCE_LIKES_UPDATED
        assert history[0].payload == {"previous": 3, "likes": 4}

    @pytest.mark.asyncio
    async def test_like_accepts_negative(self, client: AsyncClient):
        r = await client.post("/api/resources/1/like", json={"likes": -2})
        assert r.status_code == 200
        assert r.json()["likes"] == -2

    @pytest.mark.asyncio
    async def test_like_unknown_resource(self, client: AsyncClient):
        r = await client.post("/api/resources/999/like", json={"likes": 1})
        assert r.status_code == 404
        assert r.json()["detail"] == "Resource not found"

    @pytest.mark.asyncio
    async def test_like_non_numeric_id(self, client: AsyncClient):
        r = await client.post("/api/resources/abc/like", json={"likes": 1})
        assert r.status_code == 400
        assert r.json()["detail"] == "Invalid resource ID"

    @pytest.mark.asyncio
    @pytest.mark.parametrize("body", [{"likes": "5"}, {"likes": 1.5}, {}, {"likes": True}])
    async def test_like_invalid_body(self, client: AsyncClient, body):
        r = await client.post("/api/resources/1/like", json=body)
        assert r.status_code == 400
        data = r.json()
        assert data["detail"] == "Validation error"
        assert [e["field"] for e in data["errors"]] == ["likes"]


class TestStoriesAPI:
    """Story submission and moderation endpoints."""

    @pytest.mark.asyncio
    async def test_submit_story(self, client: AsyncClient, story_payload):
        before = datetime.now(timezone.utc)
        r = await client.post("/api/stories", json=story_payload)
        assert r.status_code == 201, r.text

        data = r.json()
        assert data["approved"] is False
        assert isinstance(data["id"], int)
        assert data["firstName"] == "Ana"
        assert data["injuryType"] == "Shoulder"
        submitted_at = datetime.fromisoformat(data["submittedAt"].replace("Z", "+00:00"))
        assert abs(submitted_at - before) < timedelta(seconds=5)

    @pytest.mark.asyncio
    async def test_submitted_story_is_pending_not_public(self, client: AsyncClient, story_payload):
        created = (await client.post("/api/stories", json=story_payload)).json()

        public = (await client.get("/api/stories")).json()
        pending = (await client.get("/api/stories/pending")).json()
        assert created["id"] not in [s["id"] for s in public]
        assert [s["id"] for s in pending] == [created["id"]]

    @pytest.mark.asyncio
    async def test_client_cannot_self_approve(self, client: AsyncClient, story_payload):
        story_payload.update({"approved": True, "id": 500, "submittedAt": "2001-01-01T00:00:00Z"})
        r = await client.post("/api/stories", json=story_payload)
        assert r.status_code == 201
        data = r.json()
        assert data["approved"] is False
        assert data["id"] == 1
        assert not data["submittedAt"].startswith("2001")

    @pytest.mark.asyncio
    async def test_submit_missing_fields(self, client: AsyncClient, story_payload):
        del story_payload["sport"]
        r = await client.post("/api/stories", json=story_payload)
        assert r.status_code == 400
        assert [e["field"] for e in r.json()["errors"]] == ["sport"]

    @pytest.mark.asyncio
    async def test_submit_without_body(self, client: AsyncClient):
        r = await client.post("/api/stories")
        assert r.status_code == 400
        assert r.json()["detail"] == "Validation error"

    @pytest.mark.asyncio
    async def test_submit_malformed_json(self, client: AsyncClient):
        r = await client.post(
            "/api/stories",
            content=b"{\"firstName\": ",
            headers={"Content-Type": "application/json"},
        )
        assert r.status_code == 400
        data = r.json()
        assert data["detail"] == "Validation error"
        assert [e["field"] for e in data["errors"]] == ["body"]

    @pytest.mark.asyncio
    async def test_approve_flow(self, client: AsyncClient, story_payload):
        story_id = (await client.post("/api/stories", json=story_payload)).json()["id"]

        r = await client.post(f"/api/stories/{story_id}/approve")
        assert r.status_code == 200
        assert r.json()["approved"] is True

        public_ids = [s["id"] for s in (await client.get("/api/stories")).json()]
        pending_ids = [s["id"] for s in (await client.get("/api/stories/pending")).json()]
        assert public_ids.count(story_id) == 1
        assert story_id not in pending_ids

    @pytest.mark.asyncio
    async def test_approve_twice(self, client: AsyncClient, story_payload):
        story_id = (await client.post("/api/stories", json=story_payload)).json()["id"]
        await client.post(f"/api/stories/{story_id}/approve")
        r = await client.post(f"/api/stories/{story_id}/approve")
        assert r.status_code == 200
        assert r.json()["approved"] is True

    @pytest.mark.asyncio
    async def test_approve_unknown_story(self, client: AsyncClient):
        r = await client.post("/api/stories/99999/approve")
        assert r.status_code == 404
        assert r.json()["detail"] == "Story not found"

    @pytest.mark.asyncio
    async def test_approve_non_numeric_id(self, client: AsyncClient):
        r = await client.post("/api/stories/abc/approve")
        assert r.status_code == 400
        assert r.json()["detail"] == "Invalid story ID"

    @pytest.mark.asyncio
    async def test_delete_story(self, client: AsyncClient, story_payload):
        story_id = (await client.post("/api/stories", json=story_payload)).json()["id"]

        r = await client.delete(f"/api/stories/{story_id}")
        assert r.status_code == 200
        assert r.json()["message"] == "Story deleted successfully"

        assert (await client.get("/api/stories/pending")).json() == []
        r2 = await client.delete(f"/api/stories/{story_id}")
        assert r2.status_code == 404

    @pytest.mark.asyncio
    async def test_delete_published_story(self, client: AsyncClient, story_payload):
        story_id = (await client.post("/api/stories", json=story_payload)).json()["id"]
        await client.post(f"/api/stories/{story_id}/approve")

        r = await client.delete(f"/api/stories/{story_id}")
        assert r.status_code == 200
        assert (await client.get("/api/stories")).json() == []

    @pytest.mark.asyncio
    async def test_delete_non_numeric_id(self, client: AsyncClient):
        r = await client.delete("/api/stories/first")
        assert r.status_code == 400

    @pytest.mark.asyncio
    async def test_ids_not_reused_after_delete(self, client: AsyncClient, story_payload):
        ids = [(await client.post("/api/stories", json=story_payload)).json()["id"] for _ in range(3)]
        await client.delete(f"/api/stories/{ids[-1]}")
        new_id = (await client.post("/api/stories", json=story_payload)).json()["id"]
        assert new_id > max(ids)


class TestContactsAPI:
    """Contact form endpoints."""

    @pytest.mark.asyncio
    async def test_submit_and_list(self, client: AsyncClient, contact_payload, event_store):
        r = await client.post("/api/contacts", json=contact_payload)
        assert r.status_code == 201, r.text
        created = r.json()
        assert created["id"] == 1
        assert created["inquiryType"] == "partnership"
        assert "submittedAt" in created

        listing = (await client.get("/api/contacts")).json()
        assert [c["id"] for c in listing] == [1]
        assert event_store.get_entity_history("contact", 1)[0].event_type == EventType.CONTACT_SUBMITTED

    @pytest.mark.asyncio
    async def test_missing_message(self, client: AsyncClient, contact_payload):
        del contact_payload["message"]
        r = await client.post("/api/contacts", json=contact_payload)
        assert r.status_code == 400
        errors = r.json()["errors"]
        assert [e["field"] for e in errors] == ["message"]
        assert errors[0]["type"] == "missing"

    @pytest.mark.asyncio
    async def test_wrong_type(self, client: AsyncClient, contact_payload):
        contact_payload["email"] = ["a@x.com"]
        r = await client.post("/api/contacts", json=contact_payload)
        assert r.status_code == 400
        assert [e["field"] for e in r.json()["errors"]] == ["email"]


class TestCrossCutting:
    """Request ids, error shapes, unknown routes."""

    @pytest.mark.asyncio
    async def test_request_id_generated(self, client: AsyncClient):
        r = await client.get("/api/contacts")
        assert r.headers.get("X-Request-ID")

    @pytest.mark.asyncio
    async def test_request_id_echoed(self, client: AsyncClient):
        r = await client.get("/api/stories/99/approve", headers={"X-Request-ID": "abc-123"})
        assert r.headers["X-Request-ID"] == "abc-123"

    @pytest.mark.asyncio
    async def test_error_body_carries_request_id(self, client: AsyncClient):
        r = await client.post("/api/stories/99/approve", headers={"X-Request-ID": "req-42"})
        assert r.status_code == 404
        assert r.json()["request_id"] == "req-42"

    @pytest.mark.asyncio
    async def test_unknown_route(self, client: AsyncClient):
        r = await client.get("/api/nothing-here")
        assert r.status_code == 404

    @pytest.mark.asyncio
    async def test_health(self, client: AsyncClient, story_payload):
        await client.post("/api/stories", json=story_payload)
        r = await client.get("/health")
        assert r.status_code == 200
        data = r.json()
        assert data["status"] == "ok"
        assert data["records"]["stories"] == 1


class _BrokenStore:
    """Store whose reads blow up, to exercise the 500 path."""

    def get_contacts(self):
        raise RuntimeError("secret internal detail")

    def counts(self):
        return {}


@pytest.mark.asyncio
async def test_internal_error_is_generic(test_settings):
    app = create_app(settings=test_settings, store=_BrokenStore())
    async with AsyncClient(
        transport=ASGITransport(app=app, raise_app_exceptions=False),
        base_url="http://test",
    ) as ac:
        r = await ac.get("/api/contacts")

    assert r.status_code == 500
    assert r.json()["detail"] == "Internal server error"
    assert "secret" not in r.text


@pytest.mark.asyncio
async def test_internal_error_keeps_cors_headers(test_settings):
    app = create_app(settings=test_settings, store=_BrokenStore())
    async with AsyncClient(
        transport=ASGITransport(app=app, raise_app_exceptions=False),
        base_url="http://test",
    ) as ac:
        allowed = await ac.get(
            "/api/contacts",
            headers={"Origin": "http://localhost:5173", "X-Request-ID": "rid-9"},
        )
        foreign = await ac.get("/api/contacts", headers={"Origin": "https://evil.example"})

    assert allowed.status_code == 500
    assert allowed.headers["access-control-allow-origin"] == "http://localhost:5173"
    assert allowed.headers["x-request-id"] == "rid-9"
    assert allowed.json()["request_id"] == "rid-9"

    assert foreign.status_code == 500
    assert "access-control-allow-origin" not in foreign.headers


@pytest.mark.asyncio
async def test_cors_origins_come_from_settings(test_settings):
    settings = test_settings.model_copy(update={"cors_origins": ["https://club.example"]})
    app = create_app(settings=settings, store=_BrokenStore())
    async with AsyncClient(
        transport=ASGITransport(app=app, raise_app_exceptions=False),
        base_url="http://test",
    ) as ac:
        configured = await ac.get("/health", headers={"Origin": "https://club.example"})
        dev = await ac.get("/health", headers={"Origin": "http://localhost:5173"})

    assert configured.headers["access-control-allow-origin"] == "https://club.example"
    assert "access-control-allow-origin" not in dev.headers
