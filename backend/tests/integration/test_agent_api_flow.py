"""Integration tests for the full application behind the key guards."""

import pytest
from httpx import AsyncClient, ASGITransport

from portfolio_api.api.middleware import wait_for_pending_usage
from portfolio_api.core.storage.database_storage import get_storage
from portfolio_api.main import create_app


@pytest.fixture
def app(storage):
    """Application wired to the test database."""
    app = create_app(storage=storage, use_lifespan=False)
    app.dependency_overrides[get_storage] = lambda: storage
    return app


@pytest.mark.integration
class TestAgentApiFlow:
    """End-to-end flows through the guard chain."""

    @pytest.mark.asyncio
    async def test_public_routes_need_no_key(self, app):
        """Test that site content and health checks are open."""
        transport = ASGITransport(app=app)
        async with AsyncClient(transport=transport, base_url="http://test") as client:
            health = await client.get("/health")
            portfolio = await client.get("/api/portfolio")
            root = await client.get("/")

        assert health.json() == {"status": "healthy"}
        assert portfolio.status_code == 200
        assert root.json()["status"] == "running"

    @pytest.mark.asyncio
    async def test_issue_key_and_call_agent_api(self, app, storage, admin_headers):
        """Test issuing a key, allowing a domain and calling the agent API."""
        transport = ASGITransport(app=app)
        async with AsyncClient(transport=transport, base_url="http://test") as client:
            # Admin: issue a key and allow a domain
            response = await client.post(
                "/api/admin/keys", json={"user_id": "user-7", "name": "Widget"}, headers=admin_headers
            )
            assert response.status_code == 201
            key = response.json()
            caller = {"Authorization": f"Bearer {key['key']}"}

            response = await client.post(
                "/api/admin/integrations",
                json={"agent_id": "agent-7", "api_key_id": key["id"], "domain": "*.shop.com"},
                headers=admin_headers,
            )
            assert response.status_code == 201

            # Caller: verify works from anywhere
            response = await client.get(
                "/api/v1/keys/verify", headers={**caller, "Origin": "https://elsewhere.io"}
            )
            assert response.status_code == 200
            assert response.json() == {
                "valid": True,
                "id": key["id"],
                "name": "Widget",
                "user_id": "user-7",
            }

            # Caller: agent API from an allowed subdomain
            response = await client.post(
                "/api/v1/agents",
                json={"agent_id": "agent-7", "user_id": "user-7", "name": "Shop Bot"},
                headers={**caller, "Origin": "https://www.shop.com"},
            )
            assert response.status_code == 201

            # Caller: same request from the apex domain is refused
            response = await client.get(
                "/api/v1/agents/agent-7", headers={**caller, "Origin": "https://shop.com"}
            )
            assert response.status_code == 403

        await wait_for_pending_usage()
        usage = await storage.get_api_usage_by_key_id(key["id"])
        assert sorted(u.status_code for u in usage) == ["200", "201", "403"]

        post_usage = [u for u in usage if u.method == "POST"]
        assert post_usage[0].request_payload["name"] == "Shop Bot"

    @pytest.mark.asyncio
    async def test_admin_requires_key(self, app):
        """Test that admin routes reject anonymous callers."""
        transport = ASGITransport(app=app)
        async with AsyncClient(transport=transport, base_url="http://test") as client:
            response = await client.post("/api/admin/keys", json={"user_id": "user-7"})

        assert response.status_code == 401
        assert response.json() == {"error": "Authorization header missing or invalid"}

    @pytest.mark.asyncio
    async def test_deactivated_key_is_refused(self, app, storage, admin_headers, api_key, auth_headers):
        """Test that deactivating a key locks its caller out."""
        transport = ASGITransport(app=app)
        async with AsyncClient(transport=transport, base_url="http://test") as client:
            before = await client.get("/api/v1/keys/verify", headers=auth_headers)
            await client.post(f"/api/admin/keys/{api_key.id}/deactivate", headers=admin_headers)
            after = await client.get("/api/v1/keys/verify", headers=auth_headers)

        assert before.status_code == 200
        assert after.status_code == 403

    @pytest.mark.asyncio
    async def test_unhandled_error_returns_generic_body(self, app, storage, admin_headers, monkeypatch):
        """Test that unexpected errors become a generic 500."""

        async def broken(*args, **kwargs):
            raise RuntimeError("boom")

        monkeypatch.setattr(storage, "get_api_keys_by_user_id", broken)

        transport = ASGITransport(app=app, raise_app_exceptions=False)
        async with AsyncClient(transport=transport, base_url="http://test") as client:
            response = await client.get(
                "/api/admin/keys", params={"user_id": "admin"}, headers=admin_headers
            )

        assert response.status_code == 500
        assert response.json() == {"error": "Internal server error"}

    @pytest.mark.asyncio
    async def test_only_admin_keys_publish_content(self, app, admin_headers, auth_headers, integration):
        """Test that site content is published through /api/admin by admin keys only."""
        post = {"title": "Launch", "slug": "launch", "content": "We are live"}

        transport = ASGITransport(app=app)
        async with AsyncClient(transport=transport, base_url="http://test") as client:
            anonymous = await client.post("/api/blog", json=post)
            no_key = await client.post("/api/admin/blog", json=post)
            widget = await client.post(
                "/api/admin/blog", json=post, headers={**auth_headers, "Origin": "https://example.com"}
            )
            admin = await client.post("/api/admin/blog", json=post, headers=admin_headers)
            listed = await client.get("/api/blog")

        assert anonymous.status_code == 405
        assert no_key.status_code == 401
        assert widget.status_code == 403
        assert admin.status_code == 201
        assert [p["slug"] for p in listed.json()] == ["launch"]

    @pytest.mark.asyncio
    async def test_widget_key_cannot_mint_keys(self, app, storage, auth_headers, integration):
        """Test that a domain-scoped key cannot issue keys, even from its own domain."""
        transport = ASGITransport(app=app)
        async with AsyncClient(transport=transport, base_url="http://test") as client:
            response = await client.post(
                "/api/admin/keys",
                json={"user_id": "someone-else"},
                headers={**auth_headers, "Origin": "https://example.com"},
            )

        assert response.status_code == 403
        assert await storage.get_api_keys_by_user_id("someone-else") == []
