"""
Customer Portal - HTTP Endpoint Tests
=======================================

What:  Exercises every route through the full ASGI stack (middleware,
       exception handlers, static fallback) with HTTPX's ASGITransport.

What we test:
    ✅ GET /                       HTML landing page
    ✅ GET /api/customers          all three records, in order
    ✅ GET /api/customers/{id}     hit, unknown id, non-numeric id
    ✅ GET /api/health             status, uptime, timestamp, environment
    ✅ GET /api/info               fixed literal object
    ✅ Unknown paths and wrong methods → 404
    ✅ Static fallback for undefined paths
    ✅ X-Request-ID header
"""

import re

import pytest

EXPECTED_CUSTOMERS = [
    {"id": 1, "name": "Acme Corp", "email": "contact@acme.com"},
    {"id": 2, "name": "TechStart Inc", "email": "info@techstart.com"},
    {"id": 3, "name": "Global Services", "email": "hello@globalservices.com"},
]

NOT_FOUND_BODY = {"success": False, "message": "Customer not found"}

ISO_8601_MILLIS = re.compile(r"^\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}\.\d{3}Z$")


class TestHomePage:

    @pytest.mark.asyncio
    async def test_home_renders_html(self, test_client):
        response = await test_client.get("/")
        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/html")
        assert "Acme Corp" in response.text
        assert "/api/customers" in response.text


class TestListCustomers:

    @pytest.mark.asyncio
    async def test_list_customers(self, test_client):
        response = await test_client.get("/api/customers")
        assert response.status_code == 200
        assert response.headers["content-type"] == "application/json"
        assert response.json() == {
            "success": True,
            "count": 3,
            "data": EXPECTED_CUSTOMERS,
        }


class TestGetCustomer:

    @pytest.mark.asyncio
    async def test_get_customer(self, test_client):
        response = await test_client.get("/api/customers/2")
        assert response.status_code == 200
        body = response.json()
        assert body["success"] is True
        assert body["data"] == EXPECTED_CUSTOMERS[1]

    @pytest.mark.asyncio
    async def test_leading_digits_are_enough(self, test_client):
        response = await test_client.get("/api/customers/1abc")
        assert response.status_code == 200
        assert response.json()["data"]["name"] == "Acme Corp"

    @pytest.mark.asyncio
    @pytest.mark.parametrize("raw_id", ["999", "abc", "0", "-1"])
    async def test_not_found(self, test_client, raw_id):
        """Unknown and unparsable ids both yield the same 404, never a 400/422."""
        response = await test_client.get(f"/api/customers/{raw_id}")
        assert response.status_code == 404
        assert response.headers["content-type"] == "application/json"
        assert response.json() == NOT_FOUND_BODY


class TestHealth:

    @pytest.mark.asyncio
    async def test_health(self, test_client):
        response = await test_client.get("/api/health")
        assert response.status_code == 200
        body = response.json()
        assert set(body) == {"status", "uptime", "timestamp", "application", "environment"}
        assert body["status"] == "healthy"
        assert body["application"] == "customer-portal"
        assert body["environment"] == "test"
        assert body["uptime"] >= 0
        assert ISO_8601_MILLIS.match(body["timestamp"])

    @pytest.mark.asyncio
    async def test_uptime_is_non_decreasing(self, test_client):
        first = (await test_client.get("/api/health")).json()["uptime"]
        second = (await test_client.get("/api/health")).json()["uptime"]
        assert second >= first


class TestInfo:

    @pytest.mark.asyncio
    async def test_info_is_literal_and_stable(self, test_client):
        first = await test_client.get("/api/info")
        second = await test_client.get("/api/info")
        assert first.status_code == 200
        assert first.json() == second.json() == {
            "name": "Customer Portal",
            "version": "1.0.0",
            "developer": "Application Team",
            "description": "Simple customer management portal deployed with no-code Terraform modules",
            "infrastructure": "Managed by Platform Team",
            "module_used": "webserver v1.0.0",
            "deployment": "HCP Terraform + Private Registry",
        }


class TestNotFound:

    @pytest.mark.asyncio
    async def test_unknown_path(self, test_client):
        response = await test_client.get("/does-not-exist")
        assert response.status_code == 404

    @pytest.mark.asyncio
    @pytest.mark.parametrize("path", ["/api/customers", "/api/customers/1", "/api/health"])
    async def test_wrong_method_is_not_found(self, test_client, path):
        response = await test_client.post(path)
        assert response.status_code == 404

    @pytest.mark.asyncio
    @pytest.mark.parametrize("path", ["/", "/api/customers", "/api/health"])
    async def test_head_is_not_found(self, test_client, path):
        response = await test_client.head(path)
        assert response.status_code == 404

    @pytest.mark.asyncio
    @pytest.mark.parametrize("path", ["/api/customers/", "/api/info/"])
    async def test_trailing_slash_is_not_found(self, test_client, path):
        """Paths match strictly; no redirect to the slash-less route."""
        response = await test_client.get(path)
        assert response.status_code == 404
        assert "location" not in response.headers


class TestStaticFallback:

    @pytest.mark.asyncio
    async def test_serves_static_file(self, static_client):
        response = await static_client.get("/robots.txt")
        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/plain")
        assert "User-agent" in response.text

    @pytest.mark.asyncio
    async def test_missing_static_file(self, static_client):
        response = await static_client.get("/missing.css")
        assert response.status_code == 404

    @pytest.mark.asyncio
    async def test_routes_win_over_static_files(self, static_client):
        """public/index.html exists, but GET / still renders the portal page."""
        response = await static_client.get("/")
        assert "Acme Corp" in response.text
        assert "static index" not in response.text

    @pytest.mark.asyncio
    async def test_api_routes_still_served(self, static_client):
        response = await static_client.get("/api/customers/3")
        assert response.json()["data"]["name"] == "Global Services"

    @pytest.mark.asyncio
    async def test_wrong_method_with_static_mount(self, static_client):
        response = await static_client.post("/api/customers")
        assert response.status_code == 404

    @pytest.mark.asyncio
    @pytest.mark.parametrize("path", ["/", "/api/customers", "/api/customers/2", "/api/info"])
    async def test_head_on_route_paths_ignores_static_files(self, static_client, path):
        """HEAD / must not fall through to public/index.html."""
        response = await static_client.head(path)
        assert response.status_code == 404

    @pytest.mark.asyncio
    async def test_head_on_static_file(self, static_client):
        response = await static_client.head("/robots.txt")
        assert response.status_code == 200

    @pytest.mark.asyncio
    async def test_trailing_slash_with_static_mount(self, static_client):
        response = await static_client.get("/api/customers/")
        assert response.status_code == 404


class TestRequestId:

    @pytest.mark.asyncio
    async def test_generates_request_id(self, test_client):
        response = await test_client.get("/api/info")
        assert len(response.headers["X-Request-ID"]) == 8

    @pytest.mark.asyncio
    async def test_echoes_client_request_id(self, test_client):
        response = await test_client.get("/api/info", headers={"X-Request-ID": "abc-123"})
        assert response.headers["X-Request-ID"] == "abc-123"
