"""
Doubler API - HTTP Endpoint Tests
==================================

What:  Tests for POST /doubler/{param1} and the generated documentation,
       driven through HTTPX's ASGITransport.

What we test:
    ✅ Even param1 returns 200 with doubled values
    ✅ Odd param1 and malformed input return 400 "invalid_argument"
    ✅ Error bodies carry no result fields
    ✅ OpenAPI document describes the operation (multipleOf 2, tags, 400)
    ✅ Swagger UI is served at /docs
"""

import pytest
from httpx import AsyncClient, ASGITransport

from doubler.config import Settings
from doubler.main import create_app


class TestDoublerEndpoint:
    """Successful calls."""

    @pytest.mark.asyncio
    async def test_doubles_values(self, test_client):
        response = await test_client.post("/doubler/4", json={"param2": "ab"})
        assert response.status_code == 200
        assert response.json() == {"value1": 8, "value2": "abab"}

    @pytest.mark.asyncio
    async def test_zero_and_empty_string(self, test_client):
        response = await test_client.post("/doubler/0", json={"param2": ""})
        assert response.status_code == 200
        assert response.json() == {"value1": 0, "value2": ""}

    @pytest.mark.asyncio
    async def test_negative_even(self, test_client):
        response = await test_client.post("/doubler/-2", json={"param2": "z"})
        assert response.status_code == 200
        assert response.json() == {"value1": -4, "value2": "zz"}

    @pytest.mark.asyncio
    async def test_missing_body_means_empty_param2(self, test_client):
        response = await test_client.post("/doubler/6")
        assert response.status_code == 200
        assert response.json() == {"value1": 12, "value2": ""}

    @pytest.mark.asyncio
    async def test_missing_param2_defaults_to_empty(self, test_client):
        response = await test_client.post("/doubler/2", json={})
        assert response.status_code == 200
        assert response.json() == {"value1": 4, "value2": ""}

    @pytest.mark.asyncio
    async def test_repeated_calls_are_identical(self, test_client):
        first = await test_client.post("/doubler/10", json={"param2": "hi"})
        second = await test_client.post("/doubler/10", json={"param2": "hi"})
        assert first.status_code == second.status_code == 200
        assert first.json() == second.json()


class TestDoublerInvalidArgument:
    """Rejected calls share one error shape."""

    @pytest.mark.asyncio
    async def test_odd_param1_rejected(self, test_client):
        response = await test_client.post("/doubler/3", json={"param2": "x"})
        assert response.status_code == 400
        body = response.json()
        assert body["error"] == "invalid_argument"
        assert body["message"] == "invalid argument"
        assert "value1" not in body
        assert "value2" not in body

    @pytest.mark.asyncio
    async def test_odd_negative_param1_rejected(self, test_client):
        response = await test_client.post("/doubler/-7", json={"param2": "x"})
        assert response.status_code == 400
        assert response.json()["error"] == "invalid_argument"

    @pytest.mark.asyncio
    async def test_non_integer_param1_rejected(self, test_client):
        response = await test_client.post("/doubler/abc", json={"param2": "x"})
        assert response.status_code == 400
        assert response.json()["error"] == "invalid_argument"

    @pytest.mark.asyncio
    async def test_non_string_param2_rejected(self, test_client):
        response = await test_client.post("/doubler/4", json={"param2": 5})
        assert response.status_code == 400
        body = response.json()
        assert body["error"] == "invalid_argument"
        assert body["details"]["errors"]

    @pytest.mark.asyncio
    async def test_malformed_json_rejected(self, test_client):
        response = await test_client.post(
            "/doubler/4",
            content=b'{"param2": ',
            headers={"Content-Type": "application/json"},
        )
        assert response.status_code == 400
        assert response.json()["error"] == "invalid_argument"

    @pytest.mark.asyncio
    async def test_error_carries_request_id(self, test_client):
        response = await test_client.post(
            "/doubler/3", json={"param2": "x"}, headers={"X-Request-ID": "trace-42"}
        )
        assert response.status_code == 400
        assert response.json()["request_id"] == "trace-42"
        assert response.headers["X-Request-ID"] == "trace-42"


class TestDocumentation:
    """Generated OpenAPI document and Swagger UI."""

    @pytest.mark.asyncio
    async def test_openapi_info(self, test_client):
        response = await test_client.get("/docs/openapi.json")
        assert response.status_code == 200
        info = response.json()["info"]
        assert info["title"] == "Basic Example"
        assert info["description"] == "This app showcases a trivial REST API."
        assert info["version"] == "v1.2.3"

    @pytest.mark.asyncio
    async def test_openapi_describes_operation(self, test_client):
        spec = (await test_client.get("/docs/openapi.json")).json()
        operation = spec["paths"]["/doubler/{param1}"]["post"]

        assert operation["summary"] == "Doubler"
        assert operation["description"] == "Doubler doubles parameter values."
        assert operation["tags"] == ["transformation"]
        assert "400" in operation["responses"]
        assert operation.get("deprecated", False) is False

        param1 = next(p for p in operation["parameters"] if p["name"] == "param1")
        assert param1["in"] == "path"
        assert param1["schema"]["multipleOf"] == 2

    @pytest.mark.asyncio
    async def test_openapi_body_schema(self, test_client):
        spec = (await test_client.get("/docs/openapi.json")).json()
        body_schema = spec["components"]["schemas"]["DoublerBody"]
        assert body_schema["properties"]["param2"]["description"] == "Parameter in resource body."
        output_schema = spec["components"]["schemas"]["DoublerOutput"]
        assert set(output_schema["properties"]) == {"value1", "value2"}

    @pytest.mark.asyncio
    async def test_swagger_ui_served(self, test_client):
        response = await test_client.get("/docs")
        assert response.status_code == 200
        assert "text/html" in response.headers["content-type"]
        assert "/docs/openapi.json" in response.text

    @pytest.mark.asyncio
    async def test_deprecated_flag(self):
        app = create_app(Settings(_env_file=None, doubler_deprecated=True))
        async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
            spec = (await client.get("/docs/openapi.json")).json()
        assert spec["paths"]["/doubler/{param1}"]["post"]["deprecated"] is True

    @pytest.mark.asyncio
    async def test_custom_title(self):
        app = create_app(Settings(_env_file=None, api_title="Other", api_version="v9"))
        async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
            info = (await client.get("/docs/openapi.json")).json()["info"]
        assert info["title"] == "Other"
        assert info["version"] == "v9"


class TestHealth:

    @pytest.mark.asyncio
    async def test_health(self, test_client):
        response = await test_client.get("/health")
        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "healthy"
        assert body["version"] == "v1.2.3"
        assert body["uptime_seconds"] >= 0

    @pytest.mark.asyncio
    async def test_health_version_matches_openapi(self):
        app = create_app(Settings(_env_file=None, api_version="v7.0.1"))
        async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
            health_version = (await client.get("/health")).json()["version"]
            openapi_version = (await client.get("/docs/openapi.json")).json()["info"]["version"]
        assert health_version == openapi_version == "v7.0.1"
