"""HTTP surface: health, generated document, schema browsing."""

import pytest

from uma_openapi.models.enums import Category


@pytest.mark.asyncio
async def test_health(client):
    response = await client.get("/api/v1/health")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "healthy"
    assert data["service"] == "uma-openapi"
    assert data["version"] == "2025.06.16"
    assert data["schemas"] == 129


@pytest.mark.asyncio
async def test_trace_id_generated_and_echoed(client):
    response = await client.get("/api/v1/health")
    assert response.headers["X-Trace-Id"].startswith("trc_")

    response = await client.get("/api/v1/health", headers={"X-Trace-Id": "trc_fixed"})
    assert response.headers["X-Trace-Id"] == "trc_fixed"


@pytest.mark.asyncio
async def test_openapi_document(client, generator):
    response = await client.get("/api/v1/openapi.json")
    assert response.status_code == 200
    document = response.json()
    assert document["openapi"] == "3.1.1"
    assert document == generator.generate()
    assert len(document["components"]["schemas"]) == 129


@pytest.mark.asyncio
async def test_framework_docs_routes_disabled(client):
    assert (await client.get("/openapi.json")).status_code == 404
    assert (await client.get("/docs")).status_code == 404


@pytest.mark.asyncio
async def test_swagger_ui(client):
    response = await client.get("/api/v1/docs")
    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/html")
    assert "/api/v1/openapi.json" in response.text
    assert "swagger-ui-dist@5.25.2" in response.text


@pytest.mark.asyncio
async def test_openapi_stats(client):
    response = await client.get("/api/v1/openapi/stats")
    assert response.status_code == 200
    data = response.json()
    assert data["total_schemas"] == 129
    assert data["schemas_by_category"]["docker"] == 15


@pytest.mark.asyncio
async def test_openapi_validate(client):
    response = await client.get("/api/v1/openapi/validate")
    assert response.status_code == 200
    assert response.json() == {"valid": True, "errors": []}


@pytest.mark.asyncio
async def test_list_schemas(client):
    response = await client.get("/api/v1/schemas")
    assert response.status_code == 200
    data = response.json()
    assert data["total"] == len(data["schemas"]) == 129
    assert data["schemas"] == sorted(data["schemas"])
    assert "LoginRequest" in data["schemas"]


@pytest.mark.asyncio
async def test_schemas_by_category(client):
    response = await client.get("/api/v1/schemas/categories")
    assert response.status_code == 200
    data = response.json()
    assert set(data) == {str(category) for category in Category}
    assert "LoginRequest" in data["Auth"]
    assert data["Auth"] == sorted(data["Auth"])
    assert sum(len(names) for names in data.values()) == 129


@pytest.mark.asyncio
async def test_get_schema_by_name(client, registry):
    response = await client.get("/api/v1/schemas/LoginRequest")
    assert response.status_code == 200
    data = response.json()
    assert data["name"] == "LoginRequest"
    assert data["category"] == "Auth"
    assert data["definition"] == registry.get_schema("LoginRequest")


@pytest.mark.asyncio
async def test_get_unknown_schema_returns_404(client):
    response = await client.get(
        "/api/v1/schemas/NoSuchSchema", headers={"X-Trace-Id": "trc_missing"},
    )
    assert response.status_code == 404
    error = response.json()["error"]
    assert error["code"] == "SCHEMA_NOT_FOUND"
    assert error["details"] == {"schema": "NoSuchSchema"}
    assert error["trace_id"] == "trc_missing"
    assert "timestamp" in error


@pytest.mark.asyncio
async def test_schema_lookup_is_case_sensitive(client):
    response = await client.get("/api/v1/schemas/loginrequest")
    assert response.status_code == 404
