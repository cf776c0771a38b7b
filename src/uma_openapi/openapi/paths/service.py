"""Path items for the endpoints this service serves itself."""

from uma_openapi.openapi.paths._builders import API_PREFIX, errors, get, json_response
from uma_openapi.schemas.providers._shared import ref

_NAMES = {"type": "array", "items": {"type": "string"}}


def get_service_paths() -> dict:
    return {
        f"{API_PREFIX}/health": _health(),
        f"{API_PREFIX}/docs": _docs(),
        f"{API_PREFIX}/openapi.json": get(
            "OpenAPI Specification",
            "Get the complete OpenAPI 3.1.1 specification for the UMA REST API",
            "getOpenAPISpec",
            "Documentation",
            {"200": json_response("OpenAPI specification in JSON format", ref("OpenAPISpec"))},
        ),
        f"{API_PREFIX}/openapi/stats": get(
            "Document statistics",
            "Counts of paths, schemas and responses, schemas per category and enabled features",
            "getOpenAPIStats",
            "Documentation",
            {"200": json_response("Document statistics", {"type": "object"})},
        ),
        f"{API_PREFIX}/openapi/validate": get(
            "Validate document",
            "Run structural checks on the generated document",
            "validateOpenAPISpec",
            "Documentation",
            {
                "200": json_response(
                    "Validation result",
                    {
                        "type": "object",
                        "properties": {"valid": {"type": "boolean"}, "errors": _NAMES},
                        "required": ["valid", "errors"],
                    },
                ),
            },
        ),
        f"{API_PREFIX}/schemas": get(
            "List schemas",
            "Names of every registered component schema",
            "listSchemas",
            "Schemas",
            {
                "200": json_response(
                    "Registered schema names",
                    {
                        "type": "object",
                        "properties": {
                            "schemas": _NAMES,
                            "total": {"type": "integer", "minimum": 0},
                        },
                        "required": ["schemas", "total"],
                    },
                ),
            },
        ),
        f"{API_PREFIX}/schemas/categories": get(
            "Schemas by category",
            "Registered schema names grouped by category; every category is present",
            "getSchemasByCategory",
            "Schemas",
            {
                "200": json_response(
                    "Category to schema names",
                    {"type": "object", "additionalProperties": _NAMES},
                ),
            },
        ),
        f"{API_PREFIX}/schemas/{{name}}": _schema_by_name(),
    }


def _health() -> dict:
    health = {"application/json": {"schema": ref("HealthResponse")}}
    return get(
        "Health check",
        "Check the health status of the UMA API service and its dependencies",
        "healthCheck",
        "Monitoring",
        {
            "200": {"description": "Service is healthy", "content": health},
            "503": {"description": "Service is unhealthy", "content": health},
        },
    )


def _docs() -> dict:
    return get(
        "API Documentation",
        "Interactive Swagger UI documentation for the UMA REST API",
        "getDocumentation",
        "Documentation",
        {
            "200": {
                "description": "Swagger UI HTML page",
                "content": {"text/html": {"schema": {"type": "string"}}},
            }
        },
    )


def _schema_by_name() -> dict:
    item = get(
        "Get schema",
        "A single registered schema definition and its category",
        "getSchema",
        "Schemas",
        {
            "200": json_response(
                "Schema definition",
                {
                    "type": "object",
                    "properties": {
                        "name": {"type": "string"},
                        "category": {"type": "string"},
                        "definition": {"type": "object"},
                    },
                    "required": ["name", "category", "definition"],
                },
            ),
            **errors("404"),
        },
    )
    item["get"]["parameters"] = [
        {
            "name": "name",
            "in": "path",
            "required": True,
            "description": "Case-sensitive schema name",
            "schema": {"type": "string", "example": "LoginRequest"},
        }
    ]
    return item
