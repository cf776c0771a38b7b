"""Schema describing the generated OpenAPI document itself."""

from uma_openapi.schemas.providers._shared import prop


def get_documentation_schemas() -> dict:
    return {"OpenAPISpec": _openapi_spec()}


def _definition_map(description: str, item: str) -> dict:
    return {
        "type": "object",
        "description": description,
        "additionalProperties": {"type": "object", "description": item},
    }


def _openapi_spec() -> dict:
    return {
        "type": "object",
        "description": "Complete OpenAPI 3.1 specification for the UMA API",
        "properties": {
            "openapi": prop("string", "OpenAPI specification version", "3.1.1"),
            "info": {
                "type": "object",
                "properties": {
                    "title": prop("string", "API title", "UMA REST API"),
                    "version": prop("string", "API version", "2025.06.16"),
                    "description": prop(
                        "string", "API description",
                        "Unraid Management API for system monitoring and control",
                    ),
                },
                "required": ["title", "version"],
            },
            "servers": {
                "type": "array",
                "items": {
                    "type": "object",
                    "properties": {
                        "url": prop("string", "Server URL", "http://192.168.20.21:34600"),
                        "description": prop("string", "Server description", "UMA API Server"),
                    },
                    "required": ["url"],
                },
            },
            "paths": _definition_map("API paths and operations", "Path item with HTTP operations"),
            "components": {
                "type": "object",
                "properties": {
                    "schemas": _definition_map("Reusable schema definitions", "Schema definition"),
                    "responses": _definition_map(
                        "Reusable response definitions", "Response definition",
                    ),
                    "parameters": _definition_map(
                        "Reusable parameter definitions", "Parameter definition",
                    ),
                    "securitySchemes": _definition_map(
                        "Security scheme definitions", "Security scheme definition",
                    ),
                },
            },
            "tags": {
                "type": "array",
                "items": {
                    "type": "object",
                    "properties": {
                        "name": prop("string", "Tag name", "System"),
                        "description": prop(
                            "string", "Tag description",
                            "System monitoring and control operations",
                        ),
                    },
                    "required": ["name"],
                },
            },
        },
        "required": ["openapi", "info", "paths"],
    }
