"""Fragments reused by several provider groups."""

ASYNC_OPERATION_TYPES = [
    "parity_check", "parity_correct", "array_start", "array_stop",
    "disk_scan", "smart_scan", "system_reboot", "system_shutdown",
    "bulk_container", "bulk_vm",
]

OPERATION_STATUSES = ["pending", "running", "completed", "failed", "cancelled"]


def ref(name: str) -> dict:
    """JSON reference to another registered component schema."""
    return {"$ref": f"#/components/schemas/{name}"}


def array_of(name: str, description: str | None = None) -> dict:
    schema = {"type": "array", "items": ref(name)}
    if description:
        schema["description"] = description
    return schema


def standard_response_meta() -> dict:
    return {
        "type": "object",
        "properties": {
            "timestamp": {
                "type": "integer",
                "format": "int64",
                "description": "Unix timestamp of the response",
            },
            "request_id": {
                "type": "string",
                "description": "Unique request identifier for tracing",
            },
            "api_version": {
                "type": "string",
                "example": "v1",
                "description": "API version",
            },
        },
        "required": ["timestamp", "api_version"],
    }


def standard_response() -> dict:
    return {
        "type": "object",
        "properties": {"meta": standard_response_meta()},
    }


def with_standard_envelope(data: dict) -> dict:
    """`allOf` of the standard envelope and an object carrying ``data``."""
    return {
        "allOf": [
            standard_response(),
            {"type": "object", "properties": {"data": data}},
        ],
    }


def prop(type_: str, description: str, example=None, **extra) -> dict:
    """Property definition with the usual type/description/example keys.

    Keyword arguments pass straight through, so JSON Schema keys like
    ``minimum`` or ``enum`` can be given directly. List values are
    copied so module-level enums are never shared between definitions.
    """
    schema = {"type": type_, "description": description}
    if example is not None:
        schema["example"] = example
    for key, value in extra.items():
        schema[key] = list(value) if isinstance(value, list) else value
    return schema


def timestamp(description: str, example: str = "2025-06-16T14:30:00Z", **extra) -> dict:
    return prop("string", description, example, format="date-time", **extra)


def string_list(description: str, example: list | None = None) -> dict:
    schema = {"type": "array", "items": {"type": "string"}, "description": description}
    if example is not None:
        schema["example"] = example
    return schema
