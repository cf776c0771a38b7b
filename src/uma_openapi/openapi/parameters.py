"""Reusable operation parameters published under `components.parameters`."""

RESOURCE_NAME_PATTERN = "^[a-zA-Z0-9][a-zA-Z0-9_.-]+$"


def param_ref(name: str) -> dict:
    return {"$ref": f"#/components/parameters/{name}"}


def _param(name: str, location: str, description: str, schema: dict, required: bool = False) -> dict:
    return {
        "name": name,
        "in": location,
        "description": description,
        "required": required,
        "schema": schema,
    }


def _flag(name: str, description: str, example: bool = False) -> dict:
    return _param(name, "query", description, {"type": "boolean", "default": False, "example": example})


def get_common_parameters() -> dict:
    return {
        "PageParameter": _param(
            "page", "query", "Page number for pagination (1-based)",
            {"type": "integer", "minimum": 1, "default": 1, "example": 1},
        ),
        "LimitParameter": _param(
            "limit", "query", "Number of items per page",
            {"type": "integer", "minimum": 1, "maximum": 1000, "default": 50, "example": 50},
        ),
        "RequestIDParameter": _param(
            "X-Request-ID", "header", "Optional request ID for tracing and debugging",
            {"type": "string", "pattern": "^[a-zA-Z0-9-_]{1,64}$", "example": "req_1234567890_5678"},
        ),
        "ContainerIDParameter": _param(
            "id", "path", "Container ID or name",
            {"type": "string", "pattern": RESOURCE_NAME_PATTERN, "example": "plex"},
            required=True,
        ),
        "VMIDParameter": _param(
            "id", "path", "Virtual machine ID or name",
            {"type": "string", "pattern": RESOURCE_NAME_PATTERN, "example": "Windows-10-Gaming"},
            required=True,
        ),
        "DiskIDParameter": _param(
            "id", "path", "Disk identifier (e.g., disk1, parity, cache)",
            {"type": "string", "pattern": r"^(disk|parity|cache)\d*$", "example": "disk1"},
            required=True,
        ),
        "ScriptIDParameter": _param(
            "id", "path", "User script name",
            {"type": "string", "pattern": RESOURCE_NAME_PATTERN, "example": "backup_appdata"},
            required=True,
        ),
        "AllContainersParameter": _flag("all", "Include stopped containers in the response"),
        "ForceParameter": _flag("force", "Force the operation (use with caution)"),
        "VerboseParameter": _flag("verbose", "Include detailed information in the response"),
        "SMARTParameter": _flag("smart", "Include SMART data in disk information", example=True),
        "TemperatureParameter": _flag("temperature", "Include temperature data", example=True),
        "TimeoutParameter": _param(
            "timeout", "query", "Operation timeout in seconds",
            {"type": "integer", "minimum": 1, "maximum": 300, "default": 30, "example": 30},
        ),
        "StatusFilterParameter": _param(
            "status", "query", "Filter by status",
            {"type": "array", "items": {"type": "string"}, "example": ["running", "stopped"]},
        ),
        "SinceParameter": _param(
            "since", "query", "Show data since timestamp (ISO 8601 format)",
            {"type": "string", "format": "date-time", "example": "2025-06-16T14:30:00Z"},
        ),
        "UntilParameter": _param(
            "until", "query", "Show data until timestamp (ISO 8601 format)",
            {"type": "string", "format": "date-time", "example": "2025-06-16T15:30:00Z"},
        ),
        "AcceptParameter": _param(
            "Accept", "header", "Preferred response content type",
            {
                "type": "string",
                "enum": ["application/json", "application/vnd.uma.v1+json"],
                "default": "application/json",
                "example": "application/vnd.uma.v1+json",
            },
        ),
        "LogLevelParameter": _param(
            "level", "query", "Filter logs by level",
            {
                "type": "array",
                "items": {"type": "string", "enum": ["debug", "info", "warn", "error", "fatal"]},
                "example": ["error", "fatal"],
            },
        ),
        "LogLinesParameter": _param(
            "lines", "query", "Number of log lines to return",
            {"type": "integer", "minimum": 1, "maximum": 10000, "default": 100, "example": 100},
        ),
    }
