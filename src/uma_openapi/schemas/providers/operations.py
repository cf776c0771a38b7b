"""Operation tracking schemas (list, stats, single operation)."""

from uma_openapi.schemas.providers._shared import (
    ASYNC_OPERATION_TYPES,
    OPERATION_STATUSES,
    ref,
)


def get_operation_schemas() -> dict:
    return {
        "OperationList": _operation_list(),
        "OperationStats": _operation_stats(),
        "OperationInfo": _operation_info(),
    }


def _operation_list() -> dict:
    return {
        "type": "array",
        "description": "List of async operations",
        "items": ref("OperationInfo"),
        "example": [
            {
                "id": "op-123",
                "type": "parity_check",
                "status": "running",
                "progress": 45,
                "description": "Parity check in progress",
            },
        ],
    }


def _operation_stats() -> dict:
    return {
        "type": "object",
        "properties": {
            "total": {
                "type": "integer",
                "description": "Total number of operations",
                "example": 15,
                "minimum": 0,
            },
            "active": {
                "type": "integer",
                "description": "Number of active operations",
                "example": 3,
                "minimum": 0,
            },
            "completed": {
                "type": "integer",
                "description": "Number of completed operations",
                "example": 10,
                "minimum": 0,
            },
            "failed": {
                "type": "integer",
                "description": "Number of failed operations",
                "example": 2,
                "minimum": 0,
            },
            "by_type": {
                "type": "object",
                "description": "Operation count by type",
                "additionalProperties": {"type": "integer"},
                "example": {"parity_check": 5, "array_start": 3, "disk_scan": 7},
            },
            "last_updated": {
                "type": "string",
                "format": "date-time",
                "description": "When statistics were last updated",
                "example": "2024-01-01T12:00:00Z",
            },
        },
        "required": ["total", "active", "completed", "failed"],
    }


def _operation_info() -> dict:
    return {
        "type": "object",
        "properties": {
            "id": {
                "type": "string",
                "description": "Unique operation identifier",
                "example": "op-123",
            },
            "type": {
                "type": "string",
                "description": "Type of operation",
                "enum": list(ASYNC_OPERATION_TYPES),
                "example": "parity_check",
            },
            "status": {
                "type": "string",
                "description": "Current operation status",
                "enum": list(OPERATION_STATUSES),
                "example": "running",
            },
            "progress": {
                "type": "integer",
                "description": "Progress percentage (0-100)",
                "minimum": 0,
                "maximum": 100,
                "example": 45,
            },
            "description": {
                "type": "string",
                "description": "Human-readable operation description",
                "example": "Parity check in progress",
            },
            "cancellable": {
                "type": "boolean",
                "description": "Whether the operation can be cancelled",
                "example": True,
            },
            "started": {
                "type": "string",
                "format": "date-time",
                "description": "When the operation was started",
                "example": "2024-01-01T12:00:00Z",
            },
            "completed": {
                "type": "string",
                "format": "date-time",
                "description": "When the operation completed (null if not finished)",
                "example": "2024-01-01T13:00:00Z",
                "nullable": True,
            },
            "error": {
                "type": "string",
                "description": "Error message if operation failed",
                "example": "Disk read error",
                "nullable": True,
            },
            "result": {
                "type": "object",
                "description": "Operation result data",
                "additionalProperties": True,
                "example": {"errors_found": 0, "sectors_checked": 1000000, "duration": 3600},
                "nullable": True,
            },
            "created_by": {
                "type": "string",
                "description": "User or system that created the operation",
                "example": "admin",
            },
        },
        "required": ["id", "type", "status", "description", "started"],
    }
