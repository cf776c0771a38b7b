"""Asynchronous operation request/response schemas."""

from uma_openapi.schemas.providers._shared import (
    ASYNC_OPERATION_TYPES,
    OPERATION_STATUSES,
    with_standard_envelope,
)


def get_async_operation_schemas() -> dict:
    return {
        "AsyncOperationRequest": _request(),
        "AsyncOperationResponse": _response(),
        "AsyncOperationDetailResponse": _detail_response(),
        "AsyncOperationListResponse": _list_response(),
        "AsyncOperationCancelResponse": _cancel_response(),
        "AsyncOperationStatsResponse": _stats_response(),
    }


def _type_field(description: str | None = "Type of asynchronous operation") -> dict:
    field = {"type": "string", "enum": list(ASYNC_OPERATION_TYPES)}
    if description:
        field["description"] = description
    return field


def _status_field(description: str | None = "Current status of the operation") -> dict:
    field = {"type": "string", "enum": list(OPERATION_STATUSES)}
    if description:
        field["description"] = description
    return field


def _request() -> dict:
    return {
        "type": "object",
        "required": ["type"],
        "properties": {
            "type": _type_field(),
            "description": {
                "type": "string",
                "maxLength": 500,
                "description": "Human-readable description of the operation",
                "example": "Comprehensive SMART data collection for all disks",
            },
            "cancellable": {
                "type": "boolean",
                "default": True,
                "description": "Whether the operation can be cancelled",
            },
            "parameters": {
                "type": "object",
                "description": "Operation-specific parameters",
                "additionalProperties": True,
                "examples": [{"type": "check", "priority": "normal"}],
            },
        },
    }


def _response() -> dict:
    return with_standard_envelope({
        "type": "object",
        "properties": {
            "id": {
                "type": "string",
                "format": "uuid",
                "description": "Unique identifier for the operation",
            },
            "type": _type_field(),
            "status": _status_field(),
            "description": {"type": "string", "description": "Human-readable description"},
            "cancellable": {
                "type": "boolean",
                "description": "Whether the operation can be cancelled",
            },
            "started": {
                "type": "string",
                "format": "date-time",
                "description": "When the operation was started",
            },
        },
    })


def _detail_response() -> dict:
    return with_standard_envelope({
        "type": "object",
        "properties": {
            "id": {
                "type": "string",
                "format": "uuid",
                "description": "Unique identifier for the operation",
            },
            "type": _type_field(),
            "status": _status_field(),
            "progress": {
                "type": "integer",
                "minimum": 0,
                "maximum": 100,
                "description": "Progress percentage (0-100)",
            },
            "started": {
                "type": "string",
                "format": "date-time",
                "description": "When the operation was started",
            },
            "completed": {
                "type": "string",
                "format": "date-time",
                "nullable": True,
                "description": "When the operation completed (if finished)",
            },
            "error": {
                "type": "string",
                "nullable": True,
                "description": "Error message if operation failed",
            },
            "result": {
                "type": "object",
                "nullable": True,
                "description": "Operation result data",
                "additionalProperties": True,
            },
            "cancellable": {
                "type": "boolean",
                "description": "Whether the operation can be cancelled",
            },
            "description": {"type": "string", "description": "Human-readable description"},
            "created_by": {
                "type": "string",
                "description": "User or system that created the operation",
            },
        },
    })


def _list_response() -> dict:
    return with_standard_envelope({
        "type": "object",
        "properties": {
            "operations": {
                "type": "array",
                "items": {
                    "type": "object",
                    "properties": {
                        "id": {"type": "string", "format": "uuid"},
                        "type": _type_field(None),
                        "status": _status_field(None),
                        "progress": {"type": "integer", "minimum": 0, "maximum": 100},
                        "started": {"type": "string", "format": "date-time"},
                        "description": {"type": "string"},
                        "cancellable": {"type": "boolean"},
                    },
                },
            },
            "total": {"type": "integer", "description": "Total number of operations"},
            "active": {"type": "integer", "description": "Number of active operations"},
            "completed": {"type": "integer", "description": "Number of completed operations"},
            "failed": {"type": "integer", "description": "Number of failed operations"},
        },
    })


def _cancel_response() -> dict:
    return with_standard_envelope({
        "type": "object",
        "properties": {
            "success": {"type": "boolean", "example": True},
            "message": {"type": "string", "example": "Operation cancelled successfully"},
        },
    })


def _stats_response() -> dict:
    return with_standard_envelope({
        "type": "object",
        "properties": {
            "total_operations": {"type": "integer", "description": "Total number of operations"},
            "max_operations": {
                "type": "integer",
                "description": "Maximum concurrent operations allowed",
            },
            "by_status": {
                "type": "object",
                "additionalProperties": {"type": "integer"},
                "description": "Count of operations by status",
            },
            "by_type": {
                "type": "object",
                "additionalProperties": {"type": "integer"},
                "description": "Count of operations by type",
            },
        },
    })
