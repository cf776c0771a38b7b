"""Schemas shared by every endpoint group."""

from uma_openapi.schemas.providers._shared import ref


def get_common_schemas() -> dict:
    return {
        "StandardResponse": _standard_response(),
        "PaginationInfo": _pagination_info(),
        "ResponseMeta": _response_meta(),
        "HealthResponse": _health_response(),
        "Error": _error(),
        "SuccessResponse": _success_response(),
    }


def _standard_response() -> dict:
    return {
        "type": "object",
        "properties": {
            "data": {"description": "The response data"},
            "pagination": ref("PaginationInfo"),
            "meta": ref("ResponseMeta"),
        },
        "required": ["data"],
    }


def _pagination_info() -> dict:
    return {
        "type": "object",
        "properties": {
            "page": {
                "type": "integer",
                "description": "Current page number",
                "example": 1,
                "minimum": 1,
            },
            "per_page": {
                "type": "integer",
                "description": "Number of items per page",
                "example": 50,
                "minimum": 1,
                "maximum": 1000,
            },
            "total": {
                "type": "integer",
                "description": "Total number of items",
                "example": 150,
                "minimum": 0,
            },
            "has_more": {
                "type": "boolean",
                "description": "Whether there are more pages available",
                "example": True,
            },
            "total_pages": {
                "type": "integer",
                "description": "Total number of pages",
                "example": 3,
                "minimum": 0,
            },
        },
        "required": ["page", "per_page", "total", "has_more", "total_pages"],
    }


def _response_meta() -> dict:
    return {
        "type": "object",
        "properties": {
            "request_id": {
                "type": "string",
                "description": "Unique request identifier for tracing",
                "example": "req_1234567890_5678",
            },
            "timestamp": {
                "type": "string",
                "format": "date-time",
                "description": "Response timestamp in ISO 8601 format",
                "example": "2025-06-16T14:30:00Z",
            },
            "version": {
                "type": "string",
                "description": "API version",
                "example": "v1",
            },
            "server": {
                "type": "string",
                "description": "Server identifier",
                "example": "uma-server-01",
            },
        },
    }


def _health_response() -> dict:
    check = {"type": "string", "enum": ["healthy", "unhealthy"], "example": "healthy"}
    return {
        "type": "object",
        "properties": {
            "status": {
                "type": "string",
                "description": "Overall health status",
                "enum": ["healthy", "degraded", "unhealthy"],
                "example": "healthy",
            },
            "version": {
                "type": "string",
                "description": "UMA version",
                "example": "2025.06.16",
            },
            "uptime": {
                "type": "integer",
                "description": "Server uptime in seconds",
                "example": 86400,
                "minimum": 0,
            },
            "timestamp": {
                "type": "string",
                "format": "date-time",
                "description": "Health check timestamp",
                "example": "2025-06-16T14:30:00Z",
            },
            "checks": {
                "type": "object",
                "description": "Status of service health checks",
                "properties": {
                    "auth": dict(check),
                    "docker": dict(check),
                    "storage": dict(check),
                    "system": dict(check),
                },
            },
        },
        "required": ["status", "version", "uptime", "timestamp"],
    }


def _error() -> dict:
    return {
        "type": "object",
        "properties": {
            "error": {
                "type": "string",
                "description": "Human-readable error message",
                "example": "Invalid request parameters",
            },
            "code": {
                "type": "string",
                "description": "Machine-readable error code for programmatic handling",
                "example": "INVALID_REQUEST",
            },
            "details": {
                "type": "object",
                "description": "Additional error details and context",
                "additionalProperties": True,
                "example": {
                    "field": "container_ids",
                    "message": "must contain at least 1 item",
                },
            },
            "request_id": {
                "type": "string",
                "description": "Request ID for error tracking",
                "example": "req_1234567890_5678",
            },
        },
        "required": ["error"],
    }


def _success_response() -> dict:
    return {
        "type": "object",
        "properties": {
            "success": {
                "type": "boolean",
                "description": "Operation success status",
                "example": True,
            },
            "message": {
                "type": "string",
                "description": "Success message",
                "example": "Operation completed successfully",
            },
            "data": {"description": "Optional response data"},
        },
        "required": ["success"],
    }
