"""Structured error schemas.

`APIError` is the base envelope; the specialised errors narrow its `code`
enum and `details` through `allOf`.
"""

from uma_openapi.schemas.providers._shared import array_of, standard_response_meta

ERROR_CODES = [
    # General
    "INVALID_REQUEST", "UNAUTHORIZED", "FORBIDDEN", "NOT_FOUND",
    "CONFLICT", "INTERNAL_ERROR", "SERVICE_UNAVAILABLE", "RATE_LIMIT_EXCEEDED",
    # Validation
    "VALIDATION_FAILED", "MISSING_PARAMETER", "INVALID_PARAMETER", "PARAMETER_OUT_OF_RANGE",
    # Storage / array
    "ARRAY_NOT_STOPPED", "ARRAY_NOT_STARTED", "ARRAY_INVALID_STATE",
    "DISK_NOT_FOUND", "DISK_OFFLINE", "DISK_READ_ONLY",
    "PARITY_CHECK_ACTIVE", "PARITY_CHECK_FAILED", "INSUFFICIENT_SPACE",
    # Docker
    "CONTAINER_NOT_FOUND", "CONTAINER_NOT_RUNNING", "CONTAINER_NOT_STOPPED",
    "DOCKER_DAEMON_ERROR", "IMAGE_NOT_FOUND", "NETWORK_NOT_FOUND",
    # VM
    "VM_NOT_FOUND", "VM_NOT_RUNNING", "VM_NOT_STOPPED",
    "VM_CONFIG_ERROR", "VIRT_MANAGER_ERROR",
    # System
    "SYSTEM_NOT_READY", "COMMAND_FAILED", "PERMISSION_DENIED",
    "RESOURCE_BUSY", "HARDWARE_ERROR",
    # Async operations
    "OPERATION_NOT_FOUND", "OPERATION_NOT_CANCELLABLE", "OPERATION_CONFLICT",
    "OPERATION_TIMEOUT", "MAX_OPERATIONS_REACHED",
    # Authentication
    "INVALID_CREDENTIALS", "TOKEN_EXPIRED", "TOKEN_INVALID", "SESSION_EXPIRED",
    # Configuration
    "CONFIG_NOT_FOUND", "CONFIG_INVALID", "CONFIG_READ_ONLY",
]


def get_error_schemas() -> dict:
    return {
        "APIError": _api_error(),
        "ValidationError": _validation_error(),
        "ValidationErrorResponse": _narrowed(
            ["VALIDATION_FAILED"],
            {
                "validation_errors": {
                    **array_of("ValidationError"),
                    "minItems": 1,
                },
            },
        ),
        "ResourceNotFoundError": _narrowed(
            ["DISK_NOT_FOUND", "CONTAINER_NOT_FOUND", "VM_NOT_FOUND", "OPERATION_NOT_FOUND"],
            {
                "resource_id": {
                    "type": "string",
                    "description": "ID of the resource that was not found",
                },
                "resource_type": {
                    "type": "string",
                    "description": "Type of resource (disk, container, vm, operation)",
                },
            },
        ),
        "ConflictError": _narrowed(
            ["ARRAY_NOT_STOPPED", "ARRAY_NOT_STARTED", "OPERATION_CONFLICT", "PARITY_CHECK_ACTIVE"],
            {
                "conflicting_operation": {
                    "type": "string",
                    "description": "ID or description of the conflicting operation",
                },
                "required_state": {
                    "type": "string",
                    "description": "Required state for the operation to proceed",
                },
            },
        ),
        "RateLimitError": _narrowed(
            ["RATE_LIMIT_EXCEEDED"],
            {
                "operation_type": {
                    "type": "string",
                    "description": "The operation type that was rate limited",
                },
                "client_ip": {
                    "type": "string",
                    "description": "The client IP that was rate limited",
                },
                "limit": {
                    "type": "object",
                    "properties": {
                        "requests": {"type": "integer", "description": "Number of requests allowed"},
                        "window": {"type": "string", "description": "Time window for the rate limit"},
                    },
                },
                "retry_after": {
                    "type": "integer",
                    "description": "Seconds to wait before retrying",
                },
            },
        ),
    }


def _api_error() -> dict:
    return {
        "type": "object",
        "properties": {
            "error": {
                "type": "object",
                "properties": {
                    "code": {
                        "type": "string",
                        "enum": list(ERROR_CODES),
                        "description": "Standardized error code",
                        "example": "OPERATION_NOT_FOUND",
                    },
                    "message": {
                        "type": "string",
                        "description": "Human-readable error message",
                        "example": "Operation not found",
                    },
                    "details": {
                        "type": "object",
                        "nullable": True,
                        "description": "Additional error context and debugging information",
                        "additionalProperties": True,
                        "properties": {
                            "resource_id": {
                                "type": "string",
                                "description": "ID of the resource that caused the error",
                            },
                            "resource_type": {
                                "type": "string",
                                "description": "Type of resource (disk, container, vm, operation, etc.)",
                            },
                            "operation_type": {
                                "type": "string",
                                "description": "Type of operation that failed",
                            },
                            "client_ip": {
                                "type": "string",
                                "description": "Client IP address for rate limiting errors",
                            },
                            "validation_errors": array_of(
                                "ValidationError", "Detailed validation errors for each field"
                            ),
                            "conflicting_operation": {
                                "type": "string",
                                "description": "ID or type of conflicting operation",
                            },
                            "limit": {
                                "type": "object",
                                "properties": {
                                    "requests": {"type": "integer"},
                                    "window": {"type": "string"},
                                },
                                "description": "Rate limit that was exceeded",
                            },
                        },
                    },
                },
                "required": ["code", "message"],
            },
            "meta": standard_response_meta(),
        },
        "required": ["error", "meta"],
    }


def _validation_error() -> dict:
    return {
        "type": "object",
        "properties": {
            "field": {
                "type": "string",
                "description": "Name of the field that failed validation",
                "example": "container_id",
            },
            "value": {
                "description": "The invalid value that was provided",
                "example": "invalid-container-id",
            },
            "message": {
                "type": "string",
                "description": "Human-readable validation error message",
                "example": "Invalid container ID format (expected: 12-64 hex characters)",
            },
            "code": {
                "type": "string",
                "description": "Validation error code for programmatic handling",
                "example": "INVALID_FORMAT",
            },
        },
        "required": ["field", "message"],
    }


def _narrowed(codes: list[str], details: dict) -> dict:
    return {
        "allOf": [
            _api_error(),
            {
                "type": "object",
                "properties": {
                    "error": {
                        "type": "object",
                        "properties": {
                            "code": {"type": "string", "enum": codes},
                            "details": {"type": "object", "properties": details},
                        },
                    },
                },
            },
        ],
    }
