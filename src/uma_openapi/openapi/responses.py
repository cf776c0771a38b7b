"""Reusable response objects for `components.responses`."""

from uma_openapi.schemas.providers._shared import ref

REQUEST_ID = "req_1234567890_5678"
EXAMPLE_TIME = "2025-06-16T14:30:00Z"


def get_common_responses() -> dict:
    return {
        "BadRequest": _bad_request(),
        "Unauthorized": _unauthorized(),
        "Forbidden": _forbidden(),
        "NotFound": _not_found(),
        "Conflict": _conflict(),
        "UnprocessableEntity": _unprocessable_entity(),
        "TooManyRequests": _too_many_requests(),
        "InternalServerError": _internal_server_error(),
        "ServiceUnavailable": _service_unavailable(),
        "Success": _success(),
        "Created": _created(),
        "Accepted": _accepted(),
        "NoContent": {
            "description": "No Content - Operation completed successfully with no response body",
        },
    }


def _json_response(description: str, schema: str, examples: dict, headers: dict | None = None) -> dict:
    response = {
        "description": description,
        "content": {"application/json": {"schema": ref(schema), "examples": examples}},
    }
    if headers:
        response["headers"] = headers
    return response


def _error_example(summary: str, error: str, code: str, details: dict) -> dict:
    return {
        "summary": summary,
        "value": {"error": error, "code": code, "details": details, "request_id": REQUEST_ID},
    }


def _auth_example(summary: str, error: str, code: str, details: dict) -> dict:
    return {
        "summary": summary,
        "value": {"error": error, "error_code": code, "details": details, "timestamp": EXAMPLE_TIME},
    }


def _integer_header(description: str) -> dict:
    return {"description": description, "schema": {"type": "integer"}}


def _bad_request() -> dict:
    return _json_response(
        "Bad Request - Invalid request parameters or malformed request",
        "Error",
        {
            "validation_error": _error_example(
                "Validation Error", "Invalid request parameters", "VALIDATION_ERROR",
                {"field": "container_ids", "message": "must contain at least 1 item"},
            ),
            "malformed_json": _error_example(
                "Malformed JSON", "Invalid JSON in request body", "MALFORMED_JSON",
                {"line": 5, "column": 12},
            ),
            "missing_parameter": _error_example(
                "Missing Required Parameter", "Missing required parameter", "MISSING_PARAMETER",
                {"parameter": "operation", "location": "request body"},
            ),
        },
    )


def _unauthorized() -> dict:
    return _json_response(
        "Unauthorized - Authentication required or invalid credentials",
        "AuthError",
        {
            "missing_token": _auth_example(
                "Missing Authentication Token", "Authentication required", "TOKEN_MISSING",
                {"message": "Authorization header is required"},
            ),
            "invalid_token": _auth_example(
                "Invalid Token", "Invalid authentication token", "TOKEN_INVALID",
                {"message": "Token signature verification failed"},
            ),
            "expired_token": _auth_example(
                "Expired Token", "Authentication token has expired", "TOKEN_EXPIRED",
                {"expired_at": "2025-06-16T13:30:00Z"},
            ),
        },
    )


def _forbidden() -> dict:
    return _json_response(
        "Forbidden - Insufficient permissions for the requested operation",
        "AuthError",
        {
            "insufficient_permissions": _auth_example(
                "Insufficient Permissions", "Insufficient permissions", "INSUFFICIENT_PERMISSIONS",
                {
                    "required_permission": "docker.containers.manage",
                    "user_permissions": ["docker.containers.read"],
                },
            ),
            "readonly_user": _auth_example(
                "Read-only User", "Read-only user cannot perform write operations", "READONLY_USER",
                {"operation": "container_start", "user_role": "readonly"},
            ),
        },
    )


def _not_found() -> dict:
    return _json_response(
        "Not Found - The requested resource does not exist",
        "Error",
        {
            "container_not_found": _error_example(
                "Container Not Found", "Container 'nonexistent' not found", "CONTAINER_NOT_FOUND",
                {"container_id": "nonexistent", "suggestion": "Check container name or ID"},
            ),
            "vm_not_found": _error_example(
                "VM Not Found", "Virtual machine 'missing-vm' not found", "VM_NOT_FOUND",
                {"vm_id": "missing-vm", "suggestion": "Check VM name or ID"},
            ),
            "endpoint_not_found": _error_example(
                "Endpoint Not Found", "The requested endpoint does not exist", "ENDPOINT_NOT_FOUND",
                {
                    "path": "/api/v1/nonexistent",
                    "suggestion": "Check API documentation for valid endpoints",
                },
            ),
        },
    )


def _conflict() -> dict:
    return _json_response(
        "Conflict - The request conflicts with the current state of the resource",
        "Error",
        {
            "container_already_running": _error_example(
                "Container Already Running", "Container 'plex' is already running",
                "CONTAINER_ALREADY_RUNNING",
                {"container_id": "plex", "current_status": "running", "requested_action": "start"},
            ),
            "array_already_started": _error_example(
                "Array Already Started", "Unraid array is already started", "ARRAY_ALREADY_STARTED",
                {"current_status": "started", "requested_action": "start"},
            ),
        },
    )


def _unprocessable_entity() -> dict:
    return _json_response(
        "Unprocessable Entity - The request is well-formed but contains semantic errors",
        "Error",
        {
            "invalid_operation": _error_example(
                "Invalid Operation", "Cannot perform operation on container in current state",
                "INVALID_OPERATION",
                {
                    "container_id": "plex",
                    "current_status": "exited",
                    "requested_action": "pause",
                    "valid_actions": ["start", "remove"],
                },
            ),
        },
    )


def _too_many_requests() -> dict:
    return _json_response(
        "Too Many Requests - Rate limit exceeded",
        "Error",
        {
            "rate_limited": _error_example(
                "Rate Limit Exceeded", "Rate limit exceeded", "RATE_LIMITED",
                {
                    "limit": 100,
                    "window": "1 hour",
                    "reset_at": "2025-06-16T15:30:00Z",
                    "retry_after": 3600,
                },
            ),
        },
        headers={
            "X-RateLimit-Limit": _integer_header("Request limit per time window"),
            "X-RateLimit-Remaining": _integer_header("Remaining requests in current window"),
            "X-RateLimit-Reset": _integer_header("Time when rate limit resets (Unix timestamp)"),
        },
    )


def _internal_server_error() -> dict:
    return _json_response(
        "Internal Server Error - An unexpected error occurred",
        "Error",
        {
            "service_unavailable": _error_example(
                "Service Unavailable", "Docker daemon is not available", "SERVICE_UNAVAILABLE",
                {"service": "docker", "status": "unreachable"},
            ),
            "unexpected_error": _error_example(
                "Unexpected Error", "An unexpected error occurred", "INTERNAL_ERROR",
                {"error_id": "err_1234567890"},
            ),
        },
    )


def _service_unavailable() -> dict:
    return _json_response(
        "Service Unavailable - The service is temporarily unavailable",
        "Error",
        {
            "maintenance_mode": _error_example(
                "Maintenance Mode", "Service is in maintenance mode", "MAINTENANCE_MODE",
                {"estimated_duration": "30 minutes", "retry_after": 1800},
            ),
        },
        headers={"Retry-After": _integer_header("Seconds to wait before retrying")},
    )


def _success_example(summary: str, message: str, data: dict) -> dict:
    return {"summary": summary, "value": {"success": True, "message": message, "data": data}}


def _success() -> dict:
    return _json_response(
        "Success - Operation completed successfully",
        "SuccessResponse",
        {
            "operation_success": _success_example(
                "Operation Success", "Operation completed successfully",
                {"operation_id": "op_1234567890", "timestamp": EXAMPLE_TIME},
            ),
        },
    )


def _created() -> dict:
    return _json_response(
        "Created - Resource created successfully",
        "SuccessResponse",
        {
            "resource_created": _success_example(
                "Resource Created", "Resource created successfully",
                {"id": "resource_1234567890", "created_at": EXAMPLE_TIME},
            ),
        },
    )


def _accepted() -> dict:
    return _json_response(
        "Accepted - Request accepted for processing",
        "SuccessResponse",
        {
            "async_operation": _success_example(
                "Asynchronous Operation", "Request accepted for processing",
                {
                    "operation_id": "op_1234567890",
                    "status": "pending",
                    "estimated_completion": "2025-06-16T14:35:00Z",
                },
            ),
        },
    )
