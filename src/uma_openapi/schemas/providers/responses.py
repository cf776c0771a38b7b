"""Result payloads for mutating notification, parity, system, array and Docker calls."""

from uma_openapi.schemas.providers._shared import prop, ref, timestamp


def get_response_schemas() -> dict:
    return {
        "NotificationResponse": _notification(),
        "ParityCheckResponse": _parity_check(),
        "SystemOperationResponse": _system_operation(),
        "ArrayOperationResponse": _array_operation(),
        "DockerOperationResponse": _docker_operation(),
    }


def _result(subject: str, message: str) -> dict:
    """The success/message pair every operation response starts with."""
    return {
        "success": prop("boolean", f"Whether the {subject} operation was successful", True),
        "message": prop("string", "Operation result message", message),
    }


def _operation_id(example: str) -> dict:
    return prop("string", "Async operation ID for tracking", example)


def _notification() -> dict:
    return {
        "type": "object",
        "properties": {
            **_result("notification", "Notification created successfully"),
            "notification": ref("NotificationInfo"),
            "operation": prop(
                "string", "Notification operation performed", "create",
                enum=["create", "update", "delete", "mark_read", "clear_all"],
            ),
            "count": prop(
                "integer", "Number of notifications affected (for bulk operations)", 1,
                minimum=0,
            ),
        },
        "required": ["success", "message", "operation"],
    }


def _parity_check() -> dict:
    return {
        "type": "object",
        "properties": {
            **_result("parity check", "Parity check started successfully"),
            "operation": prop(
                "string", "Parity operation performed", "start",
                enum=["start", "stop", "pause", "resume"],
            ),
            "check_type": prop(
                "string", "Type of parity check", "check", enum=["check", "correct"],
            ),
            "estimated_duration": prop(
                "integer", "Estimated duration in seconds", 28800, minimum=0,
            ),
            "operation_id": _operation_id("op-parity-123"),
        },
        "required": ["success", "message", "operation"],
    }


def _system_operation() -> dict:
    return {
        "type": "object",
        "properties": {
            **_result("system", "System reboot initiated successfully"),
            "operation": prop(
                "string", "System operation performed", "reboot",
                enum=["reboot", "shutdown", "restart_service", "stop_service"],
            ),
            "scheduled_time": timestamp(
                "When the operation is scheduled to execute", "2024-01-01T12:05:00Z",
            ),
            "delay_seconds": prop("integer", "Delay before operation executes", 60, minimum=0),
            "operation_id": _operation_id("op-reboot-456"),
        },
        "required": ["success", "message", "operation"],
    }


def _array_operation() -> dict:
    return {
        "type": "object",
        "properties": {
            **_result("array", "Array started successfully"),
            "operation": prop(
                "string", "Array operation performed", "start", enum=["start", "stop"],
            ),
            "array_status": prop(
                "string", "Current array status after operation", "starting",
                enum=["started", "stopped", "starting", "stopping"],
            ),
            "warnings": {
                "type": "array",
                "description": "Any warnings from the operation",
                "items": {"type": "string"},
                "example": ["Disk temperature high"],
            },
            "operation_id": _operation_id("op-array-789"),
        },
        "required": ["success", "message", "operation", "array_status"],
    }


def _docker_operation() -> dict:
    return {
        "type": "object",
        "properties": {
            **_result("Docker", "Container started successfully"),
            "container_id": prop("string", "Container ID or name", "plex"),
            "operation": prop(
                "string", "Docker operation performed", "start",
                enum=["start", "stop", "restart", "pause", "resume"],
            ),
            "container_status": prop(
                "string", "Current container status after operation", "running",
                enum=["created", "running", "paused", "restarting", "removing", "exited", "dead"],
            ),
            "duration": prop("number", "Operation duration in seconds", 2.5, minimum=0),
        },
        "required": ["success", "message", "container_id", "operation"],
    }
