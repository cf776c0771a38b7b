"""Notification listing, statistics and detail schemas."""

from uma_openapi.schemas.providers._shared import prop, ref, timestamp

SEVERITIES = ["info", "warning", "error", "critical"]


def get_notification_schemas() -> dict:
    return {
        "NotificationList": _list(),
        "NotificationStats": _stats(),
        "NotificationInfo": _info(),
    }


def _list() -> dict:
    return {
        "type": "array",
        "description": "List of notifications",
        "items": ref("NotificationInfo"),
        "example": [
            {
                "id": "notif-123",
                "title": "System Alert",
                "message": "High CPU usage detected",
                "severity": "warning",
                "read": False,
            }
        ],
    }


def _count(description: str, example: int) -> dict:
    return prop("integer", description, example, minimum=0)


def _stats() -> dict:
    return {
        "type": "object",
        "properties": {
            "total": _count("Total number of notifications", 25),
            "unread": _count("Number of unread notifications", 5),
            "by_severity": {
                "type": "object",
                "description": "Notification count by severity level",
                "properties": {
                    "info": _count("Number of info notifications", 10),
                    "warning": _count("Number of warning notifications", 8),
                    "error": _count("Number of error notifications", 5),
                    "critical": _count("Number of critical notifications", 2),
                },
            },
            "persistent": _count("Number of persistent notifications", 0),
            "last_updated": timestamp(
                "When notifications were last updated", "2024-01-01T12:00:00Z",
            ),
        },
        "required": ["total", "unread", "by_severity", "persistent"],
    }


def _info() -> dict:
    return {
        "type": "object",
        "properties": {
            "id": prop("string", "Unique notification identifier", "notif-123"),
            "title": prop("string", "Notification title", "System Alert"),
            "message": prop(
                "string", "Notification message content", "High CPU usage detected on server",
            ),
            "severity": prop(
                "string", "Notification severity level", "warning", enum=SEVERITIES,
            ),
            "category": prop(
                "string", "Notification category", "system",
                enum=["system", "storage", "docker", "vm", "network", "security"],
            ),
            "source": prop(
                "string", "Source component that generated the notification", "system_monitor",
            ),
            "read": prop("boolean", "Whether the notification has been read", False),
            "created_at": timestamp(
                "When the notification was created", "2024-01-01T12:00:00Z",
            ),
            "read_at": timestamp(
                "When the notification was read (null if unread)", "2024-01-01T12:05:00Z",
                nullable=True,
            ),
            "expires_at": timestamp(
                "When the notification expires (null if permanent)", "2024-01-02T12:00:00Z",
                nullable=True,
            ),
            "actions": {
                "type": "array",
                "description": "Available actions for this notification",
                "items": {
                    "type": "object",
                    "properties": {
                        "id": prop("string", "Action identifier", "acknowledge"),
                        "label": prop("string", "Action display label", "Acknowledge"),
                        "url": prop(
                            "string", "Action endpoint URL",
                            "/api/v1/notifications/notif-123/acknowledge",
                        ),
                    },
                    "required": ["id", "label"],
                },
            },
            "metadata": {
                "type": "object",
                "description": "Additional notification metadata",
                "additionalProperties": True,
                "example": {
                    "cpu_usage": "85%",
                    "threshold": "80%",
                    "affected_vms": ["vm1", "vm2"],
                },
            },
        },
        "required": ["id", "title", "message", "severity", "category", "read", "created_at"],
    }
