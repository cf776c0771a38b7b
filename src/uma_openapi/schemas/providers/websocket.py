"""WebSocket message, event, subscription and stream schemas."""

from uma_openapi.schemas.providers._shared import prop, timestamp

SEVERITIES = ["info", "warning", "error", "critical"]

CHANNELS = [
    "system.stats", "docker.events", "storage.status", "vm.events",
    "ups.status", "temperature.alerts", "disk.smart", "network.stats",
]


def get_websocket_schemas() -> dict:
    return {
        "WebSocketMessage": _message(),
        "WebSocketEvent": _event(),
        "WebSocketSubscription": _subscription(),
        "WebSocketError": _error(),
        "UnifiedWebSocketStream": _unified_stream(),
    }


def _message() -> dict:
    return {
        "type": "object",
        "properties": {
            "type": prop(
                "string", "Message type", "event",
                enum=["event", "data", "error", "ping", "pong", "subscribe", "unsubscribe"],
            ),
            "event": prop("string", "Event name", "system.stats"),
            # untyped: payload shape depends on the event
            "data": {
                "description": "Message data payload",
                "example": {
                    "cpu_usage": 25.5,
                    "memory_usage": 45.2,
                    "timestamp": "2025-06-16T14:30:00Z",
                },
            },
            "timestamp": timestamp("Message timestamp"),
            "id": prop("string", "Message ID for tracking", "msg_1234567890"),
            "channel": prop("string", "WebSocket channel", "system.stats"),
        },
        "required": ["type", "timestamp"],
    }


def _event() -> dict:
    return {
        "type": "object",
        "properties": {
            "event": prop(
                "string", "Event name", "docker.container.start",
                enum=[
                    "system.stats", "docker.container.start", "docker.container.stop",
                    "storage.array.status", "vm.state.change", "ups.status.change",
                    "temperature.alert", "disk.smart.warning",
                ],
            ),
            "source": prop(
                "string", "Event source", "docker",
                enum=["system", "docker", "storage", "vm", "ups", "monitoring"],
            ),
            "severity": prop("string", "Event severity", "info", enum=SEVERITIES),
            "data": {
                "description": "Event-specific data",
                "example": {
                    "container_id": "plex",
                    "container_name": "plex",
                    "status": "running",
                },
            },
            "timestamp": timestamp("Event timestamp"),
            "correlation_id": prop(
                "string", "Correlation ID for tracking related events", "corr_1234567890",
            ),
        },
        "required": ["event", "source", "severity", "timestamp"],
    }


def _enum_list(values: list[str], description: str) -> dict:
    return {
        "type": "array",
        "items": {"type": "string", "enum": list(values)},
        "description": description,
    }


def _subscription() -> dict:
    channels = _enum_list(CHANNELS, "Channels to subscribe/unsubscribe")
    channels.update(
        example=["system.stats", "docker.events"],
        minItems=1,
        maxItems=10,
        uniqueItems=True,
    )
    return {
        "type": "object",
        "properties": {
            "action": prop(
                "string", "Subscription action", "subscribe", enum=["subscribe", "unsubscribe"],
            ),
            "channels": channels,
            "filters": {
                "type": "object",
                "description": "Optional filters for events",
                "properties": {
                    "severity": _enum_list(SEVERITIES, "Filter by event severity"),
                    "source": _enum_list(
                        ["system", "docker", "storage", "vm", "ups"], "Filter by event source",
                    ),
                    "container_ids": {
                        "type": "array",
                        "items": {"type": "string"},
                        "description": "Filter Docker events by container IDs",
                    },
                },
            },
            "rate_limit": prop(
                "integer", "Maximum events per second (0 = no limit)", 10,
                minimum=0, maximum=100, default=0,
            ),
        },
        "required": ["action", "channels"],
    }


def _error() -> dict:
    return {
        "type": "object",
        "properties": {
            "error": prop("string", "Error message", "Invalid subscription channel"),
            "code": prop(
                "string", "Error code", "INVALID_CHANNEL",
                enum=[
                    "INVALID_MESSAGE", "INVALID_CHANNEL", "SUBSCRIPTION_FAILED",
                    "RATE_LIMITED", "AUTHENTICATION_REQUIRED", "PERMISSION_DENIED",
                ],
            ),
            "details": {
                "type": "object",
                "description": "Additional error details",
                "additionalProperties": True,
                "example": {"channel": "invalid.channel", "reason": "Channel does not exist"},
            },
            "timestamp": timestamp("Error timestamp"),
        },
        "required": ["error", "code", "timestamp"],
    }


def _unified_stream() -> dict:
    return {
        "type": "object",
        "description": (
            "Unified WebSocket stream supporting multiple event types "
            "with subscription management"
        ),
        "properties": {
            "type": prop(
                "string", "Event type", "system.stats",
                enum=[
                    "system.stats", "docker.events", "storage.status",
                    "temperature.alert", "resource.alert", "infrastructure.status",
                ],
            ),
            "channel": prop("string", "Event channel for subscription management", "system.stats"),
            "data": {
                "type": "object",
                "description": "Event data (varies by type)",
                "additionalProperties": True,
                "example": {
                    "cpu_percent": 25.5,
                    "memory_percent": 50.0,
                    "timestamp": "2025-06-19T14:30:00Z",
                },
            },
            "timestamp": timestamp("Event timestamp", "2025-06-19T14:30:00Z"),
            "subscription_id": prop("string", "Subscription ID for tracking", "sub_1234567890"),
        },
        "required": ["type", "channel", "data", "timestamp"],
    }
