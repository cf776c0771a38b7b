"""WebSocket upgrade endpoint and its diagnostics."""

from uma_openapi.openapi.config import FeatureFlags
from uma_openapi.openapi.paths._builders import API_PREFIX, enveloped, errors, get, json_response
from uma_openapi.schemas.providers._shared import prop, ref, string_list

BASE = f"{API_PREFIX}/ws"


def _stats_schema() -> dict:
    return {
        "type": "object",
        "properties": {
            "active_connections": prop("integer", "Currently open connections", 3, minimum=0),
            "total_connections": prop("integer", "Connections accepted since start", 42, minimum=0),
            "messages_sent": prop("integer", "Messages pushed to clients", 15234, minimum=0),
            "subscriptions": {
                "type": "object",
                "additionalProperties": {"type": "integer", "minimum": 0},
                "description": "Subscriber count per channel",
                "example": {"system.stats": 2, "docker.events": 1},
            },
        },
        "required": ["active_connections", "total_connections"],
    }


def get_websocket_paths(features: FeatureFlags) -> dict:
    paths = {
        BASE: get(
            "WebSocket connection",
            "Upgrade to a WebSocket and subscribe to live system, Docker and storage events. "
            "Messages follow the WebSocketMessage schema; subscriptions use WebSocketSubscription.",
            "connectWebSocket",
            "WebSocket",
            {
                "101": {"description": "Switching protocols"},
                "400": json_response("Invalid upgrade request", ref("WebSocketError")),
                **errors("401", "500"),
            },
        ),
        f"{BASE}/channels": get(
            "List WebSocket channels",
            "Channels a client can subscribe to",
            "listWebSocketChannels",
            "WebSocket",
            {
                "200": json_response(
                    "Channels retrieved successfully",
                    enveloped(string_list("Channel names", ["system.stats", "docker.events", "storage.status"])),
                ),
                **errors("401", "500"),
            },
        ),
    }
    if features.metrics:
        paths[f"{BASE}/stats"] = get(
            "Get WebSocket statistics",
            "Connection and message counters for the WebSocket hub",
            "getWebSocketStats",
            "WebSocket",
            {
                "200": json_response("Statistics retrieved successfully", enveloped(_stats_schema())),
                **errors("401", "500"),
            },
        )
    return paths
