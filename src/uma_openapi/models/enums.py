"""String enums shared across the registry and the API document."""

from enum import StrEnum


class Category(StrEnum):
    """Display category for a registered schema name."""

    COMMON = "Common"
    DOCKER = "Docker"
    SYSTEM = "System"
    STORAGE = "Storage"
    VM = "VM"
    WEBSOCKET = "WebSocket"
    AUTH = "Auth"
    DIAGNOSTICS = "Diagnostics"
    NOTIFICATIONS = "Notifications"
    OPERATIONS = "Operations"
    ASYNC_OPERATIONS = "AsyncOperations"
    RATE_LIMITING = "RateLimiting"
    ERRORS = "Errors"
    RESPONSES = "Responses"


class Environment(StrEnum):
    DEV = "dev"
    STAGING = "staging"
    PROD = "prod"
