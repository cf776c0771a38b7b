"""Authentication, session and permission schemas."""

from uma_openapi.schemas.providers._shared import prop, ref, string_list, timestamp

_TOKEN_EXAMPLE = "eyJhbGciOiJIUzI1NiIsInR5cCI6IkpXVCJ9..."
_ROLES = ["admin", "user", "readonly"]


def get_auth_schemas() -> dict:
    return {
        "LoginRequest": _login_request(),
        "LoginResponse": _login_response(),
        "TokenResponse": _token_response(),
        "RefreshRequest": _refresh_request(),
        "UserInfo": _user_info(),
        "APIKeyInfo": _api_key_info(),
        "AuthError": _auth_error(),
        "AuthStats": _auth_stats(),
        "AuthUser": _auth_user(),
        "SessionInfo": _session_info(),
        "PermissionInfo": _permission_info(),
    }


def _login_request() -> dict:
    return {
        "type": "object",
        "properties": {
            "username": prop(
                "string", "Username for authentication", "admin",
                minLength=1, maxLength=50, pattern="^[a-zA-Z0-9_.-]+$",
            ),
            "password": prop(
                "string", "Password for authentication", "secure_password",
                minLength=1, maxLength=100, format="password",
            ),
            "remember_me": prop(
                "boolean", "Whether to create a long-lived session", False, default=False,
            ),
            "client_info": {
                "type": "object",
                "description": "Optional client information",
                "properties": {
                    "user_agent": prop("string", "Client user agent", "UMA-Client/1.0"),
                    "ip_address": prop("string", "Client IP address", "192.168.1.100"),
                },
            },
        },
        "required": ["username", "password"],
    }


def _login_response() -> dict:
    return {
        "type": "object",
        "properties": {
            "success": prop("boolean", "Whether login was successful", True),
            "token": prop("string", "JWT access token", _TOKEN_EXAMPLE),
            "refresh_token": prop("string", "JWT refresh token", _TOKEN_EXAMPLE),
            "expires_in": prop("integer", "Token expiration time in seconds", 3600, minimum=1),
            "token_type": prop("string", "Token type", "Bearer", default="Bearer"),
            "user": ref("UserInfo"),
            "permissions": string_list("User permissions", ["read", "write", "admin"]),
            "session_id": prop("string", "Session identifier", "sess_1234567890"),
        },
        "required": ["success", "token", "expires_in", "token_type", "user"],
    }


def _token_response() -> dict:
    return {
        "type": "object",
        "properties": {
            "access_token": prop("string", "JWT access token", _TOKEN_EXAMPLE),
            "refresh_token": prop("string", "JWT refresh token", _TOKEN_EXAMPLE),
            "token_type": prop("string", "Token type", "Bearer", default="Bearer"),
            "expires_in": prop("integer", "Token expiration time in seconds", 3600, minimum=1),
            "scope": prop("string", "Token scope", "read write admin"),
            "issued_at": timestamp("Token issuance timestamp"),
        },
        "required": ["access_token", "token_type", "expires_in"],
    }


def _refresh_request() -> dict:
    return {
        "type": "object",
        "properties": {
            "refresh_token": prop("string", "JWT refresh token", _TOKEN_EXAMPLE),
        },
        "required": ["refresh_token"],
    }


def _user_properties() -> dict:
    return {
        "id": prop("string", "User ID", "user_1234567890"),
        "username": prop("string", "Username", "admin"),
        "email": prop("string", "User email address", "admin@example.com", format="email"),
        "full_name": prop("string", "User full name", "System Administrator"),
        "role": prop("string", "User role", "admin", enum=list(_ROLES)),
        "permissions": string_list("User permissions", ["read", "write", "admin"]),
        "created_at": timestamp("User creation timestamp"),
        "last_login": timestamp("Last login timestamp"),
        "active": prop("boolean", "Whether user account is active", True),
    }


def _user_info() -> dict:
    return {
        "type": "object",
        "properties": _user_properties(),
        "required": ["id", "username", "role", "permissions", "active"],
    }


def _auth_user() -> dict:
    properties = _user_properties()
    properties["login_count"] = prop("integer", "Total number of logins", 42, minimum=0)
    properties["last_ip"] = prop("string", "Last login IP address", "192.168.1.100")
    return {
        "type": "object",
        "properties": properties,
        "required": ["id", "username", "role", "permissions", "active"],
    }


def _api_key_info() -> dict:
    return {
        "type": "object",
        "properties": {
            "id": prop("string", "API key ID", "key_1234567890"),
            "name": prop("string", "API key name", "Home Assistant Integration"),
            "key": prop("string", "API key value (only shown on creation)", "uma_1234567890abcdef"),
            "permissions": string_list("API key permissions", ["read", "write"]),
            "created_at": timestamp("API key creation timestamp"),
            "last_used": timestamp("Last usage timestamp"),
            "expires_at": timestamp("API key expiration timestamp", "2026-06-16T14:30:00Z"),
            "active": prop("boolean", "Whether API key is active", True),
        },
        "required": ["id", "name", "permissions", "created_at", "active"],
    }


def _auth_error() -> dict:
    return {
        "type": "object",
        "properties": {
            "error": prop("string", "Authentication error message", "Invalid credentials"),
            "error_code": prop(
                "string", "Authentication error code", "INVALID_CREDENTIALS",
                enum=[
                    "INVALID_CREDENTIALS", "TOKEN_EXPIRED", "TOKEN_INVALID",
                    "INSUFFICIENT_PERMISSIONS", "ACCOUNT_DISABLED", "RATE_LIMITED",
                ],
            ),
            "details": {
                "type": "object",
                "description": "Additional error details",
                "additionalProperties": True,
                "example": {"attempts_remaining": 2, "lockout_duration": 300},
            },
            "timestamp": timestamp("Error timestamp"),
        },
        "required": ["error", "error_code", "timestamp"],
    }


def _auth_stats() -> dict:
    return {
        "type": "object",
        "properties": {
            "total_users": prop("integer", "Total number of users", 5, minimum=0),
            "active_users": prop("integer", "Number of active users", 3, minimum=0),
            "active_sessions": prop("integer", "Number of active sessions", 2, minimum=0),
            "api_keys": prop("integer", "Number of active API keys", 4, minimum=0),
            "failed_logins_24h": prop(
                "integer", "Failed login attempts in last 24 hours", 1, minimum=0,
            ),
            "successful_logins_24h": prop(
                "integer", "Successful logins in last 24 hours", 15, minimum=0,
            ),
            "last_updated": timestamp("Last update timestamp"),
        },
        "required": ["total_users", "active_users", "active_sessions", "api_keys", "last_updated"],
    }


def _session_info() -> dict:
    return {
        "type": "object",
        "properties": {
            "id": prop("string", "Session ID", "sess_1234567890"),
            "user_id": prop("string", "User ID", "user_1234567890"),
            "username": prop("string", "Username", "admin"),
            "ip_address": prop("string", "Client IP address", "192.168.1.100"),
            "user_agent": prop(
                "string", "Client user agent", "Mozilla/5.0 (Windows NT 10.0; Win64; x64)",
            ),
            "created_at": timestamp("Session creation timestamp"),
            "expires_at": timestamp("Session expiration timestamp", "2025-06-16T18:30:00Z"),
            "last_activity": timestamp("Last activity timestamp"),
            "active": prop("boolean", "Whether session is active", True),
        },
        "required": ["id", "user_id", "username", "created_at", "expires_at", "active"],
    }


def _permission_info() -> dict:
    return {
        "type": "object",
        "properties": {
            "name": prop("string", "Permission name", "docker.containers.manage"),
            "description": prop(
                "string", "Permission description",
                "Manage Docker containers (start, stop, restart)",
            ),
            "category": prop(
                "string", "Permission category", "docker",
                enum=["system", "docker", "storage", "vm", "auth", "monitoring"],
            ),
            "level": prop("string", "Permission level", "write", enum=["read", "write", "admin"]),
            "resource": prop("string", "Resource this permission applies to", "containers"),
        },
        "required": ["name", "description", "category", "level"],
    }
