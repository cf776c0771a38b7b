"""Login, token and session endpoints (only published with authentication on)."""

from uma_openapi.openapi.paths._builders import (
    API_PREFIX,
    enveloped_list,
    enveloped_ref,
    errors,
    get,
    json_body,
    json_response,
    post,
)
from uma_openapi.schemas.providers._shared import ref

BASE = f"{API_PREFIX}/auth"


def get_auth_paths() -> dict:
    return {
        f"{BASE}/login": post(
            "User login",
            "Exchange username and password for an access and refresh token pair",
            "login",
            "Authentication",
            {
                "200": json_response("Login successful", ref("LoginResponse")),
                "401": json_response("Invalid credentials", ref("AuthError")),
                **errors("400", "429", "500"),
            },
            request_body=json_body("LoginRequest"),
        ),
        f"{BASE}/refresh": post(
            "Refresh token",
            "Issue a new access token from a valid refresh token",
            "refreshToken",
            "Authentication",
            {
                "200": json_response("Token refreshed", ref("TokenResponse")),
                **errors("400", "401", "500"),
            },
            request_body=json_body("RefreshRequest"),
        ),
        f"{BASE}/logout": post(
            "User logout",
            "Invalidate the current session and its tokens",
            "logout",
            "Authentication",
            {
                "200": json_response("Logged out", ref("SuccessResponse")),
                **errors("401", "500"),
            },
        ),
        f"{BASE}/me": get(
            "Get current user information",
            "Profile and permissions of the authenticated user",
            "getCurrentUser",
            "Authentication",
            {
                "200": json_response("User information retrieved successfully", enveloped_ref("UserInfo")),
                **errors("401", "500"),
            },
        ),
        f"{BASE}/sessions": get(
            "List user sessions",
            "Active sessions of the authenticated user",
            "listSessions",
            "Authentication",
            {
                "200": json_response("Sessions retrieved successfully", enveloped_list("SessionInfo")),
                **errors("401", "500"),
            },
        ),
        f"{BASE}/apikeys": get(
            "List API keys",
            "API keys issued to the authenticated user; secrets are never returned",
            "listAPIKeys",
            "Authentication",
            {
                "200": json_response("API keys retrieved successfully", enveloped_list("APIKeyInfo")),
                **errors("401", "403", "500"),
            },
        ),
    }
