"""Rate limiter statistics and configuration schemas."""

from uma_openapi.schemas.providers._shared import with_standard_envelope

RATE_LIMITED_OPERATIONS = [
    "general", "health_check", "smart_data", "parity_check",
    "array_control", "disk_info", "docker_list", "docker_control",
    "docker_bulk", "vm_list", "vm_control", "vm_bulk",
    "system_info", "system_control", "sensor_data",
    "async_create", "async_list", "async_cancel",
]

DURATION_PATTERN = r"^(\d+(\.\d+)?(ns|us|µs|ms|s|m|h))+$"


def get_rate_limiting_schemas() -> dict:
    return {
        "RateLimitStatsResponse": _stats_response(),
        "RateLimitConfigResponse": _config_response(),
        "RateLimitConfigUpdate": _config_update(),
        "RateLimitConfigUpdateResponse": _config_update_response(),
    }


def _limit_entry() -> dict:
    return {
        "type": "object",
        "properties": {
            "requests": {
                "type": "integer",
                "minimum": 1,
                "maximum": 1000,
                "description": "Number of requests allowed",
                "example": 60,
            },
            "window": {
                "type": "string",
                "pattern": DURATION_PATTERN,
                "description": "Time window for the rate limit (Go duration format)",
                "example": "1m0s",
            },
        },
        "required": ["requests", "window"],
    }


def _stats_response() -> dict:
    return with_standard_envelope({
        "type": "object",
        "properties": {
            "general_rate_limiter": {
                "type": "object",
                "properties": {
                    "type": {"type": "string", "example": "general"},
                },
                "description": "General rate limiter statistics",
            },
            "operation_rate_limiter": {
                "type": "object",
                "properties": {
                    "type": {"type": "string", "example": "operation_specific"},
                    "total_clients": {
                        "type": "integer",
                        "description": "Total number of tracked clients",
                    },
                    "operation_limits": {
                        "type": "object",
                        "additionalProperties": {
                            "type": "object",
                            "properties": {
                                "requests": {
                                    "type": "integer",
                                    "description": "Number of requests allowed",
                                },
                                "window": {
                                    "type": "string",
                                    "description": "Time window for the rate limit",
                                    "example": "1m0s",
                                },
                            },
                        },
                        "description": "Current rate limits by operation type",
                    },
                    "client_stats": {
                        "type": "object",
                        "additionalProperties": {
                            "type": "object",
                            "additionalProperties": {
                                "type": "object",
                                "properties": {
                                    "tokens_remaining": {
                                        "type": "integer",
                                        "minimum": 0,
                                        "description": "Number of tokens remaining for this client",
                                    },
                                    "max_tokens": {
                                        "type": "integer",
                                        "minimum": 1,
                                        "description": "Maximum number of tokens for this operation type",
                                    },
                                },
                            },
                        },
                        "description": "Per-client rate limiting statistics",
                    },
                },
                "description": "Operation-specific rate limiter statistics",
            },
        },
    })


def _config_response() -> dict:
    return with_standard_envelope({
        "type": "object",
        "additionalProperties": _limit_entry(),
        "description": "Rate limiting configuration by operation type",
    })


def _config_update() -> dict:
    return {
        "type": "object",
        "additionalProperties": _limit_entry(),
        "description": "Rate limiting configuration updates by operation type",
        "minProperties": 1,
        "example": {
            "smart_data": {"requests": 2, "window": "2m0s"},
            "docker_bulk": {"requests": 10, "window": "1m0s"},
        },
    }


def _config_update_response() -> dict:
    return with_standard_envelope({
        "type": "object",
        "properties": {
            "message": {
                "type": "string",
                "example": "Rate limit configuration update not implemented yet",
            },
            "note": {
                "type": "string",
                "example": "This endpoint would require admin authentication",
            },
            "updated_operations": {
                "type": "array",
                "items": {"type": "string", "enum": list(RATE_LIMITED_OPERATIONS)},
                "description": "List of operation types that were updated",
            },
        },
    })
