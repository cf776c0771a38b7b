"""Async operation tracking and rate limit endpoints."""

from uma_openapi.openapi.config import FeatureFlags
from uma_openapi.openapi.paths._builders import (
    API_PREFIX,
    errors,
    get,
    json_body,
    json_response,
    merge,
    operation,
    post,
)
from uma_openapi.schemas.providers._shared import OPERATION_STATUSES, ref

OPERATIONS = f"{API_PREFIX}/operations"
RATE_LIMITS = f"{API_PREFIX}/rate-limits"


def _operation_id_param() -> dict:
    return {
        "name": "operationId",
        "in": "path",
        "required": True,
        "description": "Operation identifier returned when the operation was started",
        "schema": {"type": "string", "example": "op_1718548200_parity_check"},
    }


def get_async_operation_paths(features: FeatureFlags) -> dict:
    listing = get(
        "List async operations",
        "Running and recently finished long-running operations",
        "listOperations",
        "Async Operations",
        {
            "200": json_response("Operations retrieved successfully", ref("AsyncOperationListResponse")),
            **errors("401", "500"),
        },
        ["PageParameter", "LimitParameter"],
    )
    listing["get"]["parameters"].append({
        "name": "status",
        "in": "query",
        "required": False,
        "description": "Only operations in this state",
        "schema": {"type": "string", "enum": list(OPERATION_STATUSES)},
    })
    start = post(
        "Start async operation",
        "Queue a long-running operation such as a parity check or SMART scan",
        "startOperation",
        "Async Operations",
        {
            "202": json_response("Operation accepted", ref("AsyncOperationResponse")),
            **errors("400", "401", "409", "429", "500"),
        },
        request_body=json_body("AsyncOperationRequest"),
    )

    detail = get(
        "Get operation details",
        "Progress, result or error of one operation",
        "getOperation",
        "Async Operations",
        {
            "200": json_response("Operation retrieved successfully", ref("AsyncOperationDetailResponse")),
            **errors("401", "404", "500"),
        },
    )
    cancel = operation(
        "delete",
        "Cancel operation",
        "Cancel a pending or running operation",
        "cancelOperation",
        "Async Operations",
        {
            "200": json_response("Operation cancelled", ref("AsyncOperationCancelResponse")),
            **errors("401", "404", "409", "500"),
        },
    )
    for item in (detail, cancel):
        for op in item.values():
            op["parameters"] = [_operation_id_param()]

    paths = {
        OPERATIONS: merge(listing, start),
        f"{OPERATIONS}/{{operationId}}": merge(detail, cancel),
    }
    if features.metrics:
        paths[f"{OPERATIONS}/stats"] = get(
            "Get operation statistics",
            "Operation counts by type and state",
            "getOperationStats",
            "Async Operations",
            {
                "200": json_response("Statistics retrieved successfully", ref("AsyncOperationStatsResponse")),
                **errors("401", "500"),
            },
        )
    return paths


def get_rate_limit_paths(features: FeatureFlags) -> dict:
    config = merge(
        get(
            "Get rate limiting configuration",
            "Per-operation request limits and windows",
            "getRateLimitConfig",
            "Rate Limiting",
            {
                "200": json_response("Configuration retrieved successfully", ref("RateLimitConfigResponse")),
                **errors("401", "500"),
            },
        ),
        operation(
            "put",
            "Update rate limiting configuration",
            "Change limits for one or more operation types",
            "updateRateLimitConfig",
            "Rate Limiting",
            {
                "200": json_response("Configuration updated", ref("RateLimitConfigUpdateResponse")),
                **errors("400", "401", "403", "500"),
            },
            request_body=json_body("RateLimitConfigUpdate"),
        ),
    )
    paths = {f"{RATE_LIMITS}/config": config}
    if features.metrics:
        paths[f"{RATE_LIMITS}/stats"] = get(
            "Get rate limiting statistics",
            "Allowed and rejected request counts per operation type",
            "getRateLimitStats",
            "Rate Limiting",
            {
                "200": json_response("Statistics retrieved successfully", ref("RateLimitStatsResponse")),
                **errors("401", "500"),
            },
        )
    return paths
