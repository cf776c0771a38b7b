"""Static category membership for registered schema names.

Names are checked against each category's list in `CLASSIFICATION_ORDER`;
the first list containing the name wins. Names found in no list fall back to
`DEFAULT_CATEGORY`. Provider groups that declare a category bypass these
lists entirely (see `SchemaRegistry`), so the lists mainly serve groups
registered without one and act as a cross-check for those that do.
"""

from collections.abc import Mapping

from uma_openapi.models.enums import Category

DEFAULT_CATEGORY = Category.RESPONSES

# Responses is checked before the async, rate limiting and error lists.
CLASSIFICATION_ORDER: tuple[Category, ...] = (
    Category.COMMON,
    Category.DOCKER,
    Category.SYSTEM,
    Category.STORAGE,
    Category.VM,
    Category.WEBSOCKET,
    Category.AUTH,
    Category.DIAGNOSTICS,
    Category.NOTIFICATIONS,
    Category.OPERATIONS,
    Category.RESPONSES,
    Category.ASYNC_OPERATIONS,
    Category.RATE_LIMITING,
    Category.ERRORS,
)

CATEGORY_MEMBERS: dict[Category, tuple[str, ...]] = {
    Category.COMMON: (
        "StandardResponse", "PaginationInfo", "ResponseMeta",
        "HealthResponse", "Error", "SuccessResponse",
    ),
    Category.DOCKER: (
        "ContainerInfo", "ContainerState", "ContainerOperationResult",
        "ContainerOperationResponse", "BulkOperationRequest", "BulkOperationResponse",
        "BulkOperationSummary", "DockerImage", "DockerNetwork", "DockerInfo",
        "ContainerPort", "DockerContainerList", "DockerContainerInfo",
        "DockerImageList", "DockerNetworkList",
    ),
    Category.SYSTEM: (
        "SystemInfo", "CPUInfo", "MemoryInfo", "TemperatureData", "FanData",
        "GPUInfo", "UPSInfo", "NetworkInfo", "SystemResources", "FilesystemInfo",
        "SystemScript", "ExecuteRequest", "ExecuteResponse", "LogEntry",
        "SensorChip", "FanInput", "TemperatureInput", "FanInfo", "SystemLogs",
        "ParityCheckStatus", "ParityDiskInfo", "TemperatureInfo",
    ),
    Category.STORAGE: (
        "ArrayInfo", "DiskInfo", "SMARTData", "ParityInfo", "ParityCheckInfo",
        "CacheInfo", "ZFSPoolInfo", "ZFSDatasetInfo", "ArrayOperation",
        "ArrayStatus", "DiskTemperature", "StorageOverview", "BootInfo",
        "DiskList", "StorageGeneral", "ZFSInfo",
    ),
    Category.VM: (
        "VMInfo", "VMState", "VMOperation", "VMOperationResponse", "VMResources",
        "VMDisk", "VMNetwork", "VMConfig", "VMStats", "VMSnapshot",
        "BulkVMOperation", "BulkVMResponse", "VMList", "VMSnapshotList", "VMSnapshotResponse",
    ),
    Category.WEBSOCKET: (
        "WebSocketMessage", "WebSocketEvent", "WebSocketSubscription",
        "WebSocketError", "WebSocketStats", "WebSocketConnection",
        "DockerEventsStream", "SystemStatsStream", "StorageStatusStream",
    ),
    Category.AUTH: (
        "LoginRequest", "LoginResponse", "TokenResponse", "RefreshRequest",
        "UserInfo", "APIKeyInfo", "AuthError",
    ),
    Category.DIAGNOSTICS: (
        "DiagnosticsHealth", "DiagnosticsInfo", "DiagnosticsRepair",
    ),
    Category.NOTIFICATIONS: (
        "NotificationList", "NotificationStats", "NotificationInfo",
    ),
    Category.OPERATIONS: (
        "OperationList", "OperationStats", "OperationInfo",
    ),
    Category.RESPONSES: (
        "NotificationResponse", "ParityCheckResponse", "SystemOperationResponse",
        "ArrayOperationResponse", "DockerOperationResponse",
    ),
    Category.ASYNC_OPERATIONS: (
        "AsyncOperationRequest", "AsyncOperationResponse", "AsyncOperationDetailResponse",
        "AsyncOperationListResponse", "AsyncOperationCancelResponse", "AsyncOperationStatsResponse",
    ),
    Category.RATE_LIMITING: (
        "RateLimitStatsResponse", "RateLimitConfigResponse", "RateLimitConfigUpdate",
        "RateLimitConfigUpdateResponse",
    ),
    Category.ERRORS: (
        "APIError", "ValidationError", "ValidationErrorResponse",
        "ResourceNotFoundError", "ConflictError", "RateLimitError",
    ),
}


def _listed_category(name: str) -> Category | None:
    for category in CLASSIFICATION_ORDER:
        if name in CATEGORY_MEMBERS[category]:
            return category
    return None


def classify(name: str) -> Category:
    """Return the category for a schema name, or DEFAULT_CATEGORY if unlisted."""
    return _listed_category(name) or DEFAULT_CATEGORY


def is_listed(name: str) -> bool:
    """True when some category list names the schema explicitly."""
    return _listed_category(name) is not None


def find_drift(declared: Mapping[str, Category | None]) -> dict[str, tuple[Category, Category]]:
    """Compare declared categories against the static lists.

    Returns ``{name: (declared, listed)}`` for every listed name whose
    declared category differs. Unlisted names and names without a declared
    category are not drift.
    """
    drift: dict[str, tuple[Category, Category]] = {}
    for name, category in declared.items():
        if category is None:
            continue
        listed = _listed_category(name)
        if listed is not None and listed != category:
            drift[name] = (category, listed)
    return drift
