"""Path items of the generated document, gated by feature flags.

Docker, system, async operation and rate limit groups are always present.
Storage needs ``array_control``, VMs need ``vm_management``, auth needs
``authentication`` and WebSocket needs ``websockets``. Within groups,
``bulk_operations``, ``zfs`` and ``metrics`` gate the bulk, ZFS and
statistics endpoints.
"""

from uma_openapi.openapi.config import FeatureFlags
from uma_openapi.openapi.paths.auth import get_auth_paths
from uma_openapi.openapi.paths.docker import get_docker_paths
from uma_openapi.openapi.paths.operations import get_async_operation_paths, get_rate_limit_paths
from uma_openapi.openapi.paths.service import get_service_paths
from uma_openapi.openapi.paths.storage import get_storage_paths
from uma_openapi.openapi.paths.system import get_system_paths
from uma_openapi.openapi.paths.vm import get_vm_paths
from uma_openapi.openapi.paths.websocket import get_websocket_paths

__all__ = ["get_paths", "get_service_paths"]

SECURITY_REQUIREMENT = [{"BearerAuth": []}, {"ApiKeyAuth": []}]

# Reachable without credentials even when authentication is on
PUBLIC_OPERATIONS = frozenset({"login", "refreshToken"})


def _require_auth(paths: dict) -> None:
    for item in paths.values():
        for op in item.values():
            if op["operationId"] not in PUBLIC_OPERATIONS:
                op["security"] = [{name: [] for name in requirement} for requirement in SECURITY_REQUIREMENT]


def get_paths(features: FeatureFlags) -> dict:
    paths: dict = {}
    paths.update(get_docker_paths(features))
    paths.update(get_system_paths(features))
    if features.array_control:
        paths.update(get_storage_paths(features))
    if features.vm_management:
        paths.update(get_vm_paths(features))
    if features.authentication:
        paths.update(get_auth_paths())
    if features.websockets:
        paths.update(get_websocket_paths(features))
    paths.update(get_async_operation_paths(features))
    paths.update(get_rate_limit_paths(features))

    if features.authentication:
        _require_auth(paths)

    # The service's own endpoints stay public
    paths.update(get_service_paths())
    return paths
