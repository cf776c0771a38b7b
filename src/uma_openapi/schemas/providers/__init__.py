"""Schema provider groups in registration order.

Order matters only when two groups define the same name: the later group wins.
"""

from uma_openapi.models.enums import Category
from uma_openapi.schemas.providers.async_operations import get_async_operation_schemas
from uma_openapi.schemas.providers.auth import get_auth_schemas
from uma_openapi.schemas.providers.common import get_common_schemas
from uma_openapi.schemas.providers.diagnostics import get_diagnostics_schemas
from uma_openapi.schemas.providers.docker import get_docker_schemas
from uma_openapi.schemas.providers.documentation import get_documentation_schemas
from uma_openapi.schemas.providers.errors import get_error_schemas
from uma_openapi.schemas.providers.notifications import get_notification_schemas
from uma_openapi.schemas.providers.operations import get_operation_schemas
from uma_openapi.schemas.providers.rate_limiting import get_rate_limiting_schemas
from uma_openapi.schemas.providers.responses import get_response_schemas
from uma_openapi.schemas.providers.storage import get_storage_schemas
from uma_openapi.schemas.providers.system import get_system_schemas
from uma_openapi.schemas.providers.vm import get_vm_schemas
from uma_openapi.schemas.providers.websocket import get_websocket_schemas
from uma_openapi.schemas.registry import ProviderGroup

DEFAULT_PROVIDERS: tuple[ProviderGroup, ...] = (
    ProviderGroup("common", get_common_schemas, Category.COMMON),
    ProviderGroup("docker", get_docker_schemas, Category.DOCKER),
    ProviderGroup("system", get_system_schemas, Category.SYSTEM),
    ProviderGroup("storage", get_storage_schemas, Category.STORAGE),
    ProviderGroup("vm", get_vm_schemas, Category.VM),
    ProviderGroup("websocket", get_websocket_schemas, Category.WEBSOCKET),
    ProviderGroup("auth", get_auth_schemas, Category.AUTH),
    ProviderGroup("diagnostics", get_diagnostics_schemas, Category.DIAGNOSTICS),
    ProviderGroup("notifications", get_notification_schemas, Category.NOTIFICATIONS),
    ProviderGroup("operations", get_operation_schemas, Category.OPERATIONS),
    ProviderGroup("responses", get_response_schemas, Category.RESPONSES),
    ProviderGroup("async_operations", get_async_operation_schemas, Category.ASYNC_OPERATIONS),
    ProviderGroup("rate_limiting", get_rate_limiting_schemas, Category.RATE_LIMITING),
    ProviderGroup("errors", get_error_schemas, Category.ERRORS),
    ProviderGroup("documentation", get_documentation_schemas, Category.COMMON),
)

__all__ = ["DEFAULT_PROVIDERS"]
