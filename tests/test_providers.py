"""Provider groups: order, purity and internal references of the default catalog."""

from uma_openapi.models.enums import Category
from uma_openapi.schemas.providers import DEFAULT_PROVIDERS
from uma_openapi.schemas.providers.auth import get_auth_schemas
from uma_openapi.schemas.providers.common import get_common_schemas

REF_PREFIX = "#/components/schemas/"


def _refs(node):
    if isinstance(node, dict):
        for key, value in node.items():
            if key == "$ref" and isinstance(value, str):
                yield value
            else:
                yield from _refs(value)
    elif isinstance(node, list):
        for item in node:
            yield from _refs(item)


def test_default_provider_order():
    assert [group.name for group in DEFAULT_PROVIDERS] == [
        "common", "docker", "system", "storage", "vm", "websocket", "auth",
        "diagnostics", "notifications", "operations", "responses",
        "async_operations", "rate_limiting", "errors", "documentation",
    ]


def test_documentation_group_is_common():
    documentation = DEFAULT_PROVIDERS[-1]
    assert documentation.category == Category.COMMON
    assert list(documentation.provide()) == ["OpenAPISpec"]


def test_providers_return_fresh_values():
    first = get_auth_schemas()
    second = get_auth_schemas()
    assert first == second
    assert first is not second
    assert first["LoginRequest"] is not second["LoginRequest"]

    first["LoginRequest"]["mutated"] = True
    assert "mutated" not in get_auth_schemas()["LoginRequest"]


def test_common_group_names():
    assert sorted(get_common_schemas()) == sorted([
        "StandardResponse", "PaginationInfo", "ResponseMeta",
        "HealthResponse", "Error", "SuccessResponse",
    ])


def test_auth_group_names():
    assert sorted(get_auth_schemas()) == sorted([
        "LoginRequest", "LoginResponse", "TokenResponse", "RefreshRequest",
        "UserInfo", "APIKeyInfo", "AuthError", "AuthStats", "AuthUser",
        "SessionInfo", "PermissionInfo",
    ])


def test_groups_do_not_redefine_names():
    seen: dict[str, str] = {}
    for group in DEFAULT_PROVIDERS:
        for name in group.provide():
            assert name not in seen, f"{name} defined by {seen.get(name)} and {group.name}"
            seen[name] = group.name


def test_references_resolve_within_catalog(registry):
    schemas = registry.get_all_schemas()
    for name, definition in schemas.items():
        for target in _refs(definition):
            assert target.startswith(REF_PREFIX), f"{name}: {target}"
            assert target[len(REF_PREFIX):] in schemas, f"{name} -> {target}"
