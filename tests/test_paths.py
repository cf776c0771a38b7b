"""Feature-gated path groups of the generated document."""

from dataclasses import fields, replace

import pytest

from uma_openapi.openapi.config import FeatureFlags, OpenAPIConfig
from uma_openapi.openapi.generator import OpenAPIGenerator
from uma_openapi.openapi.paths import PUBLIC_OPERATIONS, get_paths

ALL_ON = FeatureFlags(authentication=True)

# Flag -> a path present only when the flag is on (with every other flag on)
GATED_PATHS = {
    "authentication": "/api/v1/auth/login",
    "bulk_operations": "/api/v1/docker/containers/bulk/start",
    "websockets": "/api/v1/ws",
    "metrics": "/api/v1/system/resources",
    "zfs": "/api/v1/storage/zfs/pools",
    "array_control": "/api/v1/storage/array",
    "vm_management": "/api/v1/vms",
}


def _document(registry, features):
    return OpenAPIGenerator(OpenAPIConfig(features=features), registry=registry).generate()


def _operations(paths):
    for item in paths.values():
        yield from item.values()


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


def test_every_flag_is_covered():
    assert set(GATED_PATHS) == {field.name for field in fields(FeatureFlags)}


@pytest.mark.parametrize("flag", sorted(GATED_PATHS))
def test_each_flag_changes_the_document(registry, flag):
    default = FeatureFlags()
    toggled = replace(default, **{flag: not getattr(default, flag)})

    before = _document(registry, default)
    after = _document(registry, toggled)

    assert (before["paths"], before["components"]) != (after["paths"], after["components"])


@pytest.mark.parametrize("flag, path", sorted(GATED_PATHS.items()))
def test_flag_gates_its_paths(flag, path):
    assert path in get_paths(ALL_ON)
    assert path not in get_paths(replace(ALL_ON, **{flag: False}))


def test_always_present_groups():
    paths = get_paths(FeatureFlags(
        authentication=False, bulk_operations=False, websockets=False, metrics=False,
        zfs=False, array_control=False, vm_management=False,
    ))
    for path in (
        "/api/v1/docker/containers",
        "/api/v1/system/info",
        "/api/v1/operations",
        "/api/v1/rate-limits/config",
        "/api/v1/health",
        "/api/v1/schemas/{name}",
    ):
        assert path in paths
    assert not any(path.startswith("/api/v1/storage") for path in paths)
    assert not any("/bulk/" in path for path in paths)
    assert [path for path in paths if path.endswith("/stats")] == ["/api/v1/openapi/stats"]


def test_metrics_gates_statistics_endpoints():
    without = get_paths(replace(ALL_ON, metrics=False))
    for path in (
        "/api/v1/vms/{id}/stats",
        "/api/v1/ws/stats",
        "/api/v1/operations/stats",
        "/api/v1/rate-limits/stats",
    ):
        assert path in get_paths(ALL_ON)
        assert path not in without


def test_references_resolve_with_every_feature(registry):
    document = _document(registry, ALL_ON)
    components = document["components"]
    sections = {
        "#/components/schemas/": components["schemas"],
        "#/components/responses/": components["responses"],
        "#/components/parameters/": components["parameters"],
    }

    targets = set(_refs(document["paths"])) | set(_refs(components["responses"]))
    assert targets
    for target in targets:
        prefix = next((p for p in sections if target.startswith(p)), None)
        assert prefix is not None, target
        assert target[len(prefix):] in sections[prefix], target


def test_operation_ids_are_unique():
    ids = [op["operationId"] for op in _operations(get_paths(ALL_ON))]
    assert len(ids) == len(set(ids))


def test_security_only_with_authentication():
    assert all("security" not in op for op in _operations(get_paths(FeatureFlags())))

    paths = get_paths(ALL_ON)
    assert paths["/api/v1/vms"]["get"]["security"] == [{"BearerAuth": []}, {"ApiKeyAuth": []}]
    for op in _operations(paths):
        if op["operationId"] in PUBLIC_OPERATIONS or op["tags"][0] in ("Monitoring", "Documentation", "Schemas"):
            assert "security" not in op, op["operationId"]
        else:
            assert "security" in op, op["operationId"]


def test_shared_path_items_carry_both_methods():
    paths = get_paths(ALL_ON)
    assert set(paths["/api/v1/operations"]) == {"get", "post"}
    assert set(paths["/api/v1/operations/{operationId}"]) == {"get", "delete"}
    assert set(paths["/api/v1/rate-limits/config"]) == {"get", "put"}


def test_paths_are_fresh_per_call():
    first = get_paths(ALL_ON)
    first["/api/v1/vms"]["get"]["mutated"] = True
    assert "mutated" not in get_paths(ALL_ON)["/api/v1/vms"]["get"]
