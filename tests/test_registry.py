"""Schema registry aggregation, lookup and category grouping."""

import logging

import pytest

from uma_openapi.errors.exceptions import NotFoundError, SchemaNotFoundError
from uma_openapi.models.enums import Category
from uma_openapi.schemas.registry import ProviderGroup, SchemaRegistry


def _group(name, schemas, category=None):
    return ProviderGroup(name, lambda: dict(schemas), category)


def _loaded(*groups):
    registry = SchemaRegistry(groups)
    registry.register_all()
    return registry


def test_new_registry_is_empty():
    registry = SchemaRegistry([])
    assert registry.list_schemas() == []
    assert registry.get_all_schemas() == {}
    assert len(registry) == 0


def test_register_all_with_no_providers():
    registry = _loaded()
    assert registry.list_schemas() == []
    assert all(names == [] for names in registry.get_schemas_by_category().values())


def test_disjoint_groups_union():
    registry = _loaded(
        _group("a", {"ContainerInfo": {"type": "object"}, "DockerImage": {}}),
        _group("b", {"VMInfo": {"type": "object"}}),
        _group("c", {"LoginRequest": {}}),
    )
    assert sorted(registry.list_schemas()) == ["ContainerInfo", "DockerImage", "LoginRequest", "VMInfo"]


def test_get_schema_returns_provider_value():
    definition = {"type": "object", "properties": {"username": {"type": "string"}}}
    registry = _loaded(ProviderGroup("auth", lambda: {"LoginRequest": definition}))

    assert registry.has_schema("LoginRequest")
    assert "LoginRequest" in registry
    assert registry.get_schema("LoginRequest") is definition


def test_every_registered_name_is_retrievable(registry):
    all_schemas = registry.get_all_schemas()
    for name in registry.list_schemas():
        assert registry.has_schema(name)
        assert registry.get_schema(name) is all_schemas[name]


def test_empty_definition_is_returned_not_an_error():
    registry = _loaded(_group("x", {"Placeholder": {}}))
    assert registry.get_schema("Placeholder") == {}


@pytest.mark.parametrize("name", ["NoSuchSchema", "", "loginrequest"])
def test_absent_name_raises(registry, name):
    assert not registry.has_schema(name)
    with pytest.raises(SchemaNotFoundError) as exc_info:
        registry.get_schema(name)
    assert exc_info.value.name == name
    assert exc_info.value.code == "SCHEMA_NOT_FOUND"
    assert exc_info.value.status_code == 404
    assert isinstance(exc_info.value, NotFoundError)


def test_lookup_before_register_all_raises():
    registry = SchemaRegistry()
    assert not registry.has_schema("Error")
    with pytest.raises(SchemaNotFoundError):
        registry.get_schema("Error")


def test_collision_last_group_wins(caplog):
    first = {"version": 1}
    second = {"version": 2}
    registry = SchemaRegistry([
        ProviderGroup("first", lambda: {"Shared": first}),
        ProviderGroup("second", lambda: {"Shared": second}),
    ])
    with caplog.at_level(logging.WARNING, logger="uma_openapi.schemas.registry"):
        registry.register_all()

    assert registry.get_schema("Shared") is second
    assert registry.list_schemas().count("Shared") == 1
    assert any(record.getMessage() == "schema_overwritten" for record in caplog.records)


def test_register_all_is_idempotent(registry):
    before = registry.get_all_schemas()
    registry.register_all()
    after = registry.get_all_schemas()
    assert sorted(before) == sorted(after)
    assert before == after


def test_get_all_schemas_returns_a_copy(registry):
    snapshot = registry.get_all_schemas()
    snapshot["Injected"] = {}
    del snapshot["Error"]
    assert not registry.has_schema("Injected")
    assert registry.has_schema("Error")


def test_reregister_does_not_mutate_earlier_snapshot():
    calls = []

    def provide():
        calls.append(1)
        return {f"Schema{len(calls)}": {}}

    registry = SchemaRegistry([ProviderGroup("dynamic", provide)])
    registry.register_all()
    first = registry.get_all_schemas()
    registry.register_all()

    assert list(first) == ["Schema1"]
    assert registry.list_schemas() == ["Schema2"]


def test_categories_cover_every_name_once(registry):
    grouped = registry.get_schemas_by_category()

    assert set(grouped) == set(Category)
    flattened = [name for names in grouped.values() for name in names]
    assert len(flattened) == len(set(flattened))
    assert sorted(flattened) == sorted(registry.list_schemas())


def test_auth_group_end_to_end():
    login = {"type": "object", "required": ["username", "password"]}
    registry = _loaded(ProviderGroup("auth", lambda: {"LoginRequest": login, "UserInfo": {}}))

    grouped = registry.get_schemas_by_category()
    assert sorted(grouped[Category.AUTH]) == ["LoginRequest", "UserInfo"]
    assert registry.get_schema("LoginRequest") == {"type": "object", "required": ["username", "password"]}


def test_declared_category_beats_static_lists():
    registry = _loaded(_group("misc", {"LoginRequest": {}, "Widget": {}}, Category.DIAGNOSTICS))
    grouped = registry.get_schemas_by_category()
    assert sorted(grouped[Category.DIAGNOSTICS]) == ["LoginRequest", "Widget"]
    assert grouped[Category.AUTH] == []
    assert registry.uncategorized() == []


def _uncategorized_warnings(caplog):
    return [record for record in caplog.records if record.getMessage() == "schema_uncategorized"]


def test_unlisted_name_falls_back_and_is_reported_once(caplog):
    registry = SchemaRegistry([_group("misc", {"Widget": {}, "VMInfo": {}})])

    with caplog.at_level(logging.WARNING, logger="uma_openapi.schemas.registry"):
        registry.register_all()
        warnings = _uncategorized_warnings(caplog)
        assert [record.schema for record in warnings] == ["Widget"]

        caplog.clear()
        grouped = registry.get_schemas_by_category()
        registry.get_schemas_by_category()
        assert _uncategorized_warnings(caplog) == []

    assert "Widget" in grouped[Category.RESPONSES]
    assert "VMInfo" in grouped[Category.VM]
    assert registry.uncategorized() == ["Widget"]
    assert registry.category_of("Widget") == Category.RESPONSES


def test_default_catalog_logs_no_uncategorized_warnings(caplog):
    with caplog.at_level(logging.WARNING, logger="uma_openapi.schemas.registry"):
        SchemaRegistry().register_all()
    assert _uncategorized_warnings(caplog) == []


def test_category_of_unknown_name_raises(registry):
    with pytest.raises(SchemaNotFoundError):
        registry.category_of("NoSuchSchema")


def test_default_catalog(registry):
    names = registry.list_schemas()
    assert len(names) == len(registry) == 129
    for required in ("Error", "SuccessResponse", "StandardResponse", "OpenAPISpec"):
        assert required in registry
    assert registry.uncategorized() == []
    assert registry.category_of("OpenAPISpec") == Category.COMMON
    assert registry.category_of("GPU") == Category.SYSTEM
    assert registry.category_of("ArrayDisk") == Category.STORAGE
