"""OpenAPI document assembly, validation and statistics."""

import pytest

from uma_openapi.errors.exceptions import ValidationError
from uma_openapi.models.enums import Category, Environment
from uma_openapi.openapi.config import REMOTE_SERVER_URL, FeatureFlags, OpenAPIConfig
from uma_openapi.openapi.generator import OPENAPI_VERSION, OpenAPIGenerator
from uma_openapi.openapi.info import FALLBACK_VERSION
from uma_openapi.schemas.registry import ProviderGroup, SchemaRegistry


def _registry(*groups):
    registry = SchemaRegistry(groups)
    registry.register_all()
    return registry


def test_document_shape(generator, registry):
    document = generator.generate()

    assert document["openapi"] == OPENAPI_VERSION == "3.1.1"
    assert document["info"]["title"] == "UMA REST API"
    assert document["info"]["version"] == "2025.06.16"
    assert document["info"]["contact"]["url"] == "https://github.com/domalab/uma"
    assert "/api/v1/health" in document["paths"]
    assert "/api/v1/openapi.json" in document["paths"]
    assert "/api/v1/schemas/{name}" in document["paths"]

    components = document["components"]
    assert set(components) == {"schemas", "responses", "parameters", "securitySchemes"}
    assert components["schemas"] == registry.get_all_schemas()
    assert "NotFound" in components["responses"]
    assert components["securitySchemes"] == {}


def test_security_schemes_follow_authentication_flag(registry):
    config = OpenAPIConfig(features=FeatureFlags(authentication=True))
    schemes = OpenAPIGenerator(config, registry=registry).generate()["components"]["securitySchemes"]

    assert schemes["BearerAuth"]["scheme"] == "bearer"
    assert schemes["ApiKeyAuth"]["name"] == "X-API-Key"


@pytest.mark.parametrize(
    "environment, base_url, expected",
    [
        (Environment.PROD, "", ["http://localhost:34600", REMOTE_SERVER_URL]),
        (Environment.DEV, "", ["http://localhost:34600"]),
        (Environment.DEV, "https://tower.lan", ["http://localhost:34600", "https://tower.lan"]),
    ],
)
def test_servers(environment, base_url, expected):
    config = OpenAPIConfig(environment=environment, base_url=base_url)
    assert [server.url for server in config.get_servers()] == expected


def test_servers_use_configured_port():
    assert OpenAPIConfig(port=8080).get_servers()[0].url == "http://localhost:8080"


@pytest.mark.parametrize("version", ["", "unknown"])
def test_info_version_fallback(registry, version):
    generator = OpenAPIGenerator(OpenAPIConfig(version=version), registry=registry)
    assert generator.generate()["info"]["version"] == FALLBACK_VERSION


def test_default_catalog_validates(generator):
    assert generator.validate_spec() == []
    generator.ensure_valid()


def test_missing_required_schemas_reported():
    registry = _registry(ProviderGroup("partial", lambda: {"Error": {}}))
    errors = OpenAPIGenerator(OpenAPIConfig(), registry=registry).validate_spec()

    assert "Required schema missing: SuccessResponse" in errors
    assert "Required schema missing: StandardResponse" in errors
    assert "Required schema missing: Error" not in errors


def test_strict_categories_reports_uncategorized_names():
    registry = _registry(
        ProviderGroup("common", lambda: {"Error": {}, "SuccessResponse": {}, "StandardResponse": {}}),
        ProviderGroup("misc", lambda: {"Widget": {}, "Gadget": {}}),
    )
    lenient = OpenAPIGenerator(OpenAPIConfig(), registry=registry)
    strict = OpenAPIGenerator(OpenAPIConfig(strict_categories=True), registry=registry)

    assert lenient.validate_spec() == []
    assert strict.validate_spec() == [
        "Schema has no category: Gadget",
        "Schema has no category: Widget",
    ]


def test_ensure_valid_raises_with_all_errors():
    registry = _registry()
    generator = OpenAPIGenerator(OpenAPIConfig(), registry=registry)

    with pytest.raises(ValidationError) as exc_info:
        generator.ensure_valid()
    assert exc_info.value.code == "VALIDATION_ERROR"
    assert exc_info.value.status_code == 400
    assert len(exc_info.value.details) == 3


def test_get_stats(generator, registry):
    stats = generator.get_stats()

    assert stats["openapi_version"] == "3.1.1"
    assert stats["api_version"] == "2025.06.16"
    assert stats["total_schemas"] == len(registry) == 129
    assert stats["total_responses"] == 13
    assert stats["total_paths"] == len(generator.generate()["paths"])
    assert set(stats["schemas_by_category"]) == {category.name.lower() for category in Category}
    assert stats["schemas_by_category"]["async_operations"] == 6
    assert sum(stats["schemas_by_category"].values()) == 129
    assert stats["schemas_by_category"]["auth"] == 11
    assert stats["total_parameters"] == len(generator.generate()["components"]["parameters"])
    assert stats["features_enabled"]["authentication"] is False
    assert stats["features_enabled"]["zfs"] is True


def test_update_config(generator):
    generator.update_config(OpenAPIConfig(version="2026.01.01", environment=Environment.DEV))

    assert generator.config.version == "2026.01.01"
    document = generator.generate()
    assert document["info"]["version"] == "2026.01.01"
    assert len(document["servers"]) == 1


def test_generator_builds_default_registry_when_none_given():
    generator = OpenAPIGenerator()
    assert len(generator.schema_registry) == 129
    assert generator.config.port == 34600
