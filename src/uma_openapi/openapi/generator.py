"""OpenAPI document generator.

Combines the schema registry, the reusable responses and the service's own
path items into one OpenAPI 3.1 document.
"""

from __future__ import annotations

import logging
from typing import Any

from uma_openapi.errors.exceptions import ValidationError
from uma_openapi.models.openapi import OpenAPIComponents, OpenAPIDocument
from uma_openapi.openapi.config import OpenAPIConfig
from uma_openapi.openapi.info import build_info
from uma_openapi.openapi.parameters import get_common_parameters
from uma_openapi.openapi.paths import get_paths
from uma_openapi.openapi.responses import get_common_responses
from uma_openapi.schemas.registry import SchemaRegistry

logger = logging.getLogger(__name__)

OPENAPI_VERSION = "3.1.1"
REQUIRED_SCHEMAS = ("Error", "SuccessResponse", "StandardResponse")


class OpenAPIGenerator:
    """Builds the UMA OpenAPI document from a populated registry."""

    def __init__(
        self,
        config: OpenAPIConfig | None = None,
        registry: SchemaRegistry | None = None,
    ):
        self._config = config or OpenAPIConfig()
        if registry is None:
            registry = SchemaRegistry()
            registry.register_all()
        self._registry = registry

    @property
    def config(self) -> OpenAPIConfig:
        return self._config

    @property
    def schema_registry(self) -> SchemaRegistry:
        return self._registry

    def update_config(self, config: OpenAPIConfig) -> None:
        self._config = config

    def build(self) -> OpenAPIDocument:
        return OpenAPIDocument(
            openapi=OPENAPI_VERSION,
            info=build_info(self._config),
            servers=self._config.get_servers(),
            paths=get_paths(self._config.features),
            components=OpenAPIComponents(
                schemas=self._registry.get_all_schemas(),
                responses=get_common_responses(),
                parameters=get_common_parameters(),
                security_schemes=self._config.get_security_schemes(),
            ),
        )

    def generate(self) -> dict[str, Any]:
        """Return the complete document as a JSON-ready dict."""
        return self.build().to_dict()

    def validate_spec(self) -> list[str]:
        """Basic structural checks. An empty list means the document is usable."""
        errors: list[str] = []
        document = self.build()

        if not document.openapi:
            errors.append("OpenAPI version is required")
        if not document.info.title:
            errors.append("API title is required")
        if not document.info.version:
            errors.append("API version is required")
        if not document.paths:
            errors.append("At least one path is required")

        for name in REQUIRED_SCHEMAS:
            if not self._registry.has_schema(name):
                errors.append(f"Required schema missing: {name}")

        if self._config.strict_categories:
            for name in sorted(self._registry.uncategorized()):
                errors.append(f"Schema has no category: {name}")

        if errors:
            logger.warning("openapi_validation_failed", extra={"errors": len(errors)})
        return errors

    def ensure_valid(self) -> None:
        """Raise ValidationError carrying every message from validate_spec()."""
        errors = self.validate_spec()
        if errors:
            raise ValidationError(
                f"Generated document has {len(errors)} validation error(s)",
                details=errors,
            )

    def get_stats(self) -> dict[str, Any]:
        """Document counts. Category keys are snake_case (``async_operations``)."""
        document = self.build()
        by_category = self._registry.get_schemas_by_category()
        return {
            "openapi_version": document.openapi,
            "api_version": document.info.version,
            "total_paths": len(document.paths),
            "total_schemas": len(document.components.schemas),
            "total_responses": len(document.components.responses),
            "total_parameters": len(document.components.parameters),
            "schemas_by_category": {
                category.name.lower(): len(names) for category, names in by_category.items()
            },
            "features_enabled": self._config.features.as_dict(),
        }
