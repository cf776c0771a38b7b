"""Schema registry aggregating provider groups into one namespace.

The registry is populated once at startup by `register_all()` and read
concurrently afterwards. `register_all()` builds the new namespace aside and
publishes it with a single assignment, so readers see either the previous
snapshot or the complete new one.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass
from typing import Any

from uma_openapi.errors.exceptions import SchemaNotFoundError
from uma_openapi.models.enums import Category
from uma_openapi.schemas.categories import DEFAULT_CATEGORY, classify, is_listed

logger = logging.getLogger(__name__)

SchemaProvider = Callable[[], Mapping[str, Any]]


@dataclass(frozen=True)
class ProviderGroup:
    """One provider function plus the category its schemas belong to.

    When ``category`` is None the static name lists classify each schema.
    """

    name: str
    provide: SchemaProvider
    category: Category | None = None


@dataclass(frozen=True)
class _Snapshot:
    schemas: dict[str, Any]
    declared: dict[str, Category | None]


class SchemaRegistry:
    """Unified name -> schema definition namespace."""

    def __init__(self, providers: Iterable[ProviderGroup] | None = None):
        if providers is None:
            from uma_openapi.schemas.providers import DEFAULT_PROVIDERS

            providers = DEFAULT_PROVIDERS
        self._providers: tuple[ProviderGroup, ...] = tuple(providers)
        self._snapshot = _Snapshot(schemas={}, declared={})

    @property
    def providers(self) -> tuple[ProviderGroup, ...]:
        return self._providers

    def register_all(self) -> None:
        """Invoke every provider in order; later groups overwrite earlier names."""
        schemas: dict[str, Any] = {}
        declared: dict[str, Category | None] = {}
        owners: dict[str, str] = {}

        for group in self._providers:
            for name, definition in group.provide().items():
                if name in owners and owners[name] != group.name:
                    logger.warning(
                        "schema_overwritten",
                        extra={"schema": name, "previous": owners[name], "provider": group.name},
                    )
                schemas[name] = definition
                declared[name] = group.category
                owners[name] = group.name

        self._snapshot = _Snapshot(schemas=schemas, declared=declared)
        for name in self.uncategorized():
            logger.warning(
                "schema_uncategorized",
                extra={"schema": name, "fallback": str(DEFAULT_CATEGORY)},
            )
        logger.info(
            "schema_registry_loaded",
            extra={"schemas": len(schemas), "providers": len(self._providers)},
        )

    def get_all_schemas(self) -> dict[str, Any]:
        """Return a copy of the name -> definition mapping."""
        return dict(self._snapshot.schemas)

    def get_schema(self, name: str) -> Any:
        """Return the registered definition for ``name``.

        Raises:
            SchemaNotFoundError: If no provider registered ``name``.
        """
        try:
            return self._snapshot.schemas[name]
        except KeyError:
            raise SchemaNotFoundError(name) from None

    def has_schema(self, name: str) -> bool:
        return name in self._snapshot.schemas

    def list_schemas(self) -> list[str]:
        """All registered names. Order is not guaranteed."""
        return list(self._snapshot.schemas)

    def category_of(self, name: str) -> Category:
        """Category of a registered name (declared first, static lists second)."""
        snapshot = self._snapshot
        if name not in snapshot.schemas:
            raise SchemaNotFoundError(name)
        return snapshot.declared.get(name) or classify(name)

    def get_schemas_by_category(self) -> dict[Category, list[str]]:
        """Group every registered name by category.

        Every Category is present as a key, with an empty list if nothing
        belongs to it.
        """
        snapshot = self._snapshot
        grouped: dict[Category, list[str]] = {category: [] for category in Category}
        for name in snapshot.schemas:
            grouped[snapshot.declared.get(name) or classify(name)].append(name)
        return grouped

    def uncategorized(self) -> list[str]:
        """Names that only reach a category through the default fallback."""
        snapshot = self._snapshot
        return [
            name for name in snapshot.schemas
            if snapshot.declared.get(name) is None and not is_listed(name)
        ]

    def __contains__(self, name: object) -> bool:
        return name in self._snapshot.schemas

    def __len__(self) -> int:
        return len(self._snapshot.schemas)
