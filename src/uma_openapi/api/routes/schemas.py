"""Browse the registered component schemas."""

from fastapi import APIRouter

from uma_openapi.dependencies import Registry

router = APIRouter()


@router.get("/schemas")
async def list_schemas(registry: Registry):
    names = sorted(registry.list_schemas())
    return {"schemas": names, "total": len(names)}


@router.get("/schemas/categories")
async def schemas_by_category(registry: Registry):
    """Every category is present, possibly with an empty list."""
    return {
        str(category): sorted(names)
        for category, names in registry.get_schemas_by_category().items()
    }


@router.get("/schemas/{name}")
async def get_schema(name: str, registry: Registry):
    """Raises SchemaNotFoundError (404) for unknown names."""
    definition = registry.get_schema(name)
    return {
        "name": name,
        "category": str(registry.category_of(name)),
        "definition": definition,
    }
