"""FastAPI dependency injection providers."""

from typing import Annotated

from fastapi import Depends, Request

from uma_openapi.openapi.generator import OpenAPIGenerator
from uma_openapi.schemas.registry import SchemaRegistry


def get_generator(request: Request) -> OpenAPIGenerator:
    """Return the generator built during application startup."""
    return request.app.state.generator


def get_registry(generator: OpenAPIGenerator = Depends(get_generator)) -> SchemaRegistry:
    return generator.schema_registry


# Type aliases for dependency injection
Generator = Annotated[OpenAPIGenerator, Depends(get_generator)]
Registry = Annotated[SchemaRegistry, Depends(get_registry)]
