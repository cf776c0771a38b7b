"""Shared test fixtures."""

import pytest
from httpx import ASGITransport, AsyncClient

from uma_openapi.openapi.config import OpenAPIConfig
from uma_openapi.openapi.generator import OpenAPIGenerator
from uma_openapi.schemas.registry import SchemaRegistry


@pytest.fixture
def registry():
    """Registry populated from the default provider groups."""
    _registry = SchemaRegistry()
    _registry.register_all()
    return _registry


@pytest.fixture
def generator(registry):
    return OpenAPIGenerator(OpenAPIConfig(), registry=registry)


@pytest.fixture
def app(generator):
    """Create a test application instance with a prebuilt generator."""
    from uma_openapi.main import create_app

    _app = create_app()
    _app.state.generator = generator
    return _app


@pytest.fixture
async def client(app):
    """Async HTTP test client."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
