"""FastAPI application factory and lifespan management."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from uma_openapi.config import settings
from uma_openapi.logging_config import configure_logging
from uma_openapi.openapi.config import OpenAPIConfig
from uma_openapi.openapi.generator import OpenAPIGenerator

# Configure logging at import time
configure_logging(log_level=settings.log_level, json_output=settings.json_logs)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Build the schema registry and generator once; requests only read them."""
    # Tests may preinstall a generator built from their own providers
    if getattr(app.state, "generator", None) is None:
        app.state.generator = OpenAPIGenerator(OpenAPIConfig.from_settings(settings))

    generator = app.state.generator
    errors = generator.validate_spec()
    if errors:
        logger.warning("openapi_spec_invalid", extra={"errors": errors})

    logger.info(
        "UMA OpenAPI service started (schemas=%d, environment=%s)",
        len(generator.schema_registry),
        generator.config.environment,
    )
    yield
    logger.info("UMA OpenAPI service shutdown complete")


def create_app() -> FastAPI:
    """Create and configure the FastAPI application.

    FastAPI's own docs and schema routes are disabled; the UMA document is
    served from /api/v1/openapi.json and /api/v1/docs instead.
    """
    app = FastAPI(
        title="UMA OpenAPI",
        version=settings.api_version,
        description="Schema registry and OpenAPI document service for the UMA REST API.",
        lifespan=lifespan,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )

    # Add middleware (order matters: last added = first executed)
    from uma_openapi.api.middleware.trace_id import TraceIdMiddleware
    app.add_middleware(TraceIdMiddleware)

    # Register error handlers
    from uma_openapi.errors.handlers import register_exception_handlers
    register_exception_handlers(app)

    # Import and mount routers
    from uma_openapi.api.router import api_router
    app.include_router(api_router)

    return app


app = create_app()
