"""Health check endpoint."""

from fastapi import APIRouter

from uma_openapi.dependencies import Generator

router = APIRouter()


@router.get("/health")
async def health_check(generator: Generator):
    """Return service health status."""
    return {
        "status": "healthy",
        "service": "uma-openapi",
        "version": generator.config.version,
        "schemas": len(generator.schema_registry),
    }
