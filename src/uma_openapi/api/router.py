"""Master API router mounted at /api/v1."""

from fastapi import APIRouter

from uma_openapi.api.routes import docs, health, schemas

api_router = APIRouter(prefix="/api/v1")
api_router.include_router(health.router, tags=["Health"])
api_router.include_router(docs.router, tags=["Documentation"])
api_router.include_router(schemas.router, tags=["Schemas"])
