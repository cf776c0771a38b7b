"""Generated document, Swagger UI and document diagnostics."""

from fastapi import APIRouter
from fastapi.openapi.docs import get_swagger_ui_html
from fastapi.responses import HTMLResponse

from uma_openapi.dependencies import Generator

router = APIRouter()

SWAGGER_UI_DIST = "https://unpkg.com/swagger-ui-dist@5.25.2"


@router.get("/openapi.json")
async def openapi_document(generator: Generator):
    return generator.generate()


@router.get("/docs", response_class=HTMLResponse)
async def swagger_ui():
    """Swagger UI pointed at the generated document."""
    return get_swagger_ui_html(
        openapi_url="/api/v1/openapi.json",
        title="UMA API Documentation",
        swagger_js_url=f"{SWAGGER_UI_DIST}/swagger-ui-bundle.js",
        swagger_css_url=f"{SWAGGER_UI_DIST}/swagger-ui.css",
    )


@router.get("/openapi/stats")
async def openapi_stats(generator: Generator):
    return generator.get_stats()


@router.get("/openapi/validate")
async def validate_openapi(generator: Generator):
    errors = generator.validate_spec()
    return {"valid": not errors, "errors": errors}
