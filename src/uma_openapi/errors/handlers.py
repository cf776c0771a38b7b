"""FastAPI exception handlers producing ErrorResponse bodies."""

import logging
from datetime import datetime, timezone

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from uma_openapi.errors.exceptions import UMAError
from uma_openapi.models.common import ErrorDetail, ErrorResponse

logger = logging.getLogger(__name__)


def register_exception_handlers(app: FastAPI) -> None:
    """Register all custom exception handlers on the FastAPI app."""

    @app.exception_handler(UMAError)
    async def uma_error_handler(request: Request, exc: UMAError):
        trace_id = getattr(request.state, "trace_id", "unknown")
        logger.info(
            "request_failed",
            extra={
                "path": request.url.path,
                "code": exc.code,
                "status_code": exc.status_code,
                "trace_id": trace_id,
            },
        )
        error_response = ErrorResponse(
            error=ErrorDetail(
                code=exc.code,
                message=exc.message,
                details=exc.details,
                trace_id=trace_id,
                timestamp=datetime.now(timezone.utc),
            ),
        )
        return JSONResponse(
            status_code=exc.status_code,
            content=error_response.model_dump(mode="json", exclude_none=True),
        )
