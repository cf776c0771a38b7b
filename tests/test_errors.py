"""Exception tree and error response envelope."""

from datetime import datetime, timezone

import pytest
from pydantic import ValidationError as PydanticValidationError

from uma_openapi.errors.exceptions import NotFoundError, SchemaNotFoundError, UMAError, ValidationError
from uma_openapi.models.common import ErrorDetail, ErrorResponse


def test_schema_not_found_error_fields():
    exc = SchemaNotFoundError("DockerInfo")
    assert isinstance(exc, NotFoundError)
    assert isinstance(exc, UMAError)
    assert exc.code == "SCHEMA_NOT_FOUND"
    assert exc.status_code == 404
    assert exc.name == "DockerInfo"
    assert exc.details == {"schema": "DockerInfo"}
    assert exc.message == "Schema 'DockerInfo' not found"


def test_validation_error_fields():
    exc = ValidationError("bad document", details=["Required schema missing: Error"])
    assert exc.code == "VALIDATION_ERROR"
    assert exc.status_code == 400
    assert str(exc) == "bad document"


def test_error_response_rejects_unknown_fields():
    detail = {
        "code": "NOT_FOUND",
        "message": "missing",
        "trace_id": "trc_1",
        "timestamp": datetime.now(timezone.utc),
    }
    ErrorResponse(error=ErrorDetail(**detail))

    with pytest.raises(PydanticValidationError):
        ErrorDetail(**detail, extra_field="nope")
