"""Custom exception classes for the UMA OpenAPI service."""


class UMAError(Exception):
    """Base exception for UMA OpenAPI."""

    def __init__(self, code: str, message: str, details=None, status_code: int = 500):
        self.code = code
        self.message = message
        self.details = details
        self.status_code = status_code
        super().__init__(message)


class ValidationError(UMAError):
    """Generated document failed validation."""

    def __init__(self, message: str, details=None):
        super().__init__("VALIDATION_ERROR", message, details, status_code=400)


class NotFoundError(UMAError):
    """Resource not found."""

    def __init__(self, resource: str, resource_id: str):
        super().__init__(
            "NOT_FOUND",
            f"{resource} '{resource_id}' not found",
            status_code=404,
        )


class SchemaNotFoundError(NotFoundError):
    """Schema name is not registered.

    A missing name during document assembly is a broken cross-reference, so
    callers should let this propagate.
    """

    def __init__(self, name: str):
        super().__init__("Schema", name)
        self.code = "SCHEMA_NOT_FOUND"
        self.name = name
        self.details = {"schema": name}
