"""Helpers for writing path items as plain dicts."""

from uma_openapi.openapi.parameters import param_ref
from uma_openapi.schemas.providers._shared import array_of, ref

API_PREFIX = "/api/v1"


def response_ref(name: str) -> dict:
    return {"$ref": f"#/components/responses/{name}"}


def errors(*statuses: str) -> dict:
    """Map status codes to the shared error responses."""
    names = {
        "400": "BadRequest",
        "401": "Unauthorized",
        "403": "Forbidden",
        "404": "NotFound",
        "409": "Conflict",
        "422": "UnprocessableEntity",
        "429": "TooManyRequests",
        "500": "InternalServerError",
        "503": "ServiceUnavailable",
    }
    return {status: response_ref(names[status]) for status in statuses}


def json_response(description: str, schema: dict) -> dict:
    return {"description": description, "content": {"application/json": {"schema": schema}}}


def enveloped(data: dict) -> dict:
    """StandardResponse with ``data`` set to the given schema."""
    return {
        "allOf": [
            ref("StandardResponse"),
            {"type": "object", "properties": {"data": data}},
        ],
    }


def enveloped_ref(name: str) -> dict:
    return enveloped(ref(name))


def enveloped_list(name: str) -> dict:
    return enveloped(array_of(name))


def json_body(name: str, description: str | None = None) -> dict:
    body = {"required": True, "content": {"application/json": {"schema": ref(name)}}}
    if description:
        body["description"] = description
    return body


def operation(
    method: str,
    summary: str,
    description: str,
    operation_id: str,
    tag: str,
    responses: dict,
    parameters: list[str] | None = None,
    request_body: dict | None = None,
) -> dict:
    """One operation wrapped in its path item, e.g. ``{"get": {...}}``.

    ``parameters`` are names under ``components.parameters``.
    """
    op = {
        "summary": summary,
        "description": description,
        "operationId": operation_id,
        "tags": [tag],
    }
    if parameters:
        op["parameters"] = [param_ref(name) for name in parameters]
    if request_body is not None:
        op["requestBody"] = request_body
    op["responses"] = responses
    return {method: op}


def get(summary, description, operation_id, tag, responses, parameters=None) -> dict:
    return operation("get", summary, description, operation_id, tag, responses, parameters)


def post(summary, description, operation_id, tag, responses, parameters=None, request_body=None) -> dict:
    return operation("post", summary, description, operation_id, tag, responses, parameters, request_body)


def merge(*items: dict) -> dict:
    """Combine single-method path items that share one path."""
    combined: dict = {}
    for item in items:
        combined.update(item)
    return combined
