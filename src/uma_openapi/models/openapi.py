"""Pydantic models for the top-level OpenAPI document."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class OpenAPIContact(BaseModel):
    name: str
    url: str
    email: str


class OpenAPIInfo(BaseModel):
    title: str
    description: str
    version: str
    contact: OpenAPIContact


class OpenAPIServer(BaseModel):
    url: str
    description: str


class OpenAPIComponents(BaseModel):
    """Reusable components; `schemas` comes straight from the registry."""

    model_config = ConfigDict(populate_by_name=True)

    schemas: dict[str, Any] = Field(default_factory=dict)
    responses: dict[str, Any] = Field(default_factory=dict)
    parameters: dict[str, Any] = Field(default_factory=dict)
    security_schemes: dict[str, Any] = Field(default_factory=dict, alias="securitySchemes")


class OpenAPIDocument(BaseModel):
    """OpenAPI 3.1 document assembled by the generator."""

    openapi: str
    info: OpenAPIInfo
    servers: list[OpenAPIServer]
    paths: dict[str, Any]
    components: OpenAPIComponents

    def to_dict(self) -> dict[str, Any]:
        """Serialize with OpenAPI field names (`securitySchemes`)."""
        return self.model_dump(mode="json", by_alias=True)
