"""Relaxed input model.

The convenient shape a caller writes by hand: a flat list of endpoints
carrying their own path and method, responses as a list carrying their own
status code, and response headers as a list carrying their own name.
"""

from typing import Any

from pydantic import Field, StrictInt, field_validator

from .shared import (
    Example,
    ExternalDocs,
    HttpMethod,
    Info,
    Items,
    Parameter,
    Schema,
    Scheme,
    SecurityRequirement,
    SecurityScheme,
    SpecModel,
    Tag,
)

DEFAULT_STATUS_CODE = 0  # becomes the "default" response


class Header(Items):
    name: str
    description: str | None = None


class Response(SpecModel):
    status_code: StrictInt = Field(ge=0)  # 0 means "default"
    description: str
    schema_: Schema | None = Field(default=None, alias="schema")
    headers: list[Header] | None = None
    examples: Example | None = None


class Operation(SpecModel):
    tags: list[str] | None = None
    summary: str | None = None
    description: str | None = None
    external_docs: ExternalDocs | None = None
    operation_id: str | None = None
    consumes: list[str] | None = None
    produces: list[str] | None = None
    parameters: list[Parameter] | None = None
    responses: list[Response]
    schemes: list[Scheme] | None = None
    deprecated: bool | None = None
    security: list[SecurityRequirement] | None = None


class Endpoint(Operation):
    """An operation bundled with the path and method it is served on."""

    path: str  # /pets/{petId}
    method: HttpMethod

    @field_validator("method", mode="before")
    @classmethod
    def _lower_method(cls, value: Any) -> Any:
        return value.lower() if isinstance(value, str) else value


class Spec(SpecModel):
    """Top-level relaxed document handed to the builder."""

    info: Info
    host: str | None = None
    base_path: str | None = None
    schemes: list[Scheme] | None = None
    consumes: list[str] | None = None
    produces: list[str] | None = None
    endpoints: list[Endpoint] = []
    paths: dict[str, dict[str, Any]] | None = None  # pre-shaped paths, merged with endpoints
    definitions: dict[str, Schema] | None = None
    parameters: dict[str, Parameter] | None = None
    responses: dict[str, dict[str, Any]] | None = None
    security_definitions: dict[str, SecurityScheme] | None = None
    security: list[SecurityRequirement] | None = None
    tags: list[Tag] | None = None
    external_docs: ExternalDocs | None = None
