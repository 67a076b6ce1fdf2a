"""Strict output model, the Swagger 2.0 document shape."""

from typing import Any, Literal, Mapping

from pydantic import Field, field_validator

from .shared import (
    Example,
    ExternalDocs,
    Info,
    Items,
    Parameter,
    Reference,
    Schema,
    Scheme,
    SecurityRequirement,
    SecurityScheme,
    SpecModel,
    Tag,
)

DEFAULT_RESPONSE_KEY = "default"


def is_response_key(key: str) -> bool:
    """True for ``"default"`` or a decimal status code without leading zeros."""
    if key == DEFAULT_RESPONSE_KEY:
        return True
    return key.isascii() and key.isdigit() and not key.startswith("0")


class Header(Items):
    description: str | None = None


class Response(SpecModel):
    description: str
    schema_: Schema | None = Field(default=None, alias="schema")
    headers: dict[str, Header] | None = None
    examples: Example | None = None


class Operation(SpecModel):
    tags: list[str] | None = None
    summary: str | None = None
    description: str | None = None
    external_docs: ExternalDocs | None = None
    operation_id: str | None = None
    consumes: list[str] | None = None
    produces: list[str] | None = None
    parameters: list[Reference | Parameter] | None = None
    responses: dict[str, Reference | Response]
    schemes: list[Scheme] | None = None
    deprecated: bool | None = None
    security: list[SecurityRequirement] | None = None

    @field_validator("responses")
    @classmethod
    def _check_response_keys(cls, value: dict[str, Any]) -> dict[str, Any]:
        for key in value:
            if not key.startswith("x-") and not is_response_key(key):
                raise ValueError(f"response key {key!r} is neither a status code nor 'default'")
        return value


class PathItem(SpecModel):
    ref: str | None = Field(default=None, alias="$ref")
    get: Operation | None = None
    put: Operation | None = None
    post: Operation | None = None
    delete: Operation | None = None
    options: Operation | None = None
    head: Operation | None = None
    patch: Operation | None = None
    parameters: list[Reference | Parameter] | None = None


class Spec(SpecModel):
    """A normalized, conformance-checked Swagger 2.0 document."""

    swagger: Literal["2.0"]
    info: Info
    host: str | None = None
    base_path: str | None = None
    schemes: list[Scheme] | None = None
    consumes: list[str] | None = None
    produces: list[str] | None = None
    paths: dict[str, PathItem]
    definitions: dict[str, Schema] | None = None
    parameters: dict[str, Parameter] | None = None
    responses: dict[str, Response] | None = None
    security_definitions: dict[str, SecurityScheme] | None = None
    security: list[SecurityRequirement] | None = None
    tags: list[Tag] | None = None
    external_docs: ExternalDocs | None = None

    @classmethod
    def from_document(cls, document: Mapping[str, Any]) -> "Spec":
        return cls.model_validate(document)
