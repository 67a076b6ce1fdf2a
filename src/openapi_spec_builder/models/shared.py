"""Document shapes shared by the relaxed and strict Swagger 2.0 models.

Attribute names are snake_case; the wire names (camelCase, ``in``, ``$ref``,
``schema``) are aliases. Unknown keys are kept so ``x-`` extensions pass
through untouched.
"""

from enum import Enum
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

SWAGGER_VERSION = "2.0"

Scheme = Literal["http", "https", "ws", "wss"]
DataType = Literal["array", "boolean", "integer", "number", "null", "object", "string", "file"]
SecurityRequirement = dict[str, list[str]]
Example = dict[str, Any]  # {mime_type: example_value}


class HttpMethod(str, Enum):
    """Operation slots a Swagger 2.0 path item can hold."""

    GET = "get"
    PUT = "put"
    POST = "post"
    DELETE = "delete"
    OPTIONS = "options"
    HEAD = "head"
    PATCH = "patch"

    @classmethod
    def parse(cls, token: str) -> "HttpMethod":
        """Match a method token case-insensitively, raising ValueError if unknown."""
        return cls(token.lower())


class SpecModel(BaseModel):
    """Base for every document object."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="allow")

    def to_document(self) -> dict[str, Any]:
        """Dump to a plain JSON-like dict using wire names.

        Only fields the caller set are written, and ones set to None are left out.
        """
        return self.model_dump(mode="json", by_alias=True, exclude_unset=True, exclude_none=True)


class Contact(SpecModel):
    name: str | None = None
    url: str | None = None
    email: str | None = None


class License(SpecModel):
    name: str
    url: str | None = None


class Info(SpecModel):
    title: str
    version: str
    description: str | None = None
    terms_of_service: str | None = None
    contact: Contact | None = None
    license: License | None = None


class ExternalDocs(SpecModel):
    url: str
    description: str | None = None


class Tag(SpecModel):
    name: str
    description: str | None = None
    external_docs: ExternalDocs | None = None


class Xml(SpecModel):
    name: str | None = None
    namespace: str | None = None
    prefix: str | None = None
    attribute: bool | None = None
    wrapped: bool | None = None


class SecurityScheme(SpecModel):
    """An entry of ``securityDefinitions``."""

    type: Literal["basic", "apiKey", "oauth2"]
    description: str | None = None
    name: str | None = None
    in_: Literal["query", "header"] | None = Field(default=None, alias="in")
    flow: Literal["implicit", "password", "application", "accessCode"] | None = None
    authorization_url: str | None = None
    token_url: str | None = None
    scopes: dict[str, str] | None = None


class Reference(SpecModel):
    ref: str = Field(alias="$ref")


class SharedSchema(SpecModel):
    """Validation keywords common to schemas, parameters, items and headers."""

    format: str | None = None  # int32 / int64 / float / double / byte / binary / date / date-time / password
    default: Any = None
    maximum: float | None = None
    exclusive_maximum: bool | None = None
    minimum: float | None = None
    exclusive_minimum: bool | None = None
    max_length: int | None = None
    min_length: int | None = None
    pattern: str | None = None
    max_items: int | None = None
    min_items: int | None = None
    unique_items: bool | None = None
    enum: list[Any] | None = None
    multiple_of: float | None = None


class Items(SharedSchema):
    """Primitive array item description used by non-body parameters and headers."""

    type: Literal["string", "number", "integer", "boolean", "array"] | None = None
    items: "Items | None" = None
    collection_format: Literal["csv", "ssv", "tsv", "pipes"] | None = None


class Schema(SharedSchema):
    ref: str | None = Field(default=None, alias="$ref")
    type: DataType | None = None
    title: str | None = None
    description: str | None = None
    items: "Schema | None" = None
    properties: dict[str, "Schema"] | None = None
    additional_properties: "bool | Schema | None" = None
    all_of: list["Schema"] | None = None
    discriminator: str | None = None
    read_only: bool | None = None
    xml: Xml | None = None
    external_docs: ExternalDocs | None = None
    example: Any = None
    max_properties: int | None = None
    min_properties: int | None = None
    required: list[str] | None = None


class Parameter(SharedSchema):
    name: str
    in_: Literal["query", "header", "path", "formData", "body"] = Field(alias="in")
    description: str | None = None
    required: bool | None = None
    schema_: Schema | None = Field(default=None, alias="schema")  # body parameters only
    type: Literal["string", "number", "integer", "boolean", "array", "file"] | None = None
    allow_empty_value: bool | None = None
    items: Items | None = None
    collection_format: Literal["csv", "ssv", "tsv", "pipes", "multi"] | None = None
