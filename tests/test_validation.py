import asyncio

import pytest

from openapi_spec_builder.errors import ConformanceError, ValidatorUnavailableError
from openapi_spec_builder.validation import OpenApiSpecValidator, check_conformance

VALID_DOC = {
    "swagger": "2.0",
    "info": {"title": "Petstore", "version": "1.0.0"},
    "paths": {
        "/pets": {
            "get": {
                "responses": {
                    "default": {"description": "unexpected error"},
                    "200": {"description": "ok", "headers": {"x-next": {"type": "string"}}},
                },
            },
        },
    },
}


class StubValidator:
    def __init__(self, errors=(), exc: Exception | None = None):
        self.errors = list(errors)
        self.exc = exc
        self.calls = []

    async def validate(self, document, version):
        self.calls.append((document, version))
        if self.exc is not None:
            raise self.exc
        return self.errors


class TestCheckConformance:
    def test_returns_same_document_when_valid(self):
        validator = StubValidator()
        result = asyncio.run(check_conformance(validator, VALID_DOC))
        assert result is VALID_DOC
        assert validator.calls == [(VALID_DOC, "2.0")]

    def test_diagnostics_are_forwarded_verbatim(self):
        diagnostics = [{"path": ["paths", "/pets"], "message": "bad"}, "second problem"]
        validator = StubValidator(errors=diagnostics)
        with pytest.raises(ConformanceError) as exc_info:
            asyncio.run(check_conformance(validator, VALID_DOC))
        assert exc_info.value.errors == diagnostics
        assert exc_info.value.errors[0] is diagnostics[0]

    def test_validator_crash_is_a_separate_channel(self):
        boom = RuntimeError("validator exploded")
        validator = StubValidator(exc=boom)
        with pytest.raises(ValidatorUnavailableError) as exc_info:
            asyncio.run(check_conformance(validator, VALID_DOC))
        assert exc_info.value.__cause__ is boom
        assert not isinstance(exc_info.value, ConformanceError)


class TestOpenApiSpecValidator:
    def test_valid_document(self):
        errors = asyncio.run(OpenApiSpecValidator().validate(VALID_DOC, "2.0"))
        assert errors == []

    def test_missing_response_description(self):
        doc = {
            "swagger": "2.0",
            "info": {"title": "Petstore", "version": "1.0.0"},
            "paths": {"/pets": {"get": {"responses": {"200": {}}}}},
        }
        errors = asyncio.run(OpenApiSpecValidator().validate(doc, "2.0"))
        assert len(errors) > 0

    def test_missing_info(self):
        doc = {"swagger": "2.0", "paths": {}}
        errors = asyncio.run(OpenApiSpecValidator().validate(doc, "2.0"))
        assert len(errors) > 0

    def test_unsupported_version(self):
        with pytest.raises(ValueError):
            asyncio.run(OpenApiSpecValidator().validate(VALID_DOC, "3.0.0"))

    def test_unsupported_version_surfaces_as_unavailable(self):
        with pytest.raises(ValidatorUnavailableError):
            asyncio.run(check_conformance(OpenApiSpecValidator(), VALID_DOC, version="3.0.0"))

    def test_unresolvable_reference_is_a_diagnostic(self):
        doc = {
            "swagger": "2.0",
            "info": {"title": "Petstore", "version": "1.0.0"},
            "paths": {
                "/pets": {"get": {"responses": {"200": {"description": "ok", "schema": {"$ref": "#/definitions/Missing"}}}}},
            },
        }
        errors = asyncio.run(OpenApiSpecValidator().validate(doc, "2.0"))
        assert len(errors) > 0
