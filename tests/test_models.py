import pytest
from pydantic import ValidationError

from openapi_spec_builder.models import relaxed, strict
from openapi_spec_builder.models.shared import HttpMethod, Info, Parameter, Schema


def _endpoint(**overrides) -> relaxed.Endpoint:
    data = {
        "path": "/pets",
        "method": "get",
        "responses": [{"statusCode": 200, "description": "ok"}],
    }
    data.update(overrides)
    return relaxed.Endpoint(**data)


class TestHttpMethod:
    def test_parse_is_case_insensitive(self):
        assert HttpMethod.parse("GET") is HttpMethod.GET
        assert HttpMethod.parse("Patch") is HttpMethod.PATCH

    def test_parse_rejects_unknown_method(self):
        with pytest.raises(ValueError):
            HttpMethod.parse("trace")


class TestSharedShapes:
    def test_parameter_accepts_wire_and_python_names(self):
        p1 = Parameter(**{"name": "limit", "in": "query", "type": "integer"})
        p2 = Parameter(name="limit", in_="query", type="integer")
        assert p1 == p2
        assert p1.to_document() == {"name": "limit", "in": "query", "type": "integer"}

    def test_parameter_rejects_unknown_location(self):
        with pytest.raises(ValidationError):
            Parameter(**{"name": "id", "in": "cookie"})

    def test_schema_is_recursive_and_keeps_ref(self):
        schema = Schema(
            type="array",
            items={"$ref": "#/definitions/Pet"},
        )
        assert schema.items.ref == "#/definitions/Pet"
        assert schema.to_document() == {"type": "array", "items": {"$ref": "#/definitions/Pet"}}

    def test_extensions_pass_through(self):
        info = Info(**{"title": "Petstore", "version": "1.0.0", "x-logo": {"url": "logo.png"}})
        assert info.to_document()["x-logo"] == {"url": "logo.png"}

    def test_fields_set_to_none_are_left_out(self):
        info = Info(title="Petstore", version="1.0.0", description=None, contact=None)
        assert info.to_document() == {"title": "Petstore", "version": "1.0.0"}

    def test_camel_case_wire_names(self):
        info = Info(title="Petstore", version="1.0.0", terms_of_service="https://example.com/tos")
        assert info.to_document() == {
            "title": "Petstore",
            "version": "1.0.0",
            "termsOfService": "https://example.com/tos",
        }


class TestRelaxedModel:
    def test_create_minimal_endpoint(self):
        ep = _endpoint()
        assert ep.method is HttpMethod.GET
        assert ep.responses[0].status_code == 200
        assert ep.parameters is None

    def test_response_requires_description(self):
        with pytest.raises(ValidationError):
            relaxed.Response(statusCode=200)

    @pytest.mark.parametrize("status_code", [True, "200", -1, 200.0])
    def test_response_status_code_must_be_a_non_negative_int(self, status_code):
        with pytest.raises(ValidationError):
            relaxed.Response(statusCode=status_code, description="ok")

    def test_endpoint_method_is_case_insensitive(self):
        assert _endpoint(method="POST").method is HttpMethod.POST

    def test_endpoint_rejects_unknown_method(self):
        with pytest.raises(ValidationError):
            _endpoint(method="fetch")

    def test_response_headers_are_named_list(self):
        response = relaxed.Response(
            statusCode=200,
            description="ok",
            headers=[{"name": "x-next", "type": "string"}],
        )
        assert response.headers[0].name == "x-next"

    def test_spec_to_document_uses_wire_names_and_set_fields_only(self):
        spec = relaxed.Spec(
            info={"title": "Petstore", "version": "1.0.0"},
            basePath="/v1",
            endpoints=[_endpoint()],
        )
        doc = spec.to_document()
        assert list(doc) == ["info", "basePath", "endpoints"]
        assert doc["endpoints"][0] == {
            "responses": [{"statusCode": 200, "description": "ok"}],
            "path": "/pets",
            "method": "get",
        }


class TestStrictModel:
    def _doc(self, responses):
        return {
            "swagger": "2.0",
            "info": {"title": "Petstore", "version": "1.0.0"},
            "paths": {"/pets": {"get": {"responses": responses}}},
        }

    def test_from_document(self):
        spec = strict.Spec.from_document(self._doc({"default": {"description": "err"}, "200": {"description": "ok"}}))
        assert spec.paths["/pets"].get.responses["200"].description == "ok"

    def test_rejects_other_version(self):
        doc = self._doc({"200": {"description": "ok"}})
        doc["swagger"] = "3.0"
        with pytest.raises(ValidationError):
            strict.Spec.from_document(doc)

    @pytest.mark.parametrize("key", ["ok", "020", "-1", "2OO"])
    def test_rejects_malformed_response_keys(self, key):
        with pytest.raises(ValidationError):
            strict.Spec.from_document(self._doc({key: {"description": "x"}}))

    def test_response_headers_are_keyed_by_name(self):
        response = strict.Response(description="ok", headers={"x-next": {"type": "string"}})
        assert response.headers["x-next"].type == "string"

    def test_is_response_key(self):
        assert strict.is_response_key("default")
        assert strict.is_response_key("404")
        assert not strict.is_response_key("0")
        assert not strict.is_response_key("")
