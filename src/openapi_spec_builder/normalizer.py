"""Shape normalizer.

Rewrites a relaxed document into the Swagger 2.0 layout:

1. ``swagger: "2.0"`` becomes the first key.
2. The flat ``endpoints`` list is grouped into ``paths[path][method]``.
3. Each operation's ``responses`` list becomes a mapping keyed by status code
   (``0`` becomes ``"default"``), and each response's ``headers`` list becomes
   a mapping keyed by header name.

Every step takes a mapping and returns a new dict without touching its input.
Leaf values (schemas, parameters, descriptions) are carried over as they are.
Running the steps on an already normalized document returns an equal document.
"""

from typing import Any, Mapping

from openapi_spec_builder.errors import DuplicateKeyError, ShapeError
from openapi_spec_builder.models.relaxed import DEFAULT_STATUS_CODE
from openapi_spec_builder.models.shared import SWAGGER_VERSION, HttpMethod
from openapi_spec_builder.models.strict import DEFAULT_RESPONSE_KEY

METHOD_KEYS = frozenset(m.value for m in HttpMethod)

Location = tuple[str | int, ...]


def normalize(document: Mapping[str, Any], strict_duplicates: bool = False) -> dict[str, Any]:
    """Run every normalization step in order.

    With ``strict_duplicates`` a repeated (path, method) pair, response key or
    header name raises DuplicateKeyError; otherwise the later entry wins.
    """
    document = inject_version(document)
    document = endpoints_to_paths(document, strict_duplicates=strict_duplicates)
    return responses_to_map(document, strict_duplicates=strict_duplicates)


def inject_version(document: Mapping[str, Any]) -> dict[str, Any]:
    """Return a copy of the document with the version tag as its first key."""
    _require_mapping(document, (), "document")
    result: dict[str, Any] = {"swagger": SWAGGER_VERSION}
    for key, value in document.items():
        if key != "swagger":
            result[key] = value
    return result


def endpoints_to_paths(document: Mapping[str, Any], strict_duplicates: bool = False) -> dict[str, Any]:
    """Group the flat endpoint list into a path -> method -> operation mapping.

    ``paths`` takes the place of ``endpoints`` in the key order. Endpoints are
    merged into a ``paths`` mapping the document may already carry.
    """
    _require_mapping(document, (), "document")
    endpoints = document.get("endpoints", [])
    if not isinstance(endpoints, list):
        raise ShapeError("'endpoints' must be a list", ("endpoints",))

    paths = _copy_paths(document.get("paths", {}))
    for index, endpoint in enumerate(endpoints):
        location: Location = ("endpoints", index)
        _require_mapping(endpoint, location, "endpoint")

        path = endpoint.get("path")
        if not isinstance(path, str):
            raise ShapeError("endpoint 'path' must be a string", location + ("path",))
        method = _parse_method(endpoint.get("method"), location + ("method",))

        path_item = paths.setdefault(path, {})
        if strict_duplicates and method in path_item:
            raise DuplicateKeyError(f"duplicate endpoint {method.upper()} {path}", location)
        path_item[method] = {k: v for k, v in endpoint.items() if k not in ("path", "method")}

    result: dict[str, Any] = {}
    for key, value in document.items():
        if key in ("endpoints", "paths"):
            result.setdefault("paths", paths)
        else:
            result[key] = value
    result.setdefault("paths", paths)
    return result


def responses_to_map(document: Mapping[str, Any], strict_duplicates: bool = False) -> dict[str, Any]:
    """Key every operation's responses by status code and their headers by name."""
    _require_mapping(document, (), "document")
    paths = document.get("paths", {})
    _require_mapping(paths, ("paths",), "'paths'")

    new_paths = {}
    for path, path_item in paths.items():
        location: Location = ("paths", path)
        _require_mapping(path_item, location, "path item")
        new_item = {}
        for key, value in path_item.items():
            # Path-level parameters, $ref and x- extensions are not operations.
            if key in METHOD_KEYS:
                value = _map_operation_responses(value, location + (key,), strict_duplicates)
            new_item[key] = value
        new_paths[path] = new_item

    return {**document, "paths": new_paths}


def response_key(status_code: Any, location: Location = ()) -> str:
    """Map a relaxed status code to its key in the responses mapping."""
    if isinstance(status_code, bool) or not isinstance(status_code, int):
        raise ShapeError(f"'statusCode' must be an integer, got {status_code!r}", location)
    if status_code < 0:
        raise ShapeError(f"'statusCode' must not be negative, got {status_code}", location)
    if status_code == DEFAULT_STATUS_CODE:
        return DEFAULT_RESPONSE_KEY
    return str(status_code)


def _copy_paths(paths: Any) -> dict[str, dict[str, Any]]:
    _require_mapping(paths, ("paths",), "'paths'")
    copied = {}
    for path, path_item in paths.items():
        _require_mapping(path_item, ("paths", path), "path item")
        copied[path] = dict(path_item)
    return copied


def _parse_method(token: Any, location: Location) -> str:
    if not isinstance(token, str):
        raise ShapeError(f"endpoint 'method' must be a string, got {token!r}", location)
    try:
        return HttpMethod.parse(token).value
    except ValueError:
        raise ShapeError(f"unknown HTTP method {token!r}", location) from None


def _map_operation_responses(operation: Any, location: Location, strict_duplicates: bool) -> dict[str, Any]:
    _require_mapping(operation, location, "operation")
    responses = operation.get("responses")
    if responses is None:
        return dict(operation)

    mapped: dict[str, Any] = {}
    if isinstance(responses, Mapping):
        # Already keyed; only header lists may still need reshaping.
        for key, response in responses.items():
            mapped[key] = _map_response_headers(response, location + ("responses", key), strict_duplicates)
        return {**operation, "responses": mapped}

    if not isinstance(responses, list):
        raise ShapeError("'responses' must be a list or a mapping", location + ("responses",))

    for index, response in enumerate(responses):
        response_location = location + ("responses", index)
        _require_mapping(response, response_location, "response")
        key = response_key(response.get("statusCode"), response_location + ("statusCode",))
        if strict_duplicates and key in mapped:
            raise DuplicateKeyError(f"duplicate response {key!r}", response_location)
        stripped = {k: v for k, v in response.items() if k != "statusCode"}
        mapped[key] = _map_response_headers(stripped, response_location, strict_duplicates)

    return {**operation, "responses": mapped}


def _map_response_headers(response: Any, location: Location, strict_duplicates: bool) -> Any:
    if not isinstance(response, Mapping) or not isinstance(response.get("headers"), list):
        return response

    headers = {}
    for index, header in enumerate(response["headers"]):
        header_location = location + ("headers", index)
        _require_mapping(header, header_location, "header")
        name = header.get("name")
        if not isinstance(name, str):
            raise ShapeError("header 'name' must be a string", header_location + ("name",))
        if strict_duplicates and name in headers:
            raise DuplicateKeyError(f"duplicate header {name!r}", header_location)
        headers[name] = {k: v for k, v in header.items() if k != "name"}

    return {**response, "headers": headers}


def _require_mapping(value: Any, location: Location, what: str) -> None:
    if not isinstance(value, Mapping):
        raise ShapeError(f"{what} must be a mapping, got {type(value).__name__}", location)
