"""OpenAPI / Swagger document reader.

Walks every path and HTTP method of an OpenAPI 3.x or Swagger 2.0
document and builds one EndpointRecord per operation.
"""

from typing import Any

from api_typegen.errors import UnresolvedReferenceError
from api_typegen.generator.synthesizer import transform_types
from api_typegen.parser.base import EndpointRecord
from api_typegen.parser.detect import SWAGGER_2, detect_version
from api_typegen.parser.parameters import resolve_parameters, resolve_parameters_v2
from api_typegen.parser.resolver import SchemaResolver

HTTP_METHODS = ("get", "put", "post", "delete", "options", "head", "patch", "trace")

JSON_CONTENT_TYPE = "application/json"


def get_schemas(document: dict[str, Any]) -> dict[str, Any]:
    """Return the schema registry: `definitions` (v2) or `components.schemas` (v3)."""
    if detect_version(document) == SWAGGER_2:
        return document.get("definitions") or {}
    return (document.get("components") or {}).get("schemas") or {}


def _follow_pointer(document: dict[str, Any], node: Any) -> Any:
    """Dereference a local non-schema `$ref` (parameters, requestBodies)."""
    if not isinstance(node, dict) or "$ref" not in node:
        return node
    ref = node["$ref"]
    target: Any = document
    for part in ref.lstrip("#/").split("/"):
        part = part.replace("~1", "/").replace("~0", "~")
        if not isinstance(target, dict) or part not in target:
            raise UnresolvedReferenceError(ref)
        target = target[part]
    return target


def _merge_parameters(document: dict[str, Any], path_level: list, operation_level: list) -> list[dict]:
    """Combine path-item and operation parameters; the operation wins on (name, in)."""
    merged: dict[tuple, dict] = {}
    for param in [*(path_level or []), *(operation_level or [])]:
        param = _follow_pointer(document, param)
        if not isinstance(param, dict):
            continue
        merged[(param.get("name"), param.get("in"))] = param
    return list(merged.values())


def _ok_response(document: dict[str, Any], operation: dict[str, Any]) -> dict[str, Any]:
    """Return the 200 response; YAML may load unquoted status codes as ints."""
    responses = {str(status): response for status, response in (operation.get("responses") or {}).items()}
    return _follow_pointer(document, responses.get("200")) or {}


def _json_schema(content: dict | None) -> Any:
    return ((content or {}).get(JSON_CONTENT_TYPE) or {}).get("schema")


def _parse_v2(
    document: dict[str, Any],
    method: str,
    parameters: list[dict],
    operation: dict[str, Any],
    resolver: SchemaResolver,
) -> dict[str, Any]:
    query = resolve_parameters_v2("query", parameters, resolver)
    params = resolve_parameters_v2("path", parameters, resolver)

    body = None
    if method != "get":
        body_param = next((p for p in parameters if p.get("in") == "body"), None)
        if body_param and body_param.get("schema"):
            body = resolver.resolve(body_param["schema"])

    ok = _ok_response(document, operation)
    schema = ok.get("schema")
    return {
        "query": query,
        "params": params,
        "body": body,
        "response": {"200": resolver.resolve(schema) if schema else None},
    }


def _parse_v3(
    document: dict[str, Any],
    method: str,
    parameters: list[dict],
    operation: dict[str, Any],
    resolver: SchemaResolver,
) -> dict[str, Any]:
    query = resolve_parameters("query", parameters, resolver)
    params = resolve_parameters("path", parameters, resolver)

    body = None
    request_body = _follow_pointer(document, operation.get("requestBody"))
    if method != "get" and request_body:
        content = request_body.get("content") or {}
        if JSON_CONTENT_TYPE in content:
            body = resolver.resolve(_json_schema(content))
        else:
            body = request_body

    ok = _ok_response(document, operation)
    content = ok.get("content") or {}
    response = resolver.resolve(_json_schema(content)) if JSON_CONTENT_TYPE in content else None
    return {
        "query": query,
        "params": params,
        "body": body,
        "response": {"200": response},
    }


def collect_endpoints(document: dict[str, Any]) -> list[EndpointRecord]:
    """Build an EndpointRecord for every (path, method) in the document.

    Raises UnsupportedVersionError before touching any path when the
    document is not Swagger 2.0 or OpenAPI 3.x.
    """
    version = detect_version(document)
    resolver = SchemaResolver(get_schemas(document))

    endpoints: list[EndpointRecord] = []
    for path, path_item in (document.get("paths") or {}).items():
        path_item = _follow_pointer(document, path_item) or {}
        for method, operation in path_item.items():
            if method.lower() not in HTTP_METHODS or not isinstance(operation, dict):
                continue
            method = method.lower()
            parameters = _merge_parameters(
                document, path_item.get("parameters"), operation.get("parameters"),
            )

            if version == SWAGGER_2:
                parsed = _parse_v2(document, method, parameters, operation, resolver)
            else:
                parsed = _parse_v3(document, method, parameters, operation, resolver)

            endpoints.append(
                EndpointRecord(
                    url=path,
                    method=method,
                    tags=operation.get("tags") or [],
                    summary=operation.get("summary"),
                    description=operation.get("description"),
                    query=transform_types(parsed["query"]) if parsed["query"] else None,
                    params=transform_types(parsed["params"]) if parsed["params"] else None,
                    body=parsed["body"],
                    response=parsed["response"],
                )
            )

    return endpoints
