"""Collect query and path parameters of an operation into name -> schema maps."""

from typing import Any

from api_typegen.parser.resolver import SchemaResolver


def _resolver_for(schemas: dict[str, Any] | SchemaResolver | None) -> SchemaResolver:
    if isinstance(schemas, SchemaResolver):
        return schemas
    return SchemaResolver(schemas)


def resolve_parameters(
    kind: str,
    parameters: list[dict] | None,
    schemas: dict[str, Any] | SchemaResolver | None,
) -> dict[str, Any] | None:
    """Resolve OpenAPI 3 parameters located `in` `kind` ('query' or 'path').

    Returns None when there is nothing to report.
    """
    if not parameters:
        return None

    resolver = _resolver_for(schemas)
    result: dict[str, Any] = {}
    for parameter in parameters:
        if parameter.get("in") != kind or not parameter.get("name"):
            continue
        schema = parameter.get("schema")
        if schema:
            result[parameter["name"]] = resolver.resolve(schema)

    return result or None


def resolve_parameters_v2(
    kind: str,
    parameters: list[dict] | None,
    schemas: dict[str, Any] | SchemaResolver | None,
) -> dict[str, Any] | None:
    """Resolve Swagger 2.0 parameters located `in` `kind` ('query' or 'path').

    Swagger 2 puts primitive types directly on the parameter, so a bare
    `type` is accepted alongside a `schema` object.
    """
    if not parameters:
        return None

    resolver = _resolver_for(schemas)
    result: dict[str, Any] = {}
    for parameter in parameters:
        if parameter.get("in") != kind or not parameter.get("name"):
            continue
        schema = parameter.get("schema")
        if schema:
            result[parameter["name"]] = resolver.resolve(schema)
        elif parameter.get("type"):
            param_schema = {"type": parameter["type"]}
            if parameter["type"] == "array" and isinstance(parameter.get("items"), dict):
                param_schema["items"] = parameter["items"]
            result[parameter["name"]] = param_schema

    return result or None
