"""Turn resolved schema nodes into structural shapes."""

from typing import Any

from api_typegen.generator.shapes import (
    ANY,
    BOOLEAN,
    NUMBER,
    STRING,
    ArrayShape,
    IndexShape,
    NullableShape,
    ObjectShape,
    Shape,
    UnionShape,
)

_PRIMITIVES: dict[str, Shape] = {
    "string": STRING,
    "number": NUMBER,
    "integer": NUMBER,
    "boolean": BOOLEAN,
}


def _merge_all_of(schemas: list[dict]) -> dict[str, Any]:
    """Merge allOf members into one object schema; later members win on conflicts."""
    properties: dict[str, Any] = {}
    has_properties = False
    required: list[str] = []
    additional = None
    for sub in schemas:
        if not isinstance(sub, dict):
            continue
        if "allOf" in sub:
            sub = _merge_all_of([{k: v for k, v in sub.items() if k != "allOf"}, *sub["allOf"]])
        if isinstance(sub.get("properties"), dict):
            has_properties = True
            properties.update(sub["properties"])
        required.extend(sub.get("required") or [])
        if sub.get("additionalProperties") is not None:
            additional = sub["additionalProperties"]

    merged: dict[str, Any] = {"type": "object", "required": required}
    if has_properties:
        merged["properties"] = properties
    if additional is not None:
        merged["additionalProperties"] = additional
    return merged


def _transform_object(schema: dict[str, Any]) -> Shape:
    properties = schema.get("properties")
    if isinstance(properties, dict):
        result: dict[str, Shape] = {}
        for key, value in properties.items():
            if isinstance(value, dict) and value.get("nullable"):
                # Strip the flag so the property is wrapped exactly once.
                result[key] = NullableShape(inner=transform_type({**value, "nullable": False}))
            else:
                result[key] = transform_type(value)
        return ObjectShape(properties=result)

    additional = schema.get("additionalProperties")
    if isinstance(additional, dict):
        return IndexShape(value=transform_type(additional))
    return IndexShape(value=ANY)


def _is_object_like(schema: Any) -> bool:
    if not isinstance(schema, dict):
        return False
    if "properties" in schema or schema.get("type") == "object":
        return True
    return any(_is_object_like(sub) for sub in schema.get("allOf") or [])


def _transform_all_of(schema: dict[str, Any]) -> Shape:
    """Merge object members; otherwise the first typed member decides the shape."""
    own = {key: value for key, value in schema.items() if key != "allOf"}
    members = [sub for sub in schema["allOf"] if isinstance(sub, dict)]

    if _is_object_like(own):
        return _transform_object(_merge_all_of([own, *members]))
    if len(members) == 1 and "type" not in own:
        return transform_type(members[0])
    if any(_is_object_like(sub) for sub in members):
        return _transform_object(_merge_all_of(members))

    if own.get("type"):
        return _transform(own)
    typed = next((sub for sub in members if "type" in sub), None)
    return transform_type(typed) if typed else ANY


def _transform(schema: dict[str, Any]) -> Shape:
    union = schema.get("anyOf") or schema.get("oneOf")
    if union:
        return UnionShape(options=[transform_type(option) for option in union])

    if schema.get("allOf"):
        return _transform_all_of(schema)

    schema_type = schema.get("type")
    if schema_type == "object":
        return _transform_object(schema)
    if schema_type == "array":
        items = schema.get("items")
        return ArrayShape(element=transform_type(items) if items else ANY)
    if isinstance(schema_type, str) and schema_type in _PRIMITIVES:
        return _PRIMITIVES[schema_type]
    return ANY


def transform_type(schema: Any) -> Shape:
    """Synthesize the shape of one resolved schema node.

    Unknown or missing types, and cyclic `$ref` placeholders, become `any`.
    A node-level `nullable: true` wraps the whole result.
    """
    if not isinstance(schema, dict):
        return ANY

    result = _transform(schema)
    if schema.get("nullable"):
        result = NullableShape(inner=result)
    return result


def transform_types(schemas: dict[str, Any]) -> ObjectShape:
    """Synthesize every entry of a name -> schema mapping into one object shape."""
    return ObjectShape(properties={key: transform_type(value) for key, value in schemas.items()})
