"""Render structural shapes as TypeScript type syntax."""

import json
import re

from api_typegen.generator.shapes import (
    ArrayShape,
    IndexShape,
    NullableShape,
    ObjectShape,
    PrimitiveShape,
    UnionShape,
)

INDENT = "  "

_IDENTIFIER_RE = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")


def is_valid_identifier(key: str) -> bool:
    return bool(_IDENTIFIER_RE.match(key))


def format_key(key: str) -> str:
    """Leave identifier keys bare, quote everything else."""
    return key if is_valid_identifier(key) else json.dumps(key)


def _serialize_element(element, indent: int) -> str:
    text = serialize_type(element, indent)
    if isinstance(element, (NullableShape, UnionShape)) and " | " in text:
        return f"({text})"
    return text


def serialize_type(value, indent: int = 0) -> str:
    """Serialize a shape at nesting level `indent`.

    Anything that is not a shape (None included) renders as `any`.
    """
    if isinstance(value, NullableShape):
        return serialize_type(value.inner, indent) + " | null | undefined"

    if isinstance(value, PrimitiveShape):
        return value.name

    if isinstance(value, ArrayShape):
        if value.element is None:
            return "any[]"
        return _serialize_element(value.element, indent) + "[]"

    if isinstance(value, IndexShape):
        return f"Record<string, {serialize_type(value.value, indent)}>"

    if isinstance(value, UnionShape):
        if not value.options:
            return "any"
        return " | ".join(serialize_type(option, indent) for option in value.options)

    if isinstance(value, ObjectShape):
        if not value.properties:
            return "{}"
        spaces = INDENT * indent
        lines = [
            f"{spaces}{INDENT}{format_key(key)}: {serialize_type(val, indent + 1)}"
            for key, val in value.properties.items()
        ]
        return "{\n" + ",\n".join(lines) + "\n" + spaces + "}"

    return "any"
