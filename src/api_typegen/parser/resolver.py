"""Resolve `$ref` pointers against a document's schema registry.

Handles:
- `#/components/schemas/<name>` (OpenAPI 3) and `#/definitions/<name>` (Swagger 2)
- nested references in properties, items, additionalProperties and compositions
- circular references, left in place as a terminal `{"$ref": pointer}`
- one cached expansion per schema name for the lifetime of a resolver
"""

import copy
from typing import Any

from api_typegen.errors import UnresolvedReferenceError

_COMPOSITION_KEYS = ("anyOf", "oneOf", "allOf")


def ref_name(ref: str) -> str:
    """Return the schema name a local JSON pointer refers to."""
    name = ref.rsplit("/", 1)[-1]
    return name.replace("~1", "/").replace("~0", "~")


class SchemaResolver:
    """Expands references against one registry, caching each schema it expands.

    The registry itself is never modified; each named schema is deep-copied
    before its children are resolved, and that copy is what the cache holds.
    """

    def __init__(self, schemas: dict[str, Any] | None):
        self.schemas = schemas or {}
        self._cache: dict[str, dict] = {}

    def resolve(self, schema: Any, visited: frozenset[str] = frozenset()) -> Any:
        if not isinstance(schema, dict):
            return schema

        ref = schema.get("$ref")
        if not isinstance(ref, str):
            return self._resolve_children(schema, visited)

        name = ref_name(ref)
        if name in visited:
            return {"$ref": ref}
        if name in self._cache:
            return self._cache[name]
        if name not in self.schemas:
            raise UnresolvedReferenceError(ref)

        path = visited | {name}
        target = copy.deepcopy(self.schemas[name])
        if isinstance(target, dict) and "$ref" in target:
            # Alias to another schema; a self-alias comes back as the placeholder.
            resolved = self.resolve(target, path)
        else:
            resolved = self._resolve_children(target, path)

        self._cache[name] = resolved
        return resolved

    def _resolve_children(self, schema: dict, visited: frozenset[str]) -> dict:
        """Resolve references one level below `schema`.

        Deeper levels are reached through the recursive `resolve` calls.
        Returns `schema` itself when nothing below it changed.
        """
        updates: dict[str, Any] = {}

        properties = schema.get("properties")
        if isinstance(properties, dict):
            resolved_props = {key: self.resolve(value, visited) for key, value in properties.items()}
            if any(resolved_props[key] is not properties[key] for key in properties):
                updates["properties"] = resolved_props

        for key in ("items", "additionalProperties"):
            child = schema.get(key)
            if isinstance(child, dict):
                resolved = self.resolve(child, visited)
                if resolved is not child:
                    updates[key] = resolved

        for key in _COMPOSITION_KEYS:
            options = schema.get(key)
            if isinstance(options, list):
                resolved_options = [self.resolve(option, visited) for option in options]
                if any(new is not old for new, old in zip(resolved_options, options)):
                    updates[key] = resolved_options

        if not updates:
            return schema
        return {**schema, **updates}


def resolve_ref(
    schema: Any,
    schemas: dict[str, Any] | None,
    visited: set[str] | frozenset[str] | None = None,
) -> Any:
    """Resolve `schema` against `schemas` with a fresh resolver."""
    return SchemaResolver(schemas).resolve(schema, frozenset(visited or ()))
