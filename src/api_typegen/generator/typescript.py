"""TypeScript generator: endpoint records -> one exported type alias."""

from typing import Any

from api_typegen.casing import pascal_case
from api_typegen.generator.serializer import serialize_type
from api_typegen.generator.shapes import ObjectShape, Shape
from api_typegen.generator.synthesizer import transform_type
from api_typegen.parser.base import EndpointRecord
from api_typegen.parser.loader import load_document
from api_typegen.parser.openapi import collect_endpoints

HEADER = """/**
 * GENERATED FILE
 * DO NOT EDIT
 */
"""


def _endpoint_definition(endpoint: EndpointRecord) -> ObjectShape:
    definition: dict[str, Shape | None] = {}
    if endpoint.query:
        definition["query"] = endpoint.query
    if endpoint.method.upper() != "GET" and endpoint.body:
        definition["body"] = transform_type(endpoint.body)

    response = {
        str(status): transform_type(schema) if schema else None
        for status, schema in endpoint.response.items()
    }
    definition["response"] = ObjectShape(properties=response)
    return ObjectShape(properties=definition)


def build_tree(endpoints: list[EndpointRecord]) -> ObjectShape:
    """Group endpoint definitions by URL, then by upper-cased method."""
    tree: dict[str, dict[str, Shape | None]] = {}
    for endpoint in endpoints:
        tree.setdefault(endpoint.url, {})[endpoint.method.upper()] = _endpoint_definition(endpoint)
    return ObjectShape(
        properties={url: ObjectShape(properties=methods) for url, methods in tree.items()}
    )


def transform_endpoints(endpoints: list[EndpointRecord]) -> str:
    """Serialize all endpoints as one TypeScript object type."""
    return serialize_type(build_tree(endpoints), 0)


def render_endpoints(endpoints: list[EndpointRecord], domain: str) -> str:
    """Render the generated module: header plus one type alias named after `domain`."""
    return f"{HEADER}\nexport type {pascal_case(domain)} = {transform_endpoints(endpoints)}\n"


def render_module(document: dict[str, Any], domain: str) -> str:
    """Render the generated TypeScript module for an already-loaded document."""
    return render_endpoints(collect_endpoints(document), domain)


def generate(url: str, domain: str) -> str:
    """Load the document at `url` (or a local path) and render its module."""
    document = load_document(url)
    return render_module(document, domain)
