"""Detect which OpenAPI version a document uses."""

from typing import Any

from api_typegen.errors import UnsupportedVersionError

SWAGGER_2 = "2.0"
OPENAPI_3 = "3"


def detect_version(document: Any) -> str:
    """Return '2.0' for Swagger 2.0 documents or '3' for OpenAPI 3.x.

    Raises UnsupportedVersionError for anything else.
    """
    if isinstance(document, dict):
        if str(document.get("swagger", "")) == SWAGGER_2:
            return SWAGGER_2
        # YAML loads an unquoted `openapi: 3.0` as a float.
        if str(document.get("openapi", "")).startswith("3."):
            return OPENAPI_3
    raise UnsupportedVersionError("Unsupported OpenAPI version. Only v2 and v3 are supported.")
