"""Generate TypeScript endpoint types from OpenAPI v2/v3 documents."""

__version__ = "0.1.0"
