"""Errors raised while reading an OpenAPI document."""


class TypegenError(Exception):
    """Base class for generation failures."""


class UnsupportedVersionError(TypegenError):
    """The document is neither Swagger 2.0 nor OpenAPI 3.x."""


class UnresolvedReferenceError(TypegenError, KeyError):
    """A `$ref` points at something the document does not define."""

    def __init__(self, ref: str):
        super().__init__(ref)
        self.ref = ref

    def __str__(self) -> str:
        return f"Unresolved reference: {self.ref}"
