"""Structural type values produced by the synthesizer.

Each shape carries a `kind` discriminator so consumers can dispatch on it
instead of probing dict keys. Shapes are immutable once built.
"""

from typing import Annotated, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


class _Shape(BaseModel):
    model_config = ConfigDict(frozen=True)


class PrimitiveShape(_Shape):
    """A leaf type: string / number / boolean / any."""

    kind: Literal["primitive"] = "primitive"
    name: Literal["string", "number", "boolean", "any"]


class ObjectShape(_Shape):
    """An object literal. `None` values render as `any`."""

    kind: Literal["object"] = "object"
    properties: dict[str, Optional["Shape"]] = {}


class ArrayShape(_Shape):
    """Array of `element`; no element renders as `any[]`."""

    kind: Literal["array"] = "array"
    element: Optional["Shape"] = None


class IndexShape(_Shape):
    """Map from arbitrary string keys to `value`."""

    kind: Literal["index"] = "index"
    value: "Shape"


class NullableShape(_Shape):
    """`inner`, or null, or absent."""

    kind: Literal["nullable"] = "nullable"
    inner: "Shape"


class UnionShape(_Shape):
    kind: Literal["union"] = "union"
    options: list["Shape"] = []


Shape = Annotated[
    Union[PrimitiveShape, ObjectShape, ArrayShape, IndexShape, NullableShape, UnionShape],
    Field(discriminator="kind"),
]

for _model in (ObjectShape, ArrayShape, IndexShape, NullableShape, UnionShape):
    _model.model_rebuild()

STRING = PrimitiveShape(name="string")
NUMBER = PrimitiveShape(name="number")
BOOLEAN = PrimitiveShape(name="boolean")
ANY = PrimitiveShape(name="any")
