"""Data model for one parsed API operation.

Both the Swagger 2.0 and OpenAPI 3.x readers produce these records
for the TypeScript generator.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict

from api_typegen.generator.shapes import ObjectShape


class EndpointRecord(BaseModel):
    """A single (path, method) operation with its resolved shapes."""

    model_config = ConfigDict(frozen=True)

    url: str  # /pets/{petId}
    method: str  # get / post / ...
    tags: list[str] = []
    summary: str | None = None
    description: str | None = None
    query: ObjectShape | None = None
    params: ObjectShape | None = None
    body: Any = None  # resolved schema node
    response: dict[str, Any] = {}  # {status_code: resolved schema node or None}
