"""
Externally supplied metadata records.

Example and error files live next to the schema (see metadata.loader)
and are written in camelCase JSON; both camelCase and snake_case keys
are accepted.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class _MetadataModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )


class ExampleResponse(_MetadataModel):
    """Expected response of an example request.

    Attributes:
        type: Response category, usually "success" or "error"
        http_status: HTTP status code returned
        body: Response body
    """

    type: str = "success"
    http_status: int = Field(default=200, ge=100, le=599)
    body: Any = None


class Example(_MetadataModel):
    """A worked example for an operation."""

    name: str
    description: str | None = None
    query: str
    variables: dict[str, Any] = Field(default_factory=dict)
    response: ExampleResponse | None = None


class ExampleFile(_MetadataModel):
    """Examples declared for one operation."""

    operation: str = Field(..., min_length=1)
    operation_type: str | None = None
    examples: list[Example] = Field(default_factory=list)


class ErrorDefinition(_MetadataModel):
    """An error an operation may return."""

    code: str
    message: str
    description: str | None = None
    extensions: dict[str, Any] = Field(default_factory=dict)


class ErrorFile(_MetadataModel):
    """Errors scoped to a set of operations.

    The scope "*" applies the errors to every operation.
    """

    operations: list[str] = Field(default_factory=list)
    errors: list[ErrorDefinition] = Field(default_factory=list)
    category: str | None = None
