"""
Parsed schema models.

These models hold what the schema parser extracts from a GraphQL schema:
the named type definitions that make up the type registry, the
directive-derived documentation metadata, and the operations found on
the root types. Type references are kept as raw SDL strings here; the
type expander resolves them later.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from gqldocs.models.base import OperationType, TypeKind
from gqldocs.models.metadata import ErrorDefinition, Example


class DocGroup(BaseModel):
    """Payload of the @docGroup directive.

    Attributes:
        name: Section the operation belongs to
        order: Explicit section position (lower first), if declared
        subsection: Subsection within the section, if any
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="Documentation section name")
    order: int | None = Field(default=None, description="Section display order")
    subsection: str | None = Field(default=None, description="Optional subsection")


class DocPriority(BaseModel):
    """Payload of the @docPriority directive."""

    model_config = ConfigDict(frozen=True)

    level: int = Field(..., description="Priority level (lower numbers first)")


class DocTags(BaseModel):
    """Payload of the @docTags directive."""

    model_config = ConfigDict(frozen=True)

    tags: list[str] = Field(default_factory=list, description="Tags for the operation")


class OperationDirectives(BaseModel):
    """Known documentation directives attached to a schema element.

    Any directive that is absent or was malformed is None.
    """

    model_config = ConfigDict(frozen=True)

    doc_group: DocGroup | None = None
    doc_priority: DocPriority | None = None
    doc_tags: DocTags | None = None

    @property
    def is_empty(self) -> bool:
        """True when no documentation directive is present."""
        return self.doc_group is None and self.doc_priority is None and self.doc_tags is None


class TypeField(BaseModel):
    """A field of an object, interface or input object type.

    Attributes:
        name: Field name
        description: Field description
        type: Raw SDL type string, e.g. "[User!]!"
        is_required: Whether the outermost wrapper is non-null
        is_list: Whether the field is a list (possibly non-null)
        directives: Documentation directives on the field
        is_deprecated: Whether the field is deprecated
        deprecation_reason: Reason given by @deprecated
    """

    model_config = ConfigDict(frozen=True)

    name: str
    description: str | None = None
    type: str
    is_required: bool = False
    is_list: bool = False
    directives: OperationDirectives = Field(default_factory=OperationDirectives)
    is_deprecated: bool = False
    deprecation_reason: str | None = None


class EnumValueDefinition(BaseModel):
    """A single value of an enum type."""

    model_config = ConfigDict(frozen=True)

    name: str
    description: str | None = None
    is_deprecated: bool = False
    deprecation_reason: str | None = None
    directives: OperationDirectives = Field(default_factory=OperationDirectives)


class TypeDefinition(BaseModel):
    """A named type as stored in the type registry.

    Only the payload relevant to the kind is populated: fields for
    OBJECT, INTERFACE and INPUT_OBJECT, enum_values for ENUM,
    possible_types for UNION and interfaces for OBJECT.
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., min_length=1)
    kind: TypeKind
    description: str | None = None
    fields: list[TypeField] = Field(default_factory=list)
    enum_values: list[EnumValueDefinition] = Field(default_factory=list)
    possible_types: list[str] = Field(default_factory=list)
    interfaces: list[str] = Field(default_factory=list)
    directives: OperationDirectives = Field(default_factory=OperationDirectives)


class Argument(BaseModel):
    """An argument of a root operation, with its raw type string."""

    model_config = ConfigDict(frozen=True)

    name: str
    description: str | None = None
    type: str
    is_required: bool = False
    default_value: Any = None


class Operation(BaseModel):
    """A root field of the Query, Mutation or Subscription type.

    Operations are produced by the schema parser with empty examples
    and errors; the metadata merger returns copies with those attached.

    Attributes:
        name: Operation (field) name
        operation_type: query, mutation or subscription
        description: Field description
        arguments: Ordered arguments with raw types
        return_type: Raw SDL return type string
        directives: Documentation directives on the field
        referenced_types: Named types referenced by return and arguments
        is_deprecated: Whether the operation is deprecated
        deprecation_reason: Reason given by @deprecated
        examples: Attached example records
        errors: Attached error definitions
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., min_length=1)
    operation_type: OperationType
    description: str | None = None
    arguments: list[Argument] = Field(default_factory=list)
    return_type: str
    directives: OperationDirectives = Field(default_factory=OperationDirectives)
    referenced_types: list[str] = Field(default_factory=list)
    is_deprecated: bool = False
    deprecation_reason: str | None = None
    examples: list[Example] = Field(default_factory=list)
    errors: list[ErrorDefinition] = Field(default_factory=list)
