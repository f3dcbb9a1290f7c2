"""
Document model handed to output adapters.

Operations here carry expanded argument and return types. Sections,
subsections and operations are already in their final display order.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, computed_field

from gqldocs.models.base import OperationType
from gqldocs.models.expanded import ExpandedType
from gqldocs.models.metadata import ErrorDefinition, Example
from gqldocs.models.schema import OperationDirectives


class ExpandedArgument(BaseModel):
    """An operation argument with its expanded type."""

    model_config = ConfigDict(frozen=True)

    name: str
    description: str | None = None
    is_required: bool = False
    default_value: Any = None
    type: ExpandedType


class ExpandedOperation(BaseModel):
    """An operation ready for rendering.

    Attributes:
        name: Operation name
        operation_type: query, mutation or subscription
        description: Operation description
        arguments: Arguments with expanded types
        return_type: Expanded return type
        directives: Documentation directives
        referenced_types: Named types referenced by the operation
        is_deprecated: Whether the operation is deprecated
        deprecation_reason: Reason given by @deprecated
        examples: Attached examples
        errors: Attached errors, wildcard errors first
    """

    model_config = ConfigDict(frozen=True)

    name: str
    operation_type: OperationType
    description: str | None = None
    arguments: list[ExpandedArgument] = Field(default_factory=list)
    return_type: ExpandedType
    directives: OperationDirectives = Field(default_factory=OperationDirectives)
    referenced_types: list[str] = Field(default_factory=list)
    is_deprecated: bool = False
    deprecation_reason: str | None = None
    examples: list[Example] = Field(default_factory=list)
    errors: list[ErrorDefinition] = Field(default_factory=list)


class Subsection(BaseModel):
    """Operations within a section. The empty name is the section root."""

    name: str = ""
    operations: list[ExpandedOperation] = Field(default_factory=list)

    @property
    def is_root(self) -> bool:
        """True for the section's default bucket."""
        return self.name == ""


class Section(BaseModel):
    """A top-level documentation section."""

    name: str
    order: int | None = None
    subsections: list[Subsection] = Field(default_factory=list)

    def get_subsection(self, name: str) -> Subsection | None:
        """Find a subsection by name."""
        for subsection in self.subsections:
            if subsection.name == name:
                return subsection
        return None

    @computed_field
    @property
    def operation_count(self) -> int:
        """Total operations across subsections."""
        return sum(len(s.operations) for s in self.subsections)


class DocModel(BaseModel):
    """Ordered sections of the generated documentation."""

    sections: list[Section] = Field(default_factory=list)

    def get_section(self, name: str) -> Section | None:
        """Find a section by name."""
        for section in self.sections:
            if section.name == name:
                return section
        return None

    def iter_operations(self):
        """Yield (section, subsection, operation) in display order."""
        for section in self.sections:
            for subsection in section.subsections:
                for operation in subsection.operations:
                    yield section, subsection, operation

    @computed_field
    @property
    def operation_count(self) -> int:
        """Total operations in the document."""
        return sum(s.operation_count for s in self.sections)
