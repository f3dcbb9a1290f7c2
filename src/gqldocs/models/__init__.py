"""
gqldocs data models.

Parsed schema records, expanded type trees, metadata records and the
final ordered document model.
"""

from gqldocs.models.base import (
    UNCATEGORIZED_SECTION,
    WILDCARD_SCOPE,
    ExpandedKind,
    OperationType,
    TypeKind,
)
from gqldocs.models.document import (
    DocModel,
    ExpandedArgument,
    ExpandedOperation,
    Section,
    Subsection,
)
from gqldocs.models.expanded import (
    CircularRef,
    ExpandedEnum,
    ExpandedEnumValue,
    ExpandedField,
    ExpandedList,
    ExpandedObject,
    ExpandedScalar,
    ExpandedType,
    ExpandedUnion,
    TypeRef,
    tree_depth,
    type_label,
    unwrap,
)
from gqldocs.models.metadata import (
    ErrorDefinition,
    ErrorFile,
    Example,
    ExampleFile,
    ExampleResponse,
)
from gqldocs.models.schema import (
    Argument,
    DocGroup,
    DocPriority,
    DocTags,
    EnumValueDefinition,
    Operation,
    OperationDirectives,
    TypeDefinition,
    TypeField,
)

__all__ = [
    # Base
    "TypeKind",
    "ExpandedKind",
    "OperationType",
    "UNCATEGORIZED_SECTION",
    "WILDCARD_SCOPE",
    # Schema
    "DocGroup",
    "DocPriority",
    "DocTags",
    "OperationDirectives",
    "TypeField",
    "EnumValueDefinition",
    "TypeDefinition",
    "Argument",
    "Operation",
    # Expanded
    "ExpandedType",
    "ExpandedScalar",
    "ExpandedEnum",
    "ExpandedEnumValue",
    "ExpandedObject",
    "ExpandedUnion",
    "ExpandedList",
    "ExpandedField",
    "CircularRef",
    "TypeRef",
    "unwrap",
    "type_label",
    "tree_depth",
    # Metadata
    "Example",
    "ExampleResponse",
    "ExampleFile",
    "ErrorDefinition",
    "ErrorFile",
    # Document
    "ExpandedArgument",
    "ExpandedOperation",
    "Subsection",
    "Section",
    "DocModel",
]
