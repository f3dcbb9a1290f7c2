"""
Base enumerations used throughout the data models.

These enums provide type-safe values for GraphQL type kinds and
operation types, and are shared by parsed and expanded models.
"""

from enum import Enum


class TypeKind(str, Enum):
    """Kind of a named GraphQL type in the registry."""

    SCALAR = "SCALAR"
    OBJECT = "OBJECT"
    INTERFACE = "INTERFACE"
    UNION = "UNION"
    ENUM = "ENUM"
    INPUT_OBJECT = "INPUT_OBJECT"


class ExpandedKind(str, Enum):
    """Kind of a node in an expanded type tree.

    Mirrors TypeKind and adds the synthetic kinds produced by expansion.
    """

    SCALAR = "SCALAR"
    OBJECT = "OBJECT"
    INTERFACE = "INTERFACE"
    UNION = "UNION"
    ENUM = "ENUM"
    INPUT_OBJECT = "INPUT_OBJECT"
    LIST = "LIST"  # Wraps an inner expanded type
    CIRCULAR_REF = "CIRCULAR_REF"  # Type already on the expansion path
    TYPE_REF = "TYPE_REF"  # Name missing from the registry


class OperationType(str, Enum):
    """Root operation type an operation belongs to."""

    QUERY = "query"
    MUTATION = "mutation"
    SUBSCRIPTION = "subscription"


# Section name used for operations without a @docGroup
UNCATEGORIZED_SECTION = "Uncategorized"

# Error scope that applies an error record to every operation
WILDCARD_SCOPE = "*"
