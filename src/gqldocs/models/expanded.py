"""
Expanded type tree models.

An ExpandedType is the display-ready form of a type reference: a closed,
discriminated union over the GraphQL kinds plus three synthetic kinds.
LIST wraps an inner node; CIRCULAR_REF and TYPE_REF are terminals that
stop expansion. Trees are finite by construction since the expander
never nests a type inside itself.
"""

from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field

from gqldocs.models.base import ExpandedKind


class _ExpandedNode(BaseModel):
    model_config = ConfigDict(frozen=True)


class ExpandedEnumValue(_ExpandedNode):
    """A value of an expanded enum."""

    name: str
    description: str | None = None
    is_deprecated: bool = False
    deprecation_reason: str | None = None


class ExpandedScalar(_ExpandedNode):
    """A scalar type. Always a leaf."""

    kind: Literal["SCALAR"] = "SCALAR"
    name: str
    description: str | None = None


class ExpandedEnum(_ExpandedNode):
    """An enum type. Values never reference other types."""

    kind: Literal["ENUM"] = "ENUM"
    name: str
    description: str | None = None
    values: list[ExpandedEnumValue] = Field(default_factory=list)


class ExpandedObject(_ExpandedNode):
    """An object, interface or input object type.

    Attributes:
        kind: OBJECT, INTERFACE or INPUT_OBJECT
        name: Type name
        description: Type description
        fields: Expanded fields, or None when truncated
        interfaces: Names of implemented interfaces (objects only)
        truncated: True when children were cut by depth or a hidden cycle
    """

    kind: Literal["OBJECT", "INTERFACE", "INPUT_OBJECT"]
    name: str
    description: str | None = None
    fields: list["ExpandedField"] | None = None
    interfaces: list[str] = Field(default_factory=list)
    truncated: bool = False


class ExpandedUnion(_ExpandedNode):
    """A union type with its expanded member types."""

    kind: Literal["UNION"] = "UNION"
    name: str
    description: str | None = None
    possible_types: list["ExpandedType"] | None = None
    truncated: bool = False


class ExpandedList(_ExpandedNode):
    """A list of the inner type."""

    kind: Literal["LIST"] = "LIST"
    of_type: "ExpandedType"


class CircularRef(_ExpandedNode):
    """Terminal marker for a type already on the expansion path.

    Attributes:
        ref: Name of the referenced type
        link: Anchor identifier of the referenced type
    """

    kind: Literal["CIRCULAR_REF"] = "CIRCULAR_REF"
    ref: str
    link: str


class TypeRef(_ExpandedNode):
    """Terminal reference to a type that could not be resolved."""

    kind: Literal["TYPE_REF"] = "TYPE_REF"
    name: str
    link: str


ExpandedType = Annotated[
    Union[
        ExpandedScalar,
        ExpandedEnum,
        ExpandedObject,
        ExpandedUnion,
        ExpandedList,
        CircularRef,
        TypeRef,
    ],
    Field(discriminator="kind"),
]


class ExpandedField(_ExpandedNode):
    """A field of an expanded object with its own expanded type."""

    name: str
    description: str | None = None
    type: ExpandedType
    is_required: bool = False
    is_list: bool = False
    is_deprecated: bool = False
    deprecation_reason: str | None = None


ExpandedObject.model_rebuild()
ExpandedField.model_rebuild()
ExpandedUnion.model_rebuild()
ExpandedList.model_rebuild()


def unwrap(node: ExpandedType) -> ExpandedType:
    """Return the innermost non-list node."""
    while isinstance(node, ExpandedList):
        node = node.of_type
    return node


def type_label(node: ExpandedType) -> str:
    """Render a node as a compact SDL-like label, e.g. "[User]"."""
    if isinstance(node, ExpandedList):
        return f"[{type_label(node.of_type)}]"
    if isinstance(node, CircularRef):
        return node.ref
    return node.name


def tree_depth(node: ExpandedType) -> int:
    """Number of nested field/member levels below a node.

    List wrappers do not count as a level.
    """
    node = unwrap(node)
    children: list[ExpandedType] = []
    if isinstance(node, ExpandedObject) and node.fields:
        children = [f.type for f in node.fields]
    elif isinstance(node, ExpandedUnion) and node.possible_types:
        children = list(node.possible_types)
    if not children:
        return 0
    return 1 + max(tree_depth(child) for child in children)


__all__ = [
    "ExpandedKind",
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
]
