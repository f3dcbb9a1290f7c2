"""
Type Expander.

Turns a raw SDL type reference such as "[User!]!" into a bounded,
display-ready ExpandedType tree.

Rules, applied per named type:
- Non-null wrappers are dropped (the enclosing field reports required-ness)
  and list wrappers become LIST nodes without adding depth.
- Names missing from the registry become TYPE_REF terminals.
- Scalars and enums are always expanded in full.
- A name already on the current expansion path becomes a CIRCULAR_REF
  terminal (or, with circular references hidden, a truncated node).
- At max_depth, composite types are emitted truncated: name and
  description only.

The path is a frozenset handed down each call, so sibling branches never
see each other's visits. A type reached along two separate paths is
expanded independently each time.
"""

import logging
from collections.abc import Iterable
from functools import lru_cache

from graphql import GraphQLError, parse_type
from graphql.language import ListTypeNode, NamedTypeNode, NonNullTypeNode, TypeNode

from gqldocs.config.models import TypeExpansionConfig
from gqldocs.models.base import TypeKind
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
)
from gqldocs.models.schema import TypeDefinition
from gqldocs.transformer.registry import TypeRegistry
from gqldocs.utils.strings import slugify

logger = logging.getLogger(__name__)

_OBJECT_KINDS = (TypeKind.OBJECT, TypeKind.INTERFACE, TypeKind.INPUT_OBJECT)


@lru_cache(maxsize=2048)
def parse_type_ref(type_ref: str) -> TypeNode | None:
    """Parse an SDL type reference, or return None if it is malformed."""
    try:
        return parse_type(type_ref)
    except GraphQLError:
        return None


def type_link(name: str) -> str:
    """Anchor identifier for a named type."""
    return slugify(name)


class TypeExpander:
    """Expands type references against a TypeRegistry.

    Attributes:
        max_depth: Nesting level at which composite types are truncated
        default_levels: Levels a renderer should show expanded; carried
            as a hint, not enforced here
        show_circular_references: Emit CIRCULAR_REF markers for cycles
            instead of silently truncated nodes
    """

    def __init__(
        self,
        registry: TypeRegistry | Iterable[TypeDefinition],
        max_depth: int = 5,
        default_levels: int = 2,
        show_circular_references: bool = True,
    ) -> None:
        """Initialize the expander.

        Args:
            registry: Registry, or type definitions to build one from
            max_depth: Maximum expansion depth (>= 1)
            default_levels: Rendering hint for expanded levels
            show_circular_references: Surface cycles as markers

        Raises:
            TypeError: If registry is None
            ValueError: If max_depth < 1 or default_levels < 0
        """
        if registry is None:
            raise TypeError("TypeExpander requires a type registry, got None")
        if max_depth < 1:
            raise ValueError(f"max_depth must be at least 1, got {max_depth}")
        if default_levels < 0:
            raise ValueError(f"default_levels cannot be negative, got {default_levels}")

        if not isinstance(registry, TypeRegistry):
            registry = TypeRegistry(registry)

        self._registry = registry
        self.max_depth = max_depth
        self.default_levels = default_levels
        self.show_circular_references = show_circular_references

    @classmethod
    def from_config(
        cls,
        registry: TypeRegistry | Iterable[TypeDefinition],
        config: TypeExpansionConfig,
    ) -> "TypeExpander":
        """Create an expander from a TypeExpansionConfig."""
        return cls(
            registry,
            max_depth=config.max_depth,
            default_levels=config.default_levels,
            show_circular_references=config.show_circular_references,
        )

    @property
    def registry(self) -> TypeRegistry:
        """The registry types are resolved from."""
        return self._registry

    def expand(self, type_ref: str) -> ExpandedType:
        """Expand a raw SDL type reference.

        Never raises for unknown or malformed references; those come back
        as TYPE_REF nodes carrying the raw name.

        Args:
            type_ref: Reference such as "User", "[User]", "User!" or "[User!]!"

        Returns:
            Finite, acyclic expanded tree
        """
        return self._expand_ref(type_ref, depth=0, path=frozenset())

    def expand_named(self, name: str) -> ExpandedType:
        """Expand a bare type name (no wrappers)."""
        return self._expand_named(name, depth=0, path=frozenset())

    def _expand_ref(self, type_ref: str, depth: int, path: frozenset[str]) -> ExpandedType:
        node = parse_type_ref(type_ref)
        if node is None:
            name = type_ref.strip()
            logger.warning(f"Malformed type reference '{type_ref}', leaving unexpanded")
            return TypeRef(name=name, link=type_link(name))
        return self._expand_node(node, depth, path)

    def _expand_node(self, node: TypeNode, depth: int, path: frozenset[str]) -> ExpandedType:
        if isinstance(node, NonNullTypeNode):
            return self._expand_node(node.type, depth, path)
        if isinstance(node, ListTypeNode):
            return ExpandedList(of_type=self._expand_node(node.type, depth, path))
        if isinstance(node, NamedTypeNode):
            return self._expand_named(node.name.value, depth, path)
        raise TypeError(f"Unexpected type node: {node!r}")

    def _expand_named(self, name: str, depth: int, path: frozenset[str]) -> ExpandedType:
        definition = self._registry.get(name)
        if definition is None:
            return TypeRef(name=name, link=type_link(name))

        if definition.kind == TypeKind.SCALAR:
            return ExpandedScalar(name=definition.name, description=definition.description)

        if definition.kind == TypeKind.ENUM:
            return self._expand_enum(definition)

        if name in path:
            logger.debug(f"Circular reference to '{name}' at depth {depth}")
            if self.show_circular_references:
                return CircularRef(ref=name, link=type_link(name))
            return self._truncated(definition)

        if depth >= self.max_depth:
            logger.debug(f"Max depth {self.max_depth} reached at '{name}'")
            return self._truncated(definition)

        child_path = path | {name}

        if definition.kind == TypeKind.UNION:
            return ExpandedUnion(
                name=definition.name,
                description=definition.description,
                possible_types=[
                    self._expand_named(member, depth + 1, child_path)
                    for member in definition.possible_types
                ],
            )

        return ExpandedObject(
            kind=definition.kind.value,
            name=definition.name,
            description=definition.description,
            interfaces=list(definition.interfaces),
            fields=[
                ExpandedField(
                    name=field.name,
                    description=field.description,
                    type=self._expand_ref(field.type, depth + 1, child_path),
                    is_required=field.is_required,
                    is_list=field.is_list,
                    is_deprecated=field.is_deprecated,
                    deprecation_reason=field.deprecation_reason,
                )
                for field in definition.fields
            ],
        )

    def _expand_enum(self, definition: TypeDefinition) -> ExpandedEnum:
        return ExpandedEnum(
            name=definition.name,
            description=definition.description,
            values=[
                ExpandedEnumValue(
                    name=value.name,
                    description=value.description,
                    is_deprecated=value.is_deprecated,
                    deprecation_reason=value.deprecation_reason,
                )
                for value in definition.enum_values
            ],
        )

    def _truncated(self, definition: TypeDefinition) -> ExpandedType:
        """Node of the definition's kind with no children."""
        if definition.kind == TypeKind.UNION:
            return ExpandedUnion(
                name=definition.name,
                description=definition.description,
                truncated=True,
            )
        if definition.kind in _OBJECT_KINDS:
            return ExpandedObject(
                kind=definition.kind.value,
                name=definition.name,
                description=definition.description,
                interfaces=list(definition.interfaces),
                truncated=True,
            )
        raise ValueError(f"Cannot truncate type of kind {definition.kind}")
