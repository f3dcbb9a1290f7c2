"""
Type Registry.

Indexed, read-only snapshot of the named types of one schema. A registry
is built once per generation run and is never shared between runs.
"""

import logging
from collections.abc import Iterable, Iterator
from types import MappingProxyType

from gqldocs.models.schema import TypeDefinition

logger = logging.getLogger(__name__)


class TypeRegistry:
    """Lookup of TypeDefinition records by name.

    Usage:
        registry = TypeRegistry(parsed.types, skip_types=["Node"])

        if "User" in registry:
            user = registry.get("User")
    """

    def __init__(
        self,
        types: Iterable[TypeDefinition],
        skip_types: Iterable[str] | None = None,
    ) -> None:
        """Build the registry.

        Args:
            types: Type definitions collected from the schema
            skip_types: Names to leave out; references to them stay
                unresolved and expand as plain type references

        Raises:
            TypeError: If types is None
        """
        if types is None:
            raise TypeError("TypeRegistry requires a sequence of type definitions, got None")

        skipped = frozenset(skip_types or ())
        index: dict[str, TypeDefinition] = {}
        for definition in types:
            if definition.name in skipped:
                continue
            if definition.name in index:
                logger.warning(f"Duplicate type definition '{definition.name}' ignored")
                continue
            index[definition.name] = definition

        self._types = MappingProxyType(index)
        self._skipped = skipped

    def get(self, name: str) -> TypeDefinition | None:
        """Get a type definition by name, or None if not registered."""
        return self._types.get(name)

    def is_registered(self, name: str) -> bool:
        """Check whether a type name resolves."""
        return name in self._types

    def names(self) -> list[str]:
        """Registered type names in collection order."""
        return list(self._types)

    @property
    def skipped(self) -> frozenset[str]:
        """Names excluded at construction."""
        return self._skipped

    def __contains__(self, name: object) -> bool:
        return name in self._types

    def __len__(self) -> int:
        return len(self._types)

    def __iter__(self) -> Iterator[TypeDefinition]:
        return iter(self._types.values())

    def __repr__(self) -> str:
        return f"TypeRegistry({len(self)} types)"
