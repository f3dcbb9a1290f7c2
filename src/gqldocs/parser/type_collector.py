"""
Type Collector.

Walks the named types reachable from a graphql-core type and records
each once as a TypeDefinition. Introspection types (__Type etc.) are
never collected.
"""

import logging

from graphql import (
    GraphQLEnumType,
    GraphQLField,
    GraphQLInputField,
    GraphQLInputObjectType,
    GraphQLInterfaceType,
    GraphQLNamedType,
    GraphQLObjectType,
    GraphQLType,
    GraphQLUnionType,
    get_named_type,
    is_enum_type,
    is_input_object_type,
    is_interface_type,
    is_list_type,
    is_non_null_type,
    is_object_type,
    is_scalar_type,
    is_union_type,
)

from gqldocs.models.base import TypeKind
from gqldocs.models.schema import EnumValueDefinition, TypeDefinition, TypeField
from gqldocs.parser.directives import DirectiveExtractor

logger = logging.getLogger(__name__)


def is_list_reference(gql_type: GraphQLType) -> bool:
    """True for [T] and [T]!."""
    if is_non_null_type(gql_type):
        gql_type = gql_type.of_type
    return is_list_type(gql_type)


class TypeCollector:
    """Collects type definitions reachable from operations.

    Usage:
        collector = TypeCollector()
        name = collector.collect(field.type)
        types = collector.get_types()
    """

    def __init__(self, directive_extractor: DirectiveExtractor | None = None) -> None:
        self._collected: dict[str, TypeDefinition] = {}
        self._directives = directive_extractor or DirectiveExtractor()

    def collect(self, gql_type: GraphQLType) -> str:
        """Collect the named type behind gql_type and everything it references.

        Args:
            gql_type: Any graphql-core type, wrapped or not

        Returns:
            The named type's name
        """
        named = get_named_type(gql_type)
        name = named.name

        if name in self._collected or name.startswith("__"):
            return name

        if is_scalar_type(named):
            self._collected[name] = self._definition(named, TypeKind.SCALAR)
        elif is_object_type(named):
            self._collect_object(named)
        elif is_interface_type(named):
            self._collect_interface(named)
        elif is_union_type(named):
            self._collect_union(named)
        elif is_enum_type(named):
            self._collect_enum(named)
        elif is_input_object_type(named):
            self._collect_input_object(named)
        else:
            logger.warning(f"Skipping type '{name}' of unsupported kind")

        return name

    def get_types(self) -> list[TypeDefinition]:
        """Collected definitions in discovery order."""
        return list(self._collected.values())

    def _definition(self, named: GraphQLNamedType, kind: TypeKind, **payload) -> TypeDefinition:
        return TypeDefinition(
            name=named.name,
            kind=kind,
            description=named.description or None,
            directives=self._directives.extract(named.ast_node),
            **payload,
        )

    def _reserve(self, named: GraphQLNamedType, kind: TypeKind) -> None:
        # Placeholder registered before walking fields so self references stop here
        self._collected[named.name] = TypeDefinition(name=named.name, kind=kind)

    def _collect_fields(
        self, fields: dict[str, GraphQLField] | dict[str, GraphQLInputField]
    ) -> list[TypeField]:
        collected = []
        for field_name, field in fields.items():
            self.collect(field.type)
            collected.append(
                TypeField(
                    name=field_name,
                    description=field.description or None,
                    type=str(field.type),
                    is_required=is_non_null_type(field.type),
                    is_list=is_list_reference(field.type),
                    directives=self._directives.extract(field.ast_node),
                    is_deprecated=field.deprecation_reason is not None,
                    deprecation_reason=field.deprecation_reason or None,
                )
            )
        return collected

    def _collect_object(self, named: GraphQLObjectType) -> None:
        self._reserve(named, TypeKind.OBJECT)
        fields = self._collect_fields(named.fields)
        interfaces = [self.collect(iface) for iface in named.interfaces]
        self._collected[named.name] = self._definition(
            named, TypeKind.OBJECT, fields=fields, interfaces=interfaces
        )

    def _collect_interface(self, named: GraphQLInterfaceType) -> None:
        self._reserve(named, TypeKind.INTERFACE)
        fields = self._collect_fields(named.fields)
        self._collected[named.name] = self._definition(named, TypeKind.INTERFACE, fields=fields)

    def _collect_union(self, named: GraphQLUnionType) -> None:
        self._reserve(named, TypeKind.UNION)
        members = [self.collect(member) for member in named.types]
        self._collected[named.name] = self._definition(
            named, TypeKind.UNION, possible_types=members
        )

    def _collect_enum(self, named: GraphQLEnumType) -> None:
        values = [
            EnumValueDefinition(
                name=value_name,
                description=value.description or None,
                is_deprecated=value.deprecation_reason is not None,
                deprecation_reason=value.deprecation_reason or None,
                directives=self._directives.extract(value.ast_node),
            )
            for value_name, value in named.values.items()
        ]
        self._collected[named.name] = self._definition(named, TypeKind.ENUM, enum_values=values)

    def _collect_input_object(self, named: GraphQLInputObjectType) -> None:
        self._reserve(named, TypeKind.INPUT_OBJECT)
        fields = self._collect_fields(named.fields)
        self._collected[named.name] = self._definition(
            named, TypeKind.INPUT_OBJECT, fields=fields
        )
