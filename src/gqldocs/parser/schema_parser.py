"""
Schema Parser.

Extracts operations and the type definitions they reach from a built
graphql-core schema. Root types are read in the order query, mutation,
subscription; fields keep their schema declaration order.
"""

import logging
from dataclasses import dataclass, field

from graphql import GraphQLArgument, GraphQLField, GraphQLObjectType, GraphQLSchema, is_non_null_type
from graphql.pyutils import Undefined

from gqldocs.models.base import OperationType
from gqldocs.models.schema import Argument, Operation, TypeDefinition
from gqldocs.parser.directives import DirectiveExtractor
from gqldocs.parser.type_collector import TypeCollector

logger = logging.getLogger(__name__)


@dataclass
class ParsedSchema:
    """Result of parsing a schema.

    Attributes:
        operations: Root operations in schema order
        types: Every named type reachable from the operations
    """

    operations: list[Operation] = field(default_factory=list)
    types: list[TypeDefinition] = field(default_factory=list)

    def get_operation(self, name: str, operation_type: OperationType | None = None) -> Operation | None:
        """Find an operation by name (and optionally type)."""
        for operation in self.operations:
            if operation.name != name:
                continue
            if operation_type is None or operation.operation_type == operation_type:
                return operation
        return None

    def get_type(self, name: str) -> TypeDefinition | None:
        """Find a collected type by name."""
        for type_def in self.types:
            if type_def.name == name:
                return type_def
        return None


class SchemaParser:
    """Turns a GraphQLSchema into operations and type definitions.

    Usage:
        parser = SchemaParser()
        parsed = parser.parse(schema)
    """

    def __init__(self) -> None:
        self._directives = DirectiveExtractor()

    def parse(self, schema: GraphQLSchema) -> ParsedSchema:
        """Parse all root operations of a schema.

        Args:
            schema: Built graphql-core schema

        Returns:
            ParsedSchema with operations and their reachable types
        """
        collector = TypeCollector(self._directives)
        operations: list[Operation] = []

        roots = (
            (OperationType.QUERY, schema.query_type),
            (OperationType.MUTATION, schema.mutation_type),
            (OperationType.SUBSCRIPTION, schema.subscription_type),
        )
        for operation_type, root in roots:
            if root is None:
                continue
            operations.extend(self._parse_root(root, operation_type, collector))

        types = collector.get_types()
        logger.info(f"Parsed {len(operations)} operations referencing {len(types)} types")
        return ParsedSchema(operations=operations, types=types)

    def _parse_root(
        self,
        root: GraphQLObjectType,
        operation_type: OperationType,
        collector: TypeCollector,
    ) -> list[Operation]:
        return [
            self._parse_operation(name, gql_field, operation_type, collector)
            for name, gql_field in root.fields.items()
        ]

    def _parse_operation(
        self,
        name: str,
        gql_field: GraphQLField,
        operation_type: OperationType,
        collector: TypeCollector,
    ) -> Operation:
        referenced: list[str] = []

        def reference(type_name: str) -> None:
            if type_name not in referenced:
                referenced.append(type_name)

        reference(collector.collect(gql_field.type))

        arguments = []
        for arg_name, arg in gql_field.args.items():
            reference(collector.collect(arg.type))
            arguments.append(self._parse_argument(arg_name, arg))

        return Operation(
            name=name,
            operation_type=operation_type,
            description=gql_field.description or None,
            arguments=arguments,
            return_type=str(gql_field.type),
            directives=self._directives.extract(gql_field.ast_node),
            referenced_types=referenced,
            is_deprecated=gql_field.deprecation_reason is not None,
            deprecation_reason=gql_field.deprecation_reason or None,
        )

    @staticmethod
    def _parse_argument(name: str, arg: GraphQLArgument) -> Argument:
        default = arg.default_value
        return Argument(
            name=name,
            description=arg.description or None,
            type=str(arg.type),
            is_required=is_non_null_type(arg.type),
            default_value=None if default is Undefined else default,
        )
