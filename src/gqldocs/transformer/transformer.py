"""
Transformer.

Runs the in-memory half of a generation run: merge metadata onto parsed
operations, expand their argument and return types, then group and sort
them into a DocModel.
"""

import logging
from collections.abc import Iterable, Sequence

from gqldocs.config.models import TypeExpansionConfig
from gqldocs.models.document import DocModel, ExpandedArgument, ExpandedOperation
from gqldocs.models.metadata import ErrorFile, ExampleFile
from gqldocs.models.schema import Operation, TypeDefinition
from gqldocs.transformer.grouping import group_operations
from gqldocs.transformer.metadata_merger import MetadataMerger
from gqldocs.transformer.registry import TypeRegistry
from gqldocs.transformer.type_expander import TypeExpander

logger = logging.getLogger(__name__)


class Transformer:
    """Turns parsed operations into the ordered document model.

    Usage:
        transformer = Transformer(parsed.types, config.type_expansion)
        doc_model = transformer.transform(parsed.operations, examples, errors)
    """

    def __init__(
        self,
        types: Iterable[TypeDefinition] | TypeRegistry,
        config: TypeExpansionConfig | None = None,
        skip_types: Iterable[str] | None = None,
    ) -> None:
        """Initialize the transformer.

        Args:
            types: Type definitions (or a prepared registry)
            config: Expansion settings (defaults if omitted)
            skip_types: Type names to leave unexpanded
        """
        self.config = config or TypeExpansionConfig()
        registry = types if isinstance(types, TypeRegistry) else TypeRegistry(types, skip_types)
        self.expander = TypeExpander.from_config(registry, self.config)

    def transform(
        self,
        operations: Sequence[Operation],
        example_files: Iterable[ExampleFile] = (),
        error_files: Iterable[ErrorFile] = (),
    ) -> DocModel:
        """Merge metadata, expand types and group operations.

        Args:
            operations: Parsed operations
            example_files: Example records
            error_files: Error records

        Returns:
            Ordered DocModel
        """
        merger = MetadataMerger(example_files, error_files)
        unmatched = merger.unmatched_operations(operations)
        if unmatched:
            logger.warning(f"Metadata references unknown operations: {', '.join(unmatched)}")

        merged = merger.merge(operations)
        expanded = [self.expand_operation(op) for op in merged]
        doc_model = group_operations(expanded)

        logger.info(
            f"Transformed {len(expanded)} operations into {len(doc_model.sections)} sections"
        )
        return doc_model

    def expand_operation(self, operation: Operation) -> ExpandedOperation:
        """Expand an operation's argument and return types.

        Each call to the expander starts from an empty path, so cycle
        state never carries over between arguments or operations.
        """
        arguments = [
            ExpandedArgument(
                name=arg.name,
                description=arg.description,
                is_required=arg.is_required,
                default_value=arg.default_value,
                type=self.expander.expand(arg.type),
            )
            for arg in operation.arguments
        ]

        return ExpandedOperation(
            name=operation.name,
            operation_type=operation.operation_type,
            description=operation.description,
            arguments=arguments,
            return_type=self.expander.expand(operation.return_type),
            directives=operation.directives,
            referenced_types=list(operation.referenced_types),
            is_deprecated=operation.is_deprecated,
            deprecation_reason=operation.deprecation_reason,
            examples=list(operation.examples),
            errors=list(operation.errors),
        )
