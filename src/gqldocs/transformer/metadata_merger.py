"""
Metadata Merger.

Attaches example and error records to operations. This is a pure join:
no operation is dropped, operations without metadata get empty lists and
records naming unknown operations are ignored.
"""

from collections import defaultdict
from collections.abc import Iterable

from gqldocs.models.base import WILDCARD_SCOPE
from gqldocs.models.metadata import ErrorDefinition, ErrorFile, Example, ExampleFile
from gqldocs.models.schema import Operation


class MetadataMerger:
    """Indexes example and error records for lookup by operation name.

    Usage:
        merger = MetadataMerger(example_files, error_files)
        merged = merger.merge(operations)
    """

    def __init__(
        self,
        example_files: Iterable[ExampleFile] = (),
        error_files: Iterable[ErrorFile] = (),
    ) -> None:
        self._examples: dict[str, list[Example]] = defaultdict(list)
        self._errors: dict[str, list[ErrorDefinition]] = defaultdict(list)
        self._global_errors: list[ErrorDefinition] = []

        for example_file in example_files:
            self._examples[example_file.operation].extend(example_file.examples)

        for error_file in error_files:
            # A wildcard record is global; names listed beside "*" add nothing
            if WILDCARD_SCOPE in error_file.operations:
                self._global_errors.extend(error_file.errors)
                continue
            for operation_name in error_file.operations:
                self._errors[operation_name].extend(error_file.errors)

    def examples_for(self, operation_name: str) -> list[Example]:
        """Examples declared for an operation, in file order."""
        return list(self._examples.get(operation_name, ()))

    def errors_for(self, operation_name: str) -> list[ErrorDefinition]:
        """Wildcard errors followed by errors scoped to the operation."""
        return [*self._global_errors, *self._errors.get(operation_name, ())]

    def unmatched_operations(self, operations: Iterable[Operation]) -> list[str]:
        """Names referenced by metadata that match no operation."""
        known = {op.name for op in operations}
        referenced = set(self._examples) | set(self._errors)
        return sorted(referenced - known)

    def merge(self, operations: Iterable[Operation]) -> list[Operation]:
        """Return copies of the operations with metadata attached."""
        return [
            operation.model_copy(
                update={
                    "examples": self.examples_for(operation.name),
                    "errors": self.errors_for(operation.name),
                }
            )
            for operation in operations
        ]


def merge_metadata(
    operations: Iterable[Operation],
    example_files: Iterable[ExampleFile],
    error_files: Iterable[ErrorFile],
) -> list[Operation]:
    """Attach examples and errors to operations.

    Args:
        operations: Parsed operations
        example_files: Example records keyed by operation name
        error_files: Error records scoped to operation names or "*"

    Returns:
        One operation per input operation, in input order
    """
    return MetadataMerger(example_files, error_files).merge(operations)
