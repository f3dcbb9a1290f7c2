"""Tests for the metadata merger."""

from gqldocs.models import ErrorDefinition, ErrorFile, Example, ExampleFile
from gqldocs.transformer import MetadataMerger, merge_metadata


def _error(code: str) -> ErrorDefinition:
    return ErrorDefinition(code=code, message=f"{code} happened")


def _example(name: str) -> Example:
    return Example(name=name, query="{ ping }")


class TestMergeExamples:
    """Tests for example attachment."""

    def test_examples_attached_by_name(self, make_operation):
        """Examples match operations by exact name."""
        ops = [make_operation("getUser"), make_operation("listUsers")]
        examples = [ExampleFile(operation="getUser", examples=[_example("basic")])]

        merged = merge_metadata(ops, examples, [])

        assert [e.name for e in merged[0].examples] == ["basic"]
        assert merged[1].examples == []

    def test_examples_concatenated_across_records(self, make_operation):
        """Several records for one operation are joined in input order."""
        examples = [
            ExampleFile(operation="getUser", examples=[_example("first")]),
            ExampleFile(operation="other", examples=[_example("ignored")]),
            ExampleFile(operation="getUser", examples=[_example("second"), _example("third")]),
        ]

        merged = merge_metadata([make_operation("getUser")], examples, [])

        assert [e.name for e in merged[0].examples] == ["first", "second", "third"]


class TestMergeErrors:
    """Tests for error attachment."""

    def test_wildcard_errors_first(self, make_operation):
        """Wildcard errors apply everywhere and precede specific ones."""
        errors = [
            ErrorFile(operations=["getUser"], errors=[_error("NOT_FOUND")]),
            ErrorFile(operations=["*"], errors=[_error("UNAUTHENTICATED")]),
        ]
        ops = [make_operation("getUser"), make_operation("health")]

        merged = merge_metadata(ops, [], errors)

        assert [e.code for e in merged[0].errors] == ["UNAUTHENTICATED", "NOT_FOUND"]
        assert [e.code for e in merged[1].errors] == ["UNAUTHENTICATED"]

    def test_wildcard_mixed_with_names(self, make_operation):
        """A record scoped to "*" and names is global, not duplicated."""
        errors = [ErrorFile(operations=["*", "getUser"], errors=[_error("RATE_LIMITED")])]

        merged = merge_metadata([make_operation("getUser")], [], errors)

        assert [e.code for e in merged[0].errors] == ["RATE_LIMITED"]

    def test_multiple_wildcard_records_keep_order(self, make_operation):
        """Global errors keep record order."""
        errors = [
            ErrorFile(operations=["*"], errors=[_error("A")]),
            ErrorFile(operations=["*"], errors=[_error("B")]),
        ]

        merged = merge_metadata([make_operation("x")], [], errors)

        assert [e.code for e in merged[0].errors] == ["A", "B"]


class TestMergeInvariants:
    """Tests for the join's structural guarantees."""

    def test_no_operation_dropped_or_reordered(self, make_operation):
        """Output has one entry per input in the same order."""
        ops = [make_operation(name) for name in ("c", "a", "b")]

        merged = merge_metadata(ops, [], [])

        assert [op.name for op in merged] == ["c", "a", "b"]
        assert all(op.examples == [] and op.errors == [] for op in merged)

    def test_inputs_not_mutated(self, make_operation):
        """Merging returns copies."""
        op = make_operation("getUser")
        examples = [ExampleFile(operation="getUser", examples=[_example("basic")])]

        merged = merge_metadata([op], examples, [])

        assert op.examples == []
        assert merged[0] is not op

    def test_unmatched_operations_reported(self, make_operation):
        """Records naming unknown operations are listed."""
        merger = MetadataMerger(
            [ExampleFile(operation="ghost", examples=[])],
            [ErrorFile(operations=["phantom", "getUser"], errors=[])],
        )

        assert merger.unmatched_operations([make_operation("getUser")]) == ["ghost", "phantom"]
