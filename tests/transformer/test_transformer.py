"""Tests for the transformer."""

import logging

from gqldocs.config import TypeExpansionConfig
from gqldocs.models import (
    Argument,
    CircularRef,
    ErrorDefinition,
    ErrorFile,
    Example,
    ExampleFile,
    ExpandedList,
    ExpandedObject,
    ExpandedScalar,
    OperationType,
    TypeRef,
)
from gqldocs.transformer import Transformer, TypeRegistry


class TestTransformer:
    """Tests for Transformer.transform."""

    def test_expands_return_and_arguments(self, user_types, make_operation):
        """Arguments and return types become expanded trees."""
        op = make_operation(
            "user",
            return_type="User",
            arguments=[Argument(name="id", type="ID!", is_required=True)],
        )

        expanded = Transformer(user_types).expand_operation(op)

        assert isinstance(expanded.return_type, ExpandedObject)
        assert expanded.arguments[0].name == "id"
        assert expanded.arguments[0].is_required is True
        assert isinstance(expanded.arguments[0].type, ExpandedScalar)

    def test_cycle_state_does_not_leak_between_operations(self, user_types, make_operation):
        """Each operation starts expansion with an empty path."""
        ops = [make_operation("a", return_type="User"), make_operation("b", return_type="[User]")]
        transformer = Transformer(user_types)

        first = transformer.expand_operation(ops[0])
        second = transformer.expand_operation(ops[1])

        assert isinstance(first.return_type, ExpandedObject)
        assert isinstance(second.return_type, ExpandedList)
        assert isinstance(second.return_type.of_type, ExpandedObject)

    def test_transform_builds_doc_model(self, user_types, make_operation):
        """transform merges, expands and groups."""
        ops = [
            make_operation("health"),
            make_operation("user", return_type="User"),
            make_operation("createUser", return_type="User!", operation_type=OperationType.MUTATION),
        ]
        examples = [ExampleFile(operation="user", examples=[Example(name="ex", query="{ user }")])]
        errors = [ErrorFile(operations=["*"], errors=[ErrorDefinition(code="E", message="m")])]

        model = Transformer(user_types).transform(ops, examples, errors)

        assert model.operation_count == 3
        ops_by_name = {op.name: op for _, _, op in model.iter_operations()}
        assert [e.name for e in ops_by_name["user"].examples] == ["ex"]
        assert all(op.errors[0].code == "E" for op in ops_by_name.values())
        friends = next(f for f in ops_by_name["user"].return_type.fields if f.name == "friends")
        assert isinstance(friends.type.of_type, CircularRef)

    def test_config_applied(self, chain_types, make_operation):
        """Expansion settings flow into the expander."""
        transformer = Transformer(chain_types, TypeExpansionConfig(max_depth=1))

        expanded = transformer.expand_operation(make_operation("chain", return_type="L0"))

        nxt = next(f for f in expanded.return_type.fields if f.name == "next")
        assert nxt.type.truncated is True

    def test_skip_types(self, user_types, make_operation):
        """skip_types leave references unresolved."""
        transformer = Transformer(user_types, skip_types=["User"])

        expanded = transformer.expand_operation(make_operation("me", return_type="User"))

        assert isinstance(expanded.return_type, TypeRef)

    def test_accepts_registry(self, user_types, make_operation):
        """A prepared registry is used as-is."""
        transformer = Transformer(TypeRegistry(user_types))

        assert transformer.expander.registry.is_registered("User")

    def test_unknown_metadata_logged(self, user_types, make_operation, caplog):
        """Metadata for unknown operations is reported as a warning."""
        examples = [ExampleFile(operation="ghost", examples=[])]

        with caplog.at_level(logging.WARNING, logger="gqldocs.transformer.transformer"):
            Transformer(user_types).transform([make_operation("health")], examples, [])

        assert "ghost" in caplog.text

    def test_operation_fields_preserved(self, user_types, make_operation):
        """Deprecation and referenced types survive expansion."""
        op = make_operation(
            "old",
            is_deprecated=True,
            deprecation_reason="Use new",
            referenced_types=["String"],
        )

        expanded = Transformer(user_types).expand_operation(op)

        assert expanded.is_deprecated is True
        assert expanded.deprecation_reason == "Use new"
        assert expanded.referenced_types == ["String"]
