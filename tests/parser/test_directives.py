"""Tests for documentation directive extraction."""

import logging

from graphql import parse

from gqldocs.parser import DIRECTIVE_DEFINITIONS, DirectiveExtractor, missing_directive_definitions


def _field_node(sdl_field: str):
    document = parse(f"type Query {{ {sdl_field} }}")
    return document.definitions[0].fields[0]


class TestDirectiveExtractor:
    """Tests for DirectiveExtractor.extract."""

    def test_all_directives(self):
        """docGroup, docPriority and docTags are read."""
        node = _field_node(
            'user: String @docGroup(name: "Users", order: 2, subsection: "Admin") '
            '@docPriority(level: 1) @docTags(tags: ["read", "user"])'
        )

        directives = DirectiveExtractor().extract(node)

        assert directives.doc_group.name == "Users"
        assert directives.doc_group.order == 2
        assert directives.doc_group.subsection == "Admin"
        assert directives.doc_priority.level == 1
        assert directives.doc_tags.tags == ["read", "user"]

    def test_no_directives(self):
        """A bare field has empty directives."""
        directives = DirectiveExtractor().extract(_field_node("user: String"))

        assert directives.is_empty

    def test_none_node(self):
        """Introspected schemas have no AST nodes."""
        assert DirectiveExtractor().extract(None).is_empty

    def test_unknown_directives_ignored(self):
        """Directives other than the documentation ones are skipped."""
        node = _field_node('user: String @deprecated(reason: "x") @docPriority(level: 3)')

        directives = DirectiveExtractor().extract(node)

        assert directives.doc_group is None
        assert directives.doc_priority.level == 3

    def test_invalid_usage_degrades_to_absent(self, caplog):
        """A docGroup without a name is dropped with a warning."""
        node = _field_node("user: String @docGroup(order: 1) @docPriority(level: 2)")

        with caplog.at_level(logging.WARNING, logger="gqldocs.parser.directives"):
            directives = DirectiveExtractor().extract(node)

        assert directives.doc_group is None
        assert directives.doc_priority.level == 2
        assert "Invalid @docGroup" in caplog.text

    def test_wrong_argument_type(self):
        """A non-integer priority is treated as absent."""
        node = _field_node('user: String @docPriority(level: "high")')

        assert DirectiveExtractor().extract(node).doc_priority is None


class TestDirectiveDefinitions:
    """Tests for directive SDL helpers."""

    def test_all_missing(self):
        """Undeclared directives are all returned."""
        extra = missing_directive_definitions("type Query { a: String }")

        for name in DIRECTIVE_DEFINITIONS:
            assert f"directive @{name}" in extra

    def test_declared_not_repeated(self):
        """Directives already declared are left out."""
        sdl = "directive @docTags(tags: [String!]!) on FIELD_DEFINITION\ntype Query { a: String }"

        extra = missing_directive_definitions(sdl)

        assert "directive @docTags" not in extra
        assert "directive @docGroup" in extra

    def test_prefix_names_not_confused(self):
        """A directive whose name starts with a known one does not count."""
        extra = missing_directive_definitions("directive @docGroupLegacy on FIELD_DEFINITION")

        assert "directive @docGroup(" in extra
