"""Tests for operation grouping and sorting."""

from gqldocs.models import UNCATEGORIZED_SECTION, Section, Subsection
from gqldocs.transformer import (
    group_operations,
    operation_sort_key,
    section_sort_key,
    subsection_sort_key,
)


class TestSectionOrder:
    """Tests for section ordering."""

    def test_ordered_sections_first_then_by_name(self):
        """Explicit orders come first, then unordered sections by name."""
        sections = [
            Section(name="Zebra"),
            Section(name="Users", order=2),
            Section(name="Alpha"),
            Section(name="Payments", order=1),
        ]

        ordered = sorted(sections, key=section_sort_key)

        assert [s.name for s in ordered] == ["Payments", "Users", "Alpha", "Zebra"]

    def test_equal_orders_keep_input_order(self):
        """Sections sharing an order keep their relative order."""
        sections = [Section(name="B", order=1), Section(name="A", order=1)]

        ordered = sorted(sections, key=section_sort_key)

        assert [s.name for s in ordered] == ["B", "A"]

    def test_negative_and_zero_orders(self):
        """Any explicit order beats an unordered section."""
        sections = [Section(name="Aardvark"), Section(name="Late", order=0), Section(name="Early", order=-5)]

        ordered = sorted(sections, key=section_sort_key)

        assert [s.name for s in ordered] == ["Early", "Late", "Aardvark"]


class TestSubsectionOrder:
    """Tests for subsection ordering."""

    def test_root_first(self):
        """The unnamed root bucket sorts before named subsections."""
        subsections = [Subsection(name="Sub B"), Subsection(name=""), Subsection(name="Sub A")]

        ordered = sorted(subsections, key=subsection_sort_key)

        assert [s.name for s in ordered] == ["", "Sub A", "Sub B"]

    def test_is_root(self):
        """Only the empty name is the root."""
        assert Subsection(name="").is_root
        assert not Subsection(name="Admin").is_root


class TestOperationOrder:
    """Tests for operation ordering by priority."""

    def test_priority_default_last(self, make_expanded_operation):
        """Priorities [2, none, 1] sort to [1, 2, none]."""
        ops = [
            make_expanded_operation("two", priority=2),
            make_expanded_operation("none"),
            make_expanded_operation("one", priority=1),
        ]

        ordered = sorted(ops, key=operation_sort_key)

        assert [op.name for op in ordered] == ["one", "two", "none"]

    def test_ties_keep_input_order(self, make_expanded_operation):
        """Equal priorities and missing priorities are stable."""
        ops = [
            make_expanded_operation("b", priority=1),
            make_expanded_operation("z"),
            make_expanded_operation("a", priority=1),
            make_expanded_operation("y"),
        ]

        ordered = sorted(ops, key=operation_sort_key)

        assert [op.name for op in ordered] == ["b", "a", "z", "y"]


class TestGroupOperations:
    """Tests for building the DocModel."""

    def test_ungrouped_go_to_uncategorized(self, make_expanded_operation):
        """Operations without @docGroup land in the fallback section."""
        model = group_operations([make_expanded_operation("health")])

        assert [s.name for s in model.sections] == [UNCATEGORIZED_SECTION]
        assert model.sections[0].subsections[0].is_root

    def test_full_grouping(self, make_expanded_operation):
        """Sections, subsections and operations are all ordered."""
        ops = [
            make_expanded_operation("listUsers", group="Users", subsection="Search"),
            make_expanded_operation("getUser", group="Users", order=2, priority=2),
            make_expanded_operation("pay", group="Payments", order=1),
            make_expanded_operation("zoo", group="Zebra"),
            make_expanded_operation("createUser", group="Users", priority=1),
            make_expanded_operation("alpha", group="Alpha"),
        ]

        model = group_operations(ops)

        assert [s.name for s in model.sections] == ["Payments", "Users", "Alpha", "Zebra"]
        users = model.get_section("Users")
        assert users.order == 2
        assert [sub.name for sub in users.subsections] == ["", "Search"]
        assert [op.name for op in users.subsections[0].operations] == ["createUser", "getUser"]
        assert users.operation_count == 3
        assert model.operation_count == 6

    def test_first_explicit_order_wins(self, make_expanded_operation):
        """The section takes the first order declared by any of its operations."""
        ops = [
            make_expanded_operation("a", group="S"),
            make_expanded_operation("b", group="S", order=3),
            make_expanded_operation("c", group="S", order=1),
        ]

        model = group_operations(ops)

        assert model.sections[0].order == 3

    def test_iter_operations_in_display_order(self, make_expanded_operation):
        """iter_operations walks sections, subsections and operations in order."""
        ops = [
            make_expanded_operation("b", group="Z"),
            make_expanded_operation("a", group="Y", subsection="Sub"),
            make_expanded_operation("c", group="Y"),
        ]

        model = group_operations(ops)

        assert [op.name for _, _, op in model.iter_operations()] == ["c", "a", "b"]

    def test_empty_input(self):
        """No operations means no sections."""
        model = group_operations([])

        assert model.sections == []
        assert model.operation_count == 0

    def test_deterministic(self, make_expanded_operation):
        """Grouping the same input twice gives the same model."""
        ops = [
            make_expanded_operation("a", group="B"),
            make_expanded_operation("b", group="A", priority=3),
            make_expanded_operation("c", group="A", priority=3),
        ]

        assert group_operations(ops) == group_operations(ops)
