"""
Operation Grouping and Sorting.

Builds the DocModel from expanded operations. All three orderings are
stable sorts, so operations with equal keys keep their input order:

- Sections: those with an explicit order first, ascending by order;
  then unordered sections ascending by name.
- Subsections: the root bucket ("") first, then by name.
- Operations: ascending docPriority level; no priority sorts last.
"""

from collections.abc import Iterable

from gqldocs.models.base import UNCATEGORIZED_SECTION
from gqldocs.models.document import DocModel, ExpandedOperation, Section, Subsection


def section_sort_key(section: Section) -> tuple[int, int, str]:
    """Two-tier key: explicit order beats any unordered section."""
    if section.order is not None:
        return (0, section.order, "")
    return (1, 0, section.name)


def subsection_sort_key(subsection: Subsection) -> tuple[bool, str]:
    """Root bucket first, then by name."""
    return (subsection.name != "", subsection.name)


def operation_sort_key(operation: ExpandedOperation) -> tuple[bool, int]:
    """Declared priority ascending, undeclared last."""
    priority = operation.directives.doc_priority
    if priority is None:
        return (True, 0)
    return (False, priority.level)


def group_operations(operations: Iterable[ExpandedOperation]) -> DocModel:
    """Assign operations to sections and subsections and order them.

    The section order is the first explicit order declared by any
    operation in the group.

    Args:
        operations: Expanded operations in schema order

    Returns:
        DocModel with a deterministic total order
    """
    sections: dict[str, Section] = {}

    for operation in operations:
        group = operation.directives.doc_group
        section_name = group.name if group and group.name else UNCATEGORIZED_SECTION
        subsection_name = (group.subsection if group else None) or ""

        section = sections.get(section_name)
        if section is None:
            section = Section(name=section_name)
            sections[section_name] = section
        if section.order is None and group is not None and group.order is not None:
            section.order = group.order

        subsection = section.get_subsection(subsection_name)
        if subsection is None:
            subsection = Subsection(name=subsection_name)
            section.subsections.append(subsection)
        subsection.operations.append(operation)

    ordered = sorted(sections.values(), key=section_sort_key)
    for section in ordered:
        section.subsections.sort(key=subsection_sort_key)
        for subsection in section.subsections:
            subsection.operations.sort(key=operation_sort_key)

    return DocModel(sections=ordered)
