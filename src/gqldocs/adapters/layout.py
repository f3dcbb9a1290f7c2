"""
Output layout.

Folder names and doc ids shared by the Docusaurus adapter and the sidebar.
Every path segment is a non-empty slug: a name without ASCII letters or
digits (e.g. "Пользователи") falls back to its 1-based position, such as
"section-2", so no path ever gains an empty or absolute segment.
"""

from gqldocs.models.document import ExpandedOperation, Section, Subsection
from gqldocs.utils.strings import slugify


def path_segment(name: str, fallback: str) -> str:
    """Slug of a name, or the fallback when the slug is empty."""
    return slugify(name) or fallback


def section_dir(section: Section, index: int) -> str:
    """Folder of a section, given its index in the document."""
    return path_segment(section.name, f"section-{index + 1}")


def subsection_dir(section_path: str, subsection: Subsection, index: int) -> str:
    """Folder of a subsection; the root subsection shares its section's folder."""
    if subsection.is_root:
        return section_path
    return f"{section_path}/{path_segment(subsection.name, f'subsection-{index + 1}')}"


def operation_slug(operation: ExpandedOperation, index: int) -> str:
    """File stem of an operation page, given its index in the subsection."""
    return path_segment(operation.name, f"operation-{index + 1}")


def doc_id(folder: str, operation: ExpandedOperation, index: int = 0) -> str:
    """Docusaurus doc id of an operation page inside a folder."""
    return f"{folder}/{operation_slug(operation, index)}"
