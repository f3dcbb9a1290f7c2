"""
Docusaurus sidebar generation.

Builds the sidebar item tree for a DocModel: one category per section,
root-subsection operations inline in their section, and one nested
category per named subsection. Doc ids mirror the file layout written
by the Docusaurus adapter.
"""

import json
from typing import Any

from gqldocs.adapters.layout import doc_id, section_dir, subsection_dir
from gqldocs.models.document import DocModel, Section

SIDEBAR_NAME = "apiSidebar"

SidebarItem = dict[str, Any]


class SidebarGenerator:
    """Generates Docusaurus sidebar items.

    Usage:
        items = SidebarGenerator().generate(doc_model)
    """

    def generate(self, doc_model: DocModel) -> list[SidebarItem]:
        """Build sidebar items in display order."""
        return [
            self._section_category(section, index)
            for index, section in enumerate(doc_model.sections)
        ]

    def _section_category(self, section: Section, index: int) -> SidebarItem:
        section_path = section_dir(section, index)
        items: list[SidebarItem] = []
        for sub_index, subsection in enumerate(section.subsections):
            folder = subsection_dir(section_path, subsection, sub_index)
            docs = [
                {"type": "doc", "id": doc_id(folder, op, op_index), "label": op.name}
                for op_index, op in enumerate(subsection.operations)
            ]
            if subsection.is_root:
                items.extend(docs)
            else:
                items.append(self._category(subsection.name, docs))
        return self._category(section.name, items)

    @staticmethod
    def _category(label: str, items: list[SidebarItem]) -> SidebarItem:
        return {
            "type": "category",
            "label": label,
            "link": {"type": "generated-index"},
            "items": items,
            "collapsible": True,
            "collapsed": True,
        }


def render_sidebar_module(items: list[SidebarItem], wrap: bool = True) -> str:
    """Render sidebar items as a CommonJS module.

    Args:
        items: Sidebar items
        wrap: Export {"apiSidebar": items} instead of the bare list

    Returns:
        JavaScript source
    """
    payload: Any = {SIDEBAR_NAME: items} if wrap else items
    return f"module.exports = {json.dumps(payload, indent=2, ensure_ascii=False)};\n"
