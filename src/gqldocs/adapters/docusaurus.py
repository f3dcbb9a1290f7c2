"""
Docusaurus Adapter.

Lays out one MDX page per operation under <section>/[<subsection>/],
with _category_.json files describing each folder, plus a sidebar
module. Single-page mode writes every operation into index.mdx.
"""

import json
import logging
from pathlib import Path

from gqldocs.adapters.base import FileType, GeneratedFile, OutputAdapter
from gqldocs.adapters.layout import operation_slug, section_dir, subsection_dir
from gqldocs.adapters.sidebar import SidebarGenerator, render_sidebar_module
from gqldocs.config.models import GeneratorConfig
from gqldocs.models.document import DocModel, ExpandedOperation
from gqldocs.renderer.mdx_renderer import AnchorRegistry, MdxRenderer
from gqldocs.utils.yaml_escape import escape_yaml_tag, escape_yaml_value

logger = logging.getLogger(__name__)

CATEGORY_FILE = "_category_.json"
SIDEBAR_FILE = "sidebars.js"
API_SIDEBAR_FILE = "sidebars.api.js"
SINGLE_PAGE_FILE = "index.mdx"
SINGLE_PAGE_TITLE = "API Reference"
OPERATION_SEPARATOR = "\n\n---\n\n"


class DocusaurusAdapter(OutputAdapter):
    """Produces Docusaurus docs files from a DocModel.

    Usage:
        adapter = DocusaurusAdapter(config)
        files = adapter.adapt(doc_model)
    """

    def __init__(
        self,
        config: GeneratorConfig | None = None,
        renderer: MdxRenderer | None = None,
        sidebar_generator: SidebarGenerator | None = None,
    ) -> None:
        super().__init__(config)
        self.renderer = renderer or MdxRenderer()
        self.sidebar_generator = sidebar_generator or SidebarGenerator()

    @property
    def default_levels(self) -> int:
        return self.config.type_expansion.default_levels

    def adapt(self, doc_model: DocModel) -> list[GeneratedFile]:
        """Produce category files, operation pages and the sidebar.

        Args:
            doc_model: Ordered document model

        Returns:
            Generated files in display order, sidebar last
        """
        if self.config.single_page:
            return [self._single_page(doc_model)]

        files: list[GeneratedFile] = []
        # Positions are 1-based display indexes; named subsections follow root pages
        for index, section in enumerate(doc_model.sections):
            section_path = section_dir(section, index)
            root_pages = sum(len(s.operations) for s in section.subsections if s.is_root)
            files.append(
                GeneratedFile(
                    path=f"{section_path}/{CATEGORY_FILE}",
                    content=self.category_json(section.name, index + 1),
                    type=FileType.JSON,
                )
            )

            for sub_index, subsection in enumerate(section.subsections):
                folder = subsection_dir(section_path, subsection, sub_index)
                if not subsection.is_root:
                    files.append(
                        GeneratedFile(
                            path=f"{folder}/{CATEGORY_FILE}",
                            content=self.category_json(
                                subsection.name, root_pages + sub_index + 1
                            ),
                            type=FileType.JSON,
                        )
                    )

                for op_index, operation in enumerate(subsection.operations):
                    slug = operation_slug(operation, op_index)
                    files.append(
                        GeneratedFile(
                            path=f"{folder}/{slug}.mdx",
                            content=self.operation_page(operation, slug, op_index + 1),
                            type=FileType.MDX,
                        )
                    )

        sidebar = self._sidebar(doc_model)
        if sidebar is not None:
            files.append(sidebar)

        logger.debug(f"Docusaurus adapter produced {len(files)} files")
        return files

    def operation_page(
        self,
        operation: ExpandedOperation,
        slug: str | None = None,
        position: int | None = None,
    ) -> str:
        """Front matter plus rendered body for one operation."""
        body = self.renderer.render_operation(operation, self.default_levels)
        return f"{self.front_matter(operation, slug, position)}\n\n{body}"

    @staticmethod
    def front_matter(
        operation: ExpandedOperation,
        slug: str | None = None,
        position: int | None = None,
    ) -> str:
        """YAML front matter for an operation page.

        Args:
            operation: Operation the page documents
            slug: Doc id (default: the operation slug)
            position: sidebar_position, omitted when None
        """
        lines = [
            "---",
            f"id: {slug or operation_slug(operation, 0)}",
            f"title: {escape_yaml_value(operation.name)}",
            f"sidebar_label: {escape_yaml_value(operation.name)}",
        ]
        doc_tags = operation.directives.doc_tags
        if doc_tags and doc_tags.tags:
            tags = ", ".join(escape_yaml_tag(tag) for tag in doc_tags.tags)
            lines.append(f"tags: [{tags}]")
        if position is not None:
            lines.append(f"sidebar_position: {position}")
        lines.append("hide_title: true")
        lines.append("---")
        return "\n".join(lines)

    @staticmethod
    def category_json(label: str, position: int) -> str:
        """Content of a _category_.json file."""
        return json.dumps(
            {
                "label": label,
                "position": position,
                "collapsible": True,
                "collapsed": True,
                "link": {"type": "generated-index"},
            },
            indent=2,
            ensure_ascii=False,
        )

    def _single_page(self, doc_model: DocModel) -> GeneratedFile:
        anchors = AnchorRegistry()
        bodies = [
            self.renderer.render_operation(operation, self.default_levels, anchors).strip()
            for _, _, operation in doc_model.iter_operations()
        ]
        front_matter = "\n".join(
            [
                "---",
                "id: index",
                f"title: {SINGLE_PAGE_TITLE}",
                f"sidebar_label: {SINGLE_PAGE_TITLE}",
                "hide_title: true",
                "---",
            ]
        )
        content = f"{front_matter}\n\n{OPERATION_SEPARATOR.join(bodies)}\n"
        return GeneratedFile(path=SINGLE_PAGE_FILE, content=content, type=FileType.MDX)

    def sidebar_target(self) -> tuple[str, bool]:
        """Sidebar file name and whether items are wrapped in apiSidebar.

        A configured sidebar_file wins. Otherwise an existing sidebars.js
        in the output directory is left alone and sidebars.api.js is
        written instead.
        """
        if self.config.sidebar_file:
            return self.config.sidebar_file, False
        if (Path(self.config.output_dir) / SIDEBAR_FILE).exists():
            return API_SIDEBAR_FILE, False
        return SIDEBAR_FILE, True

    def _sidebar(self, doc_model: DocModel) -> GeneratedFile | None:
        if not self.config.generate_sidebar:
            return None
        name, wrap = self.sidebar_target()
        items = self.sidebar_generator.generate(doc_model)
        return GeneratedFile(
            path=name,
            content=render_sidebar_module(items, wrap=wrap),
            type=FileType.JS,
        )
