"""
MDX Renderer.

Renders an expanded operation to an MDX page body with Jinja2. Type
trees are emitted as nested lists inside <details> blocks: nodes at a
depth below the default expansion level start open, deeper ones start
collapsed. Free text is escaped so it cannot open a JSX expression or
tag.
"""

import json
import logging
from pathlib import Path
from typing import Any

from jinja2 import Environment, FileSystemLoader, StrictUndefined, TemplateNotFound

from gqldocs.errors import GqlDocsError
from gqldocs.models.document import ExpandedOperation
from gqldocs.utils.strings import slugify

logger = logging.getLogger(__name__)

TEMPLATES_DIR = Path(__file__).with_name("templates")
OPERATION_TEMPLATE = "operation.md.j2"

_MDX_ESCAPES = {
    "&": "&amp;",
    "<": "&lt;",
    ">": "&gt;",
    "{": "&#123;",
    "}": "&#125;",
}


class RenderError(GqlDocsError):
    """Raised when a template is missing or fails to render."""

    pass


def escape_mdx(value: Any) -> str:
    """Escape text for MDX so braces and angle brackets stay literal."""
    if value is None:
        return ""
    return "".join(_MDX_ESCAPES.get(ch, ch) for ch in str(value))


def escape_table_cell(value: Any) -> str:
    """Escape text for a Markdown table cell."""
    text = escape_mdx(value)
    return " ".join(text.split()).replace("|", "\\|")


def pretty_json(value: Any) -> str:
    """Indented JSON for fenced code blocks."""
    return json.dumps(value, indent=2, ensure_ascii=False, default=str)


class AnchorRegistry:
    """Hands out each type anchor once per page.

    The first expanded occurrence of a type on a page carries its id;
    later occurrences render without one, so ids stay unique.
    """

    def __init__(self) -> None:
        self._claimed: set[str] = set()

    def claim(self, name: str) -> str:
        """Return ' id="<slug>"' the first time a type is claimed, else ""."""
        anchor = slugify(name)
        if not anchor or anchor in self._claimed:
            return ""
        self._claimed.add(anchor)
        return f' id="{anchor}"'


class MdxRenderer:
    """Renders operation pages from Jinja2 templates.

    Usage:
        renderer = MdxRenderer()
        body = renderer.render_operation(operation, default_levels=2)
    """

    def __init__(self, templates_dir: Path | None = None) -> None:
        self.templates_dir = templates_dir or TEMPLATES_DIR
        self.env = Environment(
            loader=FileSystemLoader(str(self.templates_dir)),
            autoescape=False,
            trim_blocks=True,
            lstrip_blocks=True,
            undefined=StrictUndefined,
        )
        self.env.filters["mdx"] = escape_mdx
        self.env.filters["cell"] = escape_table_cell
        self.env.filters["pretty_json"] = pretty_json
        self.env.filters["slugify"] = slugify

    def render_operation(
        self,
        operation: ExpandedOperation,
        default_levels: int = 2,
        anchors: AnchorRegistry | None = None,
    ) -> str:
        """Render the page body for one operation.

        Args:
            operation: Expanded operation
            default_levels: Tree levels shown open before collapsing
            anchors: Anchors already used on the page (single-page output
                shares one registry across operations)

        Returns:
            MDX content without front matter

        Raises:
            RenderError: If the template is missing or fails
        """
        try:
            template = self.env.get_template(OPERATION_TEMPLATE)
        except TemplateNotFound as e:
            raise RenderError(f"Template not found: {e.name} in {self.templates_dir}") from e

        try:
            content = template.render(
                op=operation,
                levels=default_levels,
                anchors=anchors or AnchorRegistry(),
            )
        except Exception as e:
            raise RenderError(f"Failed to render operation '{operation.name}': {e}") from e

        logger.debug(f"Rendered operation {operation.name}")
        return content.strip() + "\n"
