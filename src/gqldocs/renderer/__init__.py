"""
gqldocs - MDX Rendering

Jinja2-based rendering of operation pages.
"""

from gqldocs.renderer.mdx_renderer import (
    TEMPLATES_DIR,
    AnchorRegistry,
    MdxRenderer,
    RenderError,
    escape_mdx,
    escape_table_cell,
    pretty_json,
)

__all__ = [
    "AnchorRegistry",
    "MdxRenderer",
    "RenderError",
    "TEMPLATES_DIR",
    "escape_mdx",
    "escape_table_cell",
    "pretty_json",
]
