"""
gqldocs - Output Adapters

Docusaurus layout, sidebar generation and file writing.
"""

from gqldocs.adapters.base import FileType, GeneratedFile, OutputAdapter
from gqldocs.adapters.docusaurus import (
    API_SIDEBAR_FILE,
    CATEGORY_FILE,
    SIDEBAR_FILE,
    SINGLE_PAGE_FILE,
    DocusaurusAdapter,
)
from gqldocs.adapters.file_writer import FileWriteError, FileWriter
from gqldocs.adapters.layout import doc_id, operation_slug, path_segment, section_dir, subsection_dir
from gqldocs.adapters.sidebar import SIDEBAR_NAME, SidebarGenerator, render_sidebar_module

__all__ = [
    "FileType",
    "GeneratedFile",
    "OutputAdapter",
    "DocusaurusAdapter",
    "CATEGORY_FILE",
    "SIDEBAR_FILE",
    "API_SIDEBAR_FILE",
    "SINGLE_PAGE_FILE",
    "SidebarGenerator",
    "SIDEBAR_NAME",
    "doc_id",
    "path_segment",
    "section_dir",
    "subsection_dir",
    "operation_slug",
    "render_sidebar_module",
    "FileWriter",
    "FileWriteError",
]
