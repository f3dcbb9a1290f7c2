"""
Utility helpers for gqldocs.

String slugs for paths and anchors, and YAML escaping for front matter.
"""

from gqldocs.utils.strings import slugify
from gqldocs.utils.yaml_escape import escape_yaml_tag, escape_yaml_value

__all__ = [
    "slugify",
    "escape_yaml_value",
    "escape_yaml_tag",
]
