"""
gqldocs - Transformation Core

Type registry, type expansion, metadata merging and operation grouping.
"""

from gqldocs.transformer.grouping import (
    group_operations,
    operation_sort_key,
    section_sort_key,
    subsection_sort_key,
)
from gqldocs.transformer.metadata_merger import MetadataMerger, merge_metadata
from gqldocs.transformer.registry import TypeRegistry
from gqldocs.transformer.transformer import Transformer
from gqldocs.transformer.type_expander import TypeExpander, parse_type_ref, type_link

__all__ = [
    "TypeRegistry",
    "TypeExpander",
    "parse_type_ref",
    "type_link",
    "MetadataMerger",
    "merge_metadata",
    "group_operations",
    "section_sort_key",
    "subsection_sort_key",
    "operation_sort_key",
    "Transformer",
]
