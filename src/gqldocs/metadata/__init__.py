"""
gqldocs - Metadata Loading

Example and error records supplied alongside the schema.
"""

from gqldocs.metadata.loader import (
    METADATA_GLOB,
    MetadataLoadError,
    find_metadata_files,
    load_errors,
    load_examples,
    load_records,
)

__all__ = [
    "load_examples",
    "load_errors",
    "load_records",
    "find_metadata_files",
    "MetadataLoadError",
    "METADATA_GLOB",
]
