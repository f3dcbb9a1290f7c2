"""
gqldocs - Schema Parsing

Loads GraphQL schemas and extracts operations, type definitions and
documentation directives.
"""

from gqldocs.parser.directives import (
    DIRECTIVE_DEFINITIONS,
    DirectiveExtractor,
    missing_directive_definitions,
)
from gqldocs.parser.schema_loader import SchemaLoader, SchemaLoadError, is_url
from gqldocs.parser.schema_parser import ParsedSchema, SchemaParser
from gqldocs.parser.type_collector import TypeCollector

__all__ = [
    "SchemaLoader",
    "SchemaLoadError",
    "is_url",
    "SchemaParser",
    "ParsedSchema",
    "TypeCollector",
    "DirectiveExtractor",
    "DIRECTIVE_DEFINITIONS",
    "missing_directive_definitions",
]
