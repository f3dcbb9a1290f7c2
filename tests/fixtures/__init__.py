"""
Test Fixtures for gqldocs

This package contains a sample SDL schema and example/error metadata
files used by the parser, metadata and generator tests.
"""

from pathlib import Path

FIXTURES_DIR = Path(__file__).parent
SCHEMA_FILE = FIXTURES_DIR / "schema.graphql"
METADATA_DIR = FIXTURES_DIR / "metadata"
