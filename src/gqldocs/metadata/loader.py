"""
Metadata Loader.

Reads example and error records from JSON files under a directory tree.
Each file holds either one record or a list of records. Files are read
recursively in sorted path order so merge results are reproducible.
A file that cannot be parsed or validated is logged and skipped.
"""

import json
import logging
from pathlib import Path
from typing import Any, TypeVar

from pydantic import BaseModel, ValidationError

from gqldocs.errors import GqlDocsError
from gqldocs.models.metadata import ErrorFile, ExampleFile

logger = logging.getLogger(__name__)

RecordT = TypeVar("RecordT", bound=BaseModel)

METADATA_GLOB = "**/*.json"


class MetadataLoadError(GqlDocsError):
    """Raised for a single unreadable metadata file."""

    def __init__(self, path: Path, reason: str):
        super().__init__(f"{path}: {reason}")
        self.path = path
        self.reason = reason


def find_metadata_files(directory: str | Path) -> list[Path]:
    """List JSON files below a directory in sorted order.

    A missing directory yields an empty list.
    """
    root = Path(directory)
    if not root.is_dir():
        logger.debug(f"Metadata directory not found: {root}")
        return []
    return sorted(p for p in root.glob(METADATA_GLOB) if p.is_file())


def load_records(path: Path, model: type[RecordT]) -> list[RecordT]:
    """Load and validate the records in one file.

    Args:
        path: JSON file holding an object or a list of objects
        model: Record model to validate against

    Returns:
        Validated records in file order

    Raises:
        MetadataLoadError: If the file is unreadable or a record is invalid
    """
    try:
        data: Any = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError) as e:
        raise MetadataLoadError(path, f"cannot read file: {e}") from e
    except json.JSONDecodeError as e:
        raise MetadataLoadError(path, f"invalid JSON: {e}") from e

    items = data if isinstance(data, list) else [data]
    try:
        return [model.model_validate(item) for item in items]
    except ValidationError as e:
        errors = "; ".join(
            f"{'.'.join(str(x) for x in err['loc'])}: {err['msg']}" for err in e.errors()[:5]
        )
        raise MetadataLoadError(path, errors) from e


def _load_directory(directory: str | Path, model: type[RecordT]) -> list[RecordT]:
    records: list[RecordT] = []
    for path in find_metadata_files(directory):
        try:
            records.extend(load_records(path, model))
        except MetadataLoadError as e:
            logger.warning(f"Skipping metadata file {e}")
    return records


def load_examples(directory: str | Path) -> list[ExampleFile]:
    """Load every example record below a directory."""
    examples = _load_directory(directory, ExampleFile)
    logger.debug(f"Loaded {len(examples)} example records from {directory}")
    return examples


def load_errors(directory: str | Path) -> list[ErrorFile]:
    """Load every error record below a directory."""
    errors = _load_directory(directory, ErrorFile)
    logger.debug(f"Loaded {len(errors)} error records from {directory}")
    return errors
