"""
File Writer.

Persists generated files below an output directory.
"""

import logging
from collections.abc import Iterable
from pathlib import Path

from gqldocs.adapters.base import GeneratedFile
from gqldocs.errors import GqlDocsError

logger = logging.getLogger(__name__)


class FileWriteError(GqlDocsError):
    """Raised when a generated file cannot be written."""

    pass


class FileWriter:
    """Writes generated files as UTF-8.

    Usage:
        writer = FileWriter("./docs/api")
        written = writer.write(files)
    """

    def __init__(self, output_dir: str | Path) -> None:
        self.output_dir = Path(output_dir)

    def resolve(self, file: GeneratedFile) -> Path:
        """Absolute target path for a file, refusing paths that leave the output dir."""
        root = self.output_dir.resolve()
        target = (root / file.path).resolve()
        if target != root and root not in target.parents:
            raise FileWriteError(f"Refusing to write outside {root}: {file.path}")
        return target

    def write(self, files: Iterable[GeneratedFile]) -> list[Path]:
        """Write every file, creating directories as needed.

        Args:
            files: Generated files with paths relative to output_dir

        Returns:
            Paths written, in input order

        Raises:
            FileWriteError: If a path escapes output_dir or cannot be written
        """
        self.output_dir.mkdir(parents=True, exist_ok=True)

        written: list[Path] = []
        for file in files:
            target = self.resolve(file)
            try:
                target.parent.mkdir(parents=True, exist_ok=True)
                target.write_text(file.content, encoding="utf-8")
            except OSError as e:
                raise FileWriteError(f"Failed to write {file.path}: {e}") from e
            logger.debug(f"Written: {file.path}")
            written.append(target)

        logger.info(f"Wrote {len(written)} files to {self.output_dir}")
        return written
