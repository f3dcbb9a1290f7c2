"""
Output adapter base types.

An adapter turns the ordered DocModel into files for one documentation
framework. Files are returned, not written; the FileWriter persists them.
"""

from abc import ABC, abstractmethod
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from gqldocs.config.models import GeneratorConfig
from gqldocs.models.document import DocModel


class FileType(str, Enum):
    """Kinds of generated files."""

    MDX = "mdx"
    JSON = "json"
    JS = "js"


class GeneratedFile(BaseModel):
    """A file produced by an adapter.

    Attributes:
        path: Path relative to the output directory, "/" separated
        content: Full file content
        type: File kind
    """

    model_config = ConfigDict(frozen=True)

    path: str = Field(..., min_length=1, description="Path relative to the output directory")
    content: str = Field(..., description="File content")
    type: FileType = Field(..., description="File kind")


class OutputAdapter(ABC):
    """Abstract base class for documentation framework adapters."""

    def __init__(self, config: GeneratorConfig | None = None) -> None:
        """Initialize the adapter.

        Args:
            config: Generator configuration (defaults if omitted)
        """
        self._config = config or GeneratorConfig()

    @property
    def config(self) -> GeneratorConfig:
        """Get generator configuration."""
        return self._config

    @abstractmethod
    def adapt(self, doc_model: DocModel) -> list[GeneratedFile]:
        """Produce the files for a document model.

        Args:
            doc_model: Ordered document model

        Returns:
            Files to write, in a deterministic order
        """
        pass
