"""
Configuration Data Models.

Defines all configuration schemas using Pydantic for validation
and type safety. Keys may be written in snake_case or camelCase.
"""

import os
from enum import Enum
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from pydantic.alias_generators import to_camel


class _ConfigModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
    )


class LogLevel(str, Enum):
    """Log levels accepted in configuration."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"


class LoggingConfig(_ConfigModel):
    """Logging configuration.

    Attributes:
        level: Minimum level for gqldocs loggers
        file: Optional log file path
        format: Log record format for the file handler
    """

    level: LogLevel = Field(
        default=LogLevel.INFO,
        description="Log level",
    )
    file: str | None = Field(
        default=None,
        description="Optional log file",
    )
    format: str = Field(
        default="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        description="Log format for file output",
    )

    @field_validator("level", mode="before")
    @classmethod
    def normalize_level(cls, v: Any) -> Any:
        """Accept lowercase level names."""
        if isinstance(v, str):
            return v.upper()
        return v


class TypeExpansionConfig(_ConfigModel):
    """Configuration for type expansion.

    Attributes:
        max_depth: Hard ceiling on nested type levels
        default_levels: Levels rendered expanded by default
        show_circular_references: Surface cycles as reference markers
    """

    max_depth: int = Field(
        default=5,
        ge=1,
        le=50,
        description="Maximum expansion depth",
    )
    default_levels: int = Field(
        default=2,
        ge=0,
        description="Levels expanded by default when rendered",
    )
    show_circular_references: bool = Field(
        default=True,
        description="Show cycles as reference markers",
    )


class GeneratorConfig(_ConfigModel):
    """Root configuration for a documentation run.

    Attributes:
        schema_pointer: Schema file, directory, glob, introspection JSON or URL
        headers: Extra HTTP headers for URL schemas
        output_dir: Directory receiving generated files
        framework: Output framework
        single_page: Render every operation into one page
        metadata_dir: Root of example and error metadata
        examples_dir: Example files directory (default: <metadata_dir>/examples)
        errors_dir: Error files directory (default: <metadata_dir>/errors)
        include_deprecated: Document deprecated operations
        skip_types: Type names never expanded
        generate_sidebar: Write a sidebar file
        sidebar_file: Explicit sidebar file name
        type_expansion: Type expansion settings
        logging: Logging settings
    """

    schema_pointer: str = Field(
        default="schema.graphql",
        alias="schema",
        description="Schema location",
        examples=["schema.graphql", "./schema/", "https://api.example.com/graphql"],
    )
    headers: dict[str, str] = Field(
        default_factory=dict,
        description="HTTP headers for URL schemas",
    )
    output_dir: str = Field(
        default="./docs/api",
        description="Output directory",
    )
    framework: Literal["docusaurus"] = Field(
        default="docusaurus",
        description="Output framework",
    )
    single_page: bool = Field(
        default=False,
        description="Render a single page",
    )
    metadata_dir: str = Field(
        default="./docs-metadata",
        description="Metadata root directory",
    )
    examples_dir: str | None = Field(
        default=None,
        description="Examples directory",
    )
    errors_dir: str | None = Field(
        default=None,
        description="Errors directory",
    )
    include_deprecated: bool = Field(
        default=True,
        description="Document deprecated operations",
    )
    skip_types: list[str] = Field(
        default_factory=list,
        description="Types that are never expanded",
    )
    generate_sidebar: bool = Field(
        default=True,
        description="Generate a sidebar file",
    )
    sidebar_file: str | None = Field(
        default=None,
        description="Sidebar file name",
    )
    type_expansion: TypeExpansionConfig = Field(
        default_factory=TypeExpansionConfig,
        description="Type expansion settings",
    )
    logging: LoggingConfig = Field(
        default_factory=LoggingConfig,
        description="Logging settings",
    )

    @field_validator("schema_pointer", "output_dir", "metadata_dir")
    @classmethod
    def validate_not_empty(cls, v: str) -> str:
        """Validate that required paths are not empty."""
        if not v.strip():
            raise ValueError("Path cannot be empty")
        return v

    @model_validator(mode="after")
    def default_metadata_dirs(self) -> "GeneratorConfig":
        """Place examples and errors under metadata_dir unless set."""
        if not self.examples_dir:
            self.examples_dir = os.path.join(self.metadata_dir, "examples")
        if not self.errors_dir:
            self.errors_dir = os.path.join(self.metadata_dir, "errors")
        return self

    def to_yaml_dict(self) -> dict[str, Any]:
        """Convert to YAML-friendly dictionary.

        Returns:
            Dict suitable for YAML serialization
        """
        return self.model_dump(mode="json", exclude_none=True, by_alias=True)
