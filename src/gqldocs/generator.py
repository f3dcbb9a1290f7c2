"""
Documentation Generator.

Runs the full pipeline for one configuration:

    load schema -> parse -> filter -> load metadata -> transform -> adapt -> write

Each stage is logged at INFO. The type registry and expander are built
per run and discarded afterwards.
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path

from gqldocs.adapters.docusaurus import DocusaurusAdapter
from gqldocs.adapters.file_writer import FileWriter
from gqldocs.config.environment import load_environment
from gqldocs.config.models import GeneratorConfig
from gqldocs.metadata.loader import load_errors, load_examples
from gqldocs.parser.schema_loader import SchemaLoader
from gqldocs.parser.schema_parser import SchemaParser
from gqldocs.transformer.transformer import Transformer

logger = logging.getLogger(__name__)


@dataclass
class GenerationResult:
    """Summary of a generation run.

    Attributes:
        operations: Operations documented
        sections: Sections produced
        types: Named types collected from the schema
        files: Paths written
        output_dir: Output directory
    """

    operations: int = 0
    sections: int = 0
    types: int = 0
    files: list[Path] = field(default_factory=list)
    output_dir: Path = field(default_factory=Path)

    @property
    def file_count(self) -> int:
        return len(self.files)


class Generator:
    """Generates documentation for a GraphQL schema.

    Usage:
        generator = Generator(config)
        result = generator.generate()
    """

    def __init__(
        self,
        config: GeneratorConfig | None = None,
        schema_loader: SchemaLoader | None = None,
    ) -> None:
        """Initialize the generator.

        Args:
            config: Generator configuration (defaults if omitted)
            schema_loader: Loader override, mainly for tests
        """
        self.config = config or GeneratorConfig()
        self.schema_loader = schema_loader or SchemaLoader()

    def request_headers(self) -> dict[str, str]:
        """Headers for URL schemas: environment auth, then configured headers."""
        headers = dict(load_environment().schema_headers())
        headers.update(self.config.headers)
        return headers

    def generate(self, schema_pointer: str | None = None) -> GenerationResult:
        """Run the pipeline.

        Args:
            schema_pointer: Overrides config.schema_pointer when given

        Returns:
            GenerationResult with counts and written paths

        Raises:
            SchemaLoadError: If the schema cannot be loaded
            FileWriteError: If output cannot be written
        """
        config = self.config
        pointer = schema_pointer or config.schema_pointer

        logger.info(f"Loading schema from {pointer}")
        schema = self.schema_loader.load(pointer, headers=self.request_headers())

        logger.info("Parsing schema")
        parsed = SchemaParser().parse(schema)
        operations = parsed.operations
        if not config.include_deprecated:
            kept = [op for op in operations if not op.is_deprecated]
            dropped = len(operations) - len(kept)
            if dropped:
                logger.info(f"Skipping {dropped} deprecated operations")
            operations = kept

        logger.info("Loading metadata")
        examples = load_examples(config.examples_dir)
        errors = load_errors(config.errors_dir)
        logger.info(f"Loaded {len(examples)} example records and {len(errors)} error records")

        logger.info("Transforming operations")
        transformer = Transformer(parsed.types, config.type_expansion, config.skip_types)
        doc_model = transformer.transform(operations, examples, errors)

        logger.info("Generating documentation files")
        files = DocusaurusAdapter(config).adapt(doc_model)

        logger.info(f"Writing files to {config.output_dir}")
        written = FileWriter(config.output_dir).write(files)

        logger.info("Documentation generated successfully")
        return GenerationResult(
            operations=doc_model.operation_count,
            sections=len(doc_model.sections),
            types=len(parsed.types),
            files=written,
            output_dir=Path(config.output_dir),
        )
