"""
gqldocs Command Line Interface.

This module provides the CLI entry point for the GraphQL documentation generator.
"""

import logging
import sys
from pathlib import Path

import click
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from gqldocs.config import (
    ConfigurationError,
    GeneratorConfig,
    LoggingConfig,
    create_default_config,
    load_config,
    save_config,
)
from gqldocs.errors import GqlDocsError
from gqldocs.version import __version__

console = Console()

PACKAGE_LOGGER = "gqldocs"


def setup_logging(logging_config: LoggingConfig, verbose: bool = False) -> None:
    """Configure handlers for gqldocs loggers.

    Console output stays at WARNING unless verbose is set, in which case
    it follows the configured level. The optional log file always does.

    Args:
        logging_config: Logging section of the configuration
        verbose: Show INFO/DEBUG progress on the console
    """
    configured = getattr(logging, logging_config.level.value)
    console_level = configured if verbose else max(configured, logging.WARNING)

    handlers: list[logging.Handler] = []
    stream_handler = logging.StreamHandler()
    stream_handler.setLevel(console_level)
    stream_handler.setFormatter(logging.Formatter("%(message)s"))
    handlers.append(stream_handler)

    if logging_config.file:
        Path(logging_config.file).parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(logging_config.file, encoding="utf-8")
        file_handler.setLevel(configured)
        file_handler.setFormatter(logging.Formatter(logging_config.format))
        handlers.append(file_handler)

    logging.basicConfig(level=logging.WARNING, handlers=handlers, force=True)
    logging.getLogger(PACKAGE_LOGGER).setLevel(configured)


def _apply_overrides(
    cfg: GeneratorConfig,
    schema: str | None,
    output: str | None,
    single_page: bool,
    max_depth: int | None,
) -> GeneratorConfig:
    """Apply command line options on top of the loaded configuration."""
    updates: dict = {}
    if schema:
        updates["schema_pointer"] = schema
    if output:
        updates["output_dir"] = output
    if single_page:
        updates["single_page"] = True
    if max_depth is not None:
        updates["type_expansion"] = cfg.type_expansion.model_copy(update={"max_depth": max_depth})
    return cfg.model_copy(update=updates) if updates else cfg


@click.group()
@click.version_option(version=__version__, prog_name="gqldocs")
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output")
@click.pass_context
def main(ctx: click.Context, verbose: bool) -> None:
    """gqldocs: GraphQL API Documentation Generator.

    Generate browsable operation reference pages from a GraphQL schema,
    with expanded argument and response types, examples and errors.
    """
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose


@main.command()
@click.option(
    "--schema",
    "-s",
    type=str,
    help="Schema file, directory, glob, introspection JSON or URL",
)
@click.option(
    "--output",
    "-o",
    type=click.Path(),
    help="Output directory for generated documentation",
)
@click.option(
    "--config",
    "-c",
    type=click.Path(exists=True),
    help="Path to configuration file",
)
@click.option(
    "--single-page",
    is_flag=True,
    help="Render every operation into a single page",
)
@click.option(
    "--max-depth",
    type=click.IntRange(1, 50),
    default=None,
    help="Maximum type expansion depth",
)
@click.pass_context
def generate(
    ctx: click.Context,
    schema: str | None,
    output: str | None,
    config: str | None,
    single_page: bool,
    max_depth: int | None,
) -> None:
    """Generate documentation for a GraphQL schema."""
    from gqldocs.generator import Generator

    verbose = ctx.obj.get("verbose", False)

    try:
        cfg = load_config(config)
        cfg = _apply_overrides(cfg, schema, output, single_page, max_depth)
        setup_logging(cfg.logging, verbose)

        console.print(
            Panel(
                f"[bold blue]gqldocs v{__version__}[/bold blue]\n"
                "GraphQL API Documentation Generator",
                title="gqldocs",
            )
        )

        config_table = Table(show_header=False, box=None)
        config_table.add_column("Setting", style="cyan")
        config_table.add_column("Value", style="green")
        config_table.add_row("Schema", cfg.schema_pointer)
        config_table.add_row("Output", cfg.output_dir)
        config_table.add_row("Max Depth", str(cfg.type_expansion.max_depth))
        if cfg.single_page:
            config_table.add_row("Mode", "[yellow]Single Page[/yellow]")
        if config:
            config_table.add_row("Config File", config)
        console.print(config_table)
        console.print()

        result = Generator(cfg).generate()

    except (GqlDocsError, FileNotFoundError) as e:
        console.print(f"[red]Error:[/red] {e}")
        if verbose:
            console.print_exception()
        sys.exit(1)

    console.print(Panel("[bold green]Documentation Complete[/bold green]"))
    summary_table = Table(title="Summary", show_header=False, box=None)
    summary_table.add_column("Metric", style="cyan")
    summary_table.add_column("Value", style="green")
    summary_table.add_row("Operations", str(result.operations))
    summary_table.add_row("Sections", str(result.sections))
    summary_table.add_row("Types", str(result.types))
    summary_table.add_row("Files Written", str(result.file_count))
    summary_table.add_row("Output Directory", str(result.output_dir))
    console.print(summary_table)


@main.command()
@click.option(
    "--config",
    "-c",
    type=click.Path(exists=True),
    help="Path to configuration file",
)
def config(config: str | None) -> None:
    """Display current configuration."""
    try:
        cfg = load_config(config)
    except FileNotFoundError as e:
        console.print(f"[red]Error:[/red] {e}")
        sys.exit(1)
    except ConfigurationError as e:
        console.print(f"[red]Configuration error:[/red] {e}")
        sys.exit(1)

    console.print(
        Panel(
            "[bold blue]gqldocs Configuration[/bold blue]",
            title="Configuration",
        )
    )

    console.print("[bold]Input[/bold]")
    console.print(f"  Schema: {cfg.schema_pointer}")
    console.print(f"  Examples: {cfg.examples_dir}")
    console.print(f"  Errors: {cfg.errors_dir}")
    if cfg.headers:
        console.print(f"  Headers: {', '.join(sorted(cfg.headers))}")
    console.print()

    console.print("[bold]Output[/bold]")
    console.print(f"  Directory: {cfg.output_dir}")
    console.print(f"  Framework: {cfg.framework}")
    console.print(f"  Single Page: {cfg.single_page}")
    console.print(f"  Sidebar: {cfg.generate_sidebar}")
    if cfg.sidebar_file:
        console.print(f"  Sidebar File: {cfg.sidebar_file}")
    console.print()

    console.print("[bold]Type Expansion[/bold]")
    console.print(f"  Max Depth: {cfg.type_expansion.max_depth}")
    console.print(f"  Default Levels: {cfg.type_expansion.default_levels}")
    console.print(f"  Show Circular References: {cfg.type_expansion.show_circular_references}")
    console.print()

    console.print("[bold]Filtering[/bold]")
    console.print(f"  Include Deprecated: {cfg.include_deprecated}")
    if cfg.skip_types:
        console.print(f"  Skip Types: {', '.join(cfg.skip_types)}")


@main.command()
@click.argument("path", type=click.Path(), default="gqldocs.yaml")
@click.option("--force", is_flag=True, help="Overwrite an existing file")
def init(path: str, force: bool) -> None:
    """Write a default configuration file.

    PATH defaults to gqldocs.yaml in the current directory.
    """
    target = Path(path)
    if target.exists() and not force:
        console.print(f"[yellow]{target} already exists.[/yellow] Use --force to overwrite.")
        sys.exit(1)

    save_config(create_default_config(), target)
    console.print(f"[green]Created[/green] {target}")


if __name__ == "__main__":
    main()
