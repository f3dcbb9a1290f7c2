"""
gqldocs: GraphQL API Documentation Generator.

Turns a GraphQL schema into browsable reference pages. Each operation's
argument and return types are expanded into finite trees (cycles become
reference markers, deep nesting is truncated), example and error
metadata are attached, and operations are grouped into ordered sections
driven by @docGroup and @docPriority directives.

Example:
    from gqldocs import Generator, load_config

    result = Generator(load_config("gqldocs.yaml")).generate()
"""

from gqldocs.config import GeneratorConfig, load_config
from gqldocs.generator import GenerationResult, Generator
from gqldocs.version import __version__

__all__ = [
    "__version__",
    "Generator",
    "GenerationResult",
    "GeneratorConfig",
    "load_config",
]
