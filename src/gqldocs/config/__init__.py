"""
gqldocs - Configuration Management

This module provides configuration management including:
- YAML and .graphqlrc configuration loading and validation
- Environment variable handling
- Configuration defaults and overrides
"""

from gqldocs.config.environment import (
    EnvironmentConfig,
    ensure_dotenv_loaded,
    load_environment,
    reset_environment,
)
from gqldocs.config.loader import (
    CONFIG_ENV_VAR,
    DEFAULT_CONFIG_PATHS,
    ENV_VAR_OVERRIDES,
    GRAPHQLRC_EXTENSION,
    ConfigLoader,
    ConfigurationError,
    create_default_config,
    get_config,
    load_config,
    reset_config,
    save_config,
)
from gqldocs.config.models import (
    GeneratorConfig,
    LoggingConfig,
    LogLevel,
    TypeExpansionConfig,
)

__all__ = [
    # Config models
    "GeneratorConfig",
    "TypeExpansionConfig",
    "LoggingConfig",
    "LogLevel",
    # Loader
    "ConfigLoader",
    "ConfigurationError",
    "load_config",
    "get_config",
    "reset_config",
    "create_default_config",
    "save_config",
    "CONFIG_ENV_VAR",
    "DEFAULT_CONFIG_PATHS",
    "ENV_VAR_OVERRIDES",
    "GRAPHQLRC_EXTENSION",
    # Environment
    "EnvironmentConfig",
    "load_environment",
    "ensure_dotenv_loaded",
    "reset_environment",
]
