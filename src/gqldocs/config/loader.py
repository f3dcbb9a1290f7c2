"""
Configuration Loader.

Loads and validates configuration from YAML files with environment
variable substitution. A graphql-config file (.graphqlrc) carrying a
"graphql-docs" extension is also recognised.
"""

import os
import re
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError
from pydantic.alias_generators import to_snake

from gqldocs.config.environment import load_environment
from gqldocs.config.models import GeneratorConfig
from gqldocs.errors import GqlDocsError

# Default configuration file locations
DEFAULT_CONFIG_PATHS = [
    "gqldocs.yaml",
    "gqldocs.yml",
    ".gqldocs.yaml",
    ".gqldocs.yml",
]

# graphql-config files searched after the dedicated config files
GRAPHQLRC_PATHS = [
    ".graphqlrc.yaml",
    ".graphqlrc.yml",
    ".graphqlrc",
]

# Extension key inside .graphqlrc
GRAPHQLRC_EXTENSION = "graphql-docs"

# Environment variable for config path
CONFIG_ENV_VAR = "GQLDOCS_CONFIG"

# Environment variable overrides for configuration settings
# Maps env var name to config path (dot-separated)
ENV_VAR_OVERRIDES = {
    "GQLDOCS_SCHEMA": "schema",
    "GQLDOCS_OUTPUT_DIR": "output_dir",
    "GQLDOCS_METADATA_DIR": "metadata_dir",
    "GQLDOCS_SINGLE_PAGE": "single_page",
    "GQLDOCS_MAX_DEPTH": "type_expansion.max_depth",
    "GQLDOCS_DEFAULT_LEVELS": "type_expansion.default_levels",
    "GQLDOCS_LOG_LEVEL": "logging.level",
    "GQLDOCS_LOG_FILE": "logging.file",
}

# Sections whose keys are normalised to snake_case (headers are left alone)
_NESTED_SECTIONS = ("type_expansion", "logging")


class ConfigurationError(GqlDocsError):
    """Raised when configuration is invalid."""

    def __init__(
        self,
        message: str,
        errors: list[dict] | None = None,
        path: Path | None = None,
    ) -> None:
        """Initialize configuration error.

        Args:
            message: Error message
            errors: List of validation errors (from Pydantic)
            path: Path to the config file that caused the error
        """
        super().__init__(message)
        self.errors = errors or []
        self.path = path

    def __str__(self) -> str:
        """Message, source file and up to five validation errors."""
        text = super().__str__()
        if self.path:
            text += f" (file: {self.path})"
        shown = self.errors[:5]
        lines = [
            f"  - {'.'.join(str(part) for part in err.get('loc', ()))}: {err.get('msg', 'Unknown error')}"
            for err in shown
        ]
        hidden = len(self.errors) - len(shown)
        if hidden > 0:
            lines.append(f"  ... and {hidden} more errors")
        return "\n".join([text, *lines])


class ConfigLoader:
    """Loads configuration from YAML files.

    Supports:
    - YAML configuration files
    - graphql-config files with a "graphql-docs" extension
    - Environment variable substitution (${VAR} and ${VAR:-default} syntax)
    - GQLDOCS_* environment overrides
    - Validation via Pydantic

    Usage:
        # Load from specific file
        loader = ConfigLoader("gqldocs.yaml")
        config = loader.load()

        # Load from environment variable or default locations
        loader = ConfigLoader()
        config = loader.load_from_env()
    """

    # Matches: ${VAR_NAME} or ${VAR_NAME:-default_value} or ${VAR_NAME:default_value}
    ENV_PATTERN = re.compile(r"\$\{(\w+)(?::-?([^}]*))?\}")

    def __init__(
        self,
        config_path: str | Path | None = None,
        env_file: str = ".env",
        root_dir: str | Path | None = None,
    ) -> None:
        """Initialize the config loader.

        Args:
            config_path: Path to YAML config file (optional).
                If not provided, use load_from_env() to auto-discover.
            env_file: Path to .env file for environment loading
            root_dir: Directory searched during discovery (default: cwd)
        """
        self._config_path = Path(config_path) if config_path else None
        self._env_file = env_file
        self._root_dir = Path(root_dir) if root_dir else None
        self._raw_config: dict[str, Any] | None = None
        self._config: GeneratorConfig | None = None
        self._loaded_from_path: Path | None = None

    @property
    def config_path(self) -> Path | None:
        """Get config file path."""
        return self._config_path

    @property
    def loaded_from_path(self) -> Path | None:
        """Get the path the config was actually loaded from."""
        return self._loaded_from_path

    @property
    def config(self) -> GeneratorConfig | None:
        """Get loaded configuration, or None if not loaded yet."""
        return self._config

    def load(self, path: str | Path | None = None) -> GeneratorConfig:
        """Load and validate configuration from a specific path.

        Args:
            path: Optional path to config file. If neither this nor the
                constructor path is set, defaults are used.

        Returns:
            Validated GeneratorConfig

        Raises:
            ConfigurationError: If config is invalid
            FileNotFoundError: If config file not found
        """
        if path is not None:
            self._config_path = Path(path)

        load_environment(self._env_file)

        if self._config_path:
            self._raw_config = self._load_yaml(self._config_path)
            if self._is_graphqlrc(self._config_path):
                self._raw_config = self._extract_graphqlrc(self._raw_config)
            self._loaded_from_path = self._config_path
        else:
            self._raw_config = {}
            self._loaded_from_path = None

        return self._build(self._raw_config)

    def load_from_env(self) -> GeneratorConfig:
        """Load configuration from environment variable or default locations.

        Search order:
        1. GQLDOCS_CONFIG environment variable (if set)
        2. gqldocs.yaml, gqldocs.yml, .gqldocs.yaml, .gqldocs.yml
        3. .graphqlrc.yaml, .graphqlrc.yml, .graphqlrc with a
           "graphql-docs" extension
        4. Built-in defaults

        Returns:
            Validated GeneratorConfig

        Raises:
            ConfigurationError: If config is invalid
            FileNotFoundError: If GQLDOCS_CONFIG points to a missing file
        """
        load_environment(self._env_file)
        root = self._root_dir or Path.cwd()

        env_config_path = os.environ.get(CONFIG_ENV_VAR)
        if env_config_path:
            config_path = Path(env_config_path)
            if not config_path.exists():
                raise FileNotFoundError(
                    f"Config file specified by {CONFIG_ENV_VAR} not found: {env_config_path}"
                )
            return self.load(config_path)

        for default_path in DEFAULT_CONFIG_PATHS:
            path = root / default_path
            if path.exists():
                return self.load(path)

        for rc_path in GRAPHQLRC_PATHS:
            path = root / rc_path
            if path.exists():
                raw = self._load_yaml(path)
                if GRAPHQLRC_EXTENSION in self._graphqlrc_project(raw).get("extensions", {}):
                    return self.load(path)

        # Nothing found: every setting has a default
        self._config_path = None
        return self.load()

    def _build(self, raw: dict[str, Any]) -> GeneratorConfig:
        processed = self._substitute_env_vars(raw)
        processed = self._normalize_keys(processed)
        processed = self._apply_env_overrides(processed)
        processed = self._clean_none_values(processed)

        try:
            self._config = GeneratorConfig(**processed)
        except ValidationError as e:
            raise ConfigurationError(
                f"Configuration validation failed: {e.error_count()} errors",
                errors=e.errors(),
                path=self._loaded_from_path,
            ) from e

        return self._config

    @staticmethod
    def _is_graphqlrc(path: Path) -> bool:
        return path.name.startswith(".graphqlrc")

    @staticmethod
    def _graphqlrc_project(raw: dict[str, Any]) -> dict[str, Any]:
        projects = raw.get("projects")
        if isinstance(projects, dict):
            return projects.get("default") or {}
        return raw

    def _extract_graphqlrc(self, raw: dict[str, Any]) -> dict[str, Any]:
        """Pull the graphql-docs extension out of a graphql-config document.

        The project's top-level "schema" is used when the extension does
        not name one.
        """
        project = self._graphqlrc_project(raw)
        extension = dict((project.get("extensions") or {}).get(GRAPHQLRC_EXTENSION) or {})
        schema = project.get("schema")
        if "schema" not in extension and isinstance(schema, str):
            extension["schema"] = schema
        return extension

    def _load_yaml(self, path: Path) -> dict[str, Any]:
        """Load YAML configuration file.

        Raises:
            FileNotFoundError: If file doesn't exist
            ConfigurationError: If YAML is invalid
        """
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")

        try:
            with open(path, encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ConfigurationError(f"Invalid YAML: {e}", path=path) from e

        if not isinstance(data, dict):
            raise ConfigurationError("Configuration root must be a mapping", path=path)
        return data

    def _normalize_keys(self, data: dict[str, Any]) -> dict[str, Any]:
        """Convert camelCase keys to snake_case for top-level and nested sections."""
        normalized: dict[str, Any] = {}
        for key, value in data.items():
            snake = to_snake(key) if isinstance(key, str) else key
            if snake in _NESTED_SECTIONS and isinstance(value, dict):
                value = {to_snake(k): v for k, v in value.items()}
            normalized[snake] = value
        return normalized

    def _substitute_env_vars(self, data: Any) -> Any:
        """Recursively substitute environment variables in config.

        Supports syntax:
        - ${VAR_NAME} - substitute with env var, left as-is if not set
        - ${VAR_NAME:-default} - substitute with default if not set
        """
        if isinstance(data, dict):
            return {k: self._substitute_env_vars(v) for k, v in data.items()}
        elif isinstance(data, list):
            return [self._substitute_env_vars(item) for item in data]
        elif isinstance(data, str):
            return self._substitute_string(data)
        else:
            return data

    def _clean_none_values(self, data: Any) -> Any:
        """Drop None values recursively.

        Empty YAML sections load as None; omitting them lets the models
        apply their defaults.
        """
        if isinstance(data, dict):
            return {
                key: self._clean_none_values(value)
                for key, value in data.items()
                if value is not None
            }
        if isinstance(data, list):
            return [self._clean_none_values(item) for item in data]
        return data

    def _substitute_string(self, value: str) -> Any:
        """Substitute environment variables in a string.

        A string that is entirely one ${VAR} reference is type-coerced;
        embedded references are substituted as text.
        """
        full_match = self.ENV_PATTERN.fullmatch(value)
        if full_match:
            var_name = full_match.group(1)
            default = full_match.group(2)

            env_value = os.environ.get(var_name)
            resolved = env_value if env_value is not None else default

            if resolved is not None:
                return self._coerce_type(resolved)
            return value

        def replace(match: re.Match[str]) -> str:
            env_value = os.environ.get(match.group(1))
            if env_value is not None:
                return env_value
            if match.group(2) is not None:
                return match.group(2)
            return match.group(0)

        return self.ENV_PATTERN.sub(replace, value)

    def _coerce_type(self, value: str) -> Any:
        """Coerce string value to bool, int, float, None or str."""
        if value == "":
            return None

        lower_value = value.lower()
        if lower_value in ("true", "yes", "on"):
            return True
        if lower_value in ("false", "no", "off"):
            return False

        try:
            if "." not in value and "e" not in lower_value:
                return int(value)
            return float(value)
        except ValueError:
            pass

        return value

    def _apply_env_overrides(self, config_dict: dict[str, Any]) -> dict[str, Any]:
        """Apply GQLDOCS_* environment overrides; they win over file values."""
        for env_var, config_path in ENV_VAR_OVERRIDES.items():
            env_value = os.environ.get(env_var)
            if env_value is not None:
                self._set_nested_value(config_dict, config_path, self._coerce_type(env_value))

        return config_dict

    def _set_nested_value(
        self,
        config_dict: dict[str, Any],
        path: str,
        value: Any,
    ) -> None:
        """Set a value addressed by a dotted path, creating sections as needed."""
        *sections, key = path.split(".")
        target = config_dict
        for section in sections:
            child = target.get(section)
            if not isinstance(child, dict):
                child = target[section] = {}
            target = child
        target[key] = value

    def save(self, path: str | Path | None = None) -> None:
        """Save current configuration to YAML file.

        Args:
            path: Path to save to (defaults to original config_path)

        Raises:
            ValueError: If no config loaded or no path specified
        """
        if self._config is None:
            raise ValueError("No configuration loaded")

        save_path = Path(path) if path else self._config_path
        if save_path is None:
            raise ValueError("No path specified for saving")

        save_config(self._config, save_path)


# Global configuration for the current process
_global_config: GeneratorConfig | None = None


def load_config(
    config_path: str | Path | None = None,
    env_file: str = ".env",
) -> GeneratorConfig:
    """Load configuration from a file, or discover it when no path is given.

    Args:
        config_path: Path to a YAML config file
        env_file: Path to .env file

    Returns:
        Validated GeneratorConfig

    Raises:
        ConfigurationError: If config validation fails
        FileNotFoundError: If config file not found
    """
    global _global_config

    loader = ConfigLoader(config_path, env_file)
    _global_config = loader.load() if config_path else loader.load_from_env()
    return _global_config


def get_config() -> GeneratorConfig:
    """Get the global configuration.

    Raises:
        RuntimeError: If configuration not loaded
    """
    if _global_config is None:
        raise RuntimeError("Configuration not loaded. Call load_config() first.")
    return _global_config


def reset_config() -> None:
    """Reset global configuration. Useful for testing."""
    global _global_config
    _global_config = None


def create_default_config(**overrides: Any) -> GeneratorConfig:
    """Create a configuration with defaults.

    Args:
        **overrides: Field values to set (field names or aliases)

    Returns:
        GeneratorConfig with defaults
    """
    return GeneratorConfig(**overrides)


def save_config(config: GeneratorConfig, path: str | Path) -> None:
    """Write a configuration as YAML.

    Args:
        config: Configuration to write
        path: Target file
    """
    with open(path, "w", encoding="utf-8") as f:
        yaml.safe_dump(
            config.to_yaml_dict(),
            f,
            default_flow_style=False,
            sort_keys=False,
        )
