"""
Environment Variable Handling.

Loads .env files with python-dotenv and exposes the secrets used when
fetching a schema over HTTP.

Call ensure_dotenv_loaded() early in application startup so that
.env values are visible to configuration substitution.
"""

import os
from pathlib import Path

from dotenv import load_dotenv
from pydantic import BaseModel, Field, SecretStr

# Track whether dotenv has been loaded
_dotenv_loaded: bool = False


def ensure_dotenv_loaded(env_file: str = ".env") -> bool:
    """Ensure .env file is loaded into os.environ.

    Args:
        env_file: Path to .env file (relative or absolute)

    Returns:
        True if a .env file was found and loaded, False otherwise
    """
    global _dotenv_loaded

    if _dotenv_loaded:
        return True

    env_paths = [
        Path(env_file),
        Path.cwd() / env_file,
    ]

    for env_path in env_paths:
        if env_path.exists():
            # Values already exported in the shell take precedence
            load_dotenv(env_path, override=False)
            _dotenv_loaded = True
            return True

    # No .env file found, that's okay - use defaults
    _dotenv_loaded = True
    return False


class EnvironmentConfig(BaseModel):
    """Environment variables configuration.

    Attributes:
        schema_auth_token: Bearer token sent when introspecting a schema URL
        schema_auth_header: Header name used for the token
        env_file: Path to .env file
    """

    schema_auth_token: SecretStr | None = Field(
        default=None,
        description="Token for schema introspection endpoints",
    )
    schema_auth_header: str = Field(
        default="Authorization",
        description="Header carrying the token",
    )
    env_file: str = Field(
        default=".env",
        description="Path to .env file",
    )

    @property
    def has_schema_auth(self) -> bool:
        """Check if a schema token is configured."""
        return self.schema_auth_token is not None

    def schema_headers(self) -> dict[str, str]:
        """Headers to send with schema introspection requests."""
        if self.schema_auth_token is None:
            return {}
        token = self.schema_auth_token.get_secret_value()
        if self.schema_auth_header.lower() == "authorization" and " " not in token:
            token = f"Bearer {token}"
        return {self.schema_auth_header: token}


# Environment variable names
ENV_VARS = {
    "schema_auth_token": "GQLDOCS_SCHEMA_TOKEN",
    "schema_auth_header": "GQLDOCS_SCHEMA_AUTH_HEADER",
}

_config: EnvironmentConfig | None = None


def load_environment(env_file: str = ".env") -> EnvironmentConfig:
    """Load environment configuration.

    Loads from .env file and caches the result.

    Args:
        env_file: Path to .env file

    Returns:
        EnvironmentConfig with loaded values
    """
    global _config

    ensure_dotenv_loaded(env_file)

    if _config is None or _config.env_file != env_file:
        values: dict[str, object] = {"env_file": env_file}
        for config_key, env_var in ENV_VARS.items():
            value = os.environ.get(env_var)
            if value:
                values[config_key] = SecretStr(value) if "token" in config_key else value
        _config = EnvironmentConfig(**values)

    return _config


def reset_environment() -> None:
    """Reset cached environment configuration.

    Useful for testing or reloading after .env changes.
    """
    global _config, _dotenv_loaded
    _config = None
    _dotenv_loaded = False
