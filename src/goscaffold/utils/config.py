"""
Configuration System

Optional YAML configuration for goscaffold. Features:
- Single-file YAML loading with validation
- Environment variable resolution (${VAR}, ${VAR:-default}, $VAR)
- Dot-path access with defaults
- Cached default instance, resettable for tests

No configuration file is required. Without one every lookup returns its
default, so the CLI behaves exactly as documented by its options.
"""

import logging
import os
import re
from pathlib import Path
from typing import Any

import yaml

from goscaffold.errors import ConfigurationError

# Use standard logging (not get_logger) to avoid circular imports with logger.py
logger = logging.getLogger("CONFIG")

CONFIG_ENV_VAR = "GOSCAFFOLD_CONFIG"
DEFAULT_CONFIG_NAME = "goscaffold.yml"


class ConfigBuilder:
    """
    Loads one YAML configuration file and resolves environment variables.

    Attributes:
        config_path: Path of the loaded file, or None for an empty configuration
        raw_config: Configuration with environment variables resolved
    """

    def __init__(self, config_path: str | Path | None = None):
        """
        Initialize configuration builder.

        Args:
            config_path: Path to a YAML file. If None, the configuration is empty.

        Raises:
            ConfigurationError: If the file cannot be read or is not a mapping.
        """
        self.config_path = Path(config_path) if config_path is not None else None
        self.raw_config = self._load_config()

    def _load_yaml_file(self, file_path: Path) -> dict[str, Any]:
        """Load and validate a YAML configuration file."""
        try:
            with open(file_path) as f:
                config = yaml.safe_load(f)
        except FileNotFoundError as e:
            raise ConfigurationError(f"Configuration file not found: {file_path}") from e
        except yaml.YAMLError as e:
            raise ConfigurationError(f"Error parsing YAML configuration {file_path}: {e}") from e

        if config is None:
            logger.warning(f"Configuration file is empty: {file_path}")
            return {}

        if not isinstance(config, dict):
            raise ConfigurationError(
                f"Configuration file must contain a dictionary/mapping: {file_path}"
            )

        logger.debug(f"Loaded configuration from {file_path}")
        return config

    def _resolve_env_vars(self, data: Any) -> Any:
        """Recursively resolve environment variables in configuration data.

        Supports both simple and bash-style default value syntax:
        - ${VAR_NAME} - simple substitution
        - ${VAR_NAME:-default_value} - with default value
        - $VAR_NAME - simple substitution without braces

        Unset variables without a default are left as written.
        """
        if isinstance(data, dict):
            return {key: self._resolve_env_vars(value) for key, value in data.items()}
        elif isinstance(data, list):
            return [self._resolve_env_vars(item) for item in data]
        elif isinstance(data, str):

            def replace_env_var(match):
                if match.group(1):
                    var_name = match.group(1)
                    default_value = match.group(2)
                else:
                    var_name = match.group(3)
                    default_value = None

                env_value = os.environ.get(var_name)
                if env_value is None:
                    if default_value is not None:
                        return default_value
                    logger.debug(f"Environment variable '{var_name}' not found, keeping original value")
                    return match.group(0)
                return env_value

            pattern = r"\$\{([^}:]+)(?::-(.*?))?\}|\$([A-Za-z_][A-Za-z0-9_]*)"
            return re.sub(pattern, replace_env_var, data)
        else:
            return data

    def _load_config(self) -> dict[str, Any]:
        """Load configuration from the file, if any, with environment variables resolved."""
        if self.config_path is None:
            return {}

        return self._resolve_env_vars(self._load_yaml_file(self.config_path))

    def get(self, path: str, default: Any = None) -> Any:
        """Get configuration value using dot notation path."""
        keys = path.split(".")
        value = self.raw_config

        try:
            for key in keys:
                value = value[key]
            return value
        except (KeyError, TypeError):
            return default


# =============================================================================
# GLOBAL CONFIGURATION
# =============================================================================

_default_config: ConfigBuilder | None = None


def _discover_config_path() -> Path | None:
    """Find the configuration file to use when none was given explicitly.

    Resolution priority:
    1. GOSCAFFOLD_CONFIG environment variable
    2. goscaffold.yml in the current working directory
    3. None (empty configuration)
    """
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        return Path(env_path).expanduser()

    cwd_config = Path.cwd() / DEFAULT_CONFIG_NAME
    if cwd_config.exists():
        return cwd_config

    return None


def get_config_builder(
    config_path: str | Path | None = None, set_as_default: bool = False
) -> ConfigBuilder:
    """Get a configuration instance.

    Args:
        config_path: Explicit configuration file. If None, the cached default
            instance is returned (discovered on first use).
        set_as_default: Make the explicit configuration the default for later
            calls without a path.

    Returns:
        ConfigBuilder for the requested configuration

    Examples:
        >>> config = get_config_builder()
        >>> config = get_config_builder("team.yml", set_as_default=True)
    """
    global _default_config

    if config_path is None:
        if _default_config is None:
            _default_config = ConfigBuilder(_discover_config_path())
        return _default_config

    builder = ConfigBuilder(Path(config_path).expanduser())
    if set_as_default:
        _default_config = builder
        logger.debug(f"Set explicit config as default: {builder.config_path}")
    return builder


def get_config_value(path: str, default: Any = None, config_path: str | Path | None = None) -> Any:
    """
    Get a specific configuration value by dot-separated path.

    Args:
        path: Dot-separated configuration path (e.g., "create.port")
        default: Default value to return if path is not found
        config_path: Optional explicit path to configuration file

    Returns:
        The configuration value at the specified path, or default if not found

    Raises:
        ValueError: If path is empty or None

    Examples:
        >>> port = get_config_value("create.port", 8080)
        >>> level = get_config_value("logging.level", "WARNING")
    """
    if not path:
        raise ValueError("Configuration path cannot be empty or None")

    return get_config_builder(config_path).get(path, default)


def reset_config() -> None:
    """Drop the cached default configuration."""
    global _default_config
    _default_config = None
