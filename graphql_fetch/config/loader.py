"""
Configuration loader for graphql_fetch.

This module loads client and logging settings from a JSON or YAML file and
from environment variables. Environment variables win over the file.
"""

import json
import os
from pathlib import Path
from typing import Any, Dict, Optional, Tuple, Union

import yaml

from .models import FetchConfig, LoggingConfig


class ConfigLoader:
    """Configuration loader with support for files and the environment."""

    def __init__(self, env_prefix: str = "GRAPHQL_FETCH_") -> None:
        """Initialize configuration loader."""
        self.config_paths = [
            Path("graphql_fetch.yaml"),
            Path("graphql_fetch.yml"),
            Path("graphql_fetch.json"),
            Path.home() / ".graphql_fetch" / "config.yaml",
            Path.home() / ".graphql_fetch" / "config.json",
        ]

        self.env_prefix = env_prefix

    def load(
        self, config_file: Optional[Union[str, Path]] = None
    ) -> Tuple[FetchConfig, LoggingConfig]:
        """
        Load configuration from all available sources.

        The file may hold a ``logging`` section; every other key configures
        the client.

        Args:
            config_file: Specific config file to load

        Returns:
            Client configuration and logging configuration
        """
        config_data: Dict[str, Any] = self._load_from_file(config_file) or {}

        env_config = self._load_from_environment()
        if env_config:
            config_data = self._deep_merge(config_data, env_config)

        logging_data = config_data.pop("logging", None) or {}
        return FetchConfig(**config_data), LoggingConfig(**logging_data)

    def _load_from_file(
        self, config_file: Optional[Union[str, Path]] = None
    ) -> Optional[Dict[str, Any]]:
        """Load configuration from file."""
        if config_file:
            config_path = Path(config_file)
            if not config_path.exists():
                raise FileNotFoundError(f"Config file not found: {config_path}")
            return self._parse_config_file(config_path)

        for config_path in self.config_paths:
            if config_path.exists():
                return self._parse_config_file(config_path)

        return None

    def _parse_config_file(self, config_path: Path) -> Dict[str, Any]:
        """Parse configuration file based on extension."""
        suffix = config_path.suffix.lower()
        if suffix not in (".yaml", ".yml", ".json"):
            raise ValueError(f"Unsupported config file format: {config_path.suffix}")

        try:
            with open(config_path, "r", encoding="utf-8") as f:
                if suffix == ".json":
                    return json.load(f) or {}
                return yaml.safe_load(f) or {}
        except (OSError, json.JSONDecodeError, yaml.YAMLError) as e:
            raise ValueError(f"Failed to parse config file {config_path}: {e}") from e

    def _load_from_environment(self) -> Dict[str, Any]:
        """Load configuration from environment variables."""
        config: Dict[str, Any] = {}

        env_mappings = {
            f"{self.env_prefix}URI": ("uri",),
            f"{self.env_prefix}BASE_URL": ("base_url",),
            f"{self.env_prefix}TIMEOUT": ("timeout",),
            f"{self.env_prefix}USER_AGENT": ("user_agent",),
            f"{self.env_prefix}LOG_LEVEL": ("logging", "level"),
            f"{self.env_prefix}LOG_STRUCTURED": ("logging", "enable_structured"),
        }

        for env_var, config_path in env_mappings.items():
            value = os.getenv(env_var)
            if value is not None:
                current = config
                for key in config_path[:-1]:
                    current = current.setdefault(key, {})
                current[config_path[-1]] = self._convert_env_value(value)

        return config

    def _convert_env_value(self, value: str) -> Any:
        """Convert environment variable string to appropriate type."""
        lower = value.lower()
        if lower in ("true", "yes", "on"):
            return True
        if lower in ("false", "no", "off"):
            return False

        try:
            if "." in value:
                return float(value)
            return int(value)
        except ValueError:
            pass

        return value

    def _deep_merge(
        self, base: Dict[str, Any], override: Dict[str, Any]
    ) -> Dict[str, Any]:
        """Deep merge two dictionaries."""
        result = base.copy()

        for key, value in override.items():
            if (
                key in result
                and isinstance(result[key], dict)
                and isinstance(value, dict)
            ):
                result[key] = self._deep_merge(result[key], value)
            else:
                result[key] = value

        return result


def load_config(
    config_file: Optional[Union[str, Path]] = None,
) -> Tuple[FetchConfig, LoggingConfig]:
    """Load configuration with the default loader."""
    return ConfigLoader().load(config_file)
