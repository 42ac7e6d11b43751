"""
Configuration loading utilities for querysense.
"""
import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any

import yaml

from querysense.exceptions import ConfigError

ENV_PREFIX = "QUERYSENSE_"


@dataclass(frozen=True)
class AppConfig:
    """Application configuration."""
    database_type: str = "postgresql"
    log_level: str = "INFO"
    log_file: Path | None = None
    console_prefix: str = "[REPORT]"
    sqs_queue_url: str | None = None
    sqs_region: str = "us-east-1"
    history_endpoint: str | None = None
    history_api_key: str | None = None


_OPTIONAL_FIELDS = frozenset(f.name for f in fields(AppConfig) if f.default is None)


class ConfigLoader:
    """Loads and validates configuration from YAML files and the environment."""

    @staticmethod
    def load_config(config_path: Path, base: AppConfig | None = None) -> AppConfig:
        """Load configuration from YAML file."""
        if not config_path.exists():
            raise FileNotFoundError(f"Config file not found: {config_path}")

        with open(config_path) as f:
            try:
                config_data = yaml.safe_load(f) or {}
            except yaml.YAMLError as exc:
                raise ConfigError(f"Invalid YAML in {config_path}: {exc}") from exc

        if not isinstance(config_data, dict):
            raise ConfigError(f"Config root must be a mapping: {config_path}")

        # Settings may sit under a top-level "querysense" key
        if "querysense" in config_data:
            config_data = config_data["querysense"] or {}
            if not isinstance(config_data, dict):
                raise ConfigError(f"'querysense' section must be a mapping: {config_path}")

        return ConfigLoader.apply(base or AppConfig(), config_data)

    @staticmethod
    def from_env(environ: Mapping[str, str] | None = None, base: AppConfig | None = None) -> AppConfig:
        """Override configuration from QUERYSENSE_* environment variables."""
        environ = os.environ if environ is None else environ
        overrides = {
            f.name: environ[ENV_PREFIX + f.name.upper()]
            for f in fields(AppConfig)
            if ENV_PREFIX + f.name.upper() in environ
        }
        return ConfigLoader.apply(base or AppConfig(), overrides)

    @staticmethod
    def apply(config: AppConfig, values: Mapping[str, Any]) -> AppConfig:
        """Return ``config`` with ``values`` validated and layered on top."""
        known = {f.name for f in fields(AppConfig)}
        unknown = sorted(set(values) - known)
        if unknown:
            raise ConfigError(f"Unknown config field(s): {', '.join(unknown)}")

        cleaned: dict[str, Any] = {}
        for name, value in values.items():
            if value is None and name in _OPTIONAL_FIELDS:
                cleaned[name] = None
            elif name == "log_file":
                cleaned[name] = Path(value)
            elif not isinstance(value, str):
                raise ConfigError(f"Config field '{name}' must be a string")
            elif name == "log_level":
                level = value.upper()
                if level not in logging.getLevelNamesMapping():
                    raise ConfigError(f"Unknown log level: {value!r}")
                cleaned[name] = level
            else:
                cleaned[name] = value
        return replace(config, **cleaned)
