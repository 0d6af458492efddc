"""Configuration loading utilities with JSON and YAML support."""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any

import yaml

from hueprint.core.config.models import AppConfig
from hueprint.core.utils.logging import configure_logging as _configure_root_logging

logger = logging.getLogger(__name__)

_app_config_cache: AppConfig | None = None


def detect_format(file_path: Path | str) -> str:
    """Detect config file format from extension.

    Args:
        file_path: Path to config file

    Returns:
        Format string: "json" or "yaml"

    Raises:
        ValueError: If format cannot be determined

    Example:
        >>> detect_format("hueprint.json")
        'json'
        >>> detect_format("hueprint.yml")
        'yaml'
    """
    suffix = Path(file_path).suffix.lower()

    if suffix == ".json":
        return "json"
    elif suffix in [".yaml", ".yml"]:
        return "yaml"
    else:
        raise ValueError(f"Unsupported config format: {suffix}")


def load_config(path: str | Path) -> dict[str, Any]:
    """Load and return raw configuration dictionary.

    Args:
        path: Path to config file (.json, .yaml, or .yml)

    Returns:
        Raw configuration dictionary

    Raises:
        FileNotFoundError: If config file does not exist
        ValueError: If format is not supported or file content is invalid
    """
    path = Path(path)

    if not path.exists():
        raise FileNotFoundError(f"Config file does not exist: {path}")

    fmt = detect_format(path)

    if fmt == "json":
        try:
            with path.open("r", encoding="utf-8") as f:
                content = json.load(f)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON in {path}: {e}") from e
    else:
        try:
            with path.open("r", encoding="utf-8") as f:
                content = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid YAML in {path}: {e}") from e

    # safe_load returns None for empty files
    if content is None:
        return {}
    if not isinstance(content, dict):
        raise ValueError(f"Config root must be a mapping in {path}")
    return content


def load_app_config(path: str | Path | None = None) -> AppConfig:
    """Load and validate application configuration.

    Environment variables fill API keys left unset in the file.

    Args:
        path: Path to app config file (.json, .yaml, or .yml).
              Defaults to hueprint.yaml; a missing file yields defaults.

    Returns:
        Validated AppConfig instance

    Raises:
        ValidationError: If config is invalid
    """
    global _app_config_cache

    default_path = AppConfig.default_path()
    use_default = path is None or Path(path) == default_path
    if use_default and _app_config_cache is not None:
        return _app_config_cache

    config_path = default_path if path is None else Path(path)
    if config_path.exists():
        config = AppConfig.model_validate(load_config(config_path))
    else:
        config = AppConfig()

    config = _load_env_vars_into_config(config)

    if use_default:
        _app_config_cache = config
    return config


def reset_app_config_cache() -> None:
    """Forget the cached default config."""
    global _app_config_cache
    _app_config_cache = None


def configure_logging(config: AppConfig | None = None) -> None:
    """Configure Python logging from app config.

    Args:
        config: AppConfig instance (loads default if None)
    """
    if config is None:
        config = load_app_config()

    _configure_root_logging(
        level=config.logging.level,
        format_string=config.logging.format,
        filename=config.logging.filename,
        structured=config.logging.structured,
    )


def _load_env_vars_into_config(config: AppConfig) -> AppConfig:
    """Fill unset API keys from the environment.

    Args:
        config: AppConfig instance

    Returns:
        AppConfig with environment values applied
    """
    if config.inference.api_key is not None:
        return config

    api_key = os.getenv("OPENAI_API_KEY")
    if not api_key:
        return config

    logger.debug("Loaded OPENAI_API_KEY from environment")
    inference = config.inference.model_copy(update={"api_key": api_key})
    return config.model_copy(update={"inference": inference})
