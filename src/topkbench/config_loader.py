"""Configuration loader for topk-bench with CLI override support."""

from __future__ import annotations

import json
import logging
from dataclasses import fields, replace
from pathlib import Path
from typing import Any, Dict, Optional

from .config import Settings
from .error_handling import ConfigurationError, format_error_message

logger = logging.getLogger(__name__)

_SETTING_NAMES = tuple(f.name for f in fields(Settings))


def load_settings(
    config_file: Optional[str] = None,
    overrides: Optional[Dict[str, Any]] = None,
) -> Settings:
    """Load settings from the environment, a config file and CLI overrides.

    Args:
        config_file: Optional path to a JSON object whose keys are Settings fields
        overrides: Values given explicitly on the command line; None entries are ignored

    Returns:
        Settings instance (not yet validated, call ``ensure()``)
    """
    settings = Settings.from_env()

    if config_file:
        settings = _apply_overrides(settings, _read_config_file(Path(config_file)))
        logger.debug("Loaded settings from %s", config_file)

    if overrides:
        given = {key: value for key, value in overrides.items() if value is not None}
        settings = _apply_overrides(settings, given)

    return settings


def _read_config_file(config_path: Path) -> Dict[str, Any]:
    if not config_path.exists():
        raise ConfigurationError(format_error_message("CONFIG_NOT_FOUND", path=config_path))

    try:
        with open(config_path, 'r', encoding='utf-8') as f:
            config_data = json.load(f)
    except json.JSONDecodeError as e:
        raise ConfigurationError(f"Could not parse {config_path}: {e}") from e

    if not isinstance(config_data, dict):
        raise ConfigurationError(format_error_message("CONFIG_INVALID", path=config_path))
    return config_data


def _apply_overrides(settings: Settings, overrides: Dict[str, Any]) -> Settings:
    """Return a copy of settings with the given keys replaced."""
    for key, value in overrides.items():
        if key not in _SETTING_NAMES:
            raise ConfigurationError(
                format_error_message("UNKNOWN_SETTING", key=key, known=", ".join(_SETTING_NAMES))
            )
        if key == "verify":
            if not isinstance(value, bool):
                raise ConfigurationError(
                    format_error_message("INVALID_ENV_VALUE", name=key, kind="a boolean", value=value)
                )
        elif key == "seed" and value is None:
            continue
        elif isinstance(value, bool) or not isinstance(value, int):
            raise ConfigurationError(
                format_error_message("INVALID_ENV_VALUE", name=key, kind="an integer", value=value)
            )
    return replace(settings, **overrides)
