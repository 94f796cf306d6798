"""Shared utilities for CLI commands."""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

from dotenv import load_dotenv

from ..config import Settings
from ..config_loader import load_settings
from ..error_handling import ConfigurationError, setup_logging


def setup_settings(config_file: Optional[str] = None, overrides: Optional[Dict[str, Any]] = None) -> Settings:
    """Setup and validate settings for CLI commands."""
    load_dotenv()
    settings = load_settings(config_file=config_file, overrides=overrides)
    settings.ensure()
    return settings


def configure_logging(log_level: str) -> None:
    level = logging.getLevelName(log_level.upper())
    if not isinstance(level, int):
        raise ConfigurationError(f"Unknown log level: {log_level}")
    setup_logging(level)
