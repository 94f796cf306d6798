"""Centralized error handling and custom exceptions for topk-bench."""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

from .constants import ERRORS


class TopKBenchError(Exception):
    """Base exception for topk-bench errors."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.details = details or {}


class ConfigurationError(TopKBenchError):
    """Raised when settings are invalid or cannot be loaded."""
    pass


class SelectionError(TopKBenchError, ValueError):
    """Raised when a selection routine is asked for an impossible rank."""
    pass


class ResultMismatchError(TopKBenchError):
    """Raised when two selection methods return different top-K values."""
    pass


def format_error_message(error_key: str, **kwargs) -> str:
    """Format an error message from the constants."""
    try:
        template = ERRORS.get(error_key, "Unknown error")
        return template.format(**kwargs)
    except KeyError as e:
        return f"Error formatting message for '{error_key}': missing key {e}"


def validate_settings(settings) -> None:
    """Reject configurations the selection methods cannot honour."""
    if settings.n < 0:
        raise ConfigurationError(format_error_message("NEGATIVE_N", n=settings.n), {"n": settings.n})

    if settings.k < 0:
        raise ConfigurationError(format_error_message("NEGATIVE_K", k=settings.k), {"k": settings.k})

    if settings.k > settings.n:
        raise ConfigurationError(
            format_error_message("K_EXCEEDS_N", k=settings.k, n=settings.n),
            {"k": settings.k, "n": settings.n},
        )

    if settings.value_range_factor < 1:
        raise ConfigurationError(
            format_error_message("INVALID_RANGE_FACTOR", factor=settings.value_range_factor)
        )


def setup_logging(level: int = logging.INFO) -> None:
    """Set up centralized logging for topk-bench."""
    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    # Console handler (stderr, so stdout carries only the report)
    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)

    root_logger = logging.getLogger('topkbench')
    root_logger.setLevel(level)
    for handler in list(root_logger.handlers):
        root_logger.removeHandler(handler)
    root_logger.addHandler(console_handler)
