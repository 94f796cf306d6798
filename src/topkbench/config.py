from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional

from .constants import DEFAULT_K, DEFAULT_N, DEFAULT_VALUE_RANGE_FACTOR, ENV_PREFIX
from .error_handling import ConfigurationError, format_error_message, validate_settings


def _env_int(name: str, default: Optional[int]) -> Optional[int]:
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        raise ConfigurationError(
            format_error_message("INVALID_ENV_VALUE", name=name, kind="an integer", value=raw)
        ) from None


def _env_bool(name: str, default: bool) -> bool:
    raw = os.environ.get(name, "").strip().lower()
    if not raw:
        return default
    if raw in ("1", "true", "yes", "on"):
        return True
    if raw in ("0", "false", "no", "off"):
        return False
    raise ConfigurationError(
        format_error_message("INVALID_ENV_VALUE", name=name, kind="a boolean", value=raw)
    )


@dataclass
class Settings:
    n: int = DEFAULT_N
    k: int = DEFAULT_K
    value_range_factor: int = DEFAULT_VALUE_RANGE_FACTOR
    seed: Optional[int] = None  # None draws a fresh input every run
    verify: bool = False

    @staticmethod
    def from_env() -> "Settings":
        return Settings(
            n=_env_int(f"{ENV_PREFIX}N", DEFAULT_N),
            k=_env_int(f"{ENV_PREFIX}K", DEFAULT_K),
            value_range_factor=_env_int(f"{ENV_PREFIX}VALUE_RANGE_FACTOR", DEFAULT_VALUE_RANGE_FACTOR),
            seed=_env_int(f"{ENV_PREFIX}SEED", None),
            verify=_env_bool(f"{ENV_PREFIX}VERIFY", False),
        )

    @property
    def value_upper_bound(self) -> int:
        """Exclusive upper bound of generated values."""
        return self.value_range_factor * self.n

    def ensure(self) -> None:
        validate_settings(self)
