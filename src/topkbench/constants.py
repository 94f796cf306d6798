"""Constants for topk-bench. Reference run: N = 1000 integers, top K = 10."""

from __future__ import annotations

DEFAULT_N = 1000
DEFAULT_K = 10

# Values are drawn uniformly from [0, DEFAULT_VALUE_RANGE_FACTOR * N)
DEFAULT_VALUE_RANGE_FACTOR = 10

# Environment variable names read by Settings.from_env
ENV_PREFIX = "TOPK_"

# Width of the "Method i (Label)" column in timing lines
METHOD_TITLE_WIDTH = 22

# Error message templates
ERRORS = {
    "K_EXCEEDS_N": "K must not exceed N (got K={k}, N={n})",
    "NEGATIVE_K": "K must be non-negative (got K={k})",
    "NEGATIVE_N": "N must be non-negative (got N={n})",
    "INVALID_RANGE_FACTOR": "value_range_factor must be at least 1 (got {factor})",
    "INVALID_K": "k must be between 0 and {n} for an input of {n} values (got k={k})",
    "INVALID_NTH": "nth must be between 0 and {last} (got nth={nth})",
    "INVALID_ENV_VALUE": "{name} must be {kind} (got {value!r})",
    "UNKNOWN_SETTING": "Unknown setting '{key}'. Known settings: {known}",
    "CONFIG_NOT_FOUND": "Configuration file not found: {path}",
    "CONFIG_INVALID": "Configuration file {path} is not a JSON object",
    "RESULT_MISMATCH": "{first} and {second} disagree: {first_values} != {second_values}",
}
