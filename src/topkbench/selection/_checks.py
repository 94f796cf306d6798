from __future__ import annotations

from typing import Sequence

from ..error_handling import SelectionError, format_error_message


def check_k(numbers: Sequence[int], k: int) -> None:
    n = len(numbers)
    if k < 0 or k > n:
        raise SelectionError(format_error_message("INVALID_K", k=k, n=n), {"k": k, "n": n})
