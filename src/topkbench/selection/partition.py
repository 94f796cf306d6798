"""Top-K by partition selection (quickselect)."""

from __future__ import annotations

import random
from typing import Any, List, MutableSequence, Optional, Sequence

from ..error_handling import SelectionError, format_error_message
from ._checks import check_k


def select_nth(values: MutableSequence[int], nth: int, rng: Optional[Any] = None) -> int:
    """
    Partition ``values`` in place around its ``nth`` order statistic.

    Afterwards ``values[nth]`` holds the value a full ascending sort would put
    there, everything before it is <= and everything after it is >=. Each round
    splits the active window three ways (below, equal to, above a random pivot)
    and keeps only the side that contains ``nth``, so long runs of equal values
    finish in one round instead of degrading to quadratic time.

    Args:
        values: Sequence to partition; mutated in place
        nth: Zero-based rank to select
        rng: Anything with ``randint(a, b)``; defaults to the ``random`` module

    Returns:
        The selected value
    """
    size = len(values)
    if nth < 0 or nth >= size:
        raise SelectionError(format_error_message("INVALID_NTH", nth=nth, last=size - 1))

    rng = rng or random
    lo, hi = 0, size - 1
    while lo < hi:
        pivot = values[rng.randint(lo, hi)]
        # [lo, lt) < pivot, [lt, i) == pivot, (gt, hi] > pivot
        lt, i, gt = lo, lo, hi
        while i <= gt:
            current = values[i]
            if current < pivot:
                values[lt], values[i] = current, values[lt]
                lt += 1
                i += 1
            elif current > pivot:
                values[gt], values[i] = current, values[gt]
                gt -= 1
            else:
                i += 1

        if nth < lt:
            hi = lt - 1
        elif nth > gt:
            lo = gt + 1
        else:
            break

    return values[nth]


def top_k_quickselect(numbers: Sequence[int], k: int, rng: Optional[Any] = None) -> List[int]:
    """
    Isolate the K largest with select_nth, then sort only those K.
    Time: O(N) expected + O(K log K), Space: O(N)
    """
    check_k(numbers, k)
    if k == 0:
        return []

    working = list(numbers)
    cut = len(working) - k
    select_nth(working, cut, rng)

    result = working[cut:]
    result.sort(reverse=True)
    return result
