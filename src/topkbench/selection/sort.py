"""Top-K by sorting everything."""

from __future__ import annotations

from typing import List, Sequence

from ._checks import check_k


def top_k_sort(numbers: Sequence[int], k: int) -> List[int]:
    """
    Sort a copy descending and keep the first K.
    Time: O(N log N), Space: O(N)
    """
    check_k(numbers, k)
    return sorted(numbers, reverse=True)[:k]
