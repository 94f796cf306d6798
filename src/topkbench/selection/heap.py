"""Top-K through a bounded min-heap: one pass, O(N log K)."""

from __future__ import annotations

import heapq
from typing import List, Sequence

from ._checks import check_k


def top_k_heap(numbers: Sequence[int], k: int) -> List[int]:
    """
    Keep the K largest values seen so far in a min-heap.

    The root is the smallest kept value; a new value only gets in by
    beating it. Time: O(N log K), Space: O(K)
    """
    check_k(numbers, k)
    if k == 0:
        return []

    min_heap: List[int] = []
    for num in numbers:
        if len(min_heap) < k:
            heapq.heappush(min_heap, num)
        elif num > min_heap[0]:
            heapq.heapreplace(min_heap, num)

    # Heap order is not sorted order
    return sorted(min_heap, reverse=True)
