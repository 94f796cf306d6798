from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, List, Sequence

from .heap import top_k_heap
from .sort import top_k_sort
from .partition import select_nth, top_k_quickselect


@dataclass(frozen=True)
class SelectionMethod:
    label: str
    func: Callable[[Sequence[int], int], List[int]]
    complexity: str


# Run order of the benchmark
METHODS: List[SelectionMethod] = [
    SelectionMethod("Heap", top_k_heap, "O(N log K)"),
    SelectionMethod("Sort", top_k_sort, "O(N log N)"),
    SelectionMethod("Quickselect", top_k_quickselect, "O(N) expected + O(K log K)"),
]


__all__ = [
    "METHODS",
    "SelectionMethod",
    "select_nth",
    "top_k_heap",
    "top_k_quickselect",
    "top_k_sort",
]
