"""Timing harness: generate once, run every selection method, report."""

from __future__ import annotations

import logging
import random
import time
from dataclasses import dataclass, field
from typing import List, Optional, Sequence, Tuple

from rich.console import Console

from .config import Settings
from .constants import METHOD_TITLE_WIDTH
from .error_handling import ResultMismatchError, format_error_message
from .generator import generate_numbers
from .selection import METHODS, SelectionMethod
from .utils.logging import format_duration, format_values, print_line

logger = logging.getLogger(__name__)


@dataclass
class MethodRun:
    index: int
    label: str
    seconds: float
    values: List[int]

    @property
    def title(self) -> str:
        return f"Method {self.index} ({self.label})"


@dataclass
class BenchmarkReport:
    n: int
    k: int
    seed: Optional[int]
    runs: List[MethodRun] = field(default_factory=list)
    verified: bool = False


def time_method(method: SelectionMethod, numbers: Sequence[int], k: int) -> Tuple[List[int], float]:
    """Run one method on its own copy of the input and time it with a monotonic clock."""
    working = list(numbers)
    start = time.perf_counter()
    values = method.func(working, k)
    elapsed = time.perf_counter() - start
    return values, elapsed


def verify_runs(runs: Sequence[MethodRun]) -> None:
    """Raise ResultMismatchError unless every run returned the same top-K list."""
    for first, second in zip(runs, runs[1:]):
        if first.values != second.values:
            raise ResultMismatchError(
                format_error_message(
                    "RESULT_MISMATCH",
                    first=first.title,
                    second=second.title,
                    first_values=first.values,
                    second_values=second.values,
                ),
                {"first": first.label, "second": second.label},
            )


def run_benchmark(settings: Settings, out: Optional[Console] = None) -> BenchmarkReport:
    settings.ensure()
    n, k = settings.n, settings.k

    print_line(f"Generating {n} numbers...", out)
    numbers = generate_numbers(n, settings.value_upper_bound, random.Random(settings.seed))
    print_line("Done generating.", out)
    print_line("", out)
    logger.debug("Generated %d values in [0, %d) with seed %s", n, settings.value_upper_bound, settings.seed)

    report = BenchmarkReport(n=n, k=k, seed=settings.seed)
    for index, method in enumerate(METHODS, start=1):
        logger.info("Running %s selection on %d values (k=%d)", method.label, n, k)
        values, seconds = time_method(method, numbers, k)
        run = MethodRun(index=index, label=method.label, seconds=seconds, values=values)
        report.runs.append(run)

        print_line(f"{run.title:<{METHOD_TITLE_WIDTH}} Time: {format_duration(seconds)}", out)
        print_line(f"Result: {format_values(values[:k])}", out)

    if settings.verify:
        verify_runs(report.runs)
        report.verified = True
        print_line("", out)
        print_line("Verification passed (results match)", out)

    return report
