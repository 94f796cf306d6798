"""Command implementations for the topk-bench CLI."""

from __future__ import annotations

from typing import Optional

import typer
from rich import print
from rich.markup import escape
from rich.table import Table

from ..error_handling import TopKBenchError
from ..runner import run_benchmark
from ..selection import METHODS
from ..utils.logging import console
from .shared import configure_logging, setup_settings


def handle_run(
    n: Optional[int] = None,
    k: Optional[int] = None,
    seed: Optional[int] = None,
    value_range_factor: Optional[int] = None,
    verify: Optional[bool] = None,
    config_file: Optional[str] = None,
    log_level: str = "WARNING",
) -> None:
    """Generate one input and time every selection method against it."""
    try:
        configure_logging(log_level)
        settings = setup_settings(
            config_file=config_file,
            overrides={
                "n": n,
                "k": k,
                "seed": seed,
                "value_range_factor": value_range_factor,
                "verify": verify,
            },
        )
        run_benchmark(settings)
    except TopKBenchError as e:
        print(f"[red]{escape(str(e))}[/red]")
        raise typer.Exit(code=1)


def handle_methods() -> None:
    """List the selection methods in benchmark order."""
    table = Table(title="Top-K selection methods")
    table.add_column("#", justify="right")
    table.add_column("Method")
    table.add_column("Complexity")
    for index, method in enumerate(METHODS, start=1):
        table.add_row(str(index), method.label, method.complexity)
    console.print(table)
