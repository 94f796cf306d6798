from __future__ import annotations

from typing import Optional, Sequence

from rich.console import Console


console = Console()


def print_line(message: str = "", out: Optional[Console] = None) -> None:
    """Print plain text; brackets in result lists must not be read as markup."""
    (out or console).print(message, markup=False, highlight=False, soft_wrap=True)


def format_values(values: Sequence[int]) -> str:
    return "[" + ", ".join(str(v) for v in values) + "]"


def format_duration(seconds: float) -> str:
    """Render an elapsed time in the largest unit that keeps it above 1."""
    if seconds >= 1:
        return f"{seconds:.3f}s"
    if seconds >= 1e-3:
        return f"{seconds * 1e3:.3f}ms"
    if seconds >= 1e-6:
        return f"{seconds * 1e6:.3f}µs"
    return f"{seconds * 1e9:.3f}ns"
