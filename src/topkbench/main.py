from __future__ import annotations

from typing import Optional

import typer

from .cli.run_commands import handle_methods, handle_run


app = typer.Typer(add_completion=False, help="Time heap, sort and quickselect top-K selection.")


@app.callback(invoke_without_command=True)
def main(ctx: typer.Context) -> None:
    """With no subcommand, run the reference benchmark (N=1000, K=10)."""
    if ctx.invoked_subcommand is None:
        handle_run()


@app.command()
def run(
    n: Optional[int] = typer.Option(None, "--n", help="How many integers to generate (default 1000)"),
    k: Optional[int] = typer.Option(None, "--k", help="How many of the largest to select (default 10)"),
    seed: Optional[int] = typer.Option(None, help="Seed for a reproducible input"),
    value_range_factor: Optional[int] = typer.Option(None, help="Values are drawn from [0, factor * N)"),
    verify: Optional[bool] = typer.Option(None, "--verify/--no-verify", help="Check that all methods agree"),
    config_file: Optional[str] = typer.Option(None, "--config", help="JSON file with settings"),
    log_level: str = typer.Option("WARNING", help="Logging level for diagnostics on stderr"),
) -> None:
    """Generate one input and time each selection method on it."""
    handle_run(
        n=n,
        k=k,
        seed=seed,
        value_range_factor=value_range_factor,
        verify=verify,
        config_file=config_file,
        log_level=log_level,
    )


@app.command()
def methods() -> None:
    """List the selection methods and their complexity."""
    handle_methods()


if __name__ == "__main__":
    app()
