"""CLI entry point for nthprime."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import NoReturn

import click
from rich.console import Console
from rich.progress import BarColumn, Progress, SpinnerColumn, TextColumn, TimeElapsedColumn

from .config import Settings, configure_logging
from .errors import InvalidArgumentError, SieveError
from .estimate import estimate_bound, segment_width
from .sieve import first_primes, solve

console = Console()
log = logging.getLogger("nthprime.cli")


def _fail(err: SieveError) -> NoReturn:
    console.print(f"[bold red]Error:[/bold red] {err}")
    if isinstance(err, InvalidArgumentError):
        raise click.exceptions.Exit(2)
    raise click.exceptions.Exit(1)


@click.group()
@click.option("--log-level", default=None, help="Override NTHPRIME_LOG_LEVEL (DEBUG, INFO, ...)")
@click.pass_context
def cli(ctx: click.Context, log_level: str | None):
    """Compute n-th primes with a segmented Sieve of Eratosthenes."""
    try:
        settings = Settings.from_env()
        if log_level:
            settings = Settings(log_level=log_level.upper(), max_segment_width=settings.max_segment_width)
        configure_logging(settings.log_level)
    except ValueError as e:
        raise click.UsageError(str(e))
    ctx.obj = settings


@cli.command()
@click.argument("indices", nargs=-1, required=True, type=int)
@click.option("--json", "as_json", is_flag=True, help="Print results as JSON")
@click.option("--progress", is_flag=True, help="Show a progress bar per index")
@click.pass_obj
def nth(settings: Settings, indices: tuple[int, ...], as_json: bool, progress: bool):
    """Print the prime at each zero-based index."""
    from .report import render_results, results_to_json

    results = []
    for n in indices:
        try:
            if progress:
                results.append(_solve_with_progress(n, settings))
            else:
                results.append(solve(n, settings))
        except SieveError as e:
            _fail(e)

    if as_json:
        click.echo(results_to_json(results).decode())
    else:
        render_results(results, console=console)


def _solve_with_progress(n: int, settings: Settings):
    with Progress(
        SpinnerColumn(),
        TextColumn("[bold blue]{task.description}"),
        BarColumn(),
        TextColumn("{task.completed}/{task.total} windows"),
        TimeElapsedColumn(),
        console=console,
        transient=True,
    ) as progress:
        task = progress.add_task(f"Sieving for #{n}", total=None)

        def on_window(done: int, total: int) -> None:
            progress.update(task, completed=done, total=total)

        return solve(n, settings, on_window=on_window)


@cli.command()
@click.argument("n", type=int)
@click.pass_obj
def estimate(settings: Settings, n: int):
    """Show the search bound and segment width for index N."""
    if n < 0:
        raise click.BadParameter("must be a non-negative integer", param_hint="N")
    bound = estimate_bound(n)
    width = segment_width(bound)
    console.print(f"  bound: {bound:,}")
    console.print(f"  width: {width:,}")
    if width >= settings.max_segment_width:
        console.print(f"[yellow]  width exceeds the limit of {settings.max_segment_width:,}[/yellow]")


@cli.command()
@click.argument("count", type=click.IntRange(min=0))
@click.argument("output", type=click.Path(dir_okay=False, path_type=Path))
@click.pass_obj
def export(settings: Settings, count: int, output: Path):
    """Write the first COUNT primes to OUTPUT (.parquet or .csv)."""
    from .report import write_primes

    try:
        primes = first_primes(count, settings)
    except SieveError as e:
        _fail(e)
    try:
        write_primes(primes, output)
    except ValueError as e:
        raise click.BadParameter(str(e), param_hint="OUTPUT")
    except OSError as e:
        raise click.FileError(str(output), hint=e.strerror or str(e))
    log.info(f"Wrote {len(primes):,} primes to {output}")
    console.print(f"[bold green]Wrote {len(primes):,} primes to {output}[/bold green]")


if __name__ == "__main__":
    cli()
