"""Rich terminal tables, JSON and polars exports for computed primes."""

from __future__ import annotations

from dataclasses import asdict
from pathlib import Path
from typing import Iterable, Sequence

import orjson
import polars as pl
from rich.console import Console
from rich.table import Table

from .sieve import NthPrimeResult


def _fmt_count(n: int) -> str:
    if n >= 1_000_000_000:
        return f"{n / 1_000_000_000:.1f}G"
    if n >= 1_000_000:
        return f"{n / 1_000_000:.1f}M"
    if n >= 1_000:
        return f"{n / 1_000:.1f}K"
    return str(n)


def _fmt_elapsed(seconds: float) -> str:
    if seconds < 1:
        return f"{seconds * 1000:.1f}ms"
    return f"{seconds:.2f}s"


def render_results(results: Iterable[NthPrimeResult], console: Console | None = None) -> None:
    """Print solved indices as a table."""
    console = console or Console()

    table = Table(title="n-th primes", show_header=True)
    table.add_column("n", justify="right", style="dim")
    table.add_column("Prime", justify="right", style="bold")
    table.add_column("Bound", justify="right")
    table.add_column("Width", justify="right")
    table.add_column("Windows", justify="right")
    table.add_column("Time", justify="right")

    for r in results:
        table.add_row(
            str(r.index),
            str(r.prime),
            _fmt_count(r.bound),
            f"{r.width:,}",
            f"{r.windows:,}",
            _fmt_elapsed(r.elapsed),
        )

    console.print(table)


def results_to_json(results: Iterable[NthPrimeResult]) -> bytes:
    return orjson.dumps([asdict(r) for r in results], option=orjson.OPT_INDENT_2)


def primes_frame(primes: Sequence[int]) -> pl.DataFrame:
    """Index/prime table, ``index`` being zero-based."""
    return pl.DataFrame(
        {"index": list(range(len(primes))), "prime": list(primes)},
        schema={"index": pl.Int64, "prime": pl.Int64},
    )


def write_primes(primes: Sequence[int], path: Path) -> Path:
    """Write ``primes`` to a ``.parquet`` or ``.csv`` file."""
    suffix = path.suffix.lower()
    if suffix not in (".parquet", ".csv"):
        raise ValueError(f"Unsupported export format {path.suffix!r} (use .parquet or .csv)")

    path.parent.mkdir(parents=True, exist_ok=True)
    df = primes_frame(primes)
    if suffix == ".parquet":
        df.write_parquet(path)
    else:
        df.write_csv(path)
    return path
