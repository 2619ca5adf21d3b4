"""Find the n-th prime with a segmented Sieve of Eratosthenes.

:func:`nth_prime` is the entry point: it validates the index, sizes the
search with :func:`~nthprime.estimate.estimate_bound` and runs a
:class:`~nthprime.segment.SegmentedSieve` until the prime turns up.
"""

from __future__ import annotations

import time
from dataclasses import dataclass
from itertools import islice

from .config import Settings
from .errors import NegativeIndexError, SieveExhaustedError
from .estimate import estimate_bound
from .segment import SegmentedSieve, WindowCallback


@dataclass
class NthPrimeResult:
    """One solved index plus the numbers behind it."""
    index: int
    prime: int
    bound: int
    width: int
    windows: int
    elapsed: float  # seconds


def _check_index(n: int) -> None:
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError("n must be an integer")
    if n < 0:
        raise NegativeIndexError(n)


def _build_sieve(
    n: int,
    settings: Settings | None,
    on_window: WindowCallback | None = None,
) -> SegmentedSieve:
    settings = settings or Settings()
    return SegmentedSieve(
        estimate_bound(n),
        max_width=settings.max_segment_width,
        on_window=on_window,
    )


def nth_prime(n: int, settings: Settings | None = None) -> int:
    """Return the prime at zero-based index ``n``.

    Args:
        n: Index of the wanted prime; ``0`` gives ``2``, ``1`` gives ``3``.
        settings: Overrides for the segment size ceiling.

    Returns:
        The n-th prime.

    Raises:
        TypeError: If ``n`` is not an integer.
        NegativeIndexError: If ``n`` is negative.
        BoundTooLargeError: If the segments needed for ``n`` would reach
            ``settings.max_segment_width`` entries.

    Examples:
        >>> nth_prime(0)
        2
        >>> nth_prime(99)
        541
    """
    _check_index(n)
    return _build_sieve(n, settings).find(n)


def solve(
    n: int,
    settings: Settings | None = None,
    on_window: WindowCallback | None = None,
) -> NthPrimeResult:
    """Like :func:`nth_prime`, but also report how the answer was found."""
    _check_index(n)
    started = time.perf_counter()
    sieve = _build_sieve(n, settings, on_window)
    prime = sieve.find(n)
    return NthPrimeResult(
        index=n,
        prime=prime,
        bound=sieve.bound,
        width=sieve.width,
        windows=sieve.windows_sieved,
        elapsed=time.perf_counter() - started,
    )


def first_primes(count: int, settings: Settings | None = None) -> list[int]:
    """Return the first ``count`` primes in ascending order."""
    _check_index(count)
    if count == 0:
        return []
    sieve = _build_sieve(count - 1, settings)
    primes = list(islice(sieve.primes(), count))
    if len(primes) < count:
        raise SieveExhaustedError(count - 1, sieve.bound, sieve.count, sieve.last_prime)
    return primes
