"""Segmented Sieve of Eratosthenes.

The integer line from 2 upwards is sieved one window of ``width``
integers at a time, so memory stays at O(sqrt(bound)) instead of
O(bound).
"""

from __future__ import annotations

import logging
from typing import Callable, Iterator

from .errors import BoundTooLargeError, SieveExhaustedError
from .estimate import segment_width

log = logging.getLogger(__name__)

FIRST_WINDOW_START = 2
# A bytearray this large would take 2 GiB per window.
MAX_SEGMENT_WIDTH = 2**31

WindowCallback = Callable[[int, int], None]


class SegmentedSieve:
    """Finds primes below ``bound`` window by window.

    ``width`` is ceil(sqrt(bound)). Windows cover ``[2, 2 + w)``,
    ``[2 + w, 2 + 2w)``, ... for every start up to ``w * w``. Every
    integer in them is below ``(w + 1) ** 2``, so a composite always has
    a prime factor ``<= w``, and all of those sit in the first window.
    Only primes ``<= w`` are kept in ``known_primes``.
    """

    def __init__(
        self,
        bound: int,
        max_width: int = MAX_SEGMENT_WIDTH,
        on_window: WindowCallback | None = None,
    ):
        width = segment_width(bound)
        if width >= max_width:
            raise BoundTooLargeError(bound, width, max_width)

        self.bound = bound
        self.width = width
        self.on_window = on_window
        self.known_primes: list[int] = []
        self.count = 0
        self.last_prime: int | None = None
        self.windows_sieved = 0
        log.info(f"Sieving up to {bound:,} in windows of {width:,}")

    @property
    def total_windows(self) -> int:
        last = self.width * self.width
        if last < FIRST_WINDOW_START:
            return 0
        return (last - FIRST_WINDOW_START) // self.width + 1

    def windows(self) -> Iterator[int]:
        """Yield the start of every window."""
        start = FIRST_WINDOW_START
        last = self.width * self.width
        while start <= last:
            yield start
            start += self.width

    def retains(self, p: int) -> bool:
        """Whether prime ``p`` is needed to sieve later windows."""
        return p <= self.width

    # ── Marking ─────────────────────────────────────────────────────

    def _strike(self, segment: bytearray, start: int, p: int) -> None:
        """Mark the multiples of ``p`` inside the window at ``start``."""
        # Multiples below p*p have a smaller factor and are already struck.
        first = max(p * p, -(-start // p) * p)
        offset = first - start
        if offset >= self.width:
            return
        segment[offset::p] = bytes((self.width - 1 - offset) // p + 1)

    def _sieve_window(self, start: int) -> bytearray:
        # 1 = still a candidate, 0 = composite
        segment = bytearray(b"\x01") * self.width
        end = start + self.width
        for p in self.known_primes:
            if p * p >= end:
                break
            self._strike(segment, start, p)
        self.windows_sieved += 1
        return segment

    def _scan(self, segment: bytearray, start: int) -> Iterator[int]:
        """Yield the primes left in ``segment``, recording each one."""
        end = start + self.width
        pos = segment.find(1)
        while pos != -1:
            p = start + pos
            self.count += 1
            self.last_prime = p
            if self.retains(p):
                self.known_primes.append(p)
            # p was not known when the window was sieved
            if p * p < end:
                self._strike(segment, start, p)
            yield p
            pos = segment.find(1, pos + 1)

    def _window_done(self, start: int) -> None:
        log.debug(f"window {start:,}..{start + self.width:,}: {self.count:,} primes so far")
        if self.on_window is not None:
            self.on_window(self.windows_sieved, self.total_windows)

    # ── Public API ──────────────────────────────────────────────────

    def primes(self) -> Iterator[int]:
        """Yield every prime the windows cover, in increasing order."""
        for start in self.windows():
            segment = self._sieve_window(start)
            yield from self._scan(segment, start)
            self._window_done(start)

    def find(self, n: int) -> int:
        """Return the prime at zero-based index ``n``.

        Windows that hold no prime worth keeping and cannot contain the
        target are counted in bulk instead of being scanned.

        Raises:
            SieveExhaustedError: If the windows run out first.
        """
        target = n + 1
        for start in self.windows():
            segment = self._sieve_window(start)

            if not self.retains(start):
                survivors = segment.count(1)
                if self.count + survivors < target:
                    self.count += survivors
                    if survivors:
                        self.last_prime = start + segment.rfind(1)
                    self._window_done(start)
                    continue

            for p in self._scan(segment, start):
                if self.count == target:
                    log.info(f"Prime #{n:,} is {p:,} ({self.windows_sieved:,} windows)")
                    return p
            self._window_done(start)

        log.error(
            f"Bound {self.bound:,} exhausted after {self.count:,} primes, "
            f"prime #{n:,} not reached"
        )
        raise SieveExhaustedError(n, self.bound, self.count, self.last_prime)
