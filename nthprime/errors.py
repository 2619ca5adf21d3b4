"""Exceptions raised by the nthprime package."""

from __future__ import annotations


class SieveError(Exception):
    """Base class for every error raised by nthprime."""


class InvalidArgumentError(SieveError, ValueError):
    """The caller asked for something the sieve refuses to compute."""


class NegativeIndexError(InvalidArgumentError):
    def __init__(self, n: int):
        self.n = n
        super().__init__(f"n must be a non-negative integer, got {n}")


class BoundTooLargeError(InvalidArgumentError):
    """The segment needed for ``bound`` would be too large to allocate."""

    def __init__(self, bound: int, width: int, max_width: int):
        self.bound = bound
        self.width = width
        self.max_width = max_width
        super().__init__(
            f"Argument is too large: bound {bound:,} needs segments of {width:,} "
            f"entries (limit {max_width:,})"
        )


class SieveExhaustedError(SieveError, RuntimeError):
    """All windows up to the bound were sieved without reaching prime #n.

    This means the bound estimate was too small and is a bug, not a
    condition callers are expected to handle.
    """

    def __init__(self, n: int, bound: int, found: int, last_prime: int | None):
        self.n = n
        self.bound = bound
        self.found = found
        self.last_prime = last_prime
        super().__init__(
            f"bound {bound:,} only holds {found:,} primes (last {last_prime}), "
            f"prime #{n} was not reached"
        )
