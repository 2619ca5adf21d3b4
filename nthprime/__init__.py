"""n-th prime lookup backed by a segmented Sieve of Eratosthenes."""

from .config import Settings
from .errors import (
    BoundTooLargeError,
    InvalidArgumentError,
    NegativeIndexError,
    SieveError,
    SieveExhaustedError,
)
from .estimate import estimate_bound, segment_width
from .segment import SegmentedSieve
from .sieve import NthPrimeResult, first_primes, nth_prime, solve

__all__ = [
    "BoundTooLargeError",
    "InvalidArgumentError",
    "NegativeIndexError",
    "NthPrimeResult",
    "SegmentedSieve",
    "Settings",
    "SieveError",
    "SieveExhaustedError",
    "estimate_bound",
    "first_primes",
    "nth_prime",
    "segment_width",
    "solve",
]
