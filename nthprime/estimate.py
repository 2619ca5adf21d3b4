"""Upper bounds for the n-th prime.

The prime number theorem says pi(x) is about x / ln(x). Solving
x / ln(x) = n exactly is not needed: any over-estimate works, so the
guess is doubled until x / ln(x) reaches 2n. For x above 229 the gap
between li(x) and pi(x) is below x, which makes 2n enough slack for the
true count at the returned bound to exceed n.
"""

from __future__ import annotations

import math

# pi(2000) = 303, comfortably more than the first 229 primes.
SMALL_INDEX_THRESHOLD = 229
SMALL_INDEX_BOUND = 2000


def estimate_bound(n: int) -> int:
    """Return X such that more than ``n`` primes lie below X."""
    if n < SMALL_INDEX_THRESHOLD:
        return SMALL_INDEX_BOUND

    guess = n
    while guess / math.log(guess) < 2 * n:
        guess *= 2
    return guess


def segment_width(bound: int) -> int:
    """Exact ceil(sqrt(bound))."""
    if bound <= 0:
        return 0
    root = math.isqrt(bound - 1)
    return root + 1
