from __future__ import annotations

import pytest


def sieve_of_eratosthenes(n: int) -> list[int]:
    """Return all primes <= n with a plain, unsegmented sieve."""
    if n < 2:
        return []
    is_prime: list[bool] = [True] * (n + 1)
    is_prime[0] = False
    is_prime[1] = False
    for candidate in range(2, int(n**0.5) + 1):
        if is_prime[candidate]:
            start = candidate * candidate
            is_prime[start : n + 1 : candidate] = [False] * (((n - start) // candidate) + 1)
    return [number for number, prime in enumerate(is_prime) if prime]


@pytest.fixture(scope="session")
def reference_primes() -> list[int]:
    """Every prime below 300,000."""
    return sieve_of_eratosthenes(300_000)
