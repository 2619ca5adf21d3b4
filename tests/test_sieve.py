from __future__ import annotations

import pytest

from nthprime import (
    BoundTooLargeError,
    InvalidArgumentError,
    NegativeIndexError,
    Settings,
    SieveExhaustedError,
    first_primes,
    nth_prime,
    solve,
)


@pytest.mark.parametrize(
    "n,expected",
    [
        (0, 2),
        (1, 3),
        (19, 71),
        (99, 541),
        (228, 1447),
        (229, 1451),
        (230, 1453),
        (500, 3581),
        (986, 7793),
        (2000, 17393),
        (1_000_000, 15485867),
    ],
)
def test_known_values(n, expected):
    assert nth_prime(n) == expected


@pytest.mark.slow
def test_ten_millionth():
    assert nth_prime(10_000_000) == 179424691


def test_matches_plain_sieve_for_small_indices(reference_primes):
    for n in range(0, 1500):
        assert nth_prime(n) == reference_primes[n], f"n={n}"


@pytest.mark.parametrize("n", [3000, 4321, 9999, 12345, 20000])
def test_matches_plain_sieve_for_larger_indices(n, reference_primes):
    assert nth_prime(n) == reference_primes[n]


def test_result_has_exactly_n_smaller_primes(reference_primes):
    for n in (0, 7, 228, 229, 1024, 5000):
        p = nth_prime(n)
        assert p in reference_primes
        assert sum(1 for q in reference_primes if q < p) == n


def test_monotonic():
    values = [nth_prime(n) for n in range(220, 240)]
    assert all(a < b for a, b in zip(values, values[1:]))


@pytest.mark.parametrize("n", [-1, -2, -1000])
def test_negative_index(n):
    with pytest.raises(NegativeIndexError):
        nth_prime(n)


def test_negative_index_is_invalid_argument():
    with pytest.raises(InvalidArgumentError):
        nth_prime(-1)
    with pytest.raises(ValueError):
        nth_prime(-1)


@pytest.mark.parametrize("n", [1.0, "3", None, True])
def test_non_integer_index(n):
    with pytest.raises(TypeError):
        nth_prime(n)


def test_bound_too_large_is_rejected_before_sieving():
    with pytest.raises(BoundTooLargeError) as exc:
        nth_prime(10**17)
    assert exc.value.width >= 2**31
    assert isinstance(exc.value, InvalidArgumentError)


def test_configured_width_ceiling():
    with pytest.raises(BoundTooLargeError):
        nth_prime(0, Settings(max_segment_width=45))
    assert nth_prime(0, Settings(max_segment_width=46)) == 2


def test_undersized_bound_is_an_internal_error(monkeypatch):
    monkeypatch.setattr("nthprime.sieve.estimate_bound", lambda n: 100)
    with pytest.raises(SieveExhaustedError) as exc:
        nth_prime(1000)
    assert exc.value.last_prime == 101


def test_first_primes(reference_primes):
    assert first_primes(0) == []
    assert first_primes(1) == [2]
    assert first_primes(3000) == reference_primes[:3000]


def test_first_primes_rejects_negative_count():
    with pytest.raises(NegativeIndexError):
        first_primes(-5)


def test_solve_reports_search():
    result = solve(229)
    assert result.index == 229
    assert result.prime == 1451
    assert result.bound == 7328
    assert result.width == 86
    assert 1 <= result.windows <= 86
    assert result.elapsed >= 0


def test_calls_are_independent():
    assert nth_prime(500) == 3581
    assert nth_prime(19) == 71
    assert nth_prime(500) == 3581
