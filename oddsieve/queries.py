"""
Read-only queries over a built sieve.

Responsibility: answering questions about a table produced by sift.
Nothing here mutates storage, so one table can serve any number of
callers.

Search failures raise PrimeNotFoundError instead of returning 0.
"""

import numpy as np
from typing import Iterator

from .errors import NotAPrimeError, PrimeNotFoundError, SieveRangeError
from .index_mapping import index_of_value, value_at_index
from .sieve import coverage_bound


def _flags(storage) -> np.ndarray:
    # view for ndarray storage, copy for list / bytearray
    return np.asarray(storage, dtype=bool)


def is_prime(x: int, storage) -> bool:
    """
    Test primality of x against the sieve.

    Parameters
    ----------
    x : int
        Value to test.
    storage : array-like
        Built sieve.

    Returns
    -------
    bool
        True iff x is prime.

    Raises
    ------
    SieveRangeError
        If the sieve is empty or x is larger than its coverage bound.
    """
    max_covered = coverage_bound(storage)
    if len(storage) == 0 or x > max_covered:
        raise SieveRangeError(x, max_covered, empty=len(storage) == 0)

    if x < 2:
        return False
    if x == 2:
        return True
    if x % 2 == 0:
        return False
    return bool(storage[index_of_value(x)])


def find_nth_prime(n: int, storage) -> int:
    """
    Return the n-th prime (1-based: the first prime is 2).

    Raises
    ------
    ValueError
        If n < 1.
    PrimeNotFoundError
        If the sieve holds fewer than n primes.
    """
    if n < 1:
        raise ValueError(f"n must be >= 1, got {n}")
    if n == 1:
        return 2

    # 2 is not stored, so the (n-1)-th stored prime is the n-th prime
    positions = np.flatnonzero(_flags(storage))
    if n - 2 >= len(positions):
        raise PrimeNotFoundError(
            f"sieve up to {coverage_bound(storage)} holds only "
            f"{len(positions) + 1} primes, asked for prime #{n}"
        )
    return value_at_index(int(positions[n - 2]))


def find_next_prime(prime: int, storage) -> int:
    """
    Return the smallest prime greater than `prime`.

    `prime` must itself be prime and covered by the sieve.

    Raises
    ------
    SieveRangeError
        If `prime` is not covered.
    NotAPrimeError
        If `prime` is not prime.
    PrimeNotFoundError
        If no larger prime is covered.
    """
    if prime == 2:
        return 3
    if not is_prime(prime, storage):
        raise NotAPrimeError(f"{prime} is not prime")

    # scan forward in doubling windows; only the window is converted
    n = len(storage)
    pos = index_of_value(prime) + 1
    window = 64
    while pos < n:
        hits = np.flatnonzero(_flags(storage[pos:pos + window]))
        if len(hits):
            return value_at_index(pos + int(hits[0]))
        pos += window
        window *= 2

    raise PrimeNotFoundError(
        f"no prime after {prime} within sieve bound {coverage_bound(storage)}"
    )


def enumerate_primes(storage) -> np.ndarray:
    """
    Return array of all primes covered by the sieve, ascending.

    Always starts with 2, even for an empty sieve.
    """
    odd_primes = 2 * np.flatnonzero(_flags(storage)) + 3
    return np.concatenate(([2], odd_primes)).astype(np.int64)


def iter_primes(storage) -> Iterator[int]:
    """Lazily yield the same sequence as enumerate_primes."""
    yield 2
    for i, cell in enumerate(storage):
        if cell:
            yield value_at_index(i)


def count_primes(storage) -> int:
    """Number of primes <= coverage bound."""
    return 1 + int(np.count_nonzero(_flags(storage)))
