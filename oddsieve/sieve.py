"""
Odd-only sieve of Eratosthenes.

Responsibility: building the sieve table. No queries here.

Storage cell i is True iff 2i + 3 is prime. Instead of storing a flag for
every integer up to N, only odd numbers are kept: half the memory of
prime_flags_upto-style tables.

Marking starts at p^2 for each prime p. In index space the odd multiples
p^2, p^2 + 2p, p^2 + 4p, ... are spaced exactly p cells apart, so the stride
is the prime itself.
"""

import numpy as np
from typing import Iterator, Tuple

from .index_mapping import storage_length_for, value_at_index


def new_storage(length: int) -> np.ndarray:
    """Allocate unbuilt storage with `length` cells."""
    return np.zeros(length, dtype=bool)


def coverage_bound(storage) -> int:
    """Largest value represented by storage (2 for an empty sieve)."""
    n = len(storage)
    return value_at_index(n - 1) if n > 0 else 2


def sieve_schedule(n: int) -> Iterator[Tuple[int, int, int]]:
    """
    Yield (i, factor, index_square) for every candidate the builder visits.

    factor = 2i + 3 and index_square is the index of factor^2. The index of
    the next square is reached by adding the old factor, stepping factor by
    2, then adding the new factor:

        (f+2)^2 = f^2 + 2f + 2(f+2)   →   index grows by f + (f+2)

    Parameters
    ----------
    n : int
        Storage length.

    Yields
    ------
    tuple
        (candidate index, candidate value, index of candidate value squared)
    """
    i, factor, index_square = 0, 3, 3
    while index_square < n:
        yield i, factor, index_square
        i += 1
        index_square += factor
        factor += 2
        index_square += factor


def mark_sieve(storage, start: int, factor: int) -> None:
    """
    Clear storage[start], storage[start + factor], ... up to the end.

    Raises
    ------
    IndexError
        If start is not a position inside storage.
    """
    n = len(storage)
    if not 0 <= start < n:
        raise IndexError(f"marking start {start} outside storage of length {n}")

    if isinstance(storage, np.ndarray):
        storage[start::factor] = False
        return

    pos = start
    storage[pos] = False
    while n - pos > factor:
        pos += factor
        storage[pos] = False


def sift(storage) -> int:
    """
    Build the sieve in place.

    Parameters
    ----------
    storage : np.ndarray, list or bytearray
        Mutable storage of any length (0 allowed). Previous contents are
        overwritten.

    Returns
    -------
    int
        Largest value the storage now covers (see coverage_bound).
    """
    n = len(storage)
    if isinstance(storage, np.ndarray):
        storage.fill(True)
    else:
        for j in range(n):
            storage[j] = True

    for i, factor, index_square in sieve_schedule(n):
        if storage[i]:
            mark_sieve(storage, index_square, factor)

    return coverage_bound(storage)


def sieve_upto(upper_bound: int, verbose: bool = False) -> Tuple[np.ndarray, int]:
    """
    Allocate and build a sieve covering every value <= upper_bound.

    Parameters
    ----------
    upper_bound : int
        Largest value the sieve must cover.
    verbose : bool
        Print sizing information.

    Returns
    -------
    tuple
        (storage, max_covered). max_covered may exceed upper_bound by one
        when upper_bound is even.
    """
    length = storage_length_for(upper_bound)
    if verbose:
        print(f"    Allocating {length:,} cells ({length / 1e6:.1f} MB) for N={upper_bound:,}")

    storage = new_storage(length)
    max_covered = sift(storage)

    if verbose:
        print(f"    Sieve covers values up to {max_covered:,}")
    return storage, max_covered
