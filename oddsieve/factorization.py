"""
Factorization utilities.

Responsibility: trial-division factorization, cleanly separated.
This file must not know about the sieve.
"""

import sys
from typing import List


def prime_factors_naive(x: int, debug: bool = False) -> List[int]:
    """
    Factor x by trial division.

    Parameters
    ----------
    x : int
        Integer to factor.
    debug : bool
        Print the current trial divisor to stderr every 1000001 steps.

    Returns
    -------
    list
        Prime factors in ascending order, with multiplicity.
        Empty for x <= 1.
    """
    if x <= 1:
        return []

    factors = []
    while x % 2 == 0:
        x //= 2
        factors.append(2)

    i = 3
    while i <= x:
        if debug and i % 1000001 == 0:
            print(f"at: {i}", file=sys.stderr)
        while x % i == 0:
            x //= i
            factors.append(i)
        i += 2
    return factors
