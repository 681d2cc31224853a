"""
Odd-only sieve of Eratosthenes.

Build one table with `sift` (or `sieve_upto`), then query it repeatedly.
"""

from .errors import SieveError, SieveRangeError, PrimeNotFoundError, NotAPrimeError
from .index_mapping import index_of_value, value_at_index, storage_length_for
from .sieve import sift, mark_sieve, sieve_schedule, coverage_bound, new_storage, sieve_upto
from .queries import (
    is_prime,
    find_nth_prime,
    find_next_prime,
    enumerate_primes,
    iter_primes,
    count_primes,
)
from .factorization import prime_factors_naive

__all__ = [
    'SieveError', 'SieveRangeError', 'PrimeNotFoundError', 'NotAPrimeError',
    'index_of_value', 'value_at_index', 'storage_length_for',
    'sift', 'mark_sieve', 'sieve_schedule', 'coverage_bound', 'new_storage', 'sieve_upto',
    'is_prime', 'find_nth_prime', 'find_next_prime', 'enumerate_primes',
    'iter_primes', 'count_primes',
    'prime_factors_naive',
]
