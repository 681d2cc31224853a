"""
Errors raised by sieve queries.

A failed query never touches the storage; the table stays usable.
"""


class SieveError(Exception):
    """Base class for sieve errors."""


class SieveRangeError(SieveError, ValueError):
    """Value lies outside the range covered by the sieve (or the sieve is empty)."""

    def __init__(self, value: int, max_covered: int, empty: bool = False):
        self.value = value
        self.max_covered = max_covered
        self.empty = empty
        if empty:
            message = f"number not covered by range of sieve: {value} (sieve is empty)"
        else:
            message = f"number not covered by range of sieve: {value} > {max_covered}"
        super().__init__(message)


class PrimeNotFoundError(SieveError, LookupError):
    """Search ran off the end of the sieve before finding its prime."""


class NotAPrimeError(SieveError, ValueError):
    """Value was expected to be a prime marked in the sieve."""
