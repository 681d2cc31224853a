"""
Index mapping for odd-only sieves.

Only odd candidates are stored; 2 is handled as a constant by callers.

Index mapping:
- Index i → 2i + 3
- n → (n - 3) // 2   (n odd, n >= 3)

For n=3: index 0 ✓
For n=9: index 3 ✓
For n=101: index 49 ✓
"""


def value_at_index(i: int) -> int:
    """Convert sieve index to the odd number it represents."""
    return 2 * i + 3


def index_of_value(n: int) -> int:
    """Convert odd number (n >= 3) to sieve index. Domain is not checked."""
    return (n - 3) // 2


def storage_length_for(upper_bound: int) -> int:
    """
    Smallest storage length whose coverage reaches upper_bound.

    Parameters
    ----------
    upper_bound : int
        Largest value the sieve must be able to answer for.

    Returns
    -------
    int
        Number of cells; 0 when upper_bound < 3 (only 2 is needed).
    """
    if upper_bound < 3:
        return 0
    # round even bounds up to the next odd value
    return index_of_value(upper_bound | 1) + 1
