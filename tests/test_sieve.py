"""
Tests for the odd-only sieve builder and its index mapping.

The incremental index_square update is the easiest place to introduce an
off-by-one, so the schedule is checked against the closed form directly.
"""

import numpy as np
import pytest

from oddsieve.index_mapping import index_of_value, value_at_index, storage_length_for
from oddsieve.sieve import sift, mark_sieve, sieve_schedule, coverage_bound, new_storage, sieve_upto


def trial_division_is_prime(n: int) -> bool:
    if n < 2:
        return False
    d = 2
    while d * d <= n:
        if n % d == 0:
            return False
        d += 1
    return True


class TestIndexMapping:
    """Test the index/value bijection."""

    def test_known_values(self):
        assert value_at_index(0) == 3
        assert value_at_index(3) == 9
        assert value_at_index(49) == 101
        assert index_of_value(3) == 0
        assert index_of_value(9) == 3
        assert index_of_value(101) == 49

    def test_round_trip(self):
        for i in range(1000):
            assert index_of_value(value_at_index(i)) == i
        for v in range(3, 2001, 2):
            assert value_at_index(index_of_value(v)) == v

    def test_storage_length_for(self):
        """Smallest length covering the bound."""
        assert storage_length_for(0) == 0
        assert storage_length_for(2) == 0
        assert storage_length_for(3) == 1
        assert storage_length_for(4) == 2
        assert storage_length_for(51) == 25
        assert storage_length_for(100) == 50
        assert storage_length_for(101) == 50
        for bound in range(3, 300):
            n = storage_length_for(bound)
            assert value_at_index(n - 1) >= bound
            assert n == 1 or value_at_index(n - 2) < bound


class TestSchedule:
    """Test the candidate schedule driving the builder."""

    def test_starts_at_three(self):
        first = next(sieve_schedule(100))
        assert first == (0, 3, 3)

    def test_index_square_matches_closed_form(self):
        """After candidate p, the next index_square is index_of_value((p+2)^2)."""
        steps = list(sieve_schedule(10**6))
        assert len(steps) > 100
        for (i, p, idx_sq), (next_i, next_p, next_idx_sq) in zip(steps, steps[1:]):
            assert p == value_at_index(i)
            assert idx_sq == index_of_value(p * p)
            assert next_i == i + 1
            assert next_p == p + 2
            assert next_idx_sq == index_of_value((p + 2) ** 2)

    def test_stops_before_end_of_storage(self):
        for n in range(0, 200):
            for _, _, idx_sq in sieve_schedule(n):
                assert idx_sq < n

    def test_empty_for_short_storage(self):
        """Index of 9 is 3: storages of length <= 3 need no marking."""
        for n in range(4):
            assert list(sieve_schedule(n)) == []
        assert len(list(sieve_schedule(4))) == 1


class TestMarkSieve:
    """Test the marking step on numpy and plain storage."""

    @pytest.mark.parametrize("n,start,factor", [
        (10, 3, 3), (10, 3, 7), (12, 2, 5), (11, 10, 3), (7, 0, 1), (20, 4, 4),
    ])
    def test_marks_start_plus_multiples_of_stride(self, n, start, factor):
        expected = [not (j >= start and (j - start) % factor == 0) for j in range(n)]

        arr = np.ones(n, dtype=bool)
        mark_sieve(arr, start, factor)
        assert arr.tolist() == expected

        lst = [True] * n
        mark_sieve(lst, start, factor)
        assert lst == expected

    def test_last_cell_reachable(self):
        """A stride landing exactly on the last cell marks it."""
        lst = [True] * 10
        mark_sieve(lst, 3, 3)  # 3, 6, 9
        assert lst[9] is False

    @pytest.mark.parametrize("start", [-1, 10, 11])
    def test_start_outside_storage_raises(self, start):
        """Both storage kinds reject a start outside the table."""
        arr = np.ones(10, dtype=bool)
        with pytest.raises(IndexError):
            mark_sieve(arr, start, 3)
        assert arr.all()

        lst = [True] * 10
        with pytest.raises(IndexError):
            mark_sieve(lst, start, 3)
        assert all(lst)


class TestSift:
    """Test building sieves."""

    def test_length_50_covers_101(self):
        storage = new_storage(50)
        assert sift(storage) == 101
        assert coverage_bound(storage) == 101

    def test_coverage_bound_for_all_lengths(self):
        for n in range(0, 100):
            storage = new_storage(n)
            expected = value_at_index(n - 1) if n > 0 else 2
            assert sift(storage) == expected
            assert coverage_bound(storage) == expected

    def test_empty_and_single_cell(self):
        empty = new_storage(0)
        assert sift(empty) == 2
        assert len(empty) == 0

        single = new_storage(1)
        assert sift(single) == 3
        assert single.tolist() == [True]

    def test_agrees_with_trial_division(self):
        storage = new_storage(2000)
        sift(storage)
        for i, cell in enumerate(storage):
            assert bool(cell) == trial_division_is_prime(value_at_index(i)), value_at_index(i)

    def test_overwrites_previous_contents(self):
        storage = np.zeros(30, dtype=bool)
        storage[::2] = True
        sift(storage)
        fresh = new_storage(30)
        sift(fresh)
        assert np.array_equal(storage, fresh)

    def test_list_and_bytearray_match_numpy(self):
        n = 500
        arr = new_storage(n)
        sift(arr)

        lst = [False] * n
        assert sift(lst) == value_at_index(n - 1)
        assert lst == arr.tolist()

        buf = bytearray(n)
        assert sift(buf) == value_at_index(n - 1)
        assert [bool(b) for b in buf] == arr.tolist()

    def test_prime_squares_are_composite(self):
        storage = new_storage(5000)
        sift(storage)
        for p in [3, 5, 7, 11, 13, 97]:
            assert not storage[index_of_value(p * p)]


class TestSieveUpto:
    """Test the allocate-and-build helper."""

    def test_covers_bound(self):
        storage, max_covered = sieve_upto(100)
        assert max_covered == 101
        assert len(storage) == 50
        assert storage.dtype == bool

    def test_odd_bound_is_exact(self):
        _, max_covered = sieve_upto(51)
        assert max_covered == 51

    def test_tiny_bounds(self):
        for bound in [-5, 0, 1, 2]:
            storage, max_covered = sieve_upto(bound)
            assert len(storage) == 0
            assert max_covered == 2

    def test_verbose_prints(self, capsys):
        sieve_upto(1000, verbose=True)
        out = capsys.readouterr().out
        assert "500 cells" in out
        assert "1,001" in out


if __name__ == '__main__':
    pytest.main([__file__, '-v'])
