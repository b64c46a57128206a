"""Tests for FreeSquares and combination unranking."""

from itertools import combinations

import pytest

from chess960.core.free_squares import FreeSquares, unrank_combination


class TestUnrankCombination:
    @pytest.mark.parametrize(("n", "size"), [(5, 2), (6, 3), (8, 1), (4, 4)])
    def test_matches_itertools_order(self, n, size) -> None:
        expected = list(combinations(range(n), size))
        assert [unrank_combination(r, n, size) for r in range(len(expected))] == expected

    def test_rank_out_of_range(self) -> None:
        with pytest.raises(ValueError):
            unrank_combination(10, 5, 2)
        with pytest.raises(ValueError):
            unrank_combination(-1, 5, 2)


class TestFreeSquares:
    def test_sorted_on_construction(self) -> None:
        assert list(FreeSquares([6, 1, 3])) == [1, 3, 6]

    def test_take_shrinks(self) -> None:
        free = FreeSquares(range(8))
        assert free.take(2) == 2
        assert free.take(2) == 3
        assert free.take() == 0
        assert len(free) == 5

    def test_take_out_of_range(self) -> None:
        free = FreeSquares([0, 1])
        with pytest.raises(IndexError):
            free.take(2)

    def test_take_combination(self) -> None:
        free = FreeSquares([0, 1, 4, 6, 7])
        assert free.take_combination(5, 2) == (1, 6)
        assert list(free) == [0, 4, 7]
