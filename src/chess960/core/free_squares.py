"""Shrinking ordered set of unoccupied squares."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from math import comb

from chess960.core.types import Square


def unrank_combination(rank: int, n: int, size: int) -> tuple[int, ...]:
    """Return the ``rank``-th ``size``-combination of ``range(n)``.

    Combinations are ordered lexicographically, the same order in which
    :func:`itertools.combinations` yields them::

        >>> unrank_combination(0, 5, 2)
        (0, 1)
        >>> unrank_combination(9, 5, 2)
        (3, 4)
    """
    if not 0 <= rank < comb(n, size):
        raise ValueError(f"Combination rank {rank} out of range for C({n}, {size})")

    picks: list[int] = []
    candidate = 0
    while len(picks) < size:
        # Combinations that start with ``candidate`` at this position
        count = comb(n - candidate - 1, size - len(picks) - 1)
        if rank < count:
            picks.append(candidate)
        else:
            rank -= count
        candidate += 1
    return tuple(picks)


class FreeSquares:
    """Unoccupied squares in ascending order, removed as pieces are placed.

    Each placement routine builds its own instance and throws it away.
    """

    __slots__ = ("_squares",)

    def __init__(self, squares: Iterable[Square]) -> None:
        self._squares: list[Square] = sorted(squares)

    def __len__(self) -> int:
        return len(self._squares)

    def __iter__(self) -> Iterator[Square]:
        return iter(self._squares)

    def __repr__(self) -> str:
        return f"FreeSquares({self._squares!r})"

    def take(self, nth: int = 0) -> Square:
        """Remove and return the ``nth`` free square from the left."""
        if not 0 <= nth < len(self._squares):
            raise IndexError(
                f"No free square #{nth} (only {len(self._squares)} left)"
            )
        return self._squares.pop(nth)

    def take_combination(self, rank: int, size: int) -> tuple[Square, ...]:
        """Remove and return the free squares named by a combination rank."""
        picks = unrank_combination(rank, len(self._squares), size)
        chosen = tuple(self._squares[i] for i in picks)
        for i in reversed(picks):
            del self._squares[i]
        return chosen
