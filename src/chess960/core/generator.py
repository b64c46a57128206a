"""Direct random construction of a starting arrangement.

Follows the sequential single-die method: bishops on one dark and one light
square, then queen and knights on free squares, then rook, king, rook on the
three squares that remain, left to right.
"""

from __future__ import annotations

import random
from typing import Protocol

from chess960.core.arrangement import Arrangement
from chess960.core.enums import PieceType
from chess960.core.free_squares import FreeSquares
from chess960.core.types import DARK_SQUARES, LIGHT_SQUARES, RANK_WIDTH
from chess960.core.validation import ID_COUNT


class RandomSource(Protocol):
    """Anything that draws a uniform integer in ``[0, stop)``.

    :class:`random.Random` and :class:`random.SystemRandom` qualify. A source
    shared between threads must hand out an independent value per call.
    """

    def randrange(self, stop: int, /) -> int: ...


def default_random_source() -> RandomSource:
    """OS-entropy backed source used when none is injected."""
    return random.SystemRandom()


def generate(rng: RandomSource | None = None) -> Arrangement:
    """Uniformly random legal arrangement, built without an identifier."""
    if rng is None:
        rng = default_random_source()

    squares: list[PieceType | None] = [None] * RANK_WIDTH

    dark = FreeSquares(DARK_SQUARES)
    light = FreeSquares(LIGHT_SQUARES)
    for color_squares in (dark, light):
        sq = color_squares.take(rng.randrange(len(color_squares)))
        squares[sq] = PieceType.BISHOP

    free = FreeSquares([*dark, *light])
    for piece in (PieceType.QUEEN, PieceType.KNIGHT, PieceType.KNIGHT):
        squares[free.take(rng.randrange(len(free)))] = piece

    for piece in (PieceType.ROOK, PieceType.KING, PieceType.ROOK):
        squares[free.take()] = piece

    return Arrangement(tuple(squares))  # type: ignore[arg-type]


def random_id(rng: RandomSource | None = None) -> int:
    """Uniformly random identifier in 0–959."""
    if rng is None:
        rng = default_random_source()
    return rng.randrange(ID_COUNT)
