"""Validity predicates for arrangements and identifiers.

Both predicates fail closed: any unexpected input yields ``False``.
"""

from __future__ import annotations

import logging
from collections import Counter
from numbers import Integral
from typing import Final

from chess960.core.enums import PieceType
from chess960.core.types import RANK_WIDTH, square_name

_LOGGER = logging.getLogger(__name__)

ID_COUNT: Final = 960
MAX_ID: Final = ID_COUNT - 1

PIECE_COUNTS: Final = Counter(
    {
        PieceType.KING: 1,
        PieceType.QUEEN: 1,
        PieceType.ROOK: 2,
        PieceType.BISHOP: 2,
        PieceType.KNIGHT: 2,
    }
)


def coerce_pieces(arrangement: object) -> tuple[PieceType, ...] | None:
    """Normalise a string or sequence of symbols to a tuple of piece types.

    Accepts letters of either case and :class:`PieceType` members. Returns
    ``None`` when the input is not eight recognisable symbols.
    """
    if isinstance(arrangement, (bytes, bytearray)):
        return None
    try:
        items = tuple(arrangement)  # type: ignore[arg-type]
    except TypeError:
        return None
    if len(items) != RANK_WIDTH:
        return None

    pieces: list[PieceType] = []
    for item in items:
        if isinstance(item, PieceType):
            pieces.append(item)
        elif isinstance(item, str) and len(item) == 1:
            try:
                pieces.append(PieceType.from_char(item))
            except ValueError:
                return None
        else:
            return None
    return tuple(pieces)


def _first_and_last(pieces: tuple[PieceType, ...], piece: PieceType) -> tuple[int, int]:
    first = pieces.index(piece)
    last = len(pieces) - 1 - pieces[::-1].index(piece)
    return first, last


def violations(pieces: tuple[PieceType, ...]) -> list[str]:
    """Human-readable reasons an eight-piece rank is illegal (empty if legal)."""
    if Counter(pieces) != PIECE_COUNTS:
        return ["needs exactly K, Q, 2R, 2B and 2N"]

    problems: list[str] = []
    first_bishop, last_bishop = _first_and_last(pieces, PieceType.BISHOP)
    if (last_bishop - first_bishop) % 2 == 0:
        problems.append(
            f"bishops on {square_name(first_bishop)} and {square_name(last_bishop)} "
            "must stand on opposite-colored squares"
        )

    first_rook, last_rook = _first_and_last(pieces, PieceType.ROOK)
    king = pieces.index(PieceType.KING)
    if not first_rook < king < last_rook:
        problems.append(
            f"king on {square_name(king)} must stand between the rooks on "
            f"{square_name(first_rook)} and {square_name(last_rook)}"
        )
    return problems


def is_valid_arrangement(arrangement: object) -> bool:
    """Whether ``arrangement`` is a legal Chess960 back rank."""
    pieces = coerce_pieces(arrangement)
    if pieces is None:
        _LOGGER.debug("Not an eight-symbol rank: %r", arrangement)
        return False
    problems = violations(pieces)
    if problems:
        _LOGGER.debug("Illegal rank %r: %s", arrangement, "; ".join(problems))
        return False
    return True


def is_valid_id(identifier: object) -> bool:
    """Whether ``identifier`` is an integer in 0–959 (960 is not valid)."""
    if isinstance(identifier, bool) or not isinstance(identifier, Integral):
        return False
    return 0 <= identifier <= MAX_ID
