"""Identifier ↔ arrangement bijection (Scharnagl numbering, zero-based).

An identifier is a mixed-radix number built from three independent choices::

    id = krn_index * 96 + queen_index * 16 + bishop_index

* ``bishop_index`` (0–15): the light-square bishop's file pair in the low two
  bits, the dark-square bishop's in the next two.
* ``queen_index`` (0–5): the queen's position among the six other pieces.
* ``krn_index`` (0–9): the left-to-right pattern of king, rooks and knights.
"""

from __future__ import annotations

import logging
from typing import Final

from chess960.core.arrangement import Arrangement
from chess960.core.enums import PieceType
from chess960.core.free_squares import FreeSquares
from chess960.core.types import RANK_WIDTH
from chess960.core.validation import coerce_pieces, is_valid_id, violations

_LOGGER = logging.getLogger(__name__)

# Every order of K, R, R, N, N with the king between the rooks, indexed by
# the lexicographic rank of the knights' slots among the five squares.
KRN_PATTERNS: Final = (
    "NNRKR",
    "NRNKR",
    "NRKNR",
    "NRKRN",
    "RNNKR",
    "RNKNR",
    "RNKRN",
    "RKNNR",
    "RKNRN",
    "RKRNN",
)

# Bishop squares (left, right) indexed by bishop_index.
BISHOP_PAIRS: Final = (
    (0, 1), (0, 3), (0, 5), (0, 7),
    (1, 2), (2, 3), (2, 5), (2, 7),
    (1, 4), (3, 4), (4, 5), (4, 7),
    (1, 6), (3, 6), (5, 6), (6, 7),
)

_KRN_INDEX: Final = {
    tuple(PieceType.from_char(ch) for ch in pattern): index
    for index, pattern in enumerate(KRN_PATTERNS)
}
_BISHOP_INDEX: Final = {pair: index for index, pair in enumerate(BISHOP_PAIRS)}
_KRN_PIECES: Final = frozenset({PieceType.KING, PieceType.ROOK, PieceType.KNIGHT})


def encode(arrangement: object) -> int | None:
    """Identifier (0–959) of an arrangement, or ``None`` if it is illegal.

    ``arrangement`` may be an :class:`Arrangement`, a string of eight letters
    or a sequence of letters / :class:`PieceType` members.
    """
    pieces = coerce_pieces(arrangement)
    if pieces is None or violations(pieces):
        _LOGGER.debug("Cannot encode illegal arrangement %r", arrangement)
        return None

    krn = tuple(p for p in pieces if p in _KRN_PIECES)
    krn_index = _KRN_INDEX[krn]

    queen_index = [p for p in pieces if p is not PieceType.BISHOP].index(
        PieceType.QUEEN
    )

    bishops = tuple(sq for sq, p in enumerate(pieces) if p is PieceType.BISHOP)
    bishop_index = _BISHOP_INDEX[bishops]  # type: ignore[index]

    return krn_index * 96 + queen_index * 16 + bishop_index


def decode(identifier: object) -> Arrangement | None:
    """Arrangement for an identifier, or ``None`` if it is not in 0–959."""
    if not is_valid_id(identifier):
        _LOGGER.debug("Cannot decode invalid identifier %r", identifier)
        return None

    squares: list[PieceType | None] = [None] * RANK_WIDTH

    rest, light = divmod(int(identifier), 4)  # type: ignore[call-overload]
    squares[light * 2 + 1] = PieceType.BISHOP
    rest, dark = divmod(rest, 4)
    squares[dark * 2] = PieceType.BISHOP

    free = FreeSquares(sq for sq, p in enumerate(squares) if p is None)
    knights_rank, queen = divmod(rest, 6)
    squares[free.take(queen)] = PieceType.QUEEN
    for sq in free.take_combination(knights_rank, 2):
        squares[sq] = PieceType.KNIGHT

    # Left to right: the king always lands between the rooks.
    for piece in (PieceType.ROOK, PieceType.KING, PieceType.ROOK):
        squares[free.take()] = piece

    return Arrangement(tuple(squares))  # type: ignore[arg-type]
