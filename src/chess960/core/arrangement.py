"""Arrangement value object: one legal Chess960 back rank."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

from chess960.core.enums import Color, PieceType
from chess960.core.errors import InvalidArrangementError
from chess960.core.types import Square
from chess960.core.validation import coerce_pieces, violations

_UNICODE: dict[tuple[Color, PieceType], str] = {
    (Color.WHITE, PieceType.KNIGHT): "♘",
    (Color.WHITE, PieceType.BISHOP): "♗",
    (Color.WHITE, PieceType.ROOK): "♖",
    (Color.WHITE, PieceType.QUEEN): "♕",
    (Color.WHITE, PieceType.KING): "♔",
    (Color.BLACK, PieceType.KNIGHT): "♞",
    (Color.BLACK, PieceType.BISHOP): "♝",
    (Color.BLACK, PieceType.ROOK): "♜",
    (Color.BLACK, PieceType.QUEEN): "♛",
    (Color.BLACK, PieceType.KING): "♚",
}


@dataclass(frozen=True, slots=True)
class Arrangement:
    """Immutable, always-legal sequence of eight back-rank pieces.

    Squares are indexed 0–7 from the a-file to the h-file.
    """

    pieces: tuple[PieceType, ...]

    def __post_init__(self) -> None:
        pieces = coerce_pieces(self.pieces)
        if pieces is None:
            raise InvalidArrangementError(
                f"Arrangement needs eight piece symbols: {self.pieces!r}"
            )
        problems = violations(pieces)
        if problems:
            text = "".join(p.char for p in pieces)
            raise InvalidArrangementError(
                f"Illegal arrangement {text!r}: {'; '.join(problems)}"
            )
        object.__setattr__(self, "pieces", pieces)

    @classmethod
    def from_string(cls, text: str) -> Arrangement:
        """Parse eight piece letters of either case, e.g. ``'rnbqkbnr'``."""
        pieces = coerce_pieces(text) if isinstance(text, str) else None
        if pieces is None:
            raise InvalidArrangementError(f"Invalid arrangement string: {text!r}")
        return cls(pieces)

    # ── Sequence protocol ────────────────────────────────────────────────

    def __len__(self) -> int:
        return len(self.pieces)

    def __iter__(self) -> Iterator[PieceType]:
        return iter(self.pieces)

    def __getitem__(self, sq: Square) -> PieceType:
        return self.pieces[sq]

    def squares_of(self, piece_type: PieceType) -> tuple[Square, ...]:
        """Squares holding ``piece_type``, left to right."""
        return tuple(sq for sq, p in enumerate(self.pieces) if p is piece_type)

    # ── Presentation ─────────────────────────────────────────────────────

    def __str__(self) -> str:
        return self.to_string()

    def to_string(self, color: Color = Color.WHITE) -> str:
        """Letters, uppercase for White and lowercase for Black."""
        text = "".join(p.char for p in self.pieces)
        return text if color == Color.WHITE else text.lower()

    def upper(self) -> str:
        return self.to_string(Color.WHITE)

    def lower(self) -> str:
        return self.to_string(Color.BLACK)

    def to_unicode(self, color: Color = Color.WHITE) -> str:
        """Chess glyphs, e.g. ``'♖♘♗♕♔♗♘♖'``."""
        return "".join(_UNICODE[(color, p)] for p in self.pieces)

    def mirror(self) -> Arrangement:
        """Left-right reflection (the arrangement's "twin")."""
        return Arrangement(self.pieces[::-1])
