"""Core enumerations for the back-rank domain."""

from __future__ import annotations

from enum import IntEnum


class Color(IntEnum):
    """Side color."""

    WHITE = 0
    BLACK = 1

    @property
    def opposite(self) -> Color:
        return Color(1 - self.value)

    def __str__(self) -> str:
        return self.name.lower()


class PieceType(IntEnum):
    """Back-rank piece types ordered by conventional value."""

    KNIGHT = 2
    BISHOP = 3
    ROOK = 4
    QUEEN = 5
    KING = 6

    @property
    def char(self) -> str:
        """Uppercase letter, e.g. ``PieceType.KNIGHT.char == 'N'``."""
        return _CHARS[self]

    @classmethod
    def from_char(cls, char: str) -> PieceType:
        """Piece type for a letter of either case, e.g. 'q' → QUEEN."""
        try:
            return _FROM_CHAR[char.upper()]
        except (KeyError, AttributeError):
            raise ValueError(f"Invalid piece character: {char!r}") from None

    def __str__(self) -> str:
        return self.char


_CHARS: dict[PieceType, str] = {
    PieceType.KNIGHT: "N",
    PieceType.BISHOP: "B",
    PieceType.ROOK: "R",
    PieceType.QUEEN: "Q",
    PieceType.KING: "K",
}
_FROM_CHAR: dict[str, PieceType] = {v: k for k, v in _CHARS.items()}
