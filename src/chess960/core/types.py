"""Square type alias and helpers for a single back rank.

Rank layout (left to right, White's point of view):
    a=0, b=1, c=2, d=3, e=4, f=5, g=6, h=7

Even squares are dark, odd squares are light (a1 is a dark square).
"""

from __future__ import annotations

from typing import Final, TypeAlias

Square: TypeAlias = int  # 0–7

RANK_WIDTH: Final = 8


def square_name(sq: Square) -> str:
    """File letter of a square, e.g. 0 → 'a'."""
    if not is_valid_square(sq):
        raise ValueError(f"Invalid square index: {sq!r}")
    return chr(ord("a") + sq)


def is_valid_square(sq: int) -> bool:
    """Check whether integer is a valid square index on the rank."""
    return 0 <= sq < RANK_WIDTH


def is_dark_square(sq: Square) -> bool:
    return sq % 2 == 0


# ── Named square constants ──────────────────────────────────────────────────

A, B, C, D, E, F, G, H = range(RANK_WIDTH)

DARK_SQUARES: Final = (A, C, E, G)
LIGHT_SQUARES: Final = (B, D, F, H)
