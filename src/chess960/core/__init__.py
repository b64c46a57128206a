"""Core domain layer — pure back-rank logic with zero external dependencies.

Quick start::

    from chess960.core import decode, encode, generate

    decode(518)              # Arrangement('RNBQKBNR')
    encode("RNBQKBNR")       # 518
    generate()               # uniformly random legal arrangement
"""

from chess960.core.arrangement import Arrangement
from chess960.core.codec import BISHOP_PAIRS, KRN_PATTERNS, decode, encode
from chess960.core.enums import Color, PieceType
from chess960.core.errors import (
    Chess960Error,
    InvalidArrangementError,
    InvalidIdentifierError,
)
from chess960.core.free_squares import FreeSquares, unrank_combination
from chess960.core.generator import (
    RandomSource,
    default_random_source,
    generate,
    random_id,
)
from chess960.core.position import STANDARD, STANDARD_ID, StartingPosition
from chess960.core.types import (
    DARK_SQUARES,
    LIGHT_SQUARES,
    Square,
    is_dark_square,
    square_name,
)
from chess960.core.validation import ID_COUNT, MAX_ID, is_valid_arrangement, is_valid_id

__all__ = [
    # Enums
    "Color",
    "PieceType",
    # Types / helpers
    "DARK_SQUARES",
    "LIGHT_SQUARES",
    "Square",
    "is_dark_square",
    "square_name",
    "FreeSquares",
    "unrank_combination",
    # Errors
    "Chess960Error",
    "InvalidArrangementError",
    "InvalidIdentifierError",
    # Validation
    "ID_COUNT",
    "MAX_ID",
    "is_valid_arrangement",
    "is_valid_id",
    # Domain objects
    "Arrangement",
    "StartingPosition",
    "STANDARD",
    "STANDARD_ID",
    # Codec
    "BISHOP_PAIRS",
    "KRN_PATTERNS",
    "decode",
    "encode",
    # Generation
    "RandomSource",
    "default_random_source",
    "generate",
    "random_id",
]
