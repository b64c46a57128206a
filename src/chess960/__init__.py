"""Chess960 (Fischer Random) starting positions.

- core: identifier ↔ arrangement codec, validation, random generation
- settings: output / randomness configuration
- cli: ``chess960`` command-line front end
"""

from chess960.core import (
    STANDARD,
    Arrangement,
    Color,
    InvalidArrangementError,
    InvalidIdentifierError,
    PieceType,
    StartingPosition,
    decode,
    encode,
    generate,
    is_valid_arrangement,
    is_valid_id,
)

__version__ = "1.0.0"

__all__ = [
    "STANDARD",
    "Arrangement",
    "Color",
    "InvalidArrangementError",
    "InvalidIdentifierError",
    "PieceType",
    "StartingPosition",
    "decode",
    "encode",
    "generate",
    "is_valid_arrangement",
    "is_valid_id",
]
