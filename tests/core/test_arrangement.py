"""Tests for the Arrangement value object and its presentation helpers."""

import pytest

from chess960.core.arrangement import Arrangement
from chess960.core.codec import decode
from chess960.core.enums import Color, PieceType
from chess960.core.errors import Chess960Error, InvalidArrangementError
from chess960.core.types import A, D, E, H


class TestConstruction:
    def test_from_string(self) -> None:
        arrangement = Arrangement.from_string("RNBQKBNR")
        assert arrangement[A] == PieceType.ROOK
        assert arrangement[D] == PieceType.QUEEN
        assert arrangement[E] == PieceType.KING
        assert len(arrangement) == 8

    def test_from_lowercase(self) -> None:
        assert Arrangement.from_string("rnbqkbnr") == Arrangement.from_string(
            "RNBQKBNR"
        )

    def test_letters_normalised_to_piece_types(self) -> None:
        arrangement = Arrangement(tuple("RNBQKBNR"))
        assert all(isinstance(p, PieceType) for p in arrangement.pieces)

    @pytest.mark.parametrize("text", ["NONONONO", "KQRNNBBR", "BNBQRNKR", "RNBQ"])
    def test_illegal_raises(self, text) -> None:
        with pytest.raises(InvalidArrangementError):
            Arrangement.from_string(text)

    def test_error_is_value_error(self) -> None:
        assert issubclass(InvalidArrangementError, Chess960Error)
        with pytest.raises(ValueError):
            Arrangement.from_string("XXXXXXXX")

    def test_non_string_rejected(self) -> None:
        with pytest.raises(InvalidArrangementError):
            Arrangement.from_string(518)  # type: ignore[arg-type]

    def test_immutable(self) -> None:
        arrangement = Arrangement.from_string("RNBQKBNR")
        with pytest.raises(AttributeError):
            arrangement.pieces = ()  # type: ignore[misc]

    def test_hashable(self) -> None:
        a = Arrangement.from_string("RNBQKBNR")
        b = Arrangement.from_string("rnbqkbnr")
        assert len({a, b}) == 1


class TestPresentation:
    def test_str_uppercase(self) -> None:
        assert str(Arrangement.from_string("rnbqkbnr")) == "RNBQKBNR"

    def test_case_conversion(self) -> None:
        arrangement = Arrangement.from_string("RNBQKBNR")
        assert arrangement.lower() == "rnbqkbnr"
        assert arrangement.upper() == "RNBQKBNR"
        assert arrangement.to_string(Color.BLACK) == "rnbqkbnr"

    def test_unicode_white(self) -> None:
        assert Arrangement.from_string("RNBQKBNR").to_unicode() == "♖♘♗♕♔♗♘♖"

    def test_unicode_black(self) -> None:
        assert (
            Arrangement.from_string("RNBQKBNR").to_unicode(Color.BLACK) == "♜♞♝♛♚♝♞♜"
        )

    def test_squares_of(self) -> None:
        arrangement = Arrangement.from_string("RNBQKBNR")
        assert arrangement.squares_of(PieceType.ROOK) == (A, H)
        assert arrangement.squares_of(PieceType.KING) == (E,)


class TestMirror:
    def test_mirror_reverses(self) -> None:
        assert str(Arrangement.from_string("BBQNNRKR").mirror()) == "RKRNNQBB"

    def test_standard_is_symmetric_except_king_queen(self) -> None:
        assert str(Arrangement.from_string("RNBQKBNR").mirror()) == "RNBKQBNR"

    def test_mirror_of_every_position_is_valid(self) -> None:
        for identifier in range(960):
            arrangement = decode(identifier)
            assert arrangement.mirror().mirror() == arrangement
