"""Tests for the arrangement and identifier validators."""

import pytest

from chess960.core.enums import PieceType
from chess960.core.validation import (
    coerce_pieces,
    is_valid_arrangement,
    is_valid_id,
    violations,
)


class TestValidArrangements:
    def test_reference_table_all_valid(self, reference_positions) -> None:
        for text in reference_positions:
            assert is_valid_arrangement(text), text

    def test_standard_position(self) -> None:
        assert is_valid_arrangement("RNBQKBNR")

    def test_lowercase_accepted(self) -> None:
        assert is_valid_arrangement("rnbqkbnr")

    def test_list_of_letters(self) -> None:
        assert is_valid_arrangement(list("RNBQKBNR"))

    def test_piece_types(self) -> None:
        pieces = [PieceType.from_char(ch) for ch in "BBQNNRKR"]
        assert is_valid_arrangement(pieces)


class TestInvalidArrangements:
    def test_wrong_multiplicities(self) -> None:
        assert not is_valid_arrangement("NONONONO")

    def test_rooks_on_one_side_of_king(self) -> None:
        assert not is_valid_arrangement("KQRNNBBR")

    def test_both_rooks_left_of_king(self) -> None:
        assert not is_valid_arrangement("RRKQNNBB")

    def test_bishops_on_same_color(self) -> None:
        assert not is_valid_arrangement("BNBQRNKR")

    @pytest.mark.parametrize(
        "value",
        [
            "",
            "RNBQKBN",
            "RNBQKBNRR",
            "RNBQKBNX",
            b"RNBQKBNR",
            ["R", "N", "B", "Q", "K", "B", "N", "RR"],
            [4, 2, 3, 5, 6, 3, 2, 4],
            None,
            518,
        ],
    )
    def test_malformed_input_fails_closed(self, value) -> None:
        assert not is_valid_arrangement(value)


class TestViolations:
    def test_legal_has_none(self) -> None:
        assert violations(coerce_pieces("RNBQKBNR")) == []

    def test_reports_bishops_and_king(self) -> None:
        problems = violations(coerce_pieces("BRBRKQNN"))
        assert len(problems) == 2

    def test_reports_material(self) -> None:
        assert violations(coerce_pieces("QQRKRBBN")) == [
            "needs exactly K, Q, 2R, 2B and 2N"
        ]

    def test_messages_name_the_squares(self) -> None:
        assert violations(coerce_pieces("BNBQRNKR")) == [
            "bishops on a and c must stand on opposite-colored squares"
        ]
        assert violations(coerce_pieces("KQRNNBBR")) == [
            "king on a must stand between the rooks on c and h"
        ]


class TestCoercePieces:
    def test_mixed_case(self) -> None:
        assert coerce_pieces("RnBqKbNr") == coerce_pieces("RNBQKBNR")

    def test_wrong_length(self) -> None:
        assert coerce_pieces("RNB") is None


class TestValidId:
    @pytest.mark.parametrize("value", [0, 1, 518, 959])
    def test_in_range(self, value) -> None:
        assert is_valid_id(value)

    @pytest.mark.parametrize("value", [-1, 960, 10_000])
    def test_out_of_range(self, value) -> None:
        assert not is_valid_id(value)

    @pytest.mark.parametrize("value", [5.0, "5", None, True, False])
    def test_non_integers(self, value) -> None:
        assert not is_valid_id(value)
