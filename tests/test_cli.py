"""Tests for the chess960 command-line front end."""

import pytest

from chess960.cli import main


def _run(capsys, *argv: str, environ=None) -> tuple[int, str, str]:
    code = main(list(argv), environ={} if environ is None else environ)
    out, err = capsys.readouterr()
    return code, out, err


class TestDecodeEncode:
    def test_decode(self, capsys) -> None:
        code, out, _ = _run(capsys, "decode", "518", "0")
        assert code == 0
        assert out.splitlines() == ["RNBQKBNR", "BBQNNRKR"]

    def test_decode_invalid(self, capsys) -> None:
        code, out, err = _run(capsys, "decode", "960")
        assert code == 1
        assert out == ""
        assert "960" in err

    def test_decode_unicode_black_mirror(self, capsys) -> None:
        code, out, _ = _run(capsys, "--unicode", "--black", "--mirror", "decode", "518")
        assert code == 0
        assert out.strip() == "♜♞♝♚♛♝♞♜"

    def test_encode(self, capsys) -> None:
        code, out, _ = _run(capsys, "encode", "RNBQKBNR", "rkrnnqbb")
        assert code == 0
        assert out.splitlines() == ["518", "959"]

    def test_encode_invalid(self, capsys) -> None:
        code, _, err = _run(capsys, "encode", "NONONONO")
        assert code == 1
        assert "NONONONO" in err

    def test_environment_settings(self, capsys) -> None:
        code, out, _ = _run(
            capsys, "decode", "518", environ={"CHESS960_COLOR": "black"}
        )
        assert code == 0
        assert out.strip() == "rnbqkbnr"

    def test_bad_environment(self, capsys) -> None:
        code, _, err = _run(
            capsys, "decode", "518", environ={"CHESS960_SYMBOLS": "emoji"}
        )
        assert code == 2
        assert "Configuration error" in err


class TestValidate:
    def test_mixed(self, capsys) -> None:
        code, out, _ = _run(capsys, "validate", "RNBQKBNR", "BNBQRNKR", "xyz")
        assert code == 1
        lines = out.splitlines()
        assert lines[0] == "RNBQKBNR: valid"
        assert lines[1].startswith("BNBQRNKR: invalid (bishops")
        assert lines[2].startswith("xyz: invalid")

    def test_all_valid(self, capsys) -> None:
        code, _, _ = _run(capsys, "validate", "BBQNNRKR")
        assert code == 0


class TestRandom:
    def test_seeded_is_reproducible(self, capsys) -> None:
        _, first, _ = _run(capsys, "random", "-n", "5", "--seed", "7")
        _, second, _ = _run(capsys, "random", "-n", "5", "--seed", "7")
        assert first == second
        assert len(first.splitlines()) == 5

    def test_with_id(self, capsys) -> None:
        code, out, _ = _run(capsys, "random", "--with-id", "--seed", "1")
        assert code == 0
        identifier, arrangement = out.split()
        _, decoded, _ = _run(capsys, "decode", identifier)
        assert decoded.strip() == arrangement

    def test_seed_from_environment(self, capsys) -> None:
        env = {"CHESS960_SEED": "3"}
        _, first, _ = _run(capsys, "random", environ=env)
        _, second, _ = _run(capsys, "random", "--seed", "3")
        assert first == second

    def test_bad_count(self, capsys) -> None:
        code, _, _ = _run(capsys, "random", "--count", "0")
        assert code == 2


class TestTableAndCheck:
    def test_table(self, capsys) -> None:
        code, out, _ = _run(capsys, "table")
        lines = out.splitlines()
        assert code == 0
        assert len(lines) == 960
        assert lines[518] == "518 RNBQKBNR"

    def test_check(self, capsys) -> None:
        code, out, _ = _run(capsys, "check")
        assert code == 0
        assert "960/960" in out


class TestParser:
    def test_command_required(self) -> None:
        with pytest.raises(SystemExit):
            main([], environ={})
