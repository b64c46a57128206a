"""Tests for AppSettings."""

import logging

import pytest

from chess960.core.enums import Color
from chess960.settings import AppSettings


class TestDefaults:
    def test_defaults(self) -> None:
        s = AppSettings()
        assert s.symbols == "letters"
        assert s.color == Color.WHITE
        assert not s.mirror
        assert s.seed is None
        assert s.log_level_number == logging.WARNING

    def test_rejects_unknown_symbols(self) -> None:
        with pytest.raises(ValueError):
            AppSettings(symbols="emoji")

    def test_log_level_normalised(self) -> None:
        assert AppSettings(log_level="debug").log_level == "DEBUG"


class TestFromEnv:
    def test_empty_environment(self) -> None:
        assert AppSettings.from_env({}) == AppSettings()

    def test_reads_all_variables(self) -> None:
        s = AppSettings.from_env(
            {
                "CHESS960_SYMBOLS": "Unicode",
                "CHESS960_COLOR": "black",
                "CHESS960_MIRROR": "yes",
                "CHESS960_SEED": "42",
                "CHESS960_LOG_LEVEL": "info",
            }
        )
        assert s.symbols == "unicode"
        assert s.color == Color.BLACK
        assert s.mirror
        assert s.seed == 42
        assert s.log_level == "INFO"

    def test_log_level_from_environment(self) -> None:
        s = AppSettings.from_env({"CHESS960_LOG_LEVEL": "debug"})
        assert s.log_level_number == logging.DEBUG

    def test_numeric_levels(self) -> None:
        assert AppSettings(log_level="error").log_level_number == logging.ERROR

    @pytest.mark.parametrize(
        "env",
        [
            {"CHESS960_COLOR": "green"},
            {"CHESS960_SEED": "abc"},
            {"CHESS960_SYMBOLS": "emoji"},
            {"CHESS960_LOG_LEVEL": "loud"},
        ],
    )
    def test_invalid_values(self, env) -> None:
        with pytest.raises(ValueError):
            AppSettings.from_env(env)
