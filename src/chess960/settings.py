"""Application settings for the command-line front end."""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from chess960.core.enums import Color

ENV_PREFIX = "CHESS960_"
SYMBOL_STYLES = ("letters", "unicode")
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

# ── Settings data class ──────────────────────────────────────────────────────


@dataclass
class AppSettings:
    """All user-configurable settings."""

    # Output
    symbols: str = "letters"
    color: Color = Color.WHITE
    mirror: bool = False

    # Randomness
    seed: int | None = None

    # Diagnostics
    log_level: str = "WARNING"

    def __post_init__(self) -> None:
        if self.symbols not in SYMBOL_STYLES:
            raise ValueError(f"Unknown symbol style: {self.symbols!r}")
        self.log_level = self.log_level.upper()
        if self.log_level not in LOG_LEVELS:
            raise ValueError(f"Unknown log level: {self.log_level!r}")

    @property
    def log_level_number(self) -> int:
        return logging.getLevelNamesMapping()[self.log_level]

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> AppSettings:
        """Settings from ``CHESS960_*`` variables, defaults for the rest."""
        env = os.environ if environ is None else environ
        overrides: dict[str, Any] = {}

        symbols = env.get(ENV_PREFIX + "SYMBOLS")
        if symbols:
            overrides["symbols"] = symbols.lower()

        color = env.get(ENV_PREFIX + "COLOR")
        if color:
            try:
                overrides["color"] = Color[color.upper()]
            except KeyError:
                raise ValueError(f"Unknown color: {color!r}") from None

        mirror = env.get(ENV_PREFIX + "MIRROR")
        if mirror:
            overrides["mirror"] = mirror.lower() in ("1", "true", "yes", "on")

        seed = env.get(ENV_PREFIX + "SEED")
        if seed:
            try:
                overrides["seed"] = int(seed)
            except ValueError:
                raise ValueError(f"Seed must be an integer: {seed!r}") from None

        level = env.get(ENV_PREFIX + "LOG_LEVEL")
        if level:
            overrides["log_level"] = level

        return cls(**overrides)
