"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

import random

import pytest

from chess960.core.lookup import POSITIONS


@pytest.fixture(scope="session")
def reference_positions() -> tuple[str, ...]:
    """All 960 arrangements from the reference table, indexed by identifier."""
    return POSITIONS


@pytest.fixture
def seeded_rng() -> random.Random:
    """Deterministic random source so statistical tests are reproducible."""
    return random.Random(960)
