"""Exception types raised by the strict constructors."""

from __future__ import annotations


class Chess960Error(ValueError):
    """Base class for rejected Chess960 input."""


class InvalidArrangementError(Chess960Error):
    """The piece sequence is not a legal Chess960 back rank."""


class InvalidIdentifierError(Chess960Error):
    """The number is not an identifier in the range 0–959."""
