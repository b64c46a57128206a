"""Starting position: an identifier paired with its arrangement."""

from __future__ import annotations

from dataclasses import dataclass

from chess960.core.arrangement import Arrangement
from chess960.core.codec import decode, encode
from chess960.core.errors import InvalidArrangementError, InvalidIdentifierError
from chess960.core.generator import RandomSource, generate
from chess960.core.validation import is_valid_id


@dataclass(frozen=True, slots=True)
class StartingPosition:
    """A numbered Chess960 starting position.

    Unlike :func:`encode` / :func:`decode`, the constructors here raise on
    invalid input.
    """

    identifier: int
    arrangement: Arrangement

    def __post_init__(self) -> None:
        if not is_valid_id(self.identifier):
            raise InvalidIdentifierError(
                f"Identifier must be an integer in 0-959: {self.identifier!r}"
            )
        if not isinstance(self.arrangement, Arrangement):
            object.__setattr__(self, "arrangement", Arrangement(self.arrangement))
        if encode(self.arrangement) != self.identifier:
            raise InvalidIdentifierError(
                f"{self.arrangement} is position {encode(self.arrangement)}, "
                f"not {self.identifier!r}"
            )

    @classmethod
    def from_id(cls, identifier: int) -> StartingPosition:
        arrangement = decode(identifier)
        if arrangement is None:
            raise InvalidIdentifierError(
                f"Identifier must be an integer in 0-959: {identifier!r}"
            )
        return cls(identifier, arrangement)

    @classmethod
    def from_arrangement(cls, arrangement: object) -> StartingPosition:
        identifier = encode(arrangement)
        if identifier is None:
            raise InvalidArrangementError(f"Illegal arrangement: {arrangement!r}")
        return cls.from_id(identifier)

    @classmethod
    def random(cls, rng: RandomSource | None = None) -> StartingPosition:
        return cls.from_arrangement(generate(rng))

    @property
    def twin(self) -> StartingPosition:
        """Position whose arrangement is this one mirrored."""
        return StartingPosition.from_arrangement(self.arrangement.mirror())

    @property
    def is_standard(self) -> bool:
        return self.identifier == STANDARD_ID

    def __str__(self) -> str:
        return f"{self.identifier} {self.arrangement}"


STANDARD_ID = 518
STANDARD = StartingPosition.from_id(STANDARD_ID)
