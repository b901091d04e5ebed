from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterator, Mapping

from .charsets import CATEGORY_ORDER
from .errors import ConfigError


@dataclass(frozen=True)
class CharacterCounts:
    """Per-category character counts.

    Used both as requested minimums for generation, where ``None`` means
    "use the default", and as an observed tally from scoring, where every
    field is a concrete count.
    """

    upper: int | None = None
    lower: int | None = None
    numbers: int | None = None
    special: int | None = None

    def as_tuple(self) -> tuple[int | None, int | None, int | None, int | None]:
        return (self.upper, self.lower, self.numbers, self.special)

    def items(self) -> Iterator[tuple[str, int | None]]:
        return zip(CATEGORY_ORDER, self.as_tuple())

    def total(self) -> int:
        return sum(value or 0 for value in self.as_tuple())

    def to_dict(self) -> dict[str, Any]:
        return {key: value for key, value in self.items() if value is not None}

    @classmethod
    def from_dict(cls, payload: dict[str, Any]) -> "CharacterCounts":
        return cls(
            upper=payload.get("upper"),
            lower=payload.get("lower"),
            numbers=payload.get("numbers"),
            special=payload.get("special"),
        )


@dataclass(frozen=True)
class PasswordConfig:
    length: int | None = None
    char_counts: CharacterCounts | None = None

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {}
        if self.length is not None:
            payload["length"] = self.length
        if self.char_counts is not None:
            payload["char_counts"] = self.char_counts.to_dict()
        return payload

    @classmethod
    def from_dict(cls, payload: dict[str, Any]) -> "PasswordConfig":
        counts = payload.get("char_counts", payload.get("charCounts"))
        if counts is not None and not isinstance(counts, Mapping):
            raise ConfigError(f"char_counts must be a mapping, got {type(counts).__name__}")
        return cls(
            length=payload.get("length"),
            char_counts=CharacterCounts.from_dict(counts) if counts is not None else None,
        )


@dataclass(frozen=True)
class PasswordStrengthResult:
    strength: str
    score: int
    suggestion: str | None = None

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {"strength": self.strength, "score": self.score}
        if self.suggestion is not None:
            payload["suggestion"] = self.suggestion
        return payload
