"""Fixed scoring and tier tables used by the strength checker."""

from __future__ import annotations

from dataclasses import dataclass

from .charsets import LOWER, NUMBERS


@dataclass(frozen=True)
class LengthRule:
    score: int
    threshold: int


@dataclass(frozen=True)
class ClassRule:
    category: str
    one_char: int
    multiple_chars: int
    threshold: int


@dataclass(frozen=True)
class StrengthTier:
    min_score: int
    label: str


MIN_LENGTH = LengthRule(score=15, threshold=8)
EXTRA_LENGTH = LengthRule(score=10, threshold=12)

CLASS_RULES: tuple[ClassRule, ...] = (
    ClassRule("upper", one_char=15, multiple_chars=5, threshold=2),
    ClassRule("lower", one_char=10, multiple_chars=5, threshold=3),
    ClassRule("numbers", one_char=10, multiple_chars=5, threshold=2),
    ClassRule("special", one_char=5, multiple_chars=5, threshold=2),
)

ALL_TYPES_BONUS = 15
CONSECUTIVE_PENALTY = -10
SEQUENCE_RUN_LENGTH = 3

MIN_SCORE = 0
MAX_SCORE = 100


def _ascending_runs(alphabet: str, size: int = SEQUENCE_RUN_LENGTH) -> tuple[str, ...]:
    return tuple(alphabet[i : i + size] for i in range(len(alphabet) - size + 1))


DIGIT_RUNS = _ascending_runs(NUMBERS)
ALPHA_RUNS = _ascending_runs(LOWER)

VERY_STRONG = StrengthTier(90, "Very Strong")
STRONG = StrengthTier(70, "Strong")
MEDIUM = StrengthTier(50, "Medium")
WEAK = StrengthTier(30, "Weak")
VERY_WEAK = StrengthTier(0, "Very Weak")

# Strongest first; thresholds strictly decrease.
STRENGTH_TIERS: tuple[StrengthTier, ...] = (VERY_STRONG, STRONG, MEDIUM, WEAK, VERY_WEAK)

# Scores below this threshold get a generated replacement suggestion.
SUGGESTION_THRESHOLD = MEDIUM.min_score
