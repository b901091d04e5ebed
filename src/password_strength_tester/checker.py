"""Point-based password strength scoring."""

from __future__ import annotations

import logging
import random
import re

from .charsets import LOWER, UPPER
from .errors import InvalidInputError
from .models import CharacterCounts, PasswordStrengthResult
from .passwords import generate
from .rules import (
    ALL_TYPES_BONUS,
    ALPHA_RUNS,
    CLASS_RULES,
    CONSECUTIVE_PENALTY,
    DIGIT_RUNS,
    EXTRA_LENGTH,
    MAX_SCORE,
    MIN_LENGTH,
    MIN_SCORE,
    STRENGTH_TIERS,
    SUGGESTION_THRESHOLD,
    StrengthTier,
)


logger = logging.getLogger(__name__)

_UPPER_RE = re.compile(r"[A-Z]")
_LOWER_RE = re.compile(r"[a-z]")
_DIGIT_RE = re.compile(r"[0-9]")
# Anything that is neither an ASCII word character nor (Unicode) whitespace.
_SPECIAL_RE = re.compile(r"[^A-Za-z0-9_\s]")
_ASCII_LOWER = str.maketrans(UPPER, LOWER)


def _require_password(password: object) -> str:
    if not password:
        raise InvalidInputError("Password is required")
    if not isinstance(password, str):
        raise InvalidInputError(f"Password must be a string, got {type(password).__name__}")
    return password


def count_characters(password: str) -> CharacterCounts:
    return CharacterCounts(
        upper=len(_UPPER_RE.findall(password)),
        lower=len(_LOWER_RE.findall(password)),
        numbers=len(_DIGIT_RE.findall(password)),
        special=len(_SPECIAL_RE.findall(password)),
    )


def has_digit_sequence(password: str) -> bool:
    return any(run in password for run in DIGIT_RUNS)


def has_letter_sequence(password: str) -> bool:
    lowered = password.translate(_ASCII_LOWER)
    return any(run in lowered for run in ALPHA_RUNS)


def score_password(password: str) -> int:
    """Return the clamped 0-100 score for ``password`` without suggesting anything."""

    password = _require_password(password)
    score = 0
    applied: list[str] = []

    if len(password) >= MIN_LENGTH.threshold:
        score += MIN_LENGTH.score
        applied.append("min_length")
        if len(password) >= EXTRA_LENGTH.threshold:
            score += EXTRA_LENGTH.score
            applied.append("extra_length")

    counts = count_characters(password)
    tally = dict(counts.items())
    for rule in CLASS_RULES:
        count = tally[rule.category]
        if count >= 1:
            score += rule.one_char
            applied.append(rule.category)
            if count >= rule.threshold:
                score += rule.multiple_chars
                applied.append(f"{rule.category}_multiple")

    if has_digit_sequence(password):
        score += CONSECUTIVE_PENALTY
        applied.append("digit_sequence")
    if has_letter_sequence(password):
        score += CONSECUTIVE_PENALTY
        applied.append("letter_sequence")

    if all(count for count in counts.as_tuple()):
        score += ALL_TYPES_BONUS
        applied.append("all_types")

    clamped = min(max(score, MIN_SCORE), MAX_SCORE)
    logger.debug("Scored password of length %d: raw=%d clamped=%d rules=%s", len(password), score, clamped, applied)
    return clamped


def strength_for_score(score: int) -> StrengthTier:
    for tier in STRENGTH_TIERS:
        if score >= tier.min_score:
            return tier
    return STRENGTH_TIERS[-1]


def evaluate(password: str, *, rng: random.Random | None = None) -> PasswordStrengthResult:
    """Score ``password`` and classify it.

    Passwords scoring below the "Medium" tier come back with a generated
    replacement in ``suggestion``. ``rng`` is handed to the generator.
    """

    score = score_password(password)
    tier = strength_for_score(score)
    if score < SUGGESTION_THRESHOLD:
        logger.debug("Password rated %s; attaching suggestion", tier.label)
        return PasswordStrengthResult(strength=tier.label, score=score, suggestion=generate(rng=rng))
    return PasswordStrengthResult(strength=tier.label, score=score)


check = evaluate


def is_weak_password(password: str) -> bool:
    return score_password(password) < SUGGESTION_THRESHOLD
