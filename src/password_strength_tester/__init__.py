"""Password strength scoring and strong password generation."""

from .checker import check, count_characters, evaluate, is_weak_password, score_password, strength_for_score
from .errors import ConfigError, InvalidInputError, PasswordStrengthError
from .models import CharacterCounts, PasswordConfig, PasswordStrengthResult
from .passwords import generate, generate_strong_password
from .rules import STRENGTH_TIERS, StrengthTier

__all__ = [
    "CharacterCounts",
    "ConfigError",
    "InvalidInputError",
    "PasswordConfig",
    "PasswordStrengthError",
    "PasswordStrengthResult",
    "STRENGTH_TIERS",
    "StrengthTier",
    "check",
    "count_characters",
    "evaluate",
    "generate",
    "generate_strong_password",
    "is_weak_password",
    "score_password",
    "strength_for_score",
]
