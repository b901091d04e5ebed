from __future__ import annotations

import logging
import random
import secrets
from dataclasses import replace
from typing import Any, Mapping

from .charsets import LOWER, charset_for
from .errors import ConfigError
from .models import CharacterCounts, PasswordConfig


logger = logging.getLogger(__name__)

DEFAULT_LENGTH = 9
DEFAULT_CHAR_COUNTS = CharacterCounts(upper=2, lower=3, numbers=2, special=2)

# SystemRandom reads from the OS CSPRNG and keeps no state of its own.
_SYSTEM_RANDOM = secrets.SystemRandom()


def _require_count(name: str, value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ConfigError(f"{name} must be an integer, got {type(value).__name__}")
    if value < 0:
        raise ConfigError(f"{name} must be >= 0")
    return value


def resolve_config(config: PasswordConfig | None = None) -> tuple[int, CharacterCounts]:
    """Apply defaults to ``config`` and validate the result.

    Unset fields fall back to the defaults independently; an explicit 0 is
    kept. Raises :class:`ConfigError` when the minimums do not fit in the
    length.
    """

    config = config or PasswordConfig()
    length = _require_count("length", config.length or DEFAULT_LENGTH)
    requested = config.char_counts or CharacterCounts()
    resolved = CharacterCounts(
        *(
            _require_count(category, default if value is None else value)
            for (category, value), default in zip(requested.items(), DEFAULT_CHAR_COUNTS.as_tuple())
        )
    )
    if resolved.total() > length:
        raise ConfigError("Total character counts cannot exceed password length")
    return length, resolved


def generate(config: PasswordConfig | None = None, *, rng: random.Random | None = None) -> str:
    length, counts = resolve_config(config)
    rng = rng or _SYSTEM_RANDOM

    chars: list[str] = []
    pool_parts: list[str] = []
    for category, minimum in counts.items():
        if minimum > 0:
            charset = charset_for(category)
            chars.extend(rng.choice(charset) for _ in range(minimum))
            pool_parts.append(charset)

    remaining = length - len(chars)
    if remaining > 0:
        pool = "".join(pool_parts) or LOWER
        chars.extend(rng.choice(pool) for _ in range(remaining))
        logger.debug("Filled %d characters from a pool of %d", remaining, len(pool))

    rng.shuffle(chars)
    logger.debug("Generated password of length %d", len(chars))
    return "".join(chars)


def _coerce_config(config: PasswordConfig | Mapping[str, Any] | None) -> PasswordConfig:
    if config is None:
        return PasswordConfig()
    if isinstance(config, PasswordConfig):
        return config
    if isinstance(config, Mapping):
        return PasswordConfig.from_dict(dict(config))
    raise ConfigError(f"Unsupported password config type: {type(config).__name__}")


def generate_strong_password(
    config: PasswordConfig | Mapping[str, Any] | None = None,
    *,
    length: int | None = None,
    char_counts: CharacterCounts | Mapping[str, Any] | None = None,
    rng: random.Random | None = None,
) -> str:
    """Generate a random password.

    ``config`` may be a :class:`PasswordConfig` or a mapping such as
    ``{"length": 12, "charCounts": {"special": 0}}``. The ``length`` and
    ``char_counts`` keywords override the matching parts of ``config``.
    """

    resolved = _coerce_config(config)
    if length is not None:
        resolved = replace(resolved, length=length)
    if char_counts is not None:
        if not isinstance(char_counts, CharacterCounts):
            if not isinstance(char_counts, Mapping):
                raise ConfigError(f"Unsupported char_counts type: {type(char_counts).__name__}")
            char_counts = CharacterCounts.from_dict(dict(char_counts))
        resolved = replace(resolved, char_counts=char_counts)
    return generate(resolved, rng=rng)
