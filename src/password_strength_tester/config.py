from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from .charsets import CATEGORY_ORDER
from .errors import ConfigError
from .models import CharacterCounts, PasswordConfig
from .passwords import DEFAULT_CHAR_COUNTS, DEFAULT_LENGTH


SETTINGS_FILENAME = "password_strength.json"
DEFAULT_SETTINGS_PATH = Path.home() / ".config" / "password-strength-tester" / SETTINGS_FILENAME


def default_settings() -> dict[str, Any]:
    return {
        "generator": {
            "length": DEFAULT_LENGTH,
            "char_counts": DEFAULT_CHAR_COUNTS.to_dict(),
        },
    }


def load_json(path: Path, fallback: Any) -> Any:
    if not path.exists():
        return fallback
    try:
        return json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError:
        return fallback


def save_json(path: Path, payload: Any) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(payload, indent=2), encoding="utf-8")


def load_settings(path: Path | None = None) -> dict[str, Any]:
    settings = load_json(path or DEFAULT_SETTINGS_PATH, default_settings())
    if not isinstance(settings, dict):
        raise ConfigError(f"Settings file must contain a JSON object: {path or DEFAULT_SETTINGS_PATH}")
    return settings


def ensure_settings_file(path: Path | None = None, *, force: bool = False) -> Path:
    target = path or DEFAULT_SETTINGS_PATH
    if force or not target.exists():
        save_json(target, default_settings())
    return target


def settings_to_config(settings: dict[str, Any]) -> PasswordConfig:
    generator = settings.get("generator", {})
    if not isinstance(generator, dict):
        raise ConfigError("'generator' settings must be an object")
    counts = generator.get("char_counts", {})
    if not isinstance(counts, dict):
        raise ConfigError("'generator.char_counts' settings must be an object")
    length = generator.get("length")
    if length is not None and (isinstance(length, bool) or not isinstance(length, int)):
        raise ConfigError("'generator.length' must be an integer")
    for key in CATEGORY_ORDER:
        value = counts.get(key)
        if value is not None and (isinstance(value, bool) or not isinstance(value, int)):
            raise ConfigError(f"'generator.char_counts.{key}' must be an integer")
    return PasswordConfig(length=length, char_counts=CharacterCounts.from_dict(counts))
