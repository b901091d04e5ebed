from __future__ import annotations

import argparse
import json
import logging
from dataclasses import replace
from getpass import getpass
from pathlib import Path

from .checker import check
from .config import DEFAULT_SETTINGS_PATH, ensure_settings_file, load_settings, settings_to_config
from .errors import ConfigError, PasswordStrengthError
from .models import CharacterCounts
from .passwords import generate


logger = logging.getLogger(__name__)


def _settings_path(args: argparse.Namespace) -> Path | None:
    if not args.settings:
        return None
    return Path(args.settings).expanduser().resolve()


def _cmd_check(args: argparse.Namespace) -> int:
    password = args.password if args.password is not None else getpass("Password to check: ")
    result = check(password)
    if args.json:
        print(json.dumps(result.to_dict()))
        return 0
    print(f"Strength: {result.strength}")
    print(f"Score: {result.score}/100")
    if result.suggestion:
        print(f"Suggested replacement: {result.suggestion}")
    return 0


def _cmd_generate(args: argparse.Namespace) -> int:
    if args.count < 1:
        raise ConfigError("--count must be >= 1")
    config = settings_to_config(load_settings(_settings_path(args)))
    counts = config.char_counts or CharacterCounts()
    overrides = {
        key: value
        for key, value in (
            ("upper", args.upper),
            ("lower", args.lower),
            ("numbers", args.numbers),
            ("special", args.special),
        )
        if value is not None
    }
    config = replace(config, char_counts=replace(counts, **overrides))
    if args.length is not None:
        config = replace(config, length=args.length)
    logger.debug("Generating %d password(s) with %s", args.count, config.to_dict())
    for _ in range(args.count):
        print(generate(config))
    return 0


def _cmd_init_settings(args: argparse.Namespace) -> int:
    target = _settings_path(args) or DEFAULT_SETTINGS_PATH
    existed = target.exists()
    path = ensure_settings_file(target, force=args.force)
    if existed and not args.force:
        print(f"Settings already present: {path}")
    else:
        print(f"Wrote default settings: {path}")
    return 0


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Password Strength Tester - score passwords and generate strong ones")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    sub = parser.add_subparsers(dest="command", required=True)

    cmd_check = sub.add_parser("check", help="Score a password and suggest a replacement when weak")
    cmd_check.add_argument("password", nargs="?", default=None, help="Password to check (prompted when omitted)")
    cmd_check.add_argument("--json", action="store_true", help="Print the result as JSON")
    cmd_check.set_defaults(func=_cmd_check)

    cmd_generate = sub.add_parser("generate", help="Generate random passwords")
    cmd_generate.add_argument("--length", type=int, default=None, help="Total password length")
    cmd_generate.add_argument("--upper", type=int, default=None, help="Minimum uppercase letters")
    cmd_generate.add_argument("--lower", type=int, default=None, help="Minimum lowercase letters")
    cmd_generate.add_argument("--numbers", type=int, default=None, help="Minimum digits")
    cmd_generate.add_argument("--special", type=int, default=None, help="Minimum special characters")
    cmd_generate.add_argument("--count", type=int, default=1, help="Number of passwords to print")
    cmd_generate.add_argument("--settings", default=None, help="Path to a JSON settings file")
    cmd_generate.set_defaults(func=_cmd_generate)

    cmd_init = sub.add_parser("init-settings", help="Write the default settings file")
    cmd_init.add_argument("--settings", default=None, help="Path to write the settings file to")
    cmd_init.add_argument("--force", action="store_true", help="Overwrite an existing settings file")
    cmd_init.set_defaults(func=_cmd_init_settings)

    return parser


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s - %(message)s",
    )
    try:
        return int(args.func(args))
    except PasswordStrengthError as exc:
        print(f"Error: {exc}")
        return 2


if __name__ == "__main__":
    raise SystemExit(main())
