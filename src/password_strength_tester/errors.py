from __future__ import annotations


class PasswordStrengthError(Exception):
    pass


class InvalidInputError(PasswordStrengthError, ValueError):
    pass


class ConfigError(PasswordStrengthError, ValueError):
    pass
