from __future__ import annotations

import string


UPPER = string.ascii_uppercase
LOWER = string.ascii_lowercase
NUMBERS = string.digits
SPECIAL = "!@#$%^&*()_+-=[]{}|;:,.<>?"

# Generation order matters: minimums are drawn in this order before filler.
CATEGORY_ORDER = ("upper", "lower", "numbers", "special")

CHAR_SETS: tuple[tuple[str, str], ...] = (
    ("upper", UPPER),
    ("lower", LOWER),
    ("numbers", NUMBERS),
    ("special", SPECIAL),
)


def charset_for(category: str) -> str:
    for name, charset in CHAR_SETS:
        if name == category:
            return charset
    raise KeyError(f"Unknown character category '{category}'")
