"""Character classes and literal tokens of the RISON grammar."""

from __future__ import annotations

import string

DIGITS = frozenset(string.digits)
NONZERO_DIGITS = frozenset("123456789")

ID_START = frozenset(string.ascii_letters + "_./~")
ID_CHAR = ID_START | DIGITS | frozenset("-")

ESCAPE = "!"
QUOTE = "'"

TRUE = "!t"
FALSE = "!f"
NULL = "!n"

ARRAY_OPEN = "!("
OBJECT_OPEN = "("
CLOSE = ")"
SEPARATOR = ","
KEY_SEPARATOR = ":"

EMPTY_ARRAY = "!()"
EMPTY_OBJECT = "()"


def is_identifier(s: str) -> bool:
    """Return True if *s* can be written without quotes."""
    if not s or s[0] not in ID_START:
        return False
    return all(c in ID_CHAR for c in s[1:])


def is_digits(s: str) -> bool:
    """Return True if *s* is a non-empty run of ASCII digits."""
    return bool(s) and all(c in DIGITS for c in s)
