"""Decoder: recursive-descent parser from RISON text to Values.

Every ``take_*`` helper receives the full text and a start position and
returns the parsed value together with the position just past it.
"""

from __future__ import annotations

from .errors import DecodeError
from .grammar import (
    ARRAY_OPEN,
    CLOSE,
    DIGITS,
    EMPTY_ARRAY,
    EMPTY_OBJECT,
    ESCAPE,
    FALSE,
    ID_CHAR,
    ID_START,
    KEY_SEPARATOR,
    NONZERO_DIGITS,
    NULL,
    OBJECT_OPEN,
    QUOTE,
    SEPARATOR,
    TRUE,
)
from .model import Null, Value, VArray, VBool, VInt, VNumber, VObject, VStr

MAX_DEPTH = 256

_LITERALS: dict[str, Value] = {
    TRUE: VBool(True),
    FALSE: VBool(False),
    NULL: Null,
}


# ---------------------------------------------------------------------------
# Public entry point
# ---------------------------------------------------------------------------

def decode(text: str, *, max_depth: int = MAX_DEPTH) -> Value:
    """Decode RISON *text* into a Value.

    The whole input must form exactly one value. Arrays and objects may nest
    at most *max_depth* levels. Raises ``DecodeError`` otherwise.
    """
    if not isinstance(text, str):
        raise DecodeError()
    value, pos = take_value(text, 0, max_depth)
    if pos != len(text):
        raise DecodeError()
    return value


def take_value(text: str, pos: int, depth: int) -> tuple[Value, int]:
    """Dispatch on the leading character(s) at *pos*.

    *depth* is the number of container levels still allowed.
    """
    head = text[pos:pos + 2]
    if head in _LITERALS:
        return _LITERALS[head], pos + 2
    if not head:
        raise DecodeError()

    c = head[0]
    if c == "0":
        return VInt(0), pos + 1
    if c in NONZERO_DIGITS or (c == "-" and head[1:] in NONZERO_DIGITS):
        return take_number(text, pos)
    if c in ID_START:
        ident, pos = take_identifier(text, pos)
        return VStr(ident), pos
    if c == QUOTE:
        return take_string(text, pos)
    if head == ARRAY_OPEN:
        return take_array(text, pos, depth)
    if c == OBJECT_OPEN:
        return take_object(text, pos, depth)
    raise DecodeError()


# ---------------------------------------------------------------------------
# Numbers
# ---------------------------------------------------------------------------

def take_number(text: str, pos: int) -> tuple[VInt | VNumber, int]:
    """Parse ``int[.frac][e exp]`` starting at *pos*."""
    int_, pos = take_int(text, pos)

    frac: str | None = None
    if text.startswith(".", pos):
        start = pos + 1
        pos = _skip_digits(text, start)
        if pos == start:
            raise DecodeError()
        frac = text[start:pos]

    exp: int | None = None
    if text.startswith("e", pos):
        if text.startswith("0", pos + 1):
            exp, pos = 0, pos + 2
        else:
            exp, pos = take_int(text, pos + 1)

    if frac is None and exp is None:
        return VInt(int_), pos
    return VNumber(int_, frac, exp), pos


def take_int(text: str, pos: int) -> tuple[int, int]:
    """Parse ``-?[1-9][0-9]*`` starting at *pos*."""
    start = pos
    if text.startswith("-", pos):
        pos += 1
    if pos >= len(text) or text[pos] not in NONZERO_DIGITS:
        raise DecodeError()
    pos = _skip_digits(text, pos + 1)
    try:
        return int(text[start:pos]), pos
    except ValueError:
        # int/str conversion digit limit
        raise DecodeError() from None


def _skip_digits(text: str, pos: int) -> int:
    while pos < len(text) and text[pos] in DIGITS:
        pos += 1
    return pos


# ---------------------------------------------------------------------------
# Strings
# ---------------------------------------------------------------------------

def take_identifier(text: str, pos: int) -> tuple[str, int]:
    """Consume the maximal run of identifier characters at *pos*."""
    if pos >= len(text) or text[pos] not in ID_START:
        raise DecodeError()
    start = pos
    pos += 1
    while pos < len(text) and text[pos] in ID_CHAR:
        pos += 1
    return text[start:pos], pos


def take_string(text: str, pos: int) -> tuple[VStr, int]:
    """Parse a quoted string; *pos* points at the opening quote.

    ``!!`` and ``!'`` are the only escapes.
    """
    chars: list[str] = []
    pos += 1
    while pos < len(text):
        c = text[pos]
        if c == QUOTE:
            return VStr("".join(chars)), pos + 1
        if c == ESCAPE:
            escaped = text[pos + 1:pos + 2]
            if escaped not in (ESCAPE, QUOTE):
                raise DecodeError()
            chars.append(escaped)
            pos += 2
        else:
            chars.append(c)
            pos += 1
    # unterminated
    raise DecodeError()


# ---------------------------------------------------------------------------
# Containers
# ---------------------------------------------------------------------------

def take_array(text: str, pos: int, depth: int) -> tuple[VArray, int]:
    """Parse ``!(v,v,...)``; *pos* points at the ``!``."""
    if depth <= 0:
        raise DecodeError()
    if text.startswith(EMPTY_ARRAY, pos):
        return VArray(), pos + len(EMPTY_ARRAY)

    items: list[Value] = []
    pos += len(ARRAY_OPEN)
    while True:
        value, pos = take_value(text, pos, depth - 1)
        items.append(value)
        pos, closed = _take_delimiter(text, pos)
        if closed:
            return VArray(tuple(items)), pos


def take_object(text: str, pos: int, depth: int) -> tuple[VObject, int]:
    """Parse ``(k:v,k:v,...)``; *pos* points at the ``(``.

    Keys must be bare identifiers.
    """
    if depth <= 0:
        raise DecodeError()
    if text.startswith(EMPTY_OBJECT, pos):
        return VObject(), pos + len(EMPTY_OBJECT)

    entries: list[tuple[str, Value]] = []
    pos += len(OBJECT_OPEN)
    while True:
        key, pos = take_identifier(text, pos)
        if not text.startswith(KEY_SEPARATOR, pos):
            raise DecodeError()
        value, pos = take_value(text, pos + 1, depth - 1)
        entries.append((key, value))
        pos, closed = _take_delimiter(text, pos)
        if closed:
            return VObject(tuple(entries)), pos


def _take_delimiter(text: str, pos: int) -> tuple[int, bool]:
    """Consume the ``,`` or ``)`` that must follow a container element.

    Nested containers and quoted strings have already been consumed whole by
    ``take_value``, so a delimiter seen here always belongs to the current
    level. Returns the new position and whether the container was closed.
    """
    c = text[pos:pos + 1]
    if c == SEPARATOR:
        return pos + 1, False
    if c == CLOSE:
        return pos + 1, True
    raise DecodeError()
