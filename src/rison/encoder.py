"""Encoder: renders a Value as RISON text."""

from __future__ import annotations

from .errors import EncodeError
from .grammar import (
    ARRAY_OPEN,
    CLOSE,
    EMPTY_ARRAY,
    EMPTY_OBJECT,
    ESCAPE,
    FALSE,
    KEY_SEPARATOR,
    NULL,
    OBJECT_OPEN,
    QUOTE,
    SEPARATOR,
    TRUE,
    is_digits,
    is_identifier,
)
from .model import NullType, Value, VArray, VBool, VInt, VNumber, VObject, VStr


# ---------------------------------------------------------------------------
# Public entry point
# ---------------------------------------------------------------------------

def encode(value: Value) -> str:
    """Encode *value* as RISON text.

    Raises ``EncodeError`` if *value* is not a well-formed Value.
    """
    if isinstance(value, NullType):
        return NULL
    if isinstance(value, VBool):
        if not isinstance(value.value, bool):
            raise EncodeError("VBool must hold a bool")
        return TRUE if value.value else FALSE
    if isinstance(value, VInt):
        return encode_int(value.value)
    if isinstance(value, VNumber):
        return encode_number(value)
    if isinstance(value, VStr):
        return encode_string(value.value)
    if isinstance(value, VArray):
        return encode_array(value)
    if isinstance(value, VObject):
        return encode_object(value)
    raise EncodeError(f"not a RISON value: {type(value).__name__}")


# ---------------------------------------------------------------------------
# Numbers
# ---------------------------------------------------------------------------

def encode_int(n: int) -> str:
    if not isinstance(n, int) or isinstance(n, bool):
        raise EncodeError("integer expected")
    try:
        return str(n)
    except ValueError:
        # int/str conversion digit limit
        raise EncodeError("integer too large to render") from None


def encode_number(number: VNumber) -> str:
    """Render ``<int>[.<frac>][e<exp>]``.

    At least one of ``frac`` / ``exp`` must be present, and the integer part
    must not be zero; neither form can be decoded back to the same value.
    """
    if number.frac is None and number.exp is None:
        raise EncodeError("VNumber needs a frac or an exp; use VInt")
    text = encode_int(number.int_)
    if number.int_ == 0:
        raise EncodeError("VNumber integer part must not be zero")
    if number.frac is not None:
        if not isinstance(number.frac, str) or not is_digits(number.frac):
            raise EncodeError("frac must be a non-empty string of digits")
        text += "." + number.frac
    if number.exp is not None:
        text += "e" + encode_int(number.exp)
    return text


# ---------------------------------------------------------------------------
# Strings
# ---------------------------------------------------------------------------

def encode_string(s: str) -> str:
    """Render *s* bare if it is identifier-shaped, quoted otherwise.

    Only ``'`` and ``!`` are escaped inside quotes.
    """
    if not isinstance(s, str):
        raise EncodeError("string expected")
    if is_identifier(s):
        return s
    body = s.replace(ESCAPE, ESCAPE + ESCAPE).replace(QUOTE, ESCAPE + QUOTE)
    return QUOTE + body + QUOTE


# ---------------------------------------------------------------------------
# Containers
# ---------------------------------------------------------------------------

def encode_array(array: VArray) -> str:
    if not array.items:
        return EMPTY_ARRAY
    return ARRAY_OPEN + SEPARATOR.join(encode(item) for item in array.items) + CLOSE


def encode_object(obj: VObject) -> str:
    if not obj.entries:
        return EMPTY_OBJECT
    pairs = [
        encode_string(key) + KEY_SEPARATOR + encode(value)
        for key, value in obj.entries
    ]
    return OBJECT_OPEN + SEPARATOR.join(pairs) + CLOSE
