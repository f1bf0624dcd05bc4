"""Conversion between Values and plain Python data."""

from __future__ import annotations

from decimal import Decimal
from typing import Any

from .encoder import encode_number
from .model import (
    Null,
    NullType,
    Value,
    VArray,
    VBool,
    VInt,
    VNumber,
    VObject,
    VStr,
)


def to_python(value: Value) -> Any:
    """Convert a Value into plain Python data.

    - ``Null`` → ``None``
    - ``VNumber`` → ``Decimal`` built from the exact digits
    - ``VArray`` → ``list``
    - ``VObject`` → ``dict`` (for duplicate keys the last one wins)
    """
    if isinstance(value, NullType):
        return None
    if isinstance(value, (VBool, VInt, VStr)):
        return value.value
    if isinstance(value, VNumber):
        return Decimal(encode_number(value))
    if isinstance(value, VArray):
        return [to_python(item) for item in value.items]
    if isinstance(value, VObject):
        return {key: to_python(item) for key, item in value.entries}
    raise TypeError(f"not a RISON value: {type(value).__name__}")


def from_python(obj: Any) -> Value:
    """Convert plain Python data into a Value.

    Floats and decimals become ``VNumber`` in scientific form with a single
    non-zero leading digit, e.g. ``0.25`` → ``VNumber(2, "5", -1)``.
    """
    if obj is None:
        return Null
    if isinstance(obj, bool):
        return VBool(obj)
    if isinstance(obj, int):
        return VInt(obj)
    if isinstance(obj, str):
        return VStr(obj)
    if isinstance(obj, (float, Decimal)):
        return _decimal_to_value(Decimal(repr(obj)) if isinstance(obj, float) else obj)
    if isinstance(obj, (list, tuple)):
        return VArray(tuple(from_python(item) for item in obj))
    if isinstance(obj, dict):
        entries = []
        for key, item in obj.items():
            if not isinstance(key, str):
                raise TypeError(f"object keys must be str, not {type(key).__name__}")
            entries.append((key, from_python(item)))
        return VObject(tuple(entries))
    raise TypeError(f"cannot convert {type(obj).__name__} to a RISON value")


def _decimal_to_value(d: Decimal) -> VInt | VNumber:
    if not d.is_finite():
        raise ValueError(f"cannot represent {d} in RISON")
    if d.is_zero():
        return VInt(0)

    sign, digits, exponent = d.as_tuple()
    lead = -digits[0] if sign else digits[0]
    frac = "".join(str(digit) for digit in digits[1:]) or None
    exp = exponent + len(digits) - 1 or None
    if frac is None and exp is None:
        return VInt(lead)
    return VNumber(lead, frac, exp)
