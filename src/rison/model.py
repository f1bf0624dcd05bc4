"""Data model for RISON values."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union


# ---------------------------------------------------------------------------
# Null singleton for !n
# ---------------------------------------------------------------------------

class NullType:
    """Sentinel for the RISON null literal."""

    _instance: NullType | None = None

    def __new__(cls) -> NullType:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "Null"

    def __bool__(self) -> bool:
        return False

    def __reduce__(self) -> str:
        return "Null"


Null = NullType()


# ---------------------------------------------------------------------------
# Scalars
# ---------------------------------------------------------------------------

@dataclass(slots=True, frozen=True)
class VBool:
    value: bool


@dataclass(slots=True, frozen=True)
class VInt:
    value: int


@dataclass(slots=True, frozen=True)
class VNumber:
    """A number with a fractional and/or exponent part.

    ``frac`` keeps the digits exactly as written, so ``VNumber(1, "50")`` and
    ``VNumber(1, "5")`` are different values.
    """

    int_: int
    frac: str | None = None
    exp: int | None = None


@dataclass(slots=True, frozen=True)
class VStr:
    value: str


# ---------------------------------------------------------------------------
# Containers
# ---------------------------------------------------------------------------

@dataclass(slots=True, frozen=True)
class VArray:
    items: tuple[Value, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "items", tuple(self.items))


@dataclass(slots=True, frozen=True)
class VObject:
    """Ordered key/value pairs. Duplicate keys are kept as they are."""

    entries: tuple[tuple[str, Value], ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(
            self, "entries", tuple((key, value) for key, value in self.entries)
        )


Value = Union[NullType, VBool, VInt, VNumber, VStr, VArray, VObject]
