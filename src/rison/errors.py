"""Exceptions raised by the RISON codec."""

from __future__ import annotations

from enum import Enum


class RisonError(ValueError):
    """Base class for every failure raised by the codec."""


class DecodeError(RisonError):
    """Raised by ``decode`` on text outside the RISON grammar."""

    def __init__(self, message: str = "malformed RISON input") -> None:
        super().__init__(message)


class EncodeError(RisonError):
    """Raised by ``encode`` on a value it cannot render."""


class InvalidInput(RisonError):
    """Raised when unwrapping a failed ``load`` / ``dump`` result."""

    def __init__(self, message: str = "invalid input") -> None:
        super().__init__(message)


class ErrorKind(Enum):
    """The single error kind carried by a failed ``load`` / ``dump``."""

    INVALID_INPUT = "invalid_input"
