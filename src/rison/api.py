"""Safe entry points: ``load`` / ``dump`` never raise on bad input.

Any failure of the underlying ``decode`` / ``encode`` is collapsed into a
single ``Err`` carrying ``ErrorKind.INVALID_INPUT``.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Union

from .decoder import MAX_DEPTH, decode
from .encoder import encode
from .errors import ErrorKind, InvalidInput, RisonError
from .model import Value

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Result types
# ---------------------------------------------------------------------------

@dataclass(slots=True, frozen=True)
class Ok:
    value: object

    @property
    def ok(self) -> bool:
        return True

    def unwrap(self) -> object:
        return self.value


@dataclass(slots=True, frozen=True)
class Err:
    error: ErrorKind = ErrorKind.INVALID_INPUT

    @property
    def ok(self) -> bool:
        return False

    def unwrap(self) -> object:
        raise InvalidInput()


Result = Union[Ok, Err]


# ---------------------------------------------------------------------------
# load / dump
# ---------------------------------------------------------------------------

def load(text: str, *, max_depth: int = MAX_DEPTH) -> Result:
    """Parse *text*; ``Ok(value)`` on success, ``Err()`` otherwise."""
    try:
        return Ok(decode(text, max_depth=max_depth))
    except (RisonError, RecursionError):
        logger.debug("load: rejected malformed RISON input")
        return Err()


def dump(value: Value) -> Result:
    """Serialize *value*; ``Ok(text)`` on success, ``Err()`` otherwise."""
    try:
        return Ok(encode(value))
    except (RisonError, RecursionError):
        logger.debug("dump: rejected value that cannot be rendered")
        return Err()
