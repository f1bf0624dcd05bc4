"""rison: encoder and decoder for RISON, the URI-friendly JSON variant."""

from .api import Err, Ok, Result, dump, load
from .convert import from_python, to_python
from .decoder import MAX_DEPTH, decode
from .encoder import encode
from .errors import DecodeError, EncodeError, ErrorKind, InvalidInput, RisonError
from .grammar import is_identifier
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

__all__ = [
    "load",
    "dump",
    "encode",
    "decode",
    "Ok",
    "Err",
    "Result",
    "ErrorKind",
    "RisonError",
    "DecodeError",
    "EncodeError",
    "InvalidInput",
    "MAX_DEPTH",
    "Null",
    "NullType",
    "Value",
    "VBool",
    "VInt",
    "VNumber",
    "VStr",
    "VArray",
    "VObject",
    "from_python",
    "to_python",
    "is_identifier",
]
