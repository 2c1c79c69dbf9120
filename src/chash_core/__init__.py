"""chash core - protocol constants, errors and varint framing."""
from .errors import (
    ContentHashError,
    MalformedCidError,
    MalformedHexError,
    MalformedVarIntError,
    UnknownCodeError,
    UnsupportedCodecError,
)
from . import varint

__all__ = [
    "ContentHashError",
    "MalformedCidError",
    "MalformedHexError",
    "MalformedVarIntError",
    "UnknownCodeError",
    "UnsupportedCodecError",
    "varint",
]
