"""Unsigned varint codec (multiformats flavour)."""
from __future__ import annotations

from .errors import MalformedVarIntError
from .protocol import (
    VARINT_CONTINUATION,
    VARINT_MAX_BYTES,
    VARINT_MAX_VALUE,
    VARINT_PAYLOAD_MASK,
)


def encode(value: int) -> bytes:
    """Encode ``value`` as little-endian 7-bit groups."""
    if value < 0 or value > VARINT_MAX_VALUE:
        raise ValueError(f"varint out of range: {value}")
    out = bytearray()
    while True:
        group = value & VARINT_PAYLOAD_MASK
        value >>= 7
        if value:
            out.append(group | VARINT_CONTINUATION)
        else:
            out.append(group)
            return bytes(out)


def decode(buffer: bytes, cursor: int = 0) -> tuple[int, int]:
    """Decode the varint at ``cursor``.

    Returns ``(value, consumed)``. Only the minimal encoding is accepted, so
    ``encode(value)`` always reproduces the consumed bytes.
    """
    value = 0
    for i in range(VARINT_MAX_BYTES):
        pos = cursor + i
        if pos >= len(buffer):
            raise MalformedVarIntError(f"Truncated varint at offset {cursor}")
        b = buffer[pos]
        value |= (b & VARINT_PAYLOAD_MASK) << (7 * i)
        if not b & VARINT_CONTINUATION:
            if b == 0 and i > 0:
                raise MalformedVarIntError(f"Non-canonical varint at offset {cursor}")
            return value, i + 1
    raise MalformedVarIntError(f"Varint longer than {VARINT_MAX_BYTES} bytes at offset {cursor}")
