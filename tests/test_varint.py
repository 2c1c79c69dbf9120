import pytest

from chash_core import varint
from chash_core.errors import MalformedVarIntError


def test_known_encodings():
    assert varint.encode(0) == b"\x00"
    assert varint.encode(1) == b"\x01"
    assert varint.encode(127) == b"\x7f"
    assert varint.encode(128) == b"\x80\x01"
    assert varint.encode(300) == b"\xac\x02"
    assert varint.encode(0xe3) == b"\xe3\x01"
    assert varint.encode(0x01bc) == b"\xbc\x03"


@pytest.mark.parametrize("value", [0, 1, 127, 128, 255, 16383, 16384, 0xb29910, 2**32, 2**63 - 1])
def test_decode_reverses_encode(value):
    b = varint.encode(value)
    assert varint.decode(b) == (value, len(b))


def test_decode_at_cursor_ignores_trailing_bytes():
    buf = b"\xff" + varint.encode(0xe5) + b"payload"
    assert varint.decode(buf, 1) == (0xe5, 2)


def test_truncated_varint():
    with pytest.raises(MalformedVarIntError):
        varint.decode(b"")
    with pytest.raises(MalformedVarIntError):
        varint.decode(b"\x80\x80")


def test_non_canonical_varint_rejected():
    with pytest.raises(MalformedVarIntError):
        varint.decode(b"\x80\x00")
    with pytest.raises(MalformedVarIntError):
        varint.decode(b"\xe3\x81\x00")


def test_overlong_varint_rejected():
    with pytest.raises(MalformedVarIntError):
        varint.decode(b"\xff" * 10)


def test_encode_range():
    with pytest.raises(ValueError):
        varint.encode(-1)
    with pytest.raises(ValueError):
        varint.encode(2**63)
