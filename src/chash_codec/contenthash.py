"""Content hash encode/decode - the public surface."""
from __future__ import annotations

import re

import base58
from multiformats import multibase

from chash_core import varint
from chash_core.errors import ContentHashError, MalformedHexError, UnsupportedCodecError
from chash_core.protocol import CID_BASE, CID_V1, HEX_MARKER

from . import multicodec
from .profiles import parse_cid, resolve

_HEX_RE = re.compile(r"(?:[0-9a-fA-F]{2})*")


def hex_to_bytes(text: str) -> bytes:
    """Strict hex decode; a leading ``0x`` marker is tolerated."""
    if text[:2].lower() == HEX_MARKER:
        text = text[2:]
    if not _HEX_RE.fullmatch(text):
        raise MalformedHexError(f"Invalid hex string: {text!r}")
    return bytes.fromhex(text)


def decode(content_hash: str) -> str:
    """Decode a hex content hash into its display form."""
    buffer = hex_to_bytes(content_hash)
    codec = multicodec.get_codec(buffer)
    value = multicodec.remove_prefix(buffer)
    return resolve(codec).decode(value)


def encode(codec: str, value: str) -> str:
    """Encode ``value`` under ``codec``; returns lowercase hex without ``0x``."""
    if not multicodec.is_codec(codec):
        raise UnsupportedCodecError(codec)
    payload = resolve(codec).encode(value)
    return multicodec.add_prefix(codec, payload).hex()


def get_codec(content_hash: str) -> str | None:
    """Codec name of a hex content hash, or None if it cannot be read."""
    try:
        return multicodec.get_codec(hex_to_bytes(content_hash))
    except ContentHashError:
        return None


def cid_v0_to_v1_base32(ipfs_hash: str) -> str:
    """Convert a CIDv0 to a base32 CIDv1. A CIDv1 is re-encoded in base32."""
    cid = parse_cid(ipfs_hash)
    if cid.version == 0:
        mh = base58.b58decode(ipfs_hash)
        raw = varint.encode(CID_V1) + varint.encode(cid.codec.code) + mh
        return multibase.encode(raw, CID_BASE)
    return cid.encode(CID_BASE)
