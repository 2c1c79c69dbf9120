"""Payload profiles: how a namespace codec's payload maps to a display string."""
from __future__ import annotations

from enum import Enum

import base58
from multiformats import CID

from chash_core.errors import MalformedCidError
from chash_core.protocol import CID_BASE, CID_V1, DAG_PB, IPFS_NS, IPNS_NS, SWARM_NS

from . import multicodec


def parse_cid(data: bytes | str) -> CID:
    try:
        return CID.decode(data)
    except Exception as e:
        raise MalformedCidError(f"Invalid CID: {e}") from e


def _b58_multihash(payload: bytes) -> str:
    cid = parse_cid(payload)
    raw = bytes(cid)
    if cid.version == 0:
        # binary v0 is the bare multihash
        mh = raw
    else:
        # drop the version byte, then the content-type identifier
        mh = multicodec.remove_prefix(raw[1:])
    return base58.b58encode(mh).decode("ascii")


def _hex_digest(payload: bytes) -> str:
    return parse_cid(payload).raw_digest.hex()


def _utf8(payload: bytes) -> str:
    # Undecodable bytes become U+FFFD.
    return bytes(payload).decode("utf-8", errors="replace")


def _dag_pb_cid(value: str) -> bytes:
    try:
        mh = base58.b58decode(value)
    except ValueError as e:
        raise MalformedCidError(f"Invalid base58 multihash: {value!r}") from e
    try:
        cid = CID(CID_BASE, CID_V1, DAG_PB, mh)
    except Exception as e:
        raise MalformedCidError(f"Invalid multihash: {e}") from e
    return bytes(cid)


class Profile(Enum):
    SWARM = "swarm"
    IPFS = "ipfs"
    PLAIN_TEXT = "plain-text"

    def decode(self, payload: bytes) -> str:
        match self:
            case Profile.SWARM:
                return _hex_digest(payload)
            case Profile.IPFS:
                return _b58_multihash(payload)
            case Profile.PLAIN_TEXT:
                return _utf8(payload)
        raise AssertionError(self)

    def encode(self, value: str) -> bytes:
        match self:
            case Profile.SWARM:
                # Manifest layout for swarm-ns is not settled.
                raise NotImplementedError("swarm-ns encoding is not supported")
            case Profile.IPFS:
                return _dag_pb_cid(value)
            case Profile.PLAIN_TEXT:
                return value.encode("utf-8")
        raise AssertionError(self)


_PROFILES = {
    SWARM_NS: Profile.SWARM,
    IPFS_NS: Profile.IPFS,
    IPNS_NS: Profile.IPFS,
}


def resolve(codec: str) -> Profile:
    return _PROFILES.get(codec, Profile.PLAIN_TEXT)
