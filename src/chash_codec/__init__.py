"""chash codec - multicodec registry and content hash encode/decode."""
from .contenthash import cid_v0_to_v1_base32, decode, encode, get_codec
from .multicodec import CodecEntry, MulticodecTable
from .profiles import Profile, resolve

__all__ = [
    "decode",
    "encode",
    "get_codec",
    "cid_v0_to_v1_base32",
    "CodecEntry",
    "MulticodecTable",
    "Profile",
    "resolve",
]
