from chash_codec import contenthash, multicodec
from chash_codec.profiles import resolve
from chash_core.errors import ContentHashError
from .const import ERRORS


def _fail(code: str, **detail) -> dict:
    err = {"code": code, "message": ERRORS[code], **detail}
    return {"status": "FAIL", "error_count": 1, "errors": [err]}


def _canonical(codec: str, value: str, buffer: bytes) -> bool | None:
    try:
        payload = resolve(codec).encode(value)
    except NotImplementedError:
        return None
    except ContentHashError:
        return False
    return multicodec.add_prefix(codec, payload) == buffer


def verify_contenthash(content_hash: str, expected_codec: str | None = None) -> dict:
    try:
        buffer = contenthash.hex_to_bytes(content_hash)
        codec = multicodec.get_codec(buffer)
    except ContentHashError as e:
        return _fail(e.code, detail=str(e))

    if expected_codec is not None and codec != expected_codec:
        return _fail("E_CODEC_MISMATCH", expected=expected_codec, found=codec)

    try:
        value = resolve(codec).decode(multicodec.remove_prefix(buffer))
    except ContentHashError as e:
        return _fail(e.code, codec=codec, detail=str(e))

    return {
        "status": "PASS",
        "error_count": 0,
        "errors": [],
        "codec": codec,
        "value": value,
        "canonical": _canonical(codec, value, buffer),
    }
