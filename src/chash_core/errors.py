"""Error types shared by the codec and the verifier."""
from __future__ import annotations


class ContentHashError(ValueError):
    """Base class; ``code`` keys into chash_verify.const.ERRORS."""

    code = "E_CONTENTHASH"


class UnsupportedCodecError(ContentHashError):
    code = "E_CODEC_UNSUPPORTED"

    def __init__(self, name: str):
        super().__init__(f"The {name} codec is not supported")
        self.name = name


class UnknownCodeError(ContentHashError):
    code = "E_CODE_UNKNOWN"

    def __init__(self, value: int):
        super().__init__(f"The code {value:#x} is not found in the codec table")
        self.value = value


class MalformedVarIntError(ContentHashError):
    code = "E_VARINT_MALFORMED"


class MalformedCidError(ContentHashError):
    code = "E_CID_MALFORMED"


class MalformedHexError(ContentHashError):
    code = "E_HEX_MALFORMED"
