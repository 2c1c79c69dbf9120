"""Content hash protocol constants.

Single source of truth for codec names, wire markers and varint limits.
Keep this file stable. Encoder and verifier must remain synchronized.
"""

# External hex form
HEX_MARKER = "0x"

# Namespace codecs with a dedicated profile
SWARM_NS = "swarm-ns"
IPFS_NS = "ipfs-ns"
IPNS_NS = "ipns-ns"

# CID layout: [version varint | content-type varint | multihash]
CID_V1 = 1
DAG_PB = "dag-pb"
CID_BASE = "base32"

# Varint framing: 7 value bits per byte, high bit = continuation
VARINT_CONTINUATION = 0x80
VARINT_PAYLOAD_MASK = 0x7F
VARINT_MAX_BYTES = 9  # 63 value bits
VARINT_MAX_VALUE = (1 << 63) - 1

# Embedded multicodec table (package data of chash_codec)
TABLE_PACKAGE = "chash_codec"
TABLE_RESOURCE = "table.csv"
