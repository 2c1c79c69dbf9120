"""Multicodec registry: codec name <-> numeric code, varint framed.

The table is read once from the embedded ``table.csv`` and is read-only
afterwards. Records are ``name, tag, code[, status, description]``; only
codes written with the ``0x`` marker are loaded.
"""
from __future__ import annotations

import re
import threading
from dataclasses import dataclass
from importlib import resources
from types import MappingProxyType
from typing import Iterable, Iterator, Mapping
from warnings import warn

from chash_core import varint
from chash_core.errors import UnknownCodeError, UnsupportedCodecError
from chash_core.protocol import HEX_MARKER, TABLE_PACKAGE, TABLE_RESOURCE, VARINT_MAX_VALUE

_HEX_CODE_RE = re.compile(re.escape(HEX_MARKER) + r"[0-9a-fA-F]+")


@dataclass(frozen=True)
class CodecEntry:
    name: str
    code: int


def _parse_record(line: str) -> CodecEntry | None:
    fields = line.split(",")
    if len(fields) < 3:
        return None
    name = fields[0].strip()
    raw = fields[2].strip()
    if not name or not _HEX_CODE_RE.fullmatch(raw):
        return None
    code = int(raw[len(HEX_MARKER):], 16)
    if code > VARINT_MAX_VALUE:
        return None
    return CodecEntry(name, code)


class MulticodecTable:
    """Immutable bidirectional codec table."""

    def __init__(self, by_name: Mapping[str, int], by_code: Mapping[int, str]):
        self.by_name: Mapping[str, int] = MappingProxyType(dict(by_name))
        self.by_code: Mapping[int, str] = MappingProxyType(dict(by_code))

    @classmethod
    def from_lines(cls, lines: Iterable[str]) -> "MulticodecTable":
        """Build a table from raw records.

        A later record overrides an earlier one that shares its name or its
        code. The displaced binding is dropped in both directions so the table
        stays one-to-one.
        """
        by_name: dict[str, int] = {}
        by_code: dict[int, str] = {}
        for line in lines:
            if not line.strip():
                continue
            entry = _parse_record(line)
            if entry is None:
                continue

            old_code = by_name.get(entry.name)
            if old_code is not None and old_code != entry.code:
                warn(f"Codec {entry.name!r} rebound from {old_code:#x} to {entry.code:#x}")
                by_code.pop(old_code, None)
            old_name = by_code.get(entry.code)
            if old_name is not None and old_name != entry.name:
                warn(f"Code {entry.code:#x} rebound from {old_name!r} to {entry.name!r}")
                by_name.pop(old_name, None)

            by_name[entry.name] = entry.code
            by_code[entry.code] = entry.name
        return cls(by_name, by_code)

    def __len__(self) -> int:
        return len(self.by_name)

    def __contains__(self, name: object) -> bool:
        return name in self.by_name

    def __iter__(self) -> Iterator[CodecEntry]:
        for code in sorted(self.by_code):
            yield CodecEntry(self.by_code[code], code)


_table: MulticodecTable | None = None
_table_lock = threading.Lock()


def _load_default() -> MulticodecTable:
    text = resources.files(TABLE_PACKAGE).joinpath(TABLE_RESOURCE).read_text(encoding="utf-8")
    return MulticodecTable.from_lines(text.splitlines())


def table() -> MulticodecTable:
    """Return the process-wide table, loading it on first use."""
    global _table
    if _table is None:
        with _table_lock:
            if _table is None:
                _table = _load_default()
    return _table


def is_codec(name: str) -> bool:
    return name in table()


def get_code(name: str) -> int:
    try:
        return table().by_name[name]
    except KeyError:
        raise UnsupportedCodecError(name) from None


def get_prefix(name: str) -> bytes:
    """Varint-encoded identifier for ``name``."""
    return varint.encode(get_code(name))


def add_prefix(name: str, payload: bytes) -> bytes:
    return get_prefix(name) + bytes(payload)


def extract_prefix(buffer: bytes) -> bytes:
    """Leading identifier of ``buffer``, re-encoded."""
    value, _ = varint.decode(buffer)
    return varint.encode(value)


def remove_prefix(buffer: bytes) -> bytes:
    return bytes(buffer[len(extract_prefix(buffer)):])


def get_codec(buffer: bytes) -> str:
    """Name of the codec that prefixes ``buffer``."""
    value, _ = varint.decode(buffer)
    try:
        return table().by_code[value]
    except KeyError:
        raise UnknownCodeError(value) from None
