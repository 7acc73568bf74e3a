"""Keyword matching over GBK code units, so double-byte characters never match halfway."""

from __future__ import annotations

ENCODING = "gbk"


def _as_bytes(text: str | bytes) -> bytes:
    if isinstance(text, (bytes, bytearray)):
        return bytes(text)
    return text.encode(ENCODING, errors="replace")


def to_code_units(text: str | bytes) -> list[int]:
    """Split text into GBK code units.

    A byte of 0x80 or above starts a double-byte unit and is combined with the
    byte after it (0 when it is the last byte); every other byte is one unit.
    Text given as ``str`` is first encoded as GBK, with unencodable characters
    replaced by ``?``.
    """
    units: list[int] = []
    stream = iter(_as_bytes(text))
    for byte in stream:
        if byte >= 0x80:
            units.append(byte << 8 | next(stream, 0))
        else:
            units.append(byte)
    return units


def include(text: str | bytes, keyword: str | bytes) -> bool:
    """Return True if keyword occurs in text as a run of whole code units.

    An empty keyword occurs in every text.
    """
    haystack = to_code_units(text)
    needle = to_code_units(keyword)
    width = len(needle)
    return any(
        haystack[start:start + width] == needle
        for start in range(len(haystack) - width + 1)
    )