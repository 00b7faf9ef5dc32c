from __future__ import annotations

from typing import List

CRC32_POLY = 3988292384  # 0xEDB88320, reflected


def _build_table(poly: int = CRC32_POLY) -> List[int]:
    table: List[int] = []
    for byte in range(256):
        v = byte
        for _ in range(8):
            v = (poly ^ (v >> 1)) if v & 1 else (v >> 1)
        table.append(v)
    return table


_TABLE = _build_table()


def _code_units(text: str) -> List[int]:
    """UTF-16 code units of `text` (surrogate pairs split in two)."""
    raw = text.encode("utf-16-le", "surrogatepass")
    return [raw[i] | (raw[i + 1] << 8) for i in range(0, len(raw), 2)]


def crc32(text: str) -> int:
    """CRC32 of `text`, folding one UTF-16 code unit per step.

    Only the low byte of each code unit enters the register, so ASCII and
    Latin-1 text hash exactly like the standard CRC32 of their bytes.
    """
    reg = 0xFFFFFFFF
    for unit in _code_units(str(text)):
        reg = (reg >> 8) ^ _TABLE[(reg ^ unit) & 0xFF]
    return (~reg) & 0xFFFFFFFF


checksum = crc32

__all__ = ["CRC32_POLY", "crc32", "checksum"]
