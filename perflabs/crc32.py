"""Table-driven, most-significant-bit-first CRC-32 of bytes and files."""

from __future__ import annotations

import mmap
import os
from functools import lru_cache
from pathlib import Path

POLYNOMIAL = 0x1EDC6F41
_MASK = 0xFFFF_FFFF


def generate_crc32_table(polynomial: int) -> tuple[int, ...]:
    """Return the 256-entry lookup table for a non-reflected CRC-32."""
    if not 0 <= polynomial <= _MASK:
        raise ValueError(f"polynomial must be a 32-bit value, got {polynomial}")
    table = []
    for i in range(256):
        v = i << 24
        for _ in range(8):
            carry = v & 0x8000_0000
            v = (v << 1) & _MASK
            if carry:
                v ^= polynomial
        table.append(v)
    return tuple(table)


@lru_cache(maxsize=None)
def _table() -> tuple[int, ...]:
    return generate_crc32_table(POLYNOMIAL)


def update_crc32(crc: int, byte: int) -> int:
    """Return ``crc`` updated with one byte."""
    if not 0 <= crc <= _MASK:
        raise ValueError(f"crc must be a 32-bit value, got {crc}")
    if not 0 <= byte <= 0xFF:
        raise ValueError(f"byte must be in [0, 255], got {byte}")
    return ((crc << 8) & _MASK) ^ _table()[((crc >> 24) ^ byte) & 0xFF]


def crc32(data: bytes | bytearray | memoryview | mmap.mmap) -> int:
    """Return the CRC-32 of ``data``, starting from all ones and inverting the result."""
    table = _table()
    crc = _MASK
    with memoryview(data) as view, view.cast("B") as octets:
        for byte in octets:
            crc = ((crc << 8) & _MASK) ^ table[(crc >> 24) ^ byte]
    return crc ^ _MASK


class MappedFile:
    """A read-only memory mapping of a whole file, usable as a context manager."""

    def __init__(self, path: str | os.PathLike[str]) -> None:
        self._closed = False
        with open(path, "rb") as handle:
            size = os.fstat(handle.fileno()).st_size
            # An empty file cannot be mapped; it simply has no contents.
            self._map = (
                mmap.mmap(handle.fileno(), 0, access=mmap.ACCESS_READ) if size else None
            )

    @property
    def contents(self) -> mmap.mmap | bytes:
        """The file's bytes; valid until the mapping is closed."""
        if self._closed:
            raise ValueError("mapped file is closed")
        return self._map if self._map is not None else b""

    @property
    def closed(self) -> bool:
        return self._closed

    def close(self) -> None:
        """Release the mapping; closing twice is harmless."""
        if self._closed:
            return
        if self._map is not None:
            self._map.close()
        self._closed = True

    def __enter__(self) -> MappedFile:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()


def crc32_file(path: str | Path) -> int:
    """Return the CRC-32 of a file's contents."""
    with MappedFile(path) as mapped:
        return crc32(mapped.contents)