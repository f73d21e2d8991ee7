# SPDX-License-Identifier: MIT
# Copyright (c) 2026 ADNT Sarl <info@adnt.io>

"""
CRC-32 (ISO HDLC / IEEE 802.3) implementation.

Table-driven, reflected polynomial 0xEDB88320. Produces the same values
as zlib.crc32, rendered as 8 lowercase hex digits by checksum().
"""

from pathlib import Path
from typing import Union

POLYNOMIAL = 0xEDB88320
MASK = 0xFFFFFFFF
CHUNK_SIZE = 65536  # 64 KB


def _build_table() -> tuple:
    """Build the CRC-32 lookup table."""
    table = []
    for i in range(256):
        crc = i
        for _ in range(8):
            if crc & 1:
                crc = (crc >> 1) ^ POLYNOMIAL
            else:
                crc >>= 1
        table.append(crc)
    return tuple(table)


# Built once at import; read-only afterwards
_CRC32_TABLE = _build_table()


def crc32(data: bytes, crc: int = 0) -> int:
    """
    Compute CRC-32 (ISO HDLC) checksum.

    Args:
        data: Bytes to compute checksum for
        crc: Result of a previous call, to continue over more data

    Returns:
        32-bit CRC value
    """
    crc = (crc & MASK) ^ MASK
    for byte in data:
        crc = _CRC32_TABLE[(crc ^ byte) & 0xFF] ^ (crc >> 8)
    return crc ^ MASK


def format_hex(value: int) -> str:
    """Render a 32-bit value as 8 lowercase hex digits, big-endian."""
    return f"{value & MASK:08x}"


def checksum(data: bytes) -> str:
    """
    Compute the CRC-32 of data as a hex string.

    Args:
        data: Bytes to compute checksum for (may be empty)

    Returns:
        8-character lowercase hex string, e.g. "414fa339"
    """
    return format_hex(crc32(data))


def checksum_text(text: str, encoding: str = "utf-8") -> str:
    """CRC-32 hex string of an encoded text string."""
    return checksum(text.encode(encoding))


def checksum_file(path: Union[str, Path], chunk_size: int = CHUNK_SIZE) -> str:
    """
    Compute the CRC-32 of a file's contents as a hex string.

    Args:
        path: Path to the file
        chunk_size: Read size in bytes

    Returns:
        8-character lowercase hex string

    Raises:
        OSError: If the file cannot be read
    """
    crc = 0
    with open(path, "rb") as f:
        while chunk := f.read(chunk_size):
            crc = crc32(chunk, crc)
    return format_hex(crc)
