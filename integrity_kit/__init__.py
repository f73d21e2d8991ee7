# SPDX-License-Identifier: MIT
# Copyright (c) 2026 ADNT Sarl <info@adnt.io>

"""
Integrity Kit - checksums, integrity tags and base64 file conversion.

Example usage:
    from integrity_kit import checksum, integrity_tag, encode_file

    checksum(b"The quick brown fox jumps over the lazy dog")  # "414fa339"
    integrity_tag("release.tar.gz", "sha384")  # "sha384-..."
    encode_file("logo.png")  # base64 text
"""

from .crc32 import crc32, checksum, checksum_text, checksum_file, format_hex
from .digest import (
    SUPPORTED_ALGORITHMS,
    DEFAULT_ALGORITHM,
    digest_bytes,
    digest_file,
    format_tag,
    integrity_tag,
)
from .b64 import encode_bytes, decode_text, encode_file, encode_file_to, decode_file
from .errors import IntegrityKitError, UnsupportedAlgorithmError, DecodeError

__version__ = "0.1.0"

__all__ = [
    # CRC
    "crc32",
    "checksum",
    "checksum_text",
    "checksum_file",
    "format_hex",
    # Integrity tags
    "SUPPORTED_ALGORITHMS",
    "DEFAULT_ALGORITHM",
    "digest_bytes",
    "digest_file",
    "format_tag",
    "integrity_tag",
    # Base64
    "encode_bytes",
    "decode_text",
    "encode_file",
    "encode_file_to",
    "decode_file",
    # Errors
    "IntegrityKitError",
    "UnsupportedAlgorithmError",
    "DecodeError",
]
