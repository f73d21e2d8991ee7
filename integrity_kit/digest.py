# SPDX-License-Identifier: MIT
# Copyright (c) 2026 ADNT Sarl <info@adnt.io>

"""
File integrity tags.

Tags use the Subresource Integrity format: "<algorithm>-<base64 digest>",
e.g. "sha512-z4PhNX7vuL3xVChQ1m2AB9Yg5AULVxXcg/SpIdNs6c5H0NE8XYXysP+DGNKHfuwvY7kxvUdBeoGlODJ6+SfaPg==".
"""

import base64
import hashlib
import logging
from pathlib import Path
from typing import Union

from .errors import UnsupportedAlgorithmError

logger = logging.getLogger(__name__)

SUPPORTED_ALGORITHMS = ("sha256", "sha384", "sha512")
DEFAULT_ALGORITHM = "sha512"
CHUNK_SIZE = 65536


def _new_hash(algorithm: str):
    if algorithm not in SUPPORTED_ALGORITHMS:
        raise UnsupportedAlgorithmError(
            f"Unsupported algorithm: {algorithm} "
            f"(expected one of {', '.join(SUPPORTED_ALGORITHMS)})"
        )
    return hashlib.new(algorithm)


def digest_bytes(data: bytes, algorithm: str = DEFAULT_ALGORITHM) -> bytes:
    """Raw digest of data."""
    h = _new_hash(algorithm)
    h.update(data)
    return h.digest()


def digest_file(
    path: Union[str, Path],
    algorithm: str = DEFAULT_ALGORITHM,
    chunk_size: int = CHUNK_SIZE,
) -> bytes:
    """
    Raw digest of a file's contents.

    Raises:
        UnsupportedAlgorithmError: If algorithm is not supported
        OSError: If the file cannot be read
    """
    h = _new_hash(algorithm)
    logger.debug("Hashing %s with %s", path, algorithm)
    with open(path, "rb") as f:
        while chunk := f.read(chunk_size):
            h.update(chunk)
    return h.digest()


def format_tag(algorithm: str, digest: bytes) -> str:
    """Format a raw digest as an integrity tag."""
    return f"{algorithm}-{base64.b64encode(digest).decode('ascii')}"


def integrity_tag(path: Union[str, Path], algorithm: str = DEFAULT_ALGORITHM) -> str:
    """
    Compute the integrity tag of a file.

    Args:
        path: Path to the file
        algorithm: One of SUPPORTED_ALGORITHMS

    Returns:
        Tag string such as "sha256-47DEQpj8HBSa+/TImW+5JCeuQeRkm5NMpJWZG3hSuFU="
    """
    return format_tag(algorithm, digest_file(path, algorithm))
