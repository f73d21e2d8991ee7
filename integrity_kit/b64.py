# SPDX-License-Identifier: MIT
# Copyright (c) 2026 ADNT Sarl <info@adnt.io>

"""Base64 conversion of file contents."""

import base64
import binascii
import logging
from pathlib import Path
from typing import Union

from .errors import DecodeError

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


def encode_bytes(data: bytes) -> str:
    """Encode bytes as base64 text."""
    return base64.b64encode(data).decode("ascii")


def decode_text(text: str) -> bytes:
    """
    Decode base64 text.

    Line breaks and other whitespace are ignored.

    Raises:
        DecodeError: If text is not valid base64
    """
    compact = "".join(text.split())
    try:
        return base64.b64decode(compact, validate=True)
    except (binascii.Error, ValueError) as e:
        raise DecodeError(f"Invalid base64 data: {e}") from e


def encode_file(src: PathLike) -> str:
    """Return the base64 text of a file's bytes."""
    data = Path(src).read_bytes()
    logger.debug("Encoding %s (%d bytes)", src, len(data))
    return encode_bytes(data)


def encode_file_to(src: PathLike, dest: PathLike) -> int:
    """
    Write the base64 text of src to dest.

    Returns:
        Number of characters written
    """
    text = encode_file(src)
    Path(dest).write_text(text, encoding="ascii")
    return len(text)


def decode_file(src: PathLike, dest: PathLike) -> int:
    """
    Decode base64 text in src and write the raw bytes to dest.

    Returns:
        Number of bytes written

    Raises:
        DecodeError: If src does not hold valid base64
        OSError: If either file cannot be accessed
    """
    try:
        text = Path(src).read_text(encoding="ascii")
    except UnicodeDecodeError as e:
        raise DecodeError(f"Invalid base64 data: {e}") from e
    data = decode_text(text)
    Path(dest).write_bytes(data)
    logger.debug("Decoded %s -> %s (%d bytes)", src, dest, len(data))
    return len(data)
