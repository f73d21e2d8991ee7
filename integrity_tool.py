#!/usr/bin/env python3
# SPDX-License-Identifier: MIT
# Copyright (c) 2026 ADNT Sarl <info@adnt.io>

"""
Checksum and encoding tool built on integrity_kit.

Usage:
    python integrity_tool.py sri release.tar.gz --algorithm sha384
    python integrity_tool.py crc32 "The quick brown fox jumps over the lazy dog"
    python integrity_tool.py crc32 --file firmware.bin
    python integrity_tool.py base64 encode logo.png -o logo.b64
    python integrity_tool.py base64 decode logo.b64 -o logo.png
"""

import argparse
import logging
import sys
from pathlib import Path

from integrity_kit import (
    DEFAULT_ALGORITHM,
    SUPPORTED_ALGORITHMS,
    IntegrityKitError,
    checksum_file,
    checksum_text,
    decode_file,
    encode_file,
    encode_file_to,
    integrity_tag,
)

logger = logging.getLogger("integrity_tool")


def cmd_sri(path: Path, algorithm: str):
    """Print the integrity tag of a file."""
    print(integrity_tag(path, algorithm))


def cmd_crc32(text, path):
    """Print the CRC-32 of a string or a file."""
    if path is not None:
        print(checksum_file(path))
        return

    if not text:
        print("Nothing to checksum")
        return

    print(checksum_text(text))


def cmd_base64_encode(src: Path, output):
    """Encode a file as base64."""
    if output is None:
        print(encode_file(src))
        return

    written = encode_file_to(src, output)
    logger.info("Wrote %d characters to %s", written, output)


def cmd_base64_decode(src: Path, output: Path):
    """Decode a base64 file."""
    written = decode_file(src, output)
    logger.info("Wrote %d bytes to %s", written, output)


def _require_file(path: Path):
    if not path.is_file():
        print(f"Error: File not found: {path}")
        sys.exit(1)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Checksums, integrity tags and base64 conversion"
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable debug logging"
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    # sri command
    sri_parser = subparsers.add_parser("sri", help="Compute a file integrity tag")
    sri_parser.add_argument("file", type=Path, help="File to hash")
    sri_parser.add_argument("--algorithm", "-a", default=DEFAULT_ALGORITHM,
                            choices=SUPPORTED_ALGORITHMS,
                            help=f"Hash algorithm (default {DEFAULT_ALGORITHM})")

    # crc32 command
    crc_parser = subparsers.add_parser("crc32", help="Compute a CRC-32 checksum")
    crc_parser.add_argument("text", nargs="?", default=None, help="Text to checksum (UTF-8)")
    crc_parser.add_argument("--file", "-f", type=Path, default=None,
                            help="Checksum a file instead of text")

    # base64 command
    b64_parser = subparsers.add_parser("base64", help="Convert files to/from base64")
    b64_sub = b64_parser.add_subparsers(dest="action", required=True)

    encode_parser = b64_sub.add_parser("encode", help="Encode a file as base64 text")
    encode_parser.add_argument("file", type=Path, help="File to encode")
    encode_parser.add_argument("--output", "-o", type=Path, default=None,
                               help="Write base64 text here instead of stdout")

    decode_parser = b64_sub.add_parser("decode", help="Decode base64 text to a file")
    decode_parser.add_argument("file", type=Path, help="File holding base64 text")
    decode_parser.add_argument("--output", "-o", type=Path, required=True,
                               help="Destination for decoded bytes")

    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        if args.command == "sri":
            _require_file(args.file)
            cmd_sri(args.file, args.algorithm)
        elif args.command == "crc32":
            if args.file is not None:
                _require_file(args.file)
            cmd_crc32(args.text, args.file)
        elif args.command == "base64":
            _require_file(args.file)
            if args.action == "encode":
                cmd_base64_encode(args.file, args.output)
            else:
                cmd_base64_decode(args.file, args.output)
    except (IntegrityKitError, OSError) as e:
        print(f"Error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
