# SPDX-License-Identifier: MIT
# Copyright (c) 2026 ADNT Sarl <info@adnt.io>

"""Pytest configuration and shared fixtures."""

from pathlib import Path

import pytest

QUICK_BROWN_FOX = b"The quick brown fox jumps over the lazy dog"


@pytest.fixture
def sample_file(tmp_path) -> Path:
    """A small text file."""
    path = tmp_path / "sample.txt"
    path.write_bytes(QUICK_BROWN_FOX)
    return path


@pytest.fixture
def binary_file(tmp_path) -> Path:
    """A binary file covering every byte value, larger than one read chunk."""
    path = tmp_path / "binary.bin"
    path.write_bytes(bytes(range(256)) * 300)
    return path


@pytest.fixture
def empty_file(tmp_path) -> Path:
    """An empty file."""
    path = tmp_path / "empty.bin"
    path.write_bytes(b"")
    return path
