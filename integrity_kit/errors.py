# SPDX-License-Identifier: MIT
# Copyright (c) 2026 ADNT Sarl <info@adnt.io>

"""Exceptions raised by integrity_kit."""


class IntegrityKitError(Exception):
    """Base exception for integrity_kit errors."""
    pass


class UnsupportedAlgorithmError(IntegrityKitError, ValueError):
    """Requested hash algorithm is not supported."""
    pass


class DecodeError(IntegrityKitError, ValueError):
    """Input is not valid base64."""
    pass
