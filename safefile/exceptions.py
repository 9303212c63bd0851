# SafeFile - Crash-safe file replacement
# Copyright (C) 2026 SafeFile Authors
# SPDX-License-Identifier: Apache-2.0

"""Exception hierarchy for SafeFile.

Filesystem failures are never wrapped: they reach the caller as the
original :class:`OSError` subclass (``FileNotFoundError``,
``PermissionError``, ...). The classes below cover problems with the
*content* SafeFile reads back, and derive from :class:`SafeFileError` so
callers can catch the family with a single clause::

    try:
        settings = read_json(path)
    except SafeFileError as e:
        logger.error("Unusable state file: %s", e)
"""

from __future__ import annotations


class SafeFileError(Exception):
    """Base exception for all SafeFile errors."""


class ConfigError(SafeFileError):
    """Configuration file is malformed or holds invalid values."""


class CorruptedFileError(SafeFileError):
    """Stored content cannot be decoded (bad encoding, JSON decode failure)."""
