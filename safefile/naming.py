# SafeFile - Crash-safe file replacement
# Copyright (C) 2026 SafeFile Authors
# SPDX-License-Identifier: Apache-2.0

"""On-disk naming convention shared by the writer, reader and remover.

Three names exist per logical file:

- the public name, exactly as given by the caller
- the shadow name, ``name + ".1"``
- short-lived temporary names, ``name + "." + timestamp``

Suffixes are appended to the name as plain strings, never as separate
path components, so the layout stays compatible with other implementations
sharing the same directory.
"""

from __future__ import annotations

import os
import re
from datetime import datetime

ALT_NAME_POSTFIX = ".1"
TIMESTAMP_FORMAT = ".%Y-%m-%dT%H-%M-%S.%f"
DEFAULT_PERM = 0o600

_TEMP_SUFFIX_RE = r"\.\d{4}-\d{2}-\d{2}T\d{2}-\d{2}-\d{2}\.\d{6}"


def alt_name(name: str | os.PathLike[str]) -> str:
    """Return the shadow name for *name*."""
    return os.fspath(name) + ALT_NAME_POSTFIX


def temp_name(name: str | os.PathLike[str], moment: datetime | None = None) -> str:
    """Return a temporary name for *name* stamped with *moment* (default: now)."""
    if moment is None:
        moment = datetime.now()
    return os.fspath(name) + moment.strftime(TIMESTAMP_FORMAT)


def is_temp_name(name: str | os.PathLike[str], candidate: str | os.PathLike[str]) -> bool:
    """Whether *candidate* is a temporary name derived from *name*."""
    pattern = re.escape(os.fspath(name)) + _TEMP_SUFFIX_RE
    return re.fullmatch(pattern, os.fspath(candidate)) is not None
