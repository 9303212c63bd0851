# SafeFile - Crash-safe file replacement
# Copyright (C) 2026 SafeFile Authors
# SPDX-License-Identifier: Apache-2.0

"""Durable reader.

Reads the public name and falls back to the shadow name. Both can be
missing for a short moment while a concurrent writer swaps links, so the
pair is retried for a bounded number of rounds before giving up.
"""

from __future__ import annotations

import json
import logging
import os
import time
from typing import Any

from safefile.config.models import DEFAULT_CONFIG, SafeFileConfig
from safefile.exceptions import CorruptedFileError
from safefile.naming import alt_name

logger = logging.getLogger(__name__)


def _read(path: str) -> bytes:
    with open(path, "rb") as f:
        return f.read()


def read_file(
    name: str | os.PathLike[str],
    *,
    config: SafeFileConfig | None = None,
) -> bytes:
    """Return the contents of *name*, or of its shadow ``name + ".1"``.

    Only ``FileNotFoundError`` triggers the fallback and the retry; any
    other error is raised at once. When neither name shows up within
    ``config.read.attempts`` rounds the last ``FileNotFoundError`` is raised.
    """
    retry = (config or DEFAULT_CONFIG).read
    name = os.fspath(name)
    candidates = (name, alt_name(name))

    last_error: FileNotFoundError
    attempt = 1
    while True:
        for path in candidates:
            try:
                return _read(path)
            except FileNotFoundError as exc:
                last_error = exc
        if attempt >= retry.attempts:
            raise last_error
        logger.debug(
            "Neither %s nor its shadow exists; retry %d/%d in %.3fs",
            name, attempt, retry.attempts - 1, retry.delay,
        )
        time.sleep(retry.delay)
        attempt += 1



def read_text(
    name: str | os.PathLike[str],
    *,
    encoding: str = "utf-8",
    config: SafeFileConfig | None = None,
) -> str:
    raw = read_file(name, config=config)
    try:
        return raw.decode(encoding)
    except UnicodeDecodeError as exc:
        raise CorruptedFileError(f"{os.fspath(name)} is not valid {encoding}: {exc}") from exc


def read_json(
    name: str | os.PathLike[str],
    *,
    config: SafeFileConfig | None = None,
) -> Any:
    """Read *name* with :func:`read_file` and decode it as JSON."""
    text = read_text(name, config=config)
    try:
        return json.loads(text)
    except json.JSONDecodeError as exc:
        raise CorruptedFileError(f"{os.fspath(name)} holds invalid JSON: {exc}") from exc
