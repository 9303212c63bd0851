# SafeFile - Crash-safe file replacement
# Copyright (C) 2026 SafeFile Authors
# SPDX-License-Identifier: Apache-2.0

"""Durable writer.

New content is written to a uniquely named temporary file and fsynced
before any name that readers look at is touched. It is then published
through :func:`safefile.link.safelink`. The temporary file is removed when
the write attempt ends, whatever the outcome.
"""

from __future__ import annotations

import json
import logging
import os
from collections.abc import Iterator
from contextlib import contextmanager
from datetime import datetime, timedelta
from typing import Any

from safefile.config.models import DEFAULT_CONFIG, SafeFileConfig
from safefile.link import safelink
from safefile.naming import alt_name, temp_name

logger = logging.getLogger(__name__)

# Bound on same-microsecond collisions between threads of one process.
_MAX_TEMP_ATTEMPTS = 100


def _create_temp(name: str, perm: int) -> tuple[int, str]:
    """Exclusively create a fresh temporary file for *name*."""
    moment = datetime.now()
    collisions = 0
    while True:
        tmp = temp_name(name, moment)
        try:
            return os.open(tmp, os.O_WRONLY | os.O_CREAT | os.O_EXCL, perm), tmp
        except FileExistsError:
            collisions += 1
            if collisions >= _MAX_TEMP_ATTEMPTS:
                raise
            moment += timedelta(microseconds=1)


def _discard(tmp: str) -> None:
    try:
        os.unlink(tmp)
    except FileNotFoundError:
        pass
    except OSError:
        logger.debug("Failed to remove temp file %s", tmp, exc_info=True)


@contextmanager
def _staged(name: str, perm: int, data: bytes) -> Iterator[str]:
    """Yield the path of a synced temporary file holding *data*."""
    fd, tmp = _create_temp(name, perm)
    try:
        with os.fdopen(fd, "wb") as f:
            # umask must not narrow the requested bits
            os.fchmod(f.fileno(), perm)
            f.write(data)
            f.flush()
            os.fsync(f.fileno())
        yield tmp
    finally:
        _discard(tmp)


def _sync_directory(name: str) -> None:
    fd = os.open(os.path.dirname(name) or ".", os.O_RDONLY)
    try:
        os.fsync(fd)
    finally:
        os.close(fd)


def write_file(
    name: str | os.PathLike[str],
    data: bytes,
    perm: int | None = None,
    *,
    config: SafeFileConfig | None = None,
) -> None:
    """Atomically replace the contents of *name* with *data*.

    Also maintains the shadow file ``name + ".1"``. Readers using
    :func:`safefile.read_file` observe either the previous or the new
    content, even if this process dies at any point.

    Args:
        name: Public file name.
        data: Full new content.
        perm: Permission bits for the new file. Defaults to
            ``config.write.default_perm`` (0o600).
        config: Optional configuration; :data:`DEFAULT_CONFIG` otherwise.

    Raises:
        OSError: Any filesystem failure, unchanged. A missing parent
            directory surfaces as ``FileNotFoundError``.
    """
    cfg = config or DEFAULT_CONFIG
    if perm is None:
        perm = cfg.write.default_perm
    name = os.fspath(name)

    with _staged(name, perm, data) as tmp:
        safelink(tmp, alt_name(name), name)

    if cfg.write.fsync_directory:
        _sync_directory(name)
    logger.debug("Wrote %d bytes to %s", len(data), name)


def write_file_perm(
    name: str | os.PathLike[str],
    perm: int,
    data: bytes,
    *,
    config: SafeFileConfig | None = None,
) -> None:
    """Like :func:`write_file` with explicit permission bits."""
    write_file(name, data, perm, config=config)


def write_text(
    name: str | os.PathLike[str],
    content: str,
    perm: int | None = None,
    *,
    encoding: str = "utf-8",
    config: SafeFileConfig | None = None,
) -> None:
    write_file(name, content.encode(encoding), perm, config=config)


def write_json(
    name: str | os.PathLike[str],
    data: Any,
    perm: int | None = None,
    *,
    indent: int = 2,
    ensure_ascii: bool = False,
    config: SafeFileConfig | None = None,
) -> None:
    """Serialize *data* as JSON and write it with :func:`write_file`."""
    text = json.dumps(data, indent=indent, ensure_ascii=ensure_ascii, default=str)
    write_text(name, text, perm, config=config)
