# SafeFile - Crash-safe file replacement
# Copyright (C) 2026 SafeFile Authors
# SPDX-License-Identifier: Apache-2.0

"""Removal of a SafeFile and housekeeping of leftover temporary files."""

from __future__ import annotations

import logging
import os
import time

from safefile.naming import alt_name, is_temp_name

logger = logging.getLogger(__name__)


def _remove(path: str) -> None:
    try:
        os.unlink(path)
    except FileNotFoundError:
        pass


def remove_file(name: str | os.PathLike[str]) -> None:
    """Remove *name* and its shadow ``name + ".1"``.

    Missing files are ignored. If removing one of the two names fails, the
    other is still attempted and the first error is raised afterwards.
    """
    name = os.fspath(name)
    errors: list[OSError] = []
    for path in (name, alt_name(name)):
        try:
            _remove(path)
        except OSError as exc:
            errors.append(exc)

    if errors:
        if len(errors) > 1:
            logger.debug("Also failed to remove %s: %s", errors[1].filename, errors[1])
        raise errors[0]
    logger.debug("Removed %s", name)


def cleanup_stale_temp_files(name: str | os.PathLike[str], min_age: float = 0.0) -> int:
    """Remove temporary files of *name* left behind by crashed writers.

    Only entries matching the exact temporary suffix are considered; the
    public and shadow names are never touched. A running writer's temporary
    file looks the same as a stale one, so either call this while no writer
    is active or pass *min_age* (seconds since last modification).

    Returns the number of files removed.
    """
    name = os.fspath(name)
    directory, base = os.path.split(name)
    directory = directory or "."
    if not os.path.isdir(directory):
        return 0

    removed = 0
    now = time.time()
    with os.scandir(directory) as entries:
        for entry in entries:
            if not is_temp_name(base, entry.name) or not entry.is_file(follow_symlinks=False):
                continue
            try:
                if min_age and now - entry.stat(follow_symlinks=False).st_mtime < min_age:
                    continue
                os.unlink(entry.path)
                removed += 1
            except FileNotFoundError:
                pass
            except OSError:
                logger.debug("Failed to remove stale temp file %s", entry.path, exc_info=True)
    return removed
