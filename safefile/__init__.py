# SafeFile - Crash-safe file replacement
# Copyright (C) 2026 SafeFile Authors
# SPDX-License-Identifier: Apache-2.0

"""Crash- and concurrency-safe replacement of small files.

A file written with :func:`write_file` is, at every instant, either in its
previous complete state or its new complete state, even when the writing
process is killed halfway or several processes write at once. A hard-linked
shadow ``name + ".1"`` keeps a complete copy reachable while the public
name is being replaced; :func:`read_file` falls back to it.
"""

from __future__ import annotations

from safefile.config.models import DEFAULT_CONFIG, SafeFileConfig, load_config, save_config
from safefile.exceptions import ConfigError, CorruptedFileError, SafeFileError
from safefile.naming import ALT_NAME_POSTFIX, DEFAULT_PERM, TIMESTAMP_FORMAT
from safefile.read import read_file, read_json, read_text
from safefile.remove import cleanup_stale_temp_files, remove_file
from safefile.write import write_file, write_file_perm, write_json, write_text

__all__ = [
    "ALT_NAME_POSTFIX",
    "ConfigError",
    "CorruptedFileError",
    "DEFAULT_CONFIG",
    "DEFAULT_PERM",
    "SafeFileConfig",
    "SafeFileError",
    "TIMESTAMP_FORMAT",
    "cleanup_stale_temp_files",
    "load_config",
    "read_file",
    "read_json",
    "read_text",
    "remove_file",
    "save_config",
    "write_file",
    "write_file_perm",
    "write_json",
    "write_text",
]
