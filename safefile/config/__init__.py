# SafeFile - Crash-safe file replacement
# Copyright (C) 2026 SafeFile Authors
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from safefile.config.models import (
    DEFAULT_CONFIG,
    ReadRetryConfig,
    SafeFileConfig,
    WriteConfig,
    load_config,
    save_config,
)

__all__ = [
    "DEFAULT_CONFIG",
    "ReadRetryConfig",
    "SafeFileConfig",
    "WriteConfig",
    "load_config",
    "save_config",
]
