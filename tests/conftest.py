# SafeFile - Crash-safe file replacement
# Copyright (C) 2026 SafeFile Authors
# SPDX-License-Identifier: Apache-2.0
"""Global test fixtures for SafeFile."""

from __future__ import annotations

from pathlib import Path

import pytest

from safefile.config import ReadRetryConfig, SafeFileConfig


@pytest.fixture
def target(tmp_path: Path) -> str:
    """Public name of a file inside an isolated temporary directory."""
    return str(tmp_path / "testfile")


@pytest.fixture
def alt(target: str) -> str:
    """Shadow name belonging to ``target``."""
    return target + ".1"


@pytest.fixture
def fast_config() -> SafeFileConfig:
    """Config with a zero retry delay so NotExist paths do not slow tests down."""
    return SafeFileConfig(read=ReadRetryConfig(attempts=3, delay=0.0))
