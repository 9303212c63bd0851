# SafeFile - Crash-safe file replacement
# Copyright (C) 2026 SafeFile Authors
# SPDX-License-Identifier: Apache-2.0

"""Configuration models and JSON persistence for SafeFile.

The configuration file is itself stored through SafeFile, so a crash
while saving it never leaves a half-written ``safefile.json`` behind.
"""

from __future__ import annotations

import json
import logging
import os

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from safefile.exceptions import ConfigError
from safefile.naming import DEFAULT_PERM

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Models
# ---------------------------------------------------------------------------


class ReadRetryConfig(BaseModel):
    """How long a reader waits out a concurrent replacement."""

    model_config = ConfigDict(frozen=True)

    attempts: int = Field(default=3, ge=1)
    delay: float = Field(default=0.01, ge=0.0)  # seconds between rounds


class WriteConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    default_perm: int = DEFAULT_PERM
    fsync_directory: bool = False

    @field_validator("default_perm")
    @classmethod
    def _check_perm(cls, value: int) -> int:
        if not 0 <= value <= 0o7777:
            raise ValueError(f"default_perm must be within 0..0o7777, got {value:#o}")
        return value


class SafeFileConfig(BaseModel):
    """Top-level configuration accepted by every SafeFile operation."""

    model_config = ConfigDict(frozen=True)

    read: ReadRetryConfig = Field(default_factory=ReadRetryConfig)
    write: WriteConfig = Field(default_factory=WriteConfig)


DEFAULT_CONFIG = SafeFileConfig()


# ---------------------------------------------------------------------------
# Load / Save
# ---------------------------------------------------------------------------


def load_config(path: str | os.PathLike[str]) -> SafeFileConfig:
    """Load configuration from *path*.

    When neither the file nor its shadow exists the default configuration
    is returned. Malformed JSON or invalid values raise :class:`ConfigError`;
    any other I/O failure propagates unchanged.
    """
    from safefile.read import read_file

    try:
        raw = read_file(path)
    except FileNotFoundError:
        logger.info("Config file not found at %s; using defaults", path)
        return DEFAULT_CONFIG

    try:
        config = SafeFileConfig.model_validate(json.loads(raw))
    except (json.JSONDecodeError, UnicodeDecodeError, ValidationError) as exc:
        logger.error("Failed to load config from %s: %s", path, exc)
        raise ConfigError(f"Invalid config file {path}: {exc}") from exc

    logger.debug("Loaded config from %s", path)
    return config


def save_config(config: SafeFileConfig, path: str | os.PathLike[str]) -> None:
    """Persist *config* to *path* as pretty-printed JSON (mode 0o600)."""
    from safefile.write import write_file

    payload = config.model_dump(mode="json")
    text = json.dumps(payload, indent=2, ensure_ascii=False) + "\n"
    write_file(path, text.encode("utf-8"), DEFAULT_PERM)
    logger.debug("Config saved to %s", path)
