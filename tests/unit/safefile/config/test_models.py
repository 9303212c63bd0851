# SafeFile - Crash-safe file replacement
# Copyright (C) 2026 SafeFile Authors
# SPDX-License-Identifier: Apache-2.0
"""Tests for config models and persistence in safefile/config/models.py."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from pydantic import ValidationError

from safefile.config import (
    DEFAULT_CONFIG,
    ReadRetryConfig,
    SafeFileConfig,
    WriteConfig,
    load_config,
    save_config,
)
from safefile.exceptions import ConfigError
from safefile.naming import DEFAULT_PERM
from tests.helpers.filesystem import create_file, mode_of


# ── Models ───────────────────────────────────────────────────


class TestReadRetryConfig:
    def test_defaults(self):
        rc = ReadRetryConfig()
        assert rc.attempts == 3
        assert rc.delay == 0.01

    def test_rejects_zero_attempts(self):
        with pytest.raises(ValidationError):
            ReadRetryConfig(attempts=0)

    def test_rejects_negative_delay(self):
        with pytest.raises(ValidationError):
            ReadRetryConfig(delay=-1)


class TestWriteConfig:
    def test_defaults(self):
        wc = WriteConfig()
        assert wc.default_perm == 0o600
        assert wc.fsync_directory is False

    def test_rejects_out_of_range_perm(self):
        with pytest.raises(ValidationError, match="default_perm"):
            WriteConfig(default_perm=0o10000)


class TestSafeFileConfig:
    def test_default_config(self):
        assert DEFAULT_CONFIG == SafeFileConfig()
        assert DEFAULT_CONFIG.read.attempts == 3

    def test_is_frozen(self):
        with pytest.raises(ValidationError):
            DEFAULT_CONFIG.read.attempts = 10  # type: ignore[misc]


# ── Load / Save ──────────────────────────────────────────────


class TestLoadSave:
    def test_missing_file_returns_defaults(self, tmp_path: Path):
        assert load_config(tmp_path / "safefile.json") == DEFAULT_CONFIG

    def test_round_trip(self, tmp_path: Path):
        path = tmp_path / "safefile.json"
        config = SafeFileConfig(
            read=ReadRetryConfig(attempts=5, delay=0.5),
            write=WriteConfig(default_perm=0o640, fsync_directory=True),
        )

        save_config(config, path)

        assert load_config(path) == config

    def test_saved_file_is_private_and_shadowed(self, tmp_path: Path):
        path = tmp_path / "safefile.json"

        save_config(DEFAULT_CONFIG, path)

        assert mode_of(path) == 0o600
        assert json.loads((tmp_path / "safefile.json.1").read_text())["read"]["attempts"] == 3

    def test_saved_mode_ignores_configured_default_perm(self, tmp_path: Path):
        path = tmp_path / "safefile.json"

        save_config(SafeFileConfig(write=WriteConfig(default_perm=0o644)), path)

        assert mode_of(path) == DEFAULT_PERM
        assert load_config(path).write.default_perm == 0o644

    def test_partial_file_uses_defaults_for_missing_sections(self, tmp_path: Path):
        path = tmp_path / "safefile.json"
        create_file(path, json.dumps({"read": {"attempts": 7}}))

        config = load_config(path)

        assert config.read.attempts == 7
        assert config.read.delay == 0.01
        assert config.write == WriteConfig()

    def test_loads_from_shadow(self, tmp_path: Path):
        create_file(tmp_path / "safefile.json.1", json.dumps({"write": {"fsync_directory": True}}))

        assert load_config(tmp_path / "safefile.json").write.fsync_directory is True

    def test_malformed_json_raises_config_error(self, tmp_path: Path):
        path = tmp_path / "safefile.json"
        create_file(path, "{broken")

        with pytest.raises(ConfigError):
            load_config(path)

    def test_invalid_values_raise_config_error(self, tmp_path: Path):
        path = tmp_path / "safefile.json"
        create_file(path, json.dumps({"read": {"attempts": 0}}))

        with pytest.raises(ConfigError, match="attempts"):
            load_config(path)
