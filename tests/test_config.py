"""Tests for config.py — env-derived settings."""
import os
import subprocess
import sys
from pathlib import Path

import pytest
from pydantic import ValidationError

from systools.config import Settings, _optional_float, settings

ROOT = Path(__file__).resolve().parent.parent


class TestOptionalFloat:
    def test_empty_is_none(self):
        assert _optional_float("") is None
        assert _optional_float("  ") is None

    def test_number(self):
        assert _optional_float("2.5") == 2.5


class TestSettings:
    def test_instructions_prefix(self):
        assert settings.instructions_prefix == "#!"

    def test_write_mode_override(self):
        assert Settings(write_file_mode=0o600).write_file_mode == 0o600

    def test_write_mode_out_of_range(self):
        with pytest.raises(ValidationError):
            Settings(write_file_mode=0o1000)


class TestWriteModeFromEnvironment:
    """SYSTOOLS_WRITE_MODE is read at import, so check it in a fresh interpreter."""

    def _import_settings(self, mode: str) -> subprocess.CompletedProcess:
        env = dict(os.environ, SYSTOOLS_WRITE_MODE=mode)
        return subprocess.run(
            [sys.executable, "-c", "from systools.config import settings; print(oct(settings.write_file_mode))"],
            cwd=ROOT, env=env, capture_output=True, text=True,
        )

    def test_valid_mode(self):
        proc = self._import_settings("600")
        assert proc.returncode == 0, proc.stderr
        assert proc.stdout.strip() == "0o600"

    def test_special_bits_rejected(self):
        proc = self._import_settings("7777")
        assert proc.returncode != 0
        assert "write_file_mode" in proc.stderr
