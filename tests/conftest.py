"""
Shared pytest configuration for SOLID Lab.

Makes `src/` importable without an install and gives every test isolated
settings (no project or user .env files, no SOLID_LAB_* variables).
"""

import logging
import os
import sys
from pathlib import Path

import pytest

src_path = Path(__file__).parent.parent / "src"
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))

from core.config import AppSettings  # noqa: E402


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch, tmp_path):
    """Run each test from an empty directory with no SOLID_LAB_* overrides."""
    for key in list(os.environ):
        if key.startswith("SOLID_LAB_"):
            monkeypatch.delenv(key, raising=False)
    monkeypatch.chdir(tmp_path)
    yield


@pytest.fixture(autouse=True)
def restore_root_logger():
    """The CLI reconfigures the root logger; put it back after each test."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture
def settings():
    """Settings built only from defaults."""
    return AppSettings(_env_file=None)


@pytest.fixture
def make_settings():
    """Factory for settings with explicit overrides."""
    def _make(**overrides):
        return AppSettings(_env_file=None, **overrides)
    return _make
