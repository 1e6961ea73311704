"""Pytest configuration for shared test fixtures and environment hooks.

Updates:
  v0.1.0 - 2026-09-08 - Isolate settings from developer config files and environment.
"""

from __future__ import annotations

import os
from pathlib import Path

import pytest


@pytest.fixture(autouse=True)
def _isolated_settings_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """Run each test from an empty directory without PROMPT_MANAGER_* overrides."""
    for key in list(os.environ):
        if key.upper().startswith("PROMPT_MANAGER_"):
            monkeypatch.delenv(key, raising=False)
    monkeypatch.chdir(tmp_path)
