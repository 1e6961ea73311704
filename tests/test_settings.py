"""Tests for configuration loading and validation logic.

Updates:
  v0.2.0 - 2026-09-23 - Cover known tag parsing and suggestion limit validation.
  v0.1.0 - 2026-09-08 - Cover JSON/env precedence and validation errors.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

import pytest
from pytest import LogCaptureFixture, MonkeyPatch

from config import DEFAULT_SUGGESTION_LIMIT, PromptManagerSettings, SettingsError, load_settings
from core.tags import DEFAULT_KNOWN_TAGS


def _write_config(tmp_path: Path, payload: object, name: str = "settings.json") -> Path:
    config_path = tmp_path / name
    config_path.write_text(json.dumps(payload), encoding="utf-8")
    return config_path


def test_defaults_without_configuration(tmp_path: Path) -> None:
    """Defaults apply when neither JSON nor environment provide values."""
    settings = load_settings()

    assert isinstance(settings, PromptManagerSettings)
    assert settings.db_path == (tmp_path / "data" / "prompt_manager.db").resolve()
    assert settings.seed_samples is True
    assert settings.seed_path is None
    assert settings.known_tags == list(DEFAULT_KNOWN_TAGS)
    assert settings.suggestion_limit == DEFAULT_SUGGESTION_LIMIT


def test_load_settings_reads_json_and_env(monkeypatch: MonkeyPatch, tmp_path: Path) -> None:
    """JSON configuration wins over the environment for overlapping keys."""
    config_path = _write_config(
        tmp_path,
        {"db_path": str(tmp_path / "from_json.db"), "suggestion_limit": 3},
    )
    monkeypatch.setenv("PROMPT_MANAGER_CONFIG_JSON", str(config_path))
    monkeypatch.setenv("PROMPT_MANAGER_SUGGESTION_LIMIT", "5")
    monkeypatch.setenv("PROMPT_MANAGER_SEED_SAMPLES", "false")

    settings = load_settings()

    assert settings.db_path == (tmp_path / "from_json.db").resolve()
    assert settings.suggestion_limit == 3
    assert settings.seed_samples is False


def test_keyword_overrides_win_over_json(monkeypatch: MonkeyPatch, tmp_path: Path) -> None:
    """Explicit keyword arguments take precedence over every other source."""
    config_path = _write_config(tmp_path, {"db_path": str(tmp_path / "json.db")})
    monkeypatch.setenv("PROMPT_MANAGER_CONFIG_JSON", str(config_path))

    settings = load_settings(db_path=tmp_path / "explicit.db")

    assert settings.db_path == (tmp_path / "explicit.db").resolve()


def test_default_config_json_is_discovered(tmp_path: Path) -> None:
    """config/config.json under the working directory is read when present."""
    (tmp_path / "config").mkdir()
    _write_config(tmp_path / "config", {"seed_samples": False}, name="config.json")

    assert load_settings().seed_samples is False


def test_unknown_json_keys_are_ignored_with_warning(
    monkeypatch: MonkeyPatch,
    tmp_path: Path,
    caplog: LogCaptureFixture,
) -> None:
    """Unknown JSON keys are logged and dropped."""
    config_path = _write_config(tmp_path, {"suggestion_limit": 2, "theme": "dark"})
    monkeypatch.setenv("PROMPT_MANAGER_CONFIG_JSON", str(config_path))

    with caplog.at_level(logging.WARNING, logger="prompt_manager.settings"):
        settings = load_settings()

    assert settings.suggestion_limit == 2
    assert "theme" in caplog.text


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("Alpha, Beta ,,Alpha", ["Alpha", "Beta"]),
        ('["AI", "Web"]', ["AI", "Web"]),
        ("", []),
    ],
)
def test_known_tags_from_environment(
    monkeypatch: MonkeyPatch,
    raw: str,
    expected: list[str],
) -> None:
    """Known tags accept comma separated lists and JSON arrays."""
    monkeypatch.setenv("PROMPT_MANAGER_KNOWN_TAGS", raw)

    assert load_settings().known_tags == expected


def test_seed_path_blank_is_unset(monkeypatch: MonkeyPatch, tmp_path: Path) -> None:
    """A blank seed path falls back to packaged samples."""
    monkeypatch.setenv("PROMPT_MANAGER_SEED_PATH", "   ")
    assert load_settings().seed_path is None

    monkeypatch.setenv("PROMPT_MANAGER_SEED_PATH", str(tmp_path / "seed.json"))
    assert load_settings().seed_path == tmp_path / "seed.json"


@pytest.mark.parametrize("limit", ["0", "-1", "many"])
def test_invalid_suggestion_limit_raises(monkeypatch: MonkeyPatch, limit: str) -> None:
    """Non-positive or non-numeric limits are rejected."""
    monkeypatch.setenv("PROMPT_MANAGER_SUGGESTION_LIMIT", limit)

    with pytest.raises(SettingsError):
        load_settings()


def test_missing_explicit_config_file_raises(monkeypatch: MonkeyPatch, tmp_path: Path) -> None:
    """A config path that does not exist is an error rather than silently skipped."""
    monkeypatch.setenv("PROMPT_MANAGER_CONFIG_JSON", str(tmp_path / "absent.json"))

    with pytest.raises(SettingsError, match="not found"):
        load_settings()


@pytest.mark.parametrize("contents", ["{broken", "[1, 2]"], ids=["invalid-json", "not-object"])
def test_malformed_config_file_raises(
    monkeypatch: MonkeyPatch,
    tmp_path: Path,
    contents: str,
) -> None:
    """Config files must hold a JSON object."""
    config_path = tmp_path / "settings.json"
    config_path.write_text(contents, encoding="utf-8")
    monkeypatch.setenv("PROMPT_MANAGER_CONFIG_JSON", str(config_path))

    with pytest.raises(SettingsError):
        load_settings()


def test_blank_db_path_is_rejected() -> None:
    """An empty database path cannot be used."""
    with pytest.raises(SettingsError):
        load_settings(db_path="  ")
