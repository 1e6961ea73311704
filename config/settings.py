"""Settings management utilities for Prompt Manager configuration.

Updates:
  v0.2.0 - 2026-09-23 - Add seed file, known tag vocabulary, and suggestion limit settings.
  v0.1.0 - 2026-09-08 - Initial pydantic-settings model with JSON and env sources.
"""

from __future__ import annotations

import json
import logging
import os
from collections.abc import Mapping
from pathlib import Path
from typing import Annotated, Any, cast

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import (
    BaseSettings,
    NoDecode,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
)

from core.tags import DEFAULT_KNOWN_TAGS

DEFAULT_DB_PATH = Path("data") / "prompt_manager.db"
DEFAULT_SUGGESTION_LIMIT = 8
CONFIG_JSON_ENV = "PROMPT_MANAGER_CONFIG_JSON"
DEFAULT_CONFIG_JSON = Path("config") / "config.json"

_JSON_CONFIG_KEYS = (
    "db_path",
    "seed_samples",
    "seed_path",
    "known_tags",
    "suggestion_limit",
)

logger = logging.getLogger("prompt_manager.settings")


class SettingsError(Exception):
    """Raised when Prompt Manager configuration cannot be loaded or validated."""


class PromptManagerSettings(BaseSettings):
    """Application configuration sourced from keyword overrides, JSON files, or environment."""

    db_path: Path = Field(
        default=DEFAULT_DB_PATH,
        description="SQLite database file holding the key-value store.",
    )
    seed_samples: bool = Field(
        default=True,
        description="Seed the packaged sample prompts when the store is empty.",
    )
    seed_path: Path | None = Field(
        default=None,
        description="Optional JSON seed file used instead of the packaged samples.",
    )
    known_tags: Annotated[list[str], NoDecode] = Field(
        default_factory=lambda: list(DEFAULT_KNOWN_TAGS),
        description="Tag vocabulary offered as autocomplete suggestions.",
    )
    suggestion_limit: int | None = Field(
        default=DEFAULT_SUGGESTION_LIMIT,
        description="Maximum number of tag suggestions returned (None for unlimited).",
    )

    model_config = SettingsConfigDict(
        env_prefix="PROMPT_MANAGER_",
        case_sensitive=False,
        env_file=".env",
        extra="ignore",
    )

    @field_validator("db_path", mode="before")
    @classmethod
    def _normalise_path(cls, value: Any) -> Path:
        """Expand user-relative paths and coerce values to Path instances."""
        if value is None or not str(value).strip():
            raise ValueError("a filesystem path is required")
        return Path(str(value).strip()).expanduser().resolve()

    @field_validator("seed_path", mode="before")
    @classmethod
    def _normalise_seed_path(cls, value: Any) -> Path | None:
        """Treat blank seed paths as unset."""
        if value is None:
            return None
        text = str(value).strip()
        if not text:
            return None
        return Path(text).expanduser()

    @field_validator("known_tags", mode="before")
    @classmethod
    def _parse_known_tags(cls, value: Any) -> list[str]:
        """Accept JSON arrays, comma separated strings, or sequences."""
        if value is None:
            return []
        items: list[Any]
        if isinstance(value, str):
            text = value.strip()
            if text.startswith("["):
                try:
                    parsed = json.loads(text)
                except json.JSONDecodeError as exc:
                    raise ValueError("known_tags must be a JSON array or comma list") from exc
                if not isinstance(parsed, list):
                    raise ValueError("known_tags must be a JSON array or comma list")
                items = cast("list[Any]", parsed)
            else:
                items = text.split(",")
        elif isinstance(value, (list, tuple)):
            items = list(cast("list[Any] | tuple[Any, ...]", value))
        else:
            raise ValueError("known_tags must be a list of strings")
        cleaned: list[str] = []
        for item in items:
            tag = str(item).strip()
            if tag and tag not in cleaned:
                cleaned.append(tag)
        return cleaned

    @field_validator("suggestion_limit")
    @classmethod
    def _validate_suggestion_limit(cls, value: int | None) -> int | None:
        """Ensure the suggestion limit is positive when provided."""
        if value is not None and value <= 0:
            raise ValueError("suggestion_limit must be greater than zero")
        return value

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Define configuration source precedence.

        Order (highest → lowest):
            1. Explicit keyword arguments (e.g. load_settings(db_path="...")).
            2. JSON configuration file.
            3. Environment variables.
            4. ``.env`` file values.
            5. File secrets.
        """
        return (
            init_settings,
            cls._json_config_settings_source(settings_cls),
            env_settings,
            dotenv_settings,
            file_secret_settings,
        )

    @classmethod
    def _json_config_settings_source(
        cls,
        _: type[BaseSettings],
    ) -> PydanticBaseSettingsSource:
        """Return settings extracted from an optional JSON config file."""

        def _loader(_: BaseSettings | None = None) -> dict[str, Any]:
            explicit_path = os.getenv(CONFIG_JSON_ENV)
            if explicit_path:
                path = Path(explicit_path).expanduser()
                if not path.exists():
                    raise SettingsError(f"Configuration file not found: {path}")
            else:
                path = DEFAULT_CONFIG_JSON
                if not path.exists():
                    return {}
            try:
                raw_contents = path.read_text(encoding="utf-8")
            except OSError as exc:  # pragma: no cover - filesystem failure is env-specific
                raise SettingsError(f"Unable to read configuration file: {path}") from exc
            try:
                data = json.loads(raw_contents)
            except json.JSONDecodeError as exc:
                raise SettingsError(f"Invalid JSON in configuration file: {path}") from exc
            if not isinstance(data, dict):
                raise SettingsError(f"Configuration file {path} must contain a JSON object")
            mapping_data = cast("Mapping[object, Any]", data)
            data_dict: dict[str, Any] = {str(key): value for key, value in mapping_data.items()}
            unknown = sorted(key for key in data_dict if key not in _JSON_CONFIG_KEYS)
            if unknown:
                logger.warning(
                    "Ignoring unknown key(s) %s in configuration file %s",
                    ", ".join(unknown),
                    path,
                )
            return {key: data_dict[key] for key in _JSON_CONFIG_KEYS if key in data_dict}

        return cast("PydanticBaseSettingsSource", _loader)


def load_settings(**overrides: Any) -> PromptManagerSettings:
    """Return validated settings, raising SettingsError on failure."""
    try:
        return PromptManagerSettings(**overrides)
    except SettingsError:
        raise
    except ValidationError as exc:
        raise SettingsError("Invalid Prompt Manager configuration") from exc


__all__ = [
    "DEFAULT_DB_PATH",
    "DEFAULT_SUGGESTION_LIMIT",
    "PromptManagerSettings",
    "SettingsError",
    "load_settings",
]
