"""Configuration helpers for Prompt Manager.

Updates: v0.1.0 - 2026-09-08 - Expose settings loader and configuration error types.
"""

from .settings import (
    DEFAULT_DB_PATH,
    DEFAULT_SUGGESTION_LIMIT,
    PromptManagerSettings,
    SettingsError,
    load_settings,
)

__all__ = [
    "DEFAULT_DB_PATH",
    "DEFAULT_SUGGESTION_LIMIT",
    "PromptManagerSettings",
    "SettingsError",
    "load_settings",
]
