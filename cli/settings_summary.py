"""Printable summaries for Prompt Manager configuration.

Updates:
  v0.1.0 - 2026-09-08 - Extract CLI settings summary rendering.
"""

from __future__ import annotations

from config import PromptManagerSettings

from .utils import describe_path


def print_settings_summary(settings: PromptManagerSettings) -> None:
    """Emit a readable summary of storage and tag configuration."""
    seed_path = getattr(settings, "seed_path", None)
    if seed_path is not None:
        seed_description = describe_path(seed_path, expect_directory=False)
    elif getattr(settings, "seed_samples", False):
        seed_description = "packaged sample prompts"
    else:
        seed_description = "disabled (empty collection)"
    known_tags = list(getattr(settings, "known_tags", []) or [])
    suggestion_limit = getattr(settings, "suggestion_limit", None)

    lines = [
        "Prompt Manager configuration summary",
        "------------------------------------",
        "Storage:",
        "  Database path: "
        + describe_path(settings.db_path, expect_directory=False, allow_missing_file=True),
        "Seeding:",
        f"  Initial prompts: {seed_description}",
        "Tags:",
        f"  Known tags: {', '.join(known_tags) if known_tags else 'none'}",
        f"  Suggestion limit: {suggestion_limit if suggestion_limit is not None else 'unlimited'}",
    ]
    print("\n".join(lines))


__all__ = ["print_settings_summary"]
