"""Shared CLI utility functions for Prompt Manager commands.

Updates:
  v0.2.0 - 2026-09-21 - Add prompt card rendering for list and show output.
  v0.1.0 - 2026-09-08 - Extract stdout logging and path helpers.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:  # pragma: no cover - typing helpers
    from logging import Logger

    from models.prompt_model import Prompt
else:  # pragma: no cover - runtime placeholders for type-only imports
    Logger = Prompt = Any

FAVORITE_MARKER = "*"


def print_and_log(logger: Logger, level: int, message: str) -> None:
    """Log *message* at *level* and mirror it to stdout."""
    logger.log(level, message)
    print(message)


def describe_path(
    path_value: object,
    *,
    expect_directory: bool,
    allow_missing_file: bool = False,
) -> str:
    """Return a human-friendly description of *path_value* suitability."""
    try:
        path = Path(path_value) if path_value is not None else None  # type: ignore[arg-type]
    except TypeError:
        path = None
    if path is None:
        return "not set"

    resolved = path.expanduser()
    if resolved.exists():
        if expect_directory and not resolved.is_dir():
            return f"{resolved} (exists but is not a directory)"
        if not expect_directory and resolved.is_dir():
            return f"{resolved} (exists but is a directory)"
        return f"{resolved} (exists)"

    message = f"{resolved} (missing)"
    if not expect_directory and allow_missing_file:
        message = f"{resolved} (missing - created on demand)"
    parent = resolved.parent
    if not parent.exists():
        message += f", parent missing: {parent}"
    return message


def format_prompt_card(prompt: Prompt) -> str:
    """Return a compact multi-line summary mirroring the prompt list card."""
    marker = FAVORITE_MARKER if prompt.is_favorite else " "
    tags = " ".join(f"#{tag}" for tag in prompt.tags)
    footer = f"{tags}  {prompt.display_date}" if tags else prompt.display_date
    return "\n".join(
        [
            f"[{marker}] {prompt.title or '(untitled)'}  ({prompt.id})",
            f"    {prompt.preview()}",
            f"    {footer}",
        ]
    )


def format_prompt_detail(prompt: Prompt) -> str:
    """Return every field of *prompt* for the ``show`` command."""
    return "\n".join(
        [
            f"ID:        {prompt.id}",
            f"Title:     {prompt.title}",
            f"Favourite: {'yes' if prompt.is_favorite else 'no'}",
            f"Tags:      {', '.join(prompt.tags) or '-'}",
            f"Created:   {prompt.created_at.isoformat()}",
            f"Updated:   {(prompt.updated_at or prompt.created_at).isoformat()}",
            "",
            prompt.content,
        ]
    )
