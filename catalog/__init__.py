"""Built-in sample prompts used to seed an empty store.

Seed entries use the persisted camelCase layout, but ``id``, ``createdAt`` and
``updatedAt`` are optional: missing ids are derived from the title and missing
creation times are staggered one day apart going back from *now*.

Updates: v0.2.1 - 2026-10-18 - Reject non-boolean isFavorite values in seed files.
Updates: v0.2.0 - 2026-09-23 - Accept custom seed files and fill missing ids/timestamps.
Updates: v0.1.0 - 2026-09-08 - Provide packaged sample prompts.
"""

from __future__ import annotations

import json
import uuid
from collections.abc import Mapping
from datetime import UTC, datetime, timedelta
from importlib.resources import files
from typing import TYPE_CHECKING, Any, cast

from models.prompt_model import Prompt

if TYPE_CHECKING:
    from pathlib import Path

SeedEntry = dict[str, Any]


def builtin_catalog_resource() -> Any:
    """Return a Traversable pointing to the packaged prompts JSON file."""
    return files(__name__).joinpath("prompts.json")


def _read_entries(contents: str, source: str) -> list[SeedEntry]:
    try:
        payload: object = json.loads(contents)
    except json.JSONDecodeError as exc:
        raise ValueError(f"Invalid JSON in {source}") from exc
    if isinstance(payload, Mapping) and isinstance(payload.get("prompts"), list):
        payload = cast("Mapping[str, Any]", payload)["prompts"]
    if not isinstance(payload, list):
        raise ValueError(f"Seed file {source} must contain a JSON list of prompts")
    entries: list[SeedEntry] = []
    for raw_entry in cast("list[object]", payload):
        if not isinstance(raw_entry, Mapping):
            raise ValueError("Seed prompts must be JSON objects")
        entries.append(dict(cast("Mapping[str, Any]", raw_entry)))
    return entries


def _entry_to_prompt(entry: SeedEntry, created_fallback: datetime) -> Prompt:
    title = entry.get("title")
    content = entry.get("content", "")
    if not isinstance(title, str) or not isinstance(content, str):
        raise ValueError("Seed prompts need a string 'title' and string 'content'")
    tags = entry.get("tags") or []
    if not isinstance(tags, list) or not all(isinstance(tag, str) for tag in tags):
        raise ValueError(f"Seed prompt {title!r} has invalid tags")
    is_favorite = entry.get("isFavorite", False)
    if not isinstance(is_favorite, bool):
        raise ValueError(f"Seed prompt {title!r} needs a boolean 'isFavorite'")
    prompt_id = entry.get("id") or str(
        uuid.uuid5(uuid.NAMESPACE_URL, f"prompt-manager:{title.strip().lower()}")
    )
    created_at = entry.get("createdAt") or created_fallback
    return Prompt(
        id=str(prompt_id),
        title=title,
        content=content,
        tags=tuple(cast("list[str]", tags)),
        is_favorite=is_favorite,
        created_at=created_at,
        updated_at=entry.get("updatedAt") or created_at,
    )


def load_seed_prompts(path: Path | None = None, *, now: datetime | None = None) -> list[Prompt]:
    """Return seed prompts from *path*, or the packaged samples when omitted."""
    if path is None:
        contents = builtin_catalog_resource().read_text(encoding="utf-8")
        source = "packaged sample prompts"
    else:
        resolved = path.expanduser()
        try:
            contents = resolved.read_text(encoding="utf-8")
        except OSError as exc:
            raise FileNotFoundError(f"Cannot read seed prompts: {resolved}") from exc
        source = str(resolved)

    reference = now or datetime.now(UTC)
    prompts = [
        _entry_to_prompt(entry, reference - timedelta(days=index))
        for index, entry in enumerate(_read_entries(contents, source))
    ]
    ids = [prompt.id for prompt in prompts]
    if len(ids) != len(set(ids)):
        raise ValueError(f"Seed file {source} contains duplicate prompt ids")
    return prompts


__all__ = ["builtin_catalog_resource", "load_seed_prompts"]
