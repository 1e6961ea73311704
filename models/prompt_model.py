"""Prompt data model definitions.

Updates: v0.3.0 - 2026-09-21 - Add card preview and display date helpers.
Updates: v0.2.0 - 2026-09-14 - Freeze Prompt records and store tags as tuples.
Updates: v0.1.0 - 2026-09-02 - Initial Prompt schema with serialization helpers.
"""
from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import Any

PREVIEW_LENGTH = 100


def _utc_now() -> datetime:
    """Return an aware UTC timestamp."""
    return datetime.now(UTC)


def _ensure_datetime(value: Any) -> datetime:
    """Parse incoming datetime values (isoformat strings or datetime)."""
    if isinstance(value, datetime):
        return value if value.tzinfo else value.replace(tzinfo=UTC)
    if value is None:
        return _utc_now()
    text = str(value).strip()
    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"
    parsed = datetime.fromisoformat(text)
    return parsed if parsed.tzinfo else parsed.replace(tzinfo=UTC)


def format_timestamp(value: datetime) -> str:
    """Return an ISO-8601 UTC string with a ``Z`` suffix."""
    return value.astimezone(UTC).isoformat().replace("+00:00", "Z")


def normalise_tags(values: Iterable[Any] | str | None) -> tuple[str, ...]:
    """Return trimmed, non-empty tags with exact duplicates removed.

    Comparison is case-sensitive so ``"AI"`` and ``"ai"`` are distinct tags.
    The first occurrence of each tag wins and insertion order is preserved.
    """
    if values is None:
        return ()
    if isinstance(values, str):
        values = [values]
    tags: list[str] = []
    seen: set[str] = set()
    for raw in values:
        text = str(raw).strip()
        if not text or text in seen:
            continue
        seen.add(text)
        tags.append(text)
    return tuple(tags)


@dataclass(slots=True, frozen=True)
class Prompt:
    """Dataclass representation of a stored prompt entry.

    Instances are immutable; the repository derives changed copies with
    :func:`dataclasses.replace` so a failed write never leaks a half-applied
    edit into the in-memory collection.
    """
    id: str
    title: str = ""
    content: str = ""
    tags: tuple[str, ...] = ()
    is_favorite: bool = False
    created_at: datetime = field(default_factory=_utc_now)
    updated_at: datetime | None = None

    def __post_init__(self) -> None:
        """Normalise tags and timestamps."""
        created = _ensure_datetime(self.created_at)
        updated = created if self.updated_at is None else _ensure_datetime(self.updated_at)
        object.__setattr__(self, "tags", normalise_tags(self.tags))
        object.__setattr__(self, "is_favorite", bool(self.is_favorite))
        object.__setattr__(self, "created_at", created)
        object.__setattr__(self, "updated_at", updated)

    @property
    def display_date(self) -> str:
        """Return the creation date formatted like ``May 1, 2024``."""
        created = self.created_at.astimezone(UTC)
        return f"{created:%b} {created.day}, {created.year}"

    def preview(self, limit: int = PREVIEW_LENGTH) -> str:
        """Return the content truncated to *limit* characters for list views."""
        if len(self.content) <= limit:
            return self.content
        return f"{self.content[:limit]}..."

    def to_record(self) -> dict[str, Any]:
        """Return a JSON-serialisable mapping in the persisted camelCase layout."""
        updated = self.updated_at or self.created_at
        return {
            "id": self.id,
            "title": self.title,
            "content": self.content,
            "tags": list(self.tags),
            "isFavorite": self.is_favorite,
            "createdAt": format_timestamp(self.created_at),
            "updatedAt": format_timestamp(updated),
        }


__all__ = [
    "PREVIEW_LENGTH",
    "Prompt",
    "format_timestamp",
    "normalise_tags",
]
