"""Tag autocomplete and tag list editing helpers.

Updates:
  v0.2.0 - 2026-09-21 - Add tag removal and known-tag collection helpers.
  v0.1.0 - 2026-09-08 - Initial substring suggestion engine.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from models.prompt_model import normalise_tags

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

    from models.prompt_model import Prompt

DEFAULT_KNOWN_TAGS: tuple[str, ...] = (
    "React",
    "JavaScript",
    "TypeScript",
    "Mobile",
    "Web",
    "AI",
    "Prompt",
)


def suggest_tags(
    partial: str,
    known_tags: Iterable[str],
    already_attached: Iterable[str] = (),
    *,
    limit: int | None = None,
) -> list[str]:
    """Return known tags containing *partial* that are not attached yet.

    Matching is a case-insensitive substring test; exclusion of attached tags
    is exact. Results keep the order of *known_tags*. Blank input yields no
    suggestions.
    """
    if not partial.strip():
        return []
    if limit is not None and limit <= 0:
        return []
    needle = partial.lower()
    attached = set(already_attached)
    suggestions: list[str] = []
    for tag in known_tags:
        if tag in attached or needle not in tag.lower():
            continue
        suggestions.append(tag)
        if limit is not None and len(suggestions) >= limit:
            break
    return suggestions


def add_tag(tags: Sequence[str], candidate: str) -> list[str]:
    """Return *tags* with the trimmed *candidate* appended.

    Empty candidates and exact duplicates are ignored rather than rejected.
    """
    text = candidate.strip()
    current = list(tags)
    if not text or text in current:
        return current
    current.append(text)
    return current


def remove_tag(tags: Sequence[str], tag: str) -> list[str]:
    """Return *tags* without the first exact occurrence of *tag*."""
    current = list(tags)
    if tag in current:
        current.remove(tag)
    return current


def collect_known_tags(prompts: Iterable[Prompt], extra: Iterable[str] = ()) -> list[str]:
    """Return every tag used by *prompts* in first-seen order, then unseen *extra* tags."""
    collected: list[str] = []
    for prompt in prompts:
        collected.extend(prompt.tags)
    collected.extend(extra)
    return list(normalise_tags(collected))


__all__ = [
    "DEFAULT_KNOWN_TAGS",
    "add_tag",
    "collect_known_tags",
    "normalise_tags",
    "remove_tag",
    "suggest_tags",
]
