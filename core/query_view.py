"""Filter and order prompts for list views.

Updates:
  v0.1.0 - 2026-09-08 - Extract search filtering and sort modes from list screens.
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable

    from models.prompt_model import Prompt


class SortOption(str, Enum):
    """Enumerate the orderings offered by the prompt list."""

    NEWEST = "newest"
    OLDEST = "oldest"
    FAVORITES = "favorites"


def _coerce_sort_option(value: SortOption | str | None) -> SortOption | None:
    if isinstance(value, SortOption):
        return value
    if value is None:
        return None
    try:
        return SortOption(str(value))
    except ValueError:
        return None


def matches_query(prompt: Prompt, query: str) -> bool:
    """Return True when *query* is a case-insensitive substring of any searchable field."""
    if not query:
        return True
    needle = query.lower()
    if needle in prompt.title.lower() or needle in prompt.content.lower():
        return True
    return any(needle in tag.lower() for tag in prompt.tags)


def build_view(
    prompts: Iterable[Prompt],
    search_query: str = "",
    sort_option: SortOption | str | None = SortOption.NEWEST,
) -> list[Prompt]:
    """Return the filtered, ordered prompts for display.

    Sorting is stable, so ties (and every non-favourite under ``favorites``)
    keep their original relative order. Unknown sort options leave the
    filtered order unchanged.
    """
    filtered = [prompt for prompt in prompts if matches_query(prompt, search_query)]
    option = _coerce_sort_option(sort_option)
    if option is SortOption.NEWEST:
        return sorted(filtered, key=lambda prompt: prompt.created_at, reverse=True)
    if option is SortOption.OLDEST:
        return sorted(filtered, key=lambda prompt: prompt.created_at)
    if option is SortOption.FAVORITES:
        return sorted(filtered, key=lambda prompt: not prompt.is_favorite)
    return filtered


__all__ = ["SortOption", "build_view", "matches_query"]
