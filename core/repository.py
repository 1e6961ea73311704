"""Prompt repository backed by a single key in a key-value store.

Every mutation is one load-modify-store cycle: the persisted collection is
decoded, the change is applied to a copy, the whole copy is written back, and
only then does the in-memory snapshot move forward. A failure at any step
leaves the snapshot exactly as it was. There is no version stamping, so two
interleaved cycles resolve as last writer wins; callers serialise mutations.

Updates:
  v0.3.1 - 2026-10-18 - Type check create() arguments and reject None tags before storage access.
  v0.3.0 - 2026-09-21 - Add known-tag collection and view helpers over the snapshot.
  v0.2.0 - 2026-09-16 - Wrap adapter OSErrors and keep updated_at strictly monotonic.
  v0.1.0 - 2026-09-08 - Consolidate list/add/edit screen storage logic into one repository.
"""

from __future__ import annotations

import logging
import uuid
from dataclasses import replace
from datetime import UTC, datetime, timedelta
from typing import TYPE_CHECKING, Any

from models.prompt_model import Prompt, normalise_tags

from .codec import decode_prompts, encode_prompts
from .exceptions import PromptManagerError, PromptNotFoundError, PromptStorageError
from .query_view import SortOption, build_view
from .tags import collect_known_tags

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable, Mapping

    from .storage import KeyValueStore

logger = logging.getLogger("prompt_manager.repository")

STORAGE_KEY = "prompts"
_MAX_ID_ATTEMPTS = 8
_TIMESTAMP_STEP = timedelta(microseconds=1)

_IGNORED_FIELDS = frozenset({"id", "created_at", "createdAt", "updated_at", "updatedAt"})
_FIELD_ALIASES = {
    "title": "title",
    "content": "content",
    "tags": "tags",
    "is_favorite": "is_favorite",
    "isFavorite": "is_favorite",
}


def _utc_now() -> datetime:
    return datetime.now(UTC)


def _new_prompt_id() -> str:
    return str(uuid.uuid4())


def _require_tag_sequence(tags: Any) -> None:
    if tags is None:
        raise TypeError("Prompt tags must be a sequence of strings; pass [] to clear them")
    if isinstance(tags, str):
        raise TypeError("Prompt tags must be a sequence of strings, not a string")


def _resolve_changes(requested: Mapping[str, Any]) -> dict[str, Any]:
    """Map caller-supplied update fields onto Prompt attributes.

    Immutable fields are dropped; unknown fields and wrongly typed values raise
    before any storage access happens.
    """
    resolved: dict[str, Any] = {}
    unknown = sorted(
        key for key in requested if key not in _FIELD_ALIASES and key not in _IGNORED_FIELDS
    )
    if unknown:
        raise ValueError(f"Unsupported prompt field(s): {', '.join(unknown)}")
    for key, value in requested.items():
        if key in _IGNORED_FIELDS:
            logger.debug("Ignoring immutable prompt field", extra={"field": key})
            continue
        attribute = _FIELD_ALIASES[key]
        if attribute in {"title", "content"} and not isinstance(value, str):
            raise TypeError(f"Prompt {attribute} must be a string")
        if attribute == "is_favorite" and not isinstance(value, bool):
            raise TypeError("Prompt favourite flag must be a boolean")
        if attribute == "tags":
            _require_tag_sequence(value)
            value = normalise_tags(value)
        resolved[attribute] = value
    return resolved


class PromptRepository:
    """Own the prompt collection and every mutation applied to it."""

    def __init__(
        self,
        store: KeyValueStore,
        *,
        seed: Iterable[Prompt] | None = None,
        clock: Callable[[], datetime] | None = None,
        id_factory: Callable[[], str] | None = None,
    ) -> None:
        """Bind the repository to *store*.

        *seed* prompts are written only when :meth:`load` finds nothing stored.
        """
        self._store = store
        self._seed: tuple[Prompt, ...] = tuple(seed or ())
        seed_ids = [prompt.id for prompt in self._seed]
        if len(seed_ids) != len(set(seed_ids)):
            raise ValueError("Seed prompts must have unique ids")
        self._clock = clock or _utc_now
        self._id_factory = id_factory or _new_prompt_id
        self._prompts: list[Prompt] = []
        self._loaded = False

    # Snapshot access ----------------------------------------------------- #

    @property
    def prompts(self) -> tuple[Prompt, ...]:
        """Return the current in-memory snapshot."""
        return tuple(self._prompts)

    @property
    def loaded(self) -> bool:
        """Return True once the snapshot reflects persisted state."""
        return self._loaded

    def __len__(self) -> int:
        return len(self._prompts)

    def get_by_id(self, prompt_id: str) -> Prompt | None:
        """Return the snapshot prompt with *prompt_id*, without touching storage."""
        for prompt in self._prompts:
            if prompt.id == prompt_id:
                return prompt
        return None

    def known_tags(self, extra: Iterable[str] = ()) -> list[str]:
        """Return tags used in the snapshot followed by unseen *extra* tags."""
        return collect_known_tags(self._prompts, extra)

    def view(
        self,
        search_query: str = "",
        sort_option: SortOption | str | None = SortOption.NEWEST,
    ) -> list[Prompt]:
        """Return the snapshot filtered by *search_query* and ordered by *sort_option*."""
        return build_view(self._prompts, search_query, sort_option)

    # Persistence --------------------------------------------------------- #

    def _get_raw(self) -> bytes | None:
        try:
            return self._store.get(STORAGE_KEY)
        except PromptStorageError:
            raise
        except OSError as exc:
            raise PromptStorageError("Failed to read the prompt collection") from exc

    def _read(self) -> list[Prompt]:
        return decode_prompts(self._get_raw())

    def _write(self, prompts: list[Prompt]) -> None:
        payload = encode_prompts(prompts)
        try:
            self._store.set(STORAGE_KEY, payload)
        except PromptStorageError:
            raise
        except OSError as exc:
            raise PromptStorageError("Failed to write the prompt collection") from exc

    def _commit(self, prompts: list[Prompt]) -> None:
        self._write(prompts)
        self._prompts = prompts
        self._loaded = True

    def _now(self) -> datetime:
        value = self._clock()
        return value if value.tzinfo else value.replace(tzinfo=UTC)

    def _next_updated_at(self, prompt: Prompt) -> datetime:
        """Return a timestamp strictly after the prompt's last update."""
        now = self._now()
        previous = prompt.updated_at or prompt.created_at
        return max(now, previous + _TIMESTAMP_STEP)

    def _allocate_id(self, existing: set[str]) -> str:
        for _ in range(_MAX_ID_ATTEMPTS):
            candidate = self._id_factory()
            if candidate not in existing:
                return candidate
            logger.warning("Generated prompt id collided; retrying", extra={"prompt_id": candidate})
        raise PromptManagerError("Unable to allocate a unique prompt id")

    @staticmethod
    def _index_of(prompts: list[Prompt], prompt_id: str) -> int:
        for index, prompt in enumerate(prompts):
            if prompt.id == prompt_id:
                return index
        raise PromptNotFoundError(f"Prompt {prompt_id} not found")

    # Operations ---------------------------------------------------------- #

    def load(self) -> list[Prompt]:
        """Replace the snapshot with persisted state, seeding an empty store."""
        raw = self._get_raw()
        if raw is None:
            prompts = list(self._seed)
            self._write(prompts)
            logger.info(
                "Initialised empty prompt store",
                extra={"seeded_prompts": len(prompts)},
            )
        else:
            prompts = decode_prompts(raw)
            logger.debug("Loaded prompt collection", extra={"prompt_count": len(prompts)})
        self._prompts = prompts
        self._loaded = True
        return list(prompts)

    def create(
        self,
        title: str,
        content: str,
        tags: Iterable[str] = (),
        is_favorite: bool = False,
    ) -> Prompt:
        """Persist a new prompt with a fresh id and return it.

        Arguments are type checked before storage is read so a rejected call
        never writes a record the codec could not decode again.
        """
        if not isinstance(title, str) or not isinstance(content, str):
            raise TypeError("Prompt title and content must be strings")
        if not isinstance(is_favorite, bool):
            raise TypeError("Prompt favourite flag must be a boolean")
        _require_tag_sequence(tags)
        current = self._read()
        prompt_id = self._allocate_id({prompt.id for prompt in current})
        now = self._now()
        prompt = Prompt(
            id=prompt_id,
            title=title,
            content=content,
            tags=normalise_tags(tags),
            is_favorite=is_favorite,
            created_at=now,
            updated_at=now,
        )
        self._commit([*current, prompt])
        logger.info("Created prompt", extra={"prompt_id": prompt_id})
        return prompt

    def update(
        self,
        prompt_id: str,
        changes: Mapping[str, Any] | None = None,
        **fields: Any,
    ) -> Prompt:
        """Apply the supplied fields to a stored prompt and return the result.

        ``id`` and ``created_at`` can never change; attempts are ignored.
        """
        resolved = _resolve_changes({**(changes or {}), **fields})
        current = self._read()
        index = self._index_of(current, prompt_id)
        existing = current[index]
        updated = replace(existing, **resolved, updated_at=self._next_updated_at(existing))
        current[index] = updated
        self._commit(current)
        logger.info(
            "Updated prompt",
            extra={"prompt_id": prompt_id, "fields": sorted(resolved)},
        )
        return updated

    def delete(self, prompt_id: str) -> None:
        """Remove the prompt with *prompt_id*; absent ids are a no-op."""
        current = self._read()
        remaining = [prompt for prompt in current if prompt.id != prompt_id]
        if len(remaining) == len(current):
            logger.debug("Delete skipped; prompt not present", extra={"prompt_id": prompt_id})
        self._commit(remaining)
        if len(remaining) != len(current):
            logger.info("Deleted prompt", extra={"prompt_id": prompt_id})

    def toggle_favorite(self, prompt_id: str) -> Prompt:
        """Flip the favourite flag of a stored prompt and return the result."""
        current = self._read()
        index = self._index_of(current, prompt_id)
        existing = current[index]
        updated = replace(
            existing,
            is_favorite=not existing.is_favorite,
            updated_at=self._next_updated_at(existing),
        )
        current[index] = updated
        self._commit(current)
        logger.info(
            "Toggled favourite",
            extra={"prompt_id": prompt_id, "is_favorite": updated.is_favorite},
        )
        return updated


__all__ = ["STORAGE_KEY", "PromptRepository"]
