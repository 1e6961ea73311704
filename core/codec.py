"""Serialise prompt collections to and from the persisted JSON byte layout.

The whole collection is stored as one UTF-8 JSON array of camelCase objects.
Decoding is all-or-nothing: a single malformed record rejects the collection
with :class:`CorruptDataError` instead of silently dropping entries. Unknown
keys are ignored so newer writers can add fields without breaking readers.

Updates:
  v0.2.1 - 2026-10-18 - Parse timestamps strictly as ISO-8601 text.
  v0.2.0 - 2026-09-14 - Validate stored records with pydantic and reject duplicate ids.
  v0.1.0 - 2026-09-02 - Initial JSON encode/decode helpers.
"""

from __future__ import annotations

import json
import logging
from datetime import datetime
from typing import TYPE_CHECKING, Any

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    StrictBool,
    StrictStr,
    TypeAdapter,
    ValidationError,
    field_validator,
)

from models.prompt_model import Prompt

from .exceptions import CorruptDataError

if TYPE_CHECKING:
    from collections.abc import Iterable

logger = logging.getLogger("prompt_manager.codec")


class PromptRecord(BaseModel):
    """Validated shape of a single persisted prompt object."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    id: StrictStr
    title: StrictStr
    content: StrictStr
    tags: list[StrictStr]
    is_favorite: StrictBool = Field(alias="isFavorite")
    created_at: datetime = Field(alias="createdAt")
    updated_at: datetime = Field(alias="updatedAt")

    @field_validator("created_at", "updated_at", mode="before")
    @classmethod
    def _parse_iso_timestamp(cls, value: Any) -> Any:
        """Accept only ISO-8601 text; numeric strings are not Unix timestamps here."""
        if isinstance(value, datetime):
            return value
        if not isinstance(value, str):
            raise ValueError("timestamps must be ISO-8601 strings")
        try:
            return datetime.fromisoformat(value)
        except ValueError as exc:
            raise ValueError(f"invalid ISO-8601 timestamp: {value!r}") from exc

    def to_prompt(self) -> Prompt:
        """Return the immutable domain object for this record."""
        return Prompt(
            id=self.id,
            title=self.title,
            content=self.content,
            tags=tuple(self.tags),
            is_favorite=self.is_favorite,
            created_at=self.created_at,
            updated_at=self.updated_at,
        )


_COLLECTION_ADAPTER: TypeAdapter[list[PromptRecord]] = TypeAdapter(list[PromptRecord])


def decode_prompts(raw: bytes | None) -> list[Prompt]:
    """Return prompts decoded from *raw* bytes, or an empty list when absent."""
    if raw is None:
        return []
    try:
        text = bytes(raw).decode("utf-8")
    except UnicodeDecodeError as exc:
        logger.error("Stored prompt collection is not valid UTF-8")
        raise CorruptDataError("Stored prompt collection is not valid UTF-8") from exc
    try:
        records = _COLLECTION_ADAPTER.validate_json(text)
    except ValidationError as exc:
        logger.error(
            "Stored prompt collection failed validation",
            extra={"error_count": exc.error_count()},
        )
        raise CorruptDataError(f"Stored prompt collection is corrupt: {exc}") from exc

    prompts: list[Prompt] = []
    seen: set[str] = set()
    for record in records:
        if record.id in seen:
            logger.error("Duplicate prompt id in stored collection", extra={"prompt_id": record.id})
            raise CorruptDataError(f"Duplicate prompt id {record.id!r} in stored collection")
        seen.add(record.id)
        prompts.append(record.to_prompt())
    return prompts


def encode_prompts(prompts: Iterable[Prompt]) -> bytes:
    """Return the UTF-8 JSON encoding of *prompts* in their given order."""
    payload = [prompt.to_record() for prompt in prompts]
    return json.dumps(payload, ensure_ascii=False).encode("utf-8")


__all__ = ["PromptRecord", "decode_prompts", "encode_prompts"]
