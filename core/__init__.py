"""Core service layer for Prompt Manager.

Updates:
  v0.2.0 - 2026-09-23 - Export tag helpers and the repository factory.
  v0.1.0 - 2026-09-08 - Surface PromptRepository, codec, and storage adapters.
"""

from models.prompt_model import Prompt

from .codec import decode_prompts, encode_prompts
from .exceptions import (
    CorruptDataError,
    PromptManagerError,
    PromptNotFoundError,
    PromptStorageError,
)
from .factory import build_repository, resolve_seed_prompts
from .query_view import SortOption, build_view, matches_query
from .repository import STORAGE_KEY, PromptRepository
from .storage import InMemoryKeyValueStore, KeyValueStore, SQLiteKeyValueStore
from .tags import (
    DEFAULT_KNOWN_TAGS,
    add_tag,
    collect_known_tags,
    remove_tag,
    suggest_tags,
)

__all__ = [
    "DEFAULT_KNOWN_TAGS",
    "STORAGE_KEY",
    "CorruptDataError",
    "InMemoryKeyValueStore",
    "KeyValueStore",
    "Prompt",
    "PromptManagerError",
    "PromptNotFoundError",
    "PromptRepository",
    "PromptStorageError",
    "SQLiteKeyValueStore",
    "SortOption",
    "add_tag",
    "build_repository",
    "build_view",
    "collect_known_tags",
    "decode_prompts",
    "encode_prompts",
    "matches_query",
    "remove_tag",
    "resolve_seed_prompts",
    "suggest_tags",
]
