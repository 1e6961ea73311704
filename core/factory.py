"""Factories for constructing PromptRepository instances from validated settings.

Updates:
  v0.2.0 - 2026-09-23 - Resolve seed prompts from custom seed files.
  v0.1.0 - 2026-09-08 - Wire SQLite key-value store and packaged samples.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from catalog import load_seed_prompts

from .repository import PromptRepository
from .storage import SQLiteKeyValueStore

if TYPE_CHECKING:  # pragma: no cover - typing only
    from config import PromptManagerSettings
    from models.prompt_model import Prompt

    from .storage import KeyValueStore
else:  # pragma: no cover - typing only
    PromptManagerSettings = Any

factory_logger = logging.getLogger("prompt_manager.factory")


def resolve_seed_prompts(settings: PromptManagerSettings) -> list[Prompt]:
    """Return the prompts written to an empty store, per *settings*."""
    seed_path = getattr(settings, "seed_path", None)
    if seed_path is not None:
        factory_logger.debug("Using custom seed prompts from %s", seed_path)
        return load_seed_prompts(seed_path)
    if getattr(settings, "seed_samples", False):
        return load_seed_prompts()
    return []


def build_repository(
    settings: PromptManagerSettings,
    *,
    store: KeyValueStore | None = None,
) -> PromptRepository:
    """Return a repository bound to the configured store and seed prompts."""
    if store is None:
        store = SQLiteKeyValueStore(settings.db_path)
    seed = resolve_seed_prompts(settings)
    factory_logger.debug(
        "Built prompt repository",
        extra={"seed_prompts": len(seed), "store": type(store).__name__},
    )
    return PromptRepository(store, seed=seed)


__all__ = ["build_repository", "resolve_seed_prompts"]
