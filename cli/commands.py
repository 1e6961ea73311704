"""CLI command handlers for Prompt Manager.

Each handler receives a repository whose snapshot has already been loaded.
Handlers return process exit codes; repository failures propagate to the
dispatcher in ``main`` which maps them onto the shared exit codes.

Updates:
  v0.2.0 - 2026-09-23 - Add tag suggestion command.
  v0.1.0 - 2026-09-08 - Initial CRUD, search, and favourite command handlers.
"""

from __future__ import annotations

import argparse
import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from core.query_view import SortOption
from core.tags import suggest_tags

from .utils import format_prompt_card, format_prompt_detail, print_and_log

if TYPE_CHECKING:  # pragma: no cover - typing helpers
    from config import PromptManagerSettings
    from core.repository import PromptRepository
else:  # pragma: no cover - runtime placeholders for type-only imports
    PromptManagerSettings = PromptRepository = Any

CommandHandler = Callable[
    [PromptRepository, argparse.Namespace, PromptManagerSettings, logging.Logger],
    int,
]

EXIT_OK = 0
EXIT_INVALID_ARGUMENTS = 1
EXIT_SETTINGS_ERROR = 2
EXIT_STORAGE_ERROR = 3
EXIT_NOT_FOUND = 4


@dataclass(frozen=True)
class CommandSpec:
    """Metadata for dispatching CLI command handlers."""

    handler: CommandHandler


def run_list(
    repository: PromptRepository,
    args: argparse.Namespace,
    settings: PromptManagerSettings,
    logger: logging.Logger,
) -> int:
    del settings
    sort_option = getattr(args, "sort", None) or SortOption.NEWEST
    prompts = repository.view(getattr(args, "search", "") or "", sort_option)
    if not prompts:
        print("No prompts found")
        return EXIT_OK
    print("\n\n".join(format_prompt_card(prompt) for prompt in prompts))
    logger.debug("Listed prompts", extra={"prompt_count": len(prompts)})
    return EXIT_OK


def run_show(
    repository: PromptRepository,
    args: argparse.Namespace,
    settings: PromptManagerSettings,
    logger: logging.Logger,
) -> int:
    del settings
    prompt = repository.get_by_id(args.prompt_id)
    if prompt is None:
        print_and_log(logger, logging.ERROR, f"Prompt {args.prompt_id} not found")
        return EXIT_NOT_FOUND
    print(format_prompt_detail(prompt))
    return EXIT_OK


def run_add(
    repository: PromptRepository,
    args: argparse.Namespace,
    settings: PromptManagerSettings,
    logger: logging.Logger,
) -> int:
    del settings
    prompt = repository.create(
        args.title,
        args.content,
        tags=list(args.tags or []),
        is_favorite=bool(args.favorite),
    )
    print_and_log(logger, logging.INFO, f"Created prompt {prompt.id}")
    return EXIT_OK


def run_edit(
    repository: PromptRepository,
    args: argparse.Namespace,
    settings: PromptManagerSettings,
    logger: logging.Logger,
) -> int:
    del settings
    changes: dict[str, object] = {}
    if args.title is not None:
        changes["title"] = args.title
    if args.content is not None:
        changes["content"] = args.content
    if args.clear_tags:
        changes["tags"] = []
    elif args.tags is not None:
        changes["tags"] = list(args.tags)
    if args.favorite is not None:
        changes["is_favorite"] = bool(args.favorite)
    if not changes:
        print_and_log(logger, logging.WARNING, "Nothing to update; pass at least one field.")
        return EXIT_INVALID_ARGUMENTS
    prompt = repository.update(args.prompt_id, changes)
    print_and_log(logger, logging.INFO, f"Updated prompt {prompt.id}")
    return EXIT_OK


def run_delete(
    repository: PromptRepository,
    args: argparse.Namespace,
    settings: PromptManagerSettings,
    logger: logging.Logger,
) -> int:
    del settings
    repository.delete(args.prompt_id)
    print_and_log(logger, logging.INFO, f"Deleted prompt {args.prompt_id}")
    return EXIT_OK


def run_favorite(
    repository: PromptRepository,
    args: argparse.Namespace,
    settings: PromptManagerSettings,
    logger: logging.Logger,
) -> int:
    del settings
    prompt = repository.toggle_favorite(args.prompt_id)
    state = "added to" if prompt.is_favorite else "removed from"
    print_and_log(logger, logging.INFO, f"Prompt {prompt.id} {state} favourites")
    return EXIT_OK


def run_tags(
    repository: PromptRepository,
    args: argparse.Namespace,
    settings: PromptManagerSettings,
    logger: logging.Logger,
) -> int:
    del logger
    known = repository.known_tags(extra=getattr(settings, "known_tags", ()) or ())
    suggestions = suggest_tags(
        args.partial,
        known,
        list(args.attached or []),
        limit=getattr(settings, "suggestion_limit", None),
    )
    for suggestion in suggestions:
        print(suggestion)
    return EXIT_OK


COMMAND_SPECS: dict[str | None, CommandSpec] = {
    None: CommandSpec(run_list),
    "list": CommandSpec(run_list),
    "show": CommandSpec(run_show),
    "add": CommandSpec(run_add),
    "edit": CommandSpec(run_edit),
    "delete": CommandSpec(run_delete),
    "favorite": CommandSpec(run_favorite),
    "tags": CommandSpec(run_tags),
}


__all__ = [
    "COMMAND_SPECS",
    "EXIT_INVALID_ARGUMENTS",
    "EXIT_NOT_FOUND",
    "EXIT_OK",
    "EXIT_SETTINGS_ERROR",
    "EXIT_STORAGE_ERROR",
    "CommandSpec",
]
