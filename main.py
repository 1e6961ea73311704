"""Application entry point for Prompt Manager.

Updates:
  v0.2.0 - 2026-09-23 - Map repository failures onto distinct exit codes.
  v0.1.0 - 2026-09-08 - Wire settings, repository factory, and CLI commands.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from cli.commands import (
    COMMAND_SPECS,
    EXIT_INVALID_ARGUMENTS,
    EXIT_NOT_FOUND,
    EXIT_SETTINGS_ERROR,
    EXIT_STORAGE_ERROR,
)
from cli.parser import parse_args
from cli.runtime import setup_logging
from cli.settings_summary import print_settings_summary
from cli.utils import print_and_log
from config import SettingsError, load_settings
from core import (
    CorruptDataError,
    PromptNotFoundError,
    PromptStorageError,
    build_repository,
)

if TYPE_CHECKING:  # pragma: no cover - typing helpers
    from collections.abc import Sequence

    from config import PromptManagerSettings
    from core.repository import PromptRepository


def _initialise_repository(
    settings: PromptManagerSettings,
    logger: logging.Logger,
) -> PromptRepository | None:
    try:
        repository = build_repository(settings)
        repository.load()
    except CorruptDataError as exc:
        logger.error("Stored prompts are unreadable: %s", exc)
        return None
    except (PromptStorageError, OSError, ValueError) as exc:
        logger.error("Failed to initialise prompt storage: %s", exc)
        return None
    return repository


def main(argv: Sequence[str] | None = None) -> int:
    """Entrypoint that wires settings, storage, and CLI commands."""
    args = parse_args(argv)
    setup_logging(args.logging_config)

    logger = logging.getLogger("prompt_manager.main")
    try:
        settings = load_settings()
    except SettingsError as exc:
        logger.error("Failed to load settings: %s", exc)
        return EXIT_SETTINGS_ERROR

    if args.print_settings:
        print_settings_summary(settings)
        return 0

    spec = COMMAND_SPECS.get(getattr(args, "command", None))
    if spec is None:  # pragma: no cover - argparse rejects unknown commands
        logger.error("Unknown command: %s", args.command)
        return EXIT_INVALID_ARGUMENTS

    repository = _initialise_repository(settings, logger)
    if repository is None:
        return EXIT_STORAGE_ERROR

    try:
        return spec.handler(repository, args, settings, logger)
    except PromptNotFoundError as exc:
        print_and_log(logger, logging.ERROR, str(exc))
        return EXIT_NOT_FOUND
    except (PromptStorageError, CorruptDataError) as exc:
        print_and_log(logger, logging.ERROR, f"Storage failure: {exc}")
        return EXIT_STORAGE_ERROR
    except (TypeError, ValueError) as exc:
        print_and_log(logger, logging.ERROR, f"Invalid input: {exc}")
        return EXIT_INVALID_ARGUMENTS


if __name__ == "__main__":
    raise SystemExit(main())
