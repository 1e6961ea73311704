"""Runtime boot helpers for Prompt Manager CLI.

Updates:
  v0.1.0 - 2026-09-08 - Extract logging configuration helpers.
"""

from __future__ import annotations

import logging
import logging.config
from pathlib import Path

DEFAULT_LOGGING_CONFIG = Path("config/logging.conf")


def setup_logging(logging_conf_path: Path | None) -> None:
    """Configure logging using *logging_conf_path* when available."""
    path = logging_conf_path or DEFAULT_LOGGING_CONFIG
    if path.exists():
        try:
            logging.config.fileConfig(path, disable_existing_loggers=False)
            return
        except (OSError, ValueError, KeyError, RuntimeError) as exc:
            logging.basicConfig(
                level=logging.INFO,
                format="%(asctime)s %(levelname)s %(name)s: %(message)s",
            )
            logging.getLogger("prompt_manager.cli").warning(
                "Ignoring unusable logging configuration %s: %s", path, exc
            )
            return
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
