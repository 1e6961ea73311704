"""Argument parser for Prompt Manager CLI.

Updates:
  v0.2.0 - 2026-09-23 - Add tag suggestion subcommand.
  v0.1.0 - 2026-09-08 - Initial list/show/add/edit/delete/favorite subcommands.
"""

from __future__ import annotations

import argparse
from pathlib import Path
from typing import TYPE_CHECKING

from core.query_view import SortOption

if TYPE_CHECKING:
    from collections.abc import Sequence


def build_parser() -> argparse.ArgumentParser:
    """Return the configured argument parser."""
    parser = argparse.ArgumentParser(description="Prompt Manager")
    parser.add_argument(
        "--logging-config",
        type=Path,
        default=None,
        help="Path to logging configuration file (INI format)",
    )
    parser.add_argument(
        "--print-settings",
        action="store_true",
        help="Print resolved settings and exit",
    )

    subparsers = parser.add_subparsers(dest="command")

    list_parser = subparsers.add_parser("list", help="List stored prompts.")
    list_parser.add_argument(
        "--search",
        default="",
        help="Case-insensitive text matched against titles, content, and tags.",
    )
    list_parser.add_argument(
        "--sort",
        choices=[option.value for option in SortOption],
        default=SortOption.NEWEST.value,
        help="Ordering of the listed prompts (default: newest).",
    )

    show_parser = subparsers.add_parser("show", help="Show a single prompt in full.")
    show_parser.add_argument("prompt_id", help="Identifier of the prompt.")

    add_parser = subparsers.add_parser("add", help="Create a new prompt.")
    add_parser.add_argument("--title", required=True, help="Prompt title.")
    add_parser.add_argument("--content", required=True, help="Prompt body text.")
    add_parser.add_argument(
        "--tag",
        dest="tags",
        action="append",
        default=[],
        help="Tag to attach (repeat for several tags).",
    )
    add_parser.add_argument(
        "--favorite",
        action="store_true",
        help="Mark the new prompt as a favourite.",
    )

    edit_parser = subparsers.add_parser("edit", help="Update fields of an existing prompt.")
    edit_parser.add_argument("prompt_id", help="Identifier of the prompt.")
    edit_parser.add_argument("--title", default=None, help="Replacement title.")
    edit_parser.add_argument("--content", default=None, help="Replacement body text.")
    edit_parser.add_argument(
        "--tag",
        dest="tags",
        action="append",
        default=None,
        help="Replacement tag list entry (repeat for several tags).",
    )
    edit_parser.add_argument(
        "--clear-tags",
        action="store_true",
        help="Remove every tag from the prompt.",
    )
    edit_parser.add_argument(
        "--favorite",
        dest="favorite",
        action="store_true",
        default=None,
        help="Mark the prompt as a favourite.",
    )
    edit_parser.add_argument(
        "--no-favorite",
        dest="favorite",
        action="store_false",
        help="Clear the favourite flag.",
    )

    delete_parser = subparsers.add_parser("delete", help="Delete a prompt (no error if absent).")
    delete_parser.add_argument("prompt_id", help="Identifier of the prompt.")

    favorite_parser = subparsers.add_parser("favorite", help="Toggle the favourite flag.")
    favorite_parser.add_argument("prompt_id", help="Identifier of the prompt.")

    tags_parser = subparsers.add_parser("tags", help="Suggest known tags for partial input.")
    tags_parser.add_argument("partial", help="Partial tag text to complete.")
    tags_parser.add_argument(
        "--attached",
        action="append",
        default=[],
        help="Tag already attached and therefore excluded (repeatable).",
    )

    return parser


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    """Return parsed CLI arguments for the Prompt Manager launcher."""
    return build_parser().parse_args(argv)


__all__ = ["build_parser", "parse_args"]
