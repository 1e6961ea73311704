"""Data models for Prompt Manager.

Updates: v0.1.0 - 2026-09-02 - Export Prompt dataclass.
"""

from .prompt_model import Prompt, format_timestamp, normalise_tags

__all__ = [
    "Prompt",
    "format_timestamp",
    "normalise_tags",
]
