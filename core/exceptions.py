"""Common exception classes for core package.

All exceptions ultimately inherit from :class:`PromptManagerError`, allowing
callers to catch a single base class for any repository failure while still
telling storage outages apart from missing prompts or unreadable data.

Updates:
  v0.2.0 - 2026-09-14 - Add CorruptDataError for undecodable prompt collections.
  v0.1.0 - 2026-09-02 - Created module with storage and lookup errors.
"""

from __future__ import annotations


class PromptManagerError(Exception):
    """Base exception for Prompt Manager failures."""


class PromptNotFoundError(PromptManagerError):
    """Raised when a prompt id is absent from the collection."""


class PromptStorageError(PromptManagerError):
    """Raised when the key-value persistence layer cannot be read or written."""


class CorruptDataError(PromptManagerError):
    """Raised when stored bytes do not decode into valid prompt records."""


__all__ = [
    "CorruptDataError",
    "PromptManagerError",
    "PromptNotFoundError",
    "PromptStorageError",
]
