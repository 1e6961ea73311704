"""Tag suggestion engine and tag list editing tests."""

from __future__ import annotations

from core.tags import (
    DEFAULT_KNOWN_TAGS,
    add_tag,
    collect_known_tags,
    remove_tag,
    suggest_tags,
)
from models.prompt_model import Prompt


def test_suggest_excludes_attached_tags() -> None:
    assert suggest_tags("re", ["React", "Redux"], ["React"]) == ["Redux"]


def test_suggest_is_case_insensitive_substring_in_known_order() -> None:
    known = ["TypeScript", "JavaScript", "Prompt", "Script"]
    assert suggest_tags("SCRIPT", known, []) == ["TypeScript", "JavaScript", "Script"]
    assert suggest_tags("rom", known) == ["Prompt"]


def test_suggest_blank_input_returns_nothing() -> None:
    assert suggest_tags("", DEFAULT_KNOWN_TAGS, []) == []
    assert suggest_tags("   ", DEFAULT_KNOWN_TAGS, []) == []


def test_suggest_exclusion_is_exact_match() -> None:
    assert suggest_tags("re", ["React"], ["react"]) == ["React"]


def test_suggest_respects_limit() -> None:
    known = ["a1", "a2", "a3"]
    assert suggest_tags("a", known, limit=2) == ["a1", "a2"]
    assert suggest_tags("a", known, limit=0) == []


def test_default_known_tags_drive_suggestions() -> None:
    assert suggest_tags("script", DEFAULT_KNOWN_TAGS, ["TypeScript"]) == ["JavaScript"]


def test_add_tag_trims_and_ignores_empty_or_duplicate() -> None:
    tags = ["example"]
    assert add_tag(tags, "  gpt ") == ["example", "gpt"]
    assert add_tag(tags, "   ") == ["example"]
    assert add_tag(tags, "example") == ["example"]
    assert add_tag(tags, "Example") == ["example", "Example"]
    assert tags == ["example"]


def test_remove_tag_drops_exact_match_only() -> None:
    tags = ["a", "b", "A"]
    assert remove_tag(tags, "a") == ["b", "A"]
    assert remove_tag(tags, "missing") == ["a", "b", "A"]
    assert tags == ["a", "b", "A"]


def test_collect_known_tags_preserves_first_seen_order() -> None:
    prompts = [
        Prompt(id="1", tags=("writing", "creative")),
        Prompt(id="2", tags=("coding", "writing")),
    ]
    assert collect_known_tags(prompts) == ["writing", "creative", "coding"]
    assert collect_known_tags(prompts, ["AI", "coding"]) == [
        "writing",
        "creative",
        "coding",
        "AI",
    ]
