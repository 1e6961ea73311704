"""Seed prompt loading tests for packaged and custom catalogues."""

from __future__ import annotations

import json
from datetime import UTC, datetime, timedelta
from pathlib import Path

import pytest

from catalog import builtin_catalog_resource, load_seed_prompts

_NOW = datetime(2024, 6, 1, 12, 0, tzinfo=UTC)


def test_packaged_samples_load_with_stable_ids() -> None:
    prompts = load_seed_prompts(now=_NOW)
    again = load_seed_prompts(now=_NOW)

    assert [prompt.title for prompt in prompts] == [
        "Creative Writing Assistant",
        "Code Reviewer",
        "Travel Planner",
    ]
    assert [prompt.id for prompt in prompts] == [prompt.id for prompt in again]
    assert len({prompt.id for prompt in prompts}) == 3
    assert [prompt.is_favorite for prompt in prompts] == [True, False, True]
    assert prompts[1].tags == ("coding", "review")


def test_packaged_samples_are_staggered_one_day_apart() -> None:
    prompts = load_seed_prompts(now=_NOW)

    assert [prompt.created_at for prompt in prompts] == [
        _NOW,
        _NOW - timedelta(days=1),
        _NOW - timedelta(days=2),
    ]
    assert all(prompt.updated_at == prompt.created_at for prompt in prompts)


def test_builtin_resource_is_packaged_json() -> None:
    payload = json.loads(builtin_catalog_resource().read_text(encoding="utf-8"))
    assert isinstance(payload, list)
    assert payload


def test_custom_seed_file_keeps_explicit_fields(tmp_path: Path) -> None:
    seed_file = tmp_path / "seed.json"
    seed_file.write_text(
        json.dumps(
            {
                "prompts": [
                    {
                        "id": "fixed",
                        "title": "Summariser",
                        "content": "Summarise the text.",
                        "tags": ["writing"],
                        "createdAt": "2023-01-02T03:04:05.000Z",
                    },
                    {"title": "Untagged"},
                ]
            }
        ),
        encoding="utf-8",
    )

    prompts = load_seed_prompts(seed_file, now=_NOW)

    assert prompts[0].id == "fixed"
    assert prompts[0].created_at == datetime(2023, 1, 2, 3, 4, 5, tzinfo=UTC)
    assert prompts[0].updated_at == prompts[0].created_at
    assert prompts[1].content == ""
    assert prompts[1].tags == ()
    assert prompts[1].created_at == _NOW - timedelta(days=1)


def test_missing_seed_file_raises(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        load_seed_prompts(tmp_path / "absent.json")


@pytest.mark.parametrize(
    "contents",
    [
        "{not json",
        json.dumps({"title": "not a list"}),
        json.dumps(["just a string"]),
        json.dumps([{"content": "missing title"}]),
        json.dumps([{"title": "Bad tags", "tags": "coding"}]),
        json.dumps([{"title": "Same"}, {"title": "same"}]),
        json.dumps([{"title": "T", "isFavorite": "false"}]),
    ],
    ids=[
        "invalid-json",
        "not-a-list",
        "non-object-entry",
        "missing-title",
        "tags-not-list",
        "duplicate-derived-ids",
        "favorite-not-bool",
    ],
)
def test_invalid_seed_files_raise_value_error(tmp_path: Path, contents: str) -> None:
    seed_file = tmp_path / "seed.json"
    seed_file.write_text(contents, encoding="utf-8")

    with pytest.raises(ValueError):
        load_seed_prompts(seed_file, now=_NOW)
