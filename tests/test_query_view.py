"""Search filtering and sort ordering tests for list views."""

from __future__ import annotations

from datetime import UTC, datetime, timedelta

import pytest

from core.query_view import SortOption, build_view, matches_query
from models.prompt_model import Prompt

_BASE = datetime(2024, 1, 10, tzinfo=UTC)


def _prompt(
    prompt_id: str,
    *,
    days: int = 0,
    title: str = "",
    content: str = "",
    tags: tuple[str, ...] = (),
    favorite: bool = False,
) -> Prompt:
    return Prompt(
        id=prompt_id,
        title=title,
        content=content,
        tags=tags,
        is_favorite=favorite,
        created_at=_BASE + timedelta(days=days),
    )


def _ids(prompts: list[Prompt]) -> list[str]:
    return [prompt.id for prompt in prompts]


def test_empty_query_includes_everything() -> None:
    prompts = [_prompt("a"), _prompt("b")]
    assert _ids(build_view(prompts, "", "unsorted")) == ["a", "b"]


def test_query_matches_tag_substring_case_insensitively() -> None:
    coding = _prompt("coder", title="Reviewer", tags=("coding", "review"))
    travel = _prompt("travel", title="Travel Planner", tags=("travel",))

    assert _ids(build_view([coding, travel], "CODI", "newest")) == ["coder"]
    assert _ids(build_view([coding, travel], "view", "newest")) == ["coder"]


def test_code_query_finds_code_reviewer_sample() -> None:
    reviewer = _prompt("reviewer", title="Code Reviewer", tags=("coding", "review"))
    travel = _prompt("travel", title="Travel Planner", tags=("travel", "planning"))

    assert _ids(build_view([travel, reviewer], "code", "newest")) == ["reviewer"]


def test_search_correctness_for_tag_substring() -> None:
    prompt = _prompt("c", tags=("coding",))
    assert matches_query(prompt, "cod")
    assert build_view([prompt], "Coding", SortOption.NEWEST) == [prompt]


def test_query_matches_title_and_content() -> None:
    by_title = _prompt("title", title="Creative Writing Assistant")
    by_content = _prompt("content", content="Act as a senior DEVELOPER")
    neither = _prompt("none", title="Other", content="Nothing")

    prompts = [by_title, by_content, neither]
    assert _ids(build_view(prompts, "writing", "oldest")) == ["title"]
    assert _ids(build_view(prompts, "developer", "oldest")) == ["content"]


def test_query_is_not_trimmed() -> None:
    spaced = _prompt("spaced", title="two words")
    single = _prompt("single", title="twowords")

    assert _ids(build_view([spaced, single], " ", "oldest")) == ["spaced"]


def test_oldest_and_newest_order_by_created_at() -> None:
    t1 = _prompt("t1", days=1)
    t2 = _prompt("t2", days=2)
    t3 = _prompt("t3", days=3)
    shuffled = [t2, t3, t1]

    assert _ids(build_view(shuffled, "", "oldest")) == ["t1", "t2", "t3"]
    assert _ids(build_view(shuffled, "", "newest")) == ["t3", "t2", "t1"]


def test_date_ties_keep_original_order() -> None:
    first = _prompt("first", days=1)
    second = _prompt("second", days=1)

    assert _ids(build_view([first, second], "", SortOption.NEWEST)) == ["first", "second"]
    assert _ids(build_view([first, second], "", SortOption.OLDEST)) == ["first", "second"]


def test_favorites_first_is_stable() -> None:
    a = _prompt("A", days=3)
    b = _prompt("B", days=1, favorite=True)
    c = _prompt("C", days=2)
    d = _prompt("D", days=0, favorite=True)

    assert _ids(build_view([a, b, c], "", "favorites")) == ["B", "A", "C"]
    assert _ids(build_view([a, b, c, d], "", SortOption.FAVORITES)) == ["B", "D", "A", "C"]


@pytest.mark.parametrize("option", ["alphabetical", "", None, "NEWEST"])
def test_unknown_sort_option_is_identity(option: str | None) -> None:
    prompts = [_prompt("x", days=1), _prompt("y", days=5), _prompt("z", days=3)]
    assert _ids(build_view(prompts, "", option)) == ["x", "y", "z"]


def test_build_view_does_not_mutate_input() -> None:
    prompts = [_prompt("late", days=5), _prompt("early", days=1)]
    original = list(prompts)

    build_view(prompts, "", "oldest")
    assert prompts == original
