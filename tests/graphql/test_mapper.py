from __future__ import annotations

import pytest

from twitch_gql.contracts.exceptions import InvalidArgumentError, TooManyArgumentsError
from twitch_gql.graphql.mapper import (
    check_bulk,
    clamp_first,
    compact,
    page_variables,
    require_subject_id,
    to_ids,
    to_strings,
    unwrap,
)
from twitch_gql.models import VideoQueryOpts


@pytest.mark.parametrize(("first", "expected"), [(-5, 25), (0, 25), (1, 1), (25, 25), (100, 100), (101, 25)])
def test_clamp_first(first: int, expected: int) -> None:
    assert clamp_first(first) == expected


def test_page_variables() -> None:
    assert page_variables(VideoQueryOpts(first=0, after="abc")) == {"first": 25, "after": "abc"}


def test_check_bulk_limit() -> None:
    check_bulk(["x"] * 100)
    with pytest.raises(TooManyArgumentsError, match="got 101"):
        check_bulk(["x"] * 101)


def test_to_ids_and_to_strings_stringify() -> None:
    assert to_ids([1, "2"]) == ["1", "2"]
    assert to_strings(("a", "b")) == ["a", "b"]


@pytest.mark.parametrize("subject_id", [None, ""])
def test_require_subject_id_rejects_empty(subject_id: str | None) -> None:
    with pytest.raises(InvalidArgumentError):
        require_subject_id(subject_id)


@pytest.mark.parametrize("subject_id", ["1", 0, 42])
def test_require_subject_id_returns_value_verbatim(subject_id: str | int) -> None:
    assert require_subject_id(subject_id) is subject_id


def test_unwrap_top_level_and_nested() -> None:
    data = {"user": {"videos": {"edges": []}}, "clip": None}

    assert unwrap(data, "clip") is None
    assert unwrap(data, "user", "videos") == {"edges": []}
    assert unwrap({"user": None}, "user", "videos") is None
    assert unwrap({}, "user", "videos") is None


def test_compact_drops_nulls() -> None:
    assert compact([{"id": "1"}, None]) == [{"id": "1"}]
    assert compact(None) == []
