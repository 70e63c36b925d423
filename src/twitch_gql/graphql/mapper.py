"""Variable marshalling and response unwrapping helpers."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from twitch_gql.contracts.exceptions import InvalidArgumentError, TooManyArgumentsError
from twitch_gql.models.options import DEFAULT_FIRST, MAX_FIRST, QueryOpts
from twitch_gql.models.user import SubjectID

MAX_BULK_ARGUMENTS = 100


def clamp_first(first: int) -> int:
    """Return ``first`` if it is a valid page size, otherwise the default of 25."""
    if first < 1 or first > MAX_FIRST:
        return DEFAULT_FIRST
    return first


def page_variables(opts: QueryOpts) -> dict[str, Any]:
    return {"first": clamp_first(opts.first), "after": opts.after}


def check_bulk(identifiers: Sequence[str]) -> None:
    if len(identifiers) > MAX_BULK_ARGUMENTS:
        raise TooManyArgumentsError(len(identifiers), MAX_BULK_ARGUMENTS)


def to_ids(identifiers: Sequence[Any]) -> list[str]:
    """Marshal identifiers for an ``[ID!]`` variable."""
    return [str(identifier) for identifier in identifiers]


def to_strings(values: Sequence[Any]) -> list[str]:
    """Marshal values for a ``[String!]`` variable."""
    return [str(value) for value in values]


def require_subject_id(subject_id: SubjectID) -> SubjectID:
    """Return the subject ID unchanged, or raise if it is absent or empty.

    Raises:
        InvalidArgumentError: If the ID is None or stringifies to "".
    """
    if subject_id is None or not str(subject_id):
        raise InvalidArgumentError("subject ID must be set and non-empty")
    return subject_id


def unwrap(data: dict[str, Any], outer: str, inner: str | None = None) -> Any:
    """Pull a (possibly nested) field out of a response ``data`` object.

    A null outer payload means the subject was not found; None is returned
    without reading the inner field.
    """
    value = data.get(outer)
    if value is None or inner is None:
        return value
    if not isinstance(value, dict):
        return None
    return value.get(inner)


def compact(nodes: list[Any] | None) -> list[Any]:
    """Drop null entries (unknown IDs or logins) from a bulk lookup result."""
    return [node for node in nodes or [] if node is not None]
