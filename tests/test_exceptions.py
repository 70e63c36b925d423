from __future__ import annotations

import pytest

from twitch_gql.contracts.exceptions import (
    AuthenticationError,
    ConfigError,
    GraphQLError,
    InvalidArgumentError,
    TokenNotSetError,
    TooManyArgumentsError,
    TwitchGQLError,
)


@pytest.mark.parametrize(
    "exc_type",
    [AuthenticationError, ConfigError, GraphQLError, InvalidArgumentError, TokenNotSetError, TooManyArgumentsError],
)
def test_all_errors_share_base(exc_type: type[Exception]) -> None:
    assert issubclass(exc_type, TwitchGQLError)


def test_token_not_set_default_message() -> None:
    assert str(TokenNotSetError()) == "bearer token is not set"


def test_too_many_arguments_carries_counts() -> None:
    exc = TooManyArgumentsError(150, 100)

    assert (exc.count, exc.limit) == (150, 100)
    assert "150" in str(exc)


def test_graphql_error_defaults_to_empty_error_list() -> None:
    assert GraphQLError("bad").errors == []
