"""Exception hierarchy for twitch-gql."""

from __future__ import annotations

from typing import Any


class TwitchGQLError(Exception):
    """Base exception for all twitch-gql errors."""


class ConfigError(TwitchGQLError):
    """Configuration loading or validation failure."""


class AuthenticationError(TwitchGQLError):
    """No usable bearer token could be read for the configured auth mode."""


class TokenNotSetError(TwitchGQLError):
    """An authenticated operation was attempted without a bearer token."""

    def __init__(self, message: str = "bearer token is not set") -> None:
        super().__init__(message)


class TooManyArgumentsError(TwitchGQLError):
    """A bulk lookup received more identifiers than the endpoint accepts.

    Attributes:
        count: Number of identifiers supplied.
        limit: Maximum number accepted per request.
    """

    def __init__(self, count: int, limit: int) -> None:
        self.count = count
        self.limit = limit
        super().__init__(f"too many arguments: got {count}, at most {limit} allowed")


class InvalidArgumentError(TwitchGQLError, ValueError):
    """A required argument (usually a subject ID) is missing or empty."""


class GraphQLError(TwitchGQLError):
    """The server answered with GraphQL errors or a malformed payload.

    Attributes:
        errors: Raw error objects from the response ``errors`` array.
    """

    def __init__(self, message: str, *, errors: list[dict[str, Any]] | None = None) -> None:
        super().__init__(message)
        self.errors = errors or []
