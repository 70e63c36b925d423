"""Public contracts for twitch-gql."""

from twitch_gql.contracts.config import DEFAULT_CLIENT_ID, URL, ClientConfig
from twitch_gql.contracts.credentials import Credentials
from twitch_gql.contracts.exceptions import (
    AuthenticationError,
    ConfigError,
    GraphQLError,
    InvalidArgumentError,
    TokenNotSetError,
    TooManyArgumentsError,
    TwitchGQLError,
)
from twitch_gql.contracts.transport import Transport

__all__ = [
    "DEFAULT_CLIENT_ID",
    "URL",
    "AuthenticationError",
    "ClientConfig",
    "ConfigError",
    "Credentials",
    "GraphQLError",
    "InvalidArgumentError",
    "TokenNotSetError",
    "TooManyArgumentsError",
    "Transport",
    "TwitchGQLError",
]
