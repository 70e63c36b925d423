"""Public API surface for twitch-gql."""

__version__ = "0.1.0"

from twitch_gql.client import Client
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
from twitch_gql.graphql.transport import HttpxTransport
from twitch_gql.models import (
    Channel,
    Clip,
    FollowersQuery,
    FollowQueryOpts,
    Game,
    GameOptions,
    GameQueryOpts,
    GamesQuery,
    ModsQuery,
    ModsQueryOpts,
    Stream,
    StreamOptions,
    StreamQueryOpts,
    StreamsQuery,
    User,
    Video,
    VideoQueryOpts,
    VideosQuery,
    VIPsQuery,
    VIPsQueryOpts,
)
from twitch_gql.sdk import create_client, load_config, resolve_bearer

__all__ = [
    "DEFAULT_CLIENT_ID",
    "URL",
    "AuthenticationError",
    "Channel",
    "Client",
    "ClientConfig",
    "Clip",
    "ConfigError",
    "Credentials",
    "FollowQueryOpts",
    "FollowersQuery",
    "Game",
    "GameOptions",
    "GameQueryOpts",
    "GamesQuery",
    "GraphQLError",
    "HttpxTransport",
    "InvalidArgumentError",
    "ModsQuery",
    "ModsQueryOpts",
    "Stream",
    "StreamOptions",
    "StreamQueryOpts",
    "StreamsQuery",
    "TokenNotSetError",
    "TooManyArgumentsError",
    "Transport",
    "TwitchGQLError",
    "User",
    "VIPsQuery",
    "VIPsQueryOpts",
    "Video",
    "VideoQueryOpts",
    "VideosQuery",
    "create_client",
    "load_config",
    "resolve_bearer",
]
