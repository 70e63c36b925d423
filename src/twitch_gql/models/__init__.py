"""Domain models returned and accepted by the client."""

from twitch_gql.models.connection import (
    Connection,
    Edge,
    FollowerEdge,
    FollowersQuery,
    GamesQuery,
    ModEdge,
    ModsQuery,
    PageInfo,
    StreamsQuery,
    VideosQuery,
    VIPEdge,
    VIPsQuery,
)
from twitch_gql.models.content import Clip, Game, Stream, Video
from twitch_gql.models.enums import BroadcastType, GameSort, StreamSort
from twitch_gql.models.options import (
    FollowQueryOpts,
    GameOptions,
    GameQueryOpts,
    ModsQueryOpts,
    QueryOpts,
    StreamOptions,
    StreamQueryOpts,
    VideoQueryOpts,
    VIPsQueryOpts,
)
from twitch_gql.models.user import Channel, SubjectID, User

__all__ = [
    "BroadcastType",
    "Channel",
    "Clip",
    "Connection",
    "Edge",
    "FollowQueryOpts",
    "FollowerEdge",
    "FollowersQuery",
    "Game",
    "GameOptions",
    "GameQueryOpts",
    "GameSort",
    "GamesQuery",
    "ModEdge",
    "ModsQuery",
    "ModsQueryOpts",
    "PageInfo",
    "QueryOpts",
    "Stream",
    "StreamOptions",
    "StreamQueryOpts",
    "StreamSort",
    "StreamsQuery",
    "SubjectID",
    "User",
    "VIPEdge",
    "VIPsQuery",
    "VIPsQueryOpts",
    "Video",
    "VideoQueryOpts",
    "VideosQuery",
]
