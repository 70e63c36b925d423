"""Paginated result wrappers.

Every listing query returns a connection: a page of edges, each carrying a
cursor and a node, plus paging info. The cursor of the last edge is what the
caller passes as ``after`` to fetch the next page.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, Generic, TypeVar

from pydantic import Field, field_validator

from twitch_gql.models.base import WireModel
from twitch_gql.models.content import Game, Stream, Video
from twitch_gql.models.user import User

NodeT = TypeVar("NodeT")
EdgeT = TypeVar("EdgeT")


class PageInfo(WireModel):
    has_next_page: bool = Field(default=False, alias="hasNextPage")


class Edge(WireModel, Generic[NodeT]):
    cursor: str | None = None
    node: NodeT


class Connection(WireModel, Generic[EdgeT]):
    edges: list[EdgeT] = Field(default_factory=list)
    page_info: PageInfo = Field(default_factory=PageInfo, alias="pageInfo")
    total_count: int | None = Field(default=None, alias="totalCount")

    @field_validator("edges", mode="before")
    @classmethod
    def drop_empty_edges(cls, value: Any) -> Any:
        # Edges whose node was deleted or hidden come back as null.
        if not isinstance(value, list):
            return value
        return [
            edge for edge in value if edge is not None and (not isinstance(edge, dict) or edge.get("node") is not None)
        ]

    @property
    def nodes(self) -> list[Any]:
        return [edge.node for edge in self.edges]

    @property
    def cursor(self) -> str | None:
        """Cursor for the next page, or None when the page is empty."""
        if not self.edges:
            return None
        return self.edges[-1].cursor


# ------------------------------------------------------------------
# Relationship edges
# ------------------------------------------------------------------


class FollowerEdge(Edge[User]):
    followed_at: datetime | None = Field(default=None, alias="followedAt")


class ModEdge(Edge[User]):
    granted_at: datetime | None = Field(default=None, alias="grantedAt")


class VIPEdge(Edge[User]):
    granted_at: datetime | None = Field(default=None, alias="grantedAt")


# ------------------------------------------------------------------
# Named page results
# ------------------------------------------------------------------


class StreamsQuery(Connection[Edge[Stream]]):
    """A page of live streams."""


class VideosQuery(Connection[Edge[Video]]):
    """A page of videos."""


class GamesQuery(Connection[Edge[Game]]):
    """A page of games (categories)."""


class FollowersQuery(Connection[FollowerEdge]):
    """A page of users following a subject."""


class ModsQuery(Connection[ModEdge]):
    """A page of a channel's moderators."""


class VIPsQuery(Connection[VIPEdge]):
    """A page of a channel's VIPs."""
