"""Models for streams, videos, games and clips."""

from __future__ import annotations

from datetime import datetime

from pydantic import Field

from twitch_gql.models.base import WireModel
from twitch_gql.models.user import User


class Game(WireModel):
    id: str | None = None
    name: str = ""
    display_name: str = Field(default="", alias="displayName")
    viewers_count: int = Field(default=0, alias="viewersCount")
    followers_count: int = Field(default=0, alias="followersCount")
    box_art_url: str | None = Field(default=None, alias="boxArtURL")


class Stream(WireModel):
    id: str | None = None
    title: str = ""
    type: str = ""
    viewers_count: int = Field(default=0, alias="viewersCount")
    created_at: datetime | None = Field(default=None, alias="createdAt")
    broadcaster: User | None = None
    game: Game | None = None


class Video(WireModel):
    id: str | None = None
    title: str = ""
    description: str | None = None
    length_seconds: int = Field(default=0, alias="lengthSeconds")
    view_count: int = Field(default=0, alias="viewCount")
    broadcast_type: str | None = Field(default=None, alias="broadcastType")
    created_at: datetime | None = Field(default=None, alias="createdAt")
    published_at: datetime | None = Field(default=None, alias="publishedAt")
    owner: User | None = None
    game: Game | None = None


class Clip(WireModel):
    id: str | None = None
    slug: str = ""
    title: str = ""
    url: str = ""
    view_count: int = Field(default=0, alias="viewCount")
    duration_seconds: int = Field(default=0, alias="durationSeconds")
    created_at: datetime | None = Field(default=None, alias="createdAt")
    broadcaster: User | None = None
    curator: User | None = None
    game: Game | None = None
