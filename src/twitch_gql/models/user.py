"""User and channel models.

A user and a channel share the same opaque ID on Twitch. Relationship
queries (videos, followers, mods, VIPs) are always keyed by that ID.
"""

from __future__ import annotations

from datetime import datetime

from pydantic import Field

from twitch_gql.models.base import WireModel

SubjectID = str | int | None
"""Opaque Twitch ID. Values are forwarded verbatim as the ``ID`` variable."""


class User(WireModel):
    id: SubjectID = None
    login: str = ""
    display_name: str = Field(default="", alias="displayName")
    description: str | None = None
    profile_image_url: str | None = Field(default=None, alias="profileImageURL")
    created_at: datetime | None = Field(default=None, alias="createdAt")


class Channel(WireModel):
    id: SubjectID = None
    name: str = ""
    display_name: str = Field(default="", alias="displayName")
    description: str | None = None
    profile_image_url: str | None = Field(default=None, alias="profileImageURL")
