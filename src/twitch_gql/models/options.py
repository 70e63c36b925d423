"""Query option models for paginated listings.

``first`` is deliberately unconstrained here: out-of-range page sizes are
clamped by the client rather than rejected.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

from twitch_gql.models.enums import GameSort, StreamSort

DEFAULT_FIRST = 25
MAX_FIRST = 100


class QueryOpts(BaseModel):
    first: int = DEFAULT_FIRST
    after: str | None = None

    model_config = {"frozen": True}


class StreamOptions(BaseModel):
    sort: StreamSort | None = None
    tags: list[str] | None = None
    languages: list[str] | None = Field(default=None, alias="broadcasterLanguages")

    model_config = {"populate_by_name": True, "frozen": True}

    def to_variables(self) -> dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class GameOptions(BaseModel):
    sort: GameSort | None = None
    tags: list[str] | None = None

    model_config = {"frozen": True}

    def to_variables(self) -> dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class StreamQueryOpts(QueryOpts):
    options: StreamOptions | None = None


class VideoQueryOpts(QueryOpts):
    pass


class GameQueryOpts(QueryOpts):
    options: GameOptions | None = None


class FollowQueryOpts(QueryOpts):
    pass


class ModsQueryOpts(QueryOpts):
    pass


class VIPsQueryOpts(QueryOpts):
    pass
