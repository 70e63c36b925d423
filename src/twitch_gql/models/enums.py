"""Enumerated types accepted by the Twitch GraphQL schema."""

from __future__ import annotations

from enum import StrEnum


class StreamSort(StrEnum):
    VIEWER_COUNT = "VIEWER_COUNT"
    VIEWER_COUNT_ASC = "VIEWER_COUNT_ASC"
    RECENT = "RECENT"
    RELEVANCE = "RELEVANCE"


class GameSort(StrEnum):
    VIEWER_COUNT = "VIEWER_COUNT"
    RELEVANCE = "RELEVANCE"


class BroadcastType(StrEnum):
    ARCHIVE = "ARCHIVE"
    HIGHLIGHT = "HIGHLIGHT"
    UPLOAD = "UPLOAD"
    PREMIERE_UPLOAD = "PREMIERE_UPLOAD"
    PAST_PREMIERE = "PAST_PREMIERE"
