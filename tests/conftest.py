"""Shared test fixtures for twitch-gql tests."""

from __future__ import annotations

import pytest

from tests.fakes.transport import FakeTransport
from twitch_gql.client import Client
from twitch_gql.contracts.config import ClientConfig


@pytest.fixture
def transport() -> FakeTransport:
    return FakeTransport()


@pytest.fixture
def client(transport: FakeTransport) -> Client:
    return Client(ClientConfig(client_id="test-client-id"), transport=transport)


@pytest.fixture
def user_payload() -> dict[str, object]:
    return {
        "id": "12826",
        "login": "twitch",
        "displayName": "Twitch",
        "description": "Official channel",
        "profileImageURL": "https://static-cdn.jtvnw.net/twitch.png",
        "createdAt": "2007-05-22T10:39:54Z",
    }
