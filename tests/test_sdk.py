"""Tests for config loading, bearer resolution and client creation."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from tests.fakes.transport import FakeTransport
from twitch_gql import create_client, load_config, resolve_bearer
from twitch_gql.contracts.config import ClientConfig
from twitch_gql.contracts.exceptions import AuthenticationError, ConfigError


def test_load_config_reads_json(tmp_path: Path) -> None:
    path = tmp_path / "twitch-gql.json"
    path.write_text(json.dumps({"client_id": "abc", "auth": "env", "timeout": 5}), encoding="utf-8")

    config = load_config(path)

    assert config == ClientConfig(client_id="abc", auth="env", timeout=5)


def test_load_config_missing_file(tmp_path: Path) -> None:
    with pytest.raises(ConfigError, match="cannot read config file"):
        load_config(tmp_path / "missing.json")


def test_load_config_invalid_json(tmp_path: Path) -> None:
    path = tmp_path / "bad.json"
    path.write_text("{not json", encoding="utf-8")

    with pytest.raises(ConfigError, match="invalid config"):
        load_config(path)


def test_load_config_invalid_values(tmp_path: Path) -> None:
    path = tmp_path / "bad.json"
    path.write_text(json.dumps({"auth": "token"}), encoding="utf-8")

    with pytest.raises(ConfigError, match="needs a non-empty token"):
        load_config(path)


def test_resolve_bearer_anonymous() -> None:
    assert resolve_bearer(ClientConfig()) == ""


def test_resolve_bearer_from_config_token() -> None:
    assert resolve_bearer(ClientConfig(auth="token", token="tok")) == "tok"


def test_resolve_bearer_from_custom_env_variable(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("MY_TWITCH_TOKEN", " tok_456 ")

    assert resolve_bearer(ClientConfig(auth="env", token_env="MY_TWITCH_TOKEN")) == "tok_456"


@pytest.mark.parametrize("value", [None, "   "])
def test_resolve_bearer_env_missing_or_blank(monkeypatch: pytest.MonkeyPatch, value: str | None) -> None:
    if value is None:
        monkeypatch.delenv("TWITCH_GQL_TOKEN", raising=False)
    else:
        monkeypatch.setenv("TWITCH_GQL_TOKEN", value)

    with pytest.raises(AuthenticationError, match="TWITCH_GQL_TOKEN"):
        resolve_bearer(ClientConfig(auth="env"))


def test_create_client_anonymous() -> None:
    client = create_client(transport=FakeTransport())

    assert client.bearer == ""


@pytest.mark.asyncio
async def test_create_client_with_static_token() -> None:
    transport = FakeTransport()

    client = create_client(ClientConfig(auth="token", token="tok"), transport=transport)
    await client.get_current_user()

    assert client.bearer == "tok"
    assert transport.calls[0].credentials.bearer == "tok"


def test_create_client_with_env_token(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("TWITCH_GQL_TOKEN", "env-tok")

    client = create_client(ClientConfig(auth="env"), transport=FakeTransport())

    assert client.bearer == "env-tok"


def test_create_client_propagates_resolution_failure(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("TWITCH_GQL_TOKEN", raising=False)

    with pytest.raises(AuthenticationError):
        create_client(ClientConfig(auth="env"), transport=FakeTransport())
