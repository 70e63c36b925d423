"""Configuration contracts."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field, field_validator, model_validator

URL = "https://gql.twitch.tv/gql"
"""Address of the Twitch GraphQL server."""

DEFAULT_CLIENT_ID = "kimne78kx3ncx6brgo4mv6wki5h1ko"
"""Client ID of the official Twitch web client, used when none is configured."""

DEFAULT_TOKEN_ENV = "TWITCH_GQL_TOKEN"

AuthMode = Literal["none", "env", "token"]
"""Where the bearer token comes from: nowhere, an environment variable, or ``token``."""


class ClientConfig(BaseModel):
    url: str = URL
    client_id: str = DEFAULT_CLIENT_ID
    auth: AuthMode = "none"
    token: str | None = None
    token_env: str = DEFAULT_TOKEN_ENV
    timeout: float = Field(default=30.0, gt=0)

    model_config = {"frozen": True}

    @field_validator("token")
    @classmethod
    def blank_token_is_unset(cls, value: str | None) -> str | None:
        return (value or "").strip() or None

    @model_validator(mode="after")
    def token_only_with_token_auth(self) -> ClientConfig:
        if self.auth == "token" and self.token is None:
            raise ValueError("auth 'token' needs a non-empty token")
        if self.auth != "token" and self.token is not None:
            raise ValueError(f"token is only read when auth is 'token', not {self.auth!r}")
        return self
