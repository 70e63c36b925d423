"""Convenience entry points: load a config file and build a ready client."""

from __future__ import annotations

import logging
import os
from pathlib import Path

from pydantic import ValidationError

from twitch_gql.client import Client
from twitch_gql.contracts.config import ClientConfig
from twitch_gql.contracts.exceptions import AuthenticationError, ConfigError
from twitch_gql.contracts.transport import Transport

_LOG = logging.getLogger(__name__)


def load_config(path: str | Path) -> ClientConfig:
    """Read a JSON config file into a :class:`ClientConfig`.

    Raises:
        ConfigError: If the file cannot be read, is not JSON, or fails validation.
    """
    config_path = Path(path).expanduser()
    try:
        raw = config_path.read_bytes()
    except OSError as exc:
        raise ConfigError(f"cannot read config file {config_path}: {exc.strerror}") from exc

    try:
        return ClientConfig.model_validate_json(raw)
    except ValidationError as exc:
        raise ConfigError(f"invalid config in {config_path} ({exc.error_count()} error(s)):\n{exc}") from exc


def resolve_bearer(config: ClientConfig) -> str:
    """Return the bearer token ``config.auth`` points at, or "" for anonymous access.

    Raises:
        AuthenticationError: If ``auth`` is ``"env"`` and the variable is unset or blank.
    """
    if config.auth == "token":
        return config.token or ""
    if config.auth == "env":
        token = (os.getenv(config.token_env) or "").strip()
        if not token:
            raise AuthenticationError(f"{config.token_env} is not set or empty")
        return token
    return ""


def create_client(config: ClientConfig | None = None, *, transport: Transport | None = None) -> Client:
    """Build a :class:`Client` authenticated according to ``config.auth``."""
    config = config or ClientConfig()
    bearer = resolve_bearer(config)
    _LOG.debug("Creating client", extra={"auth": config.auth, "authenticated": bool(bearer)})
    return Client(config, transport=transport, bearer=bearer)
