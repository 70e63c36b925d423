"""Typed query client for the Twitch GraphQL endpoint.

Every public operation validates its arguments, builds a variable mapping,
and funnels a single request through :meth:`Client.custom_query`. Validation
failures are raised before the transport is touched; transport failures
propagate unchanged.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Mapping
from types import TracebackType
from typing import Any

from twitch_gql.contracts.config import ClientConfig
from twitch_gql.contracts.credentials import Credentials
from twitch_gql.contracts.exceptions import TokenNotSetError
from twitch_gql.contracts.transport import Transport
from twitch_gql.graphql import mapper, queries
from twitch_gql.graphql.transport import HttpxTransport
from twitch_gql.models.connection import (
    FollowersQuery,
    GamesQuery,
    ModsQuery,
    StreamsQuery,
    VideosQuery,
    VIPsQuery,
)
from twitch_gql.models.content import Clip
from twitch_gql.models.options import (
    FollowQueryOpts,
    GameQueryOpts,
    ModsQueryOpts,
    StreamQueryOpts,
    VideoQueryOpts,
    VIPsQueryOpts,
)
from twitch_gql.models.user import Channel, User

_LOG = logging.getLogger(__name__)


def _user_for_channel(channel: Channel) -> User:
    """Re-derive the user a channel belongs to; both share one ID."""
    return User(id=channel.id)


class Client:
    """Twitch GraphQL client.

    The bearer token is kept in an immutable :class:`Credentials` value.
    :meth:`set_bearer` swaps that value atomically and each call captures a
    single snapshot before reaching the transport, so in-flight calls keep
    the credentials they started with. Use :meth:`with_bearer` when
    concurrent callers need different tokens.
    """

    def __init__(
        self,
        config: ClientConfig | None = None,
        *,
        transport: Transport | None = None,
        bearer: str = "",
    ) -> None:
        self._config = config or ClientConfig()
        self._owns_transport = transport is None
        self._transport: Transport = transport or HttpxTransport(url=self._config.url, timeout=self._config.timeout)
        self._lock = threading.Lock()
        self._credentials = Credentials(client_id=self._config.client_id, bearer=bearer)

    async def __aenter__(self) -> Client:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        if self._owns_transport and isinstance(self._transport, HttpxTransport):
            await self._transport.aclose()

    # ------------------------------------------------------------------
    # Identity
    # ------------------------------------------------------------------

    @property
    def id(self) -> str:
        """Client ID sent with every request."""
        return self._config.client_id

    @property
    def config(self) -> ClientConfig:
        return self._config

    @property
    def transport(self) -> Transport:
        return self._transport

    @property
    def bearer(self) -> str:
        return self.credentials.bearer

    @property
    def credentials(self) -> Credentials:
        with self._lock:
            return self._credentials

    def set_bearer(self, token: str) -> None:
        """Replace the bearer token used by subsequent calls.

        An empty string clears authentication.
        """
        with self._lock:
            self._credentials = self._credentials.with_bearer(token)

    def with_bearer(self, token: str) -> Client:
        """Return a client sharing this transport but authenticated with ``token``."""
        return Client(self._config, transport=self._transport, bearer=token)

    # ------------------------------------------------------------------
    # Generic execution
    # ------------------------------------------------------------------

    async def custom_query(self, document: str, variables: Mapping[str, Any] | None = None) -> dict[str, Any]:
        """Execute a query document and return the raw ``data`` object."""
        return await self._execute("query", document, variables)

    async def custom_mutation(self, document: str, variables: Mapping[str, Any] | None = None) -> dict[str, Any]:
        """Execute a mutation document and return the raw ``data`` object."""
        return await self._execute("mutation", document, variables)

    async def _execute(
        self,
        kind: str,
        document: str,
        variables: Mapping[str, Any] | None,
        credentials: Credentials | None = None,
    ) -> dict[str, Any]:
        credentials = credentials or self.credentials
        variables = dict(variables or {})
        _LOG.debug("Executing GraphQL %s", kind, extra={"variables": sorted(variables)})
        return await self._transport.execute(document, variables, credentials=credentials)

    # ------------------------------------------------------------------
    # Users and channels
    # ------------------------------------------------------------------

    async def is_username_available(self, username: str) -> bool:
        data = await self.custom_query(queries.USERNAME_AVAILABILITY, {"username": username})
        return bool(data.get("isUsernameAvailable"))

    async def get_current_user(self) -> User | None:
        """Return the user the bearer token belongs to.

        Raises:
            TokenNotSetError: If no bearer token is set.
        """
        credentials = self.credentials
        if not credentials.authenticated:
            raise TokenNotSetError()
        data = await self._execute("query", queries.CURRENT_USER, None, credentials)
        payload = mapper.unwrap(data, "currentUser")
        if payload is None:
            return None
        return User.model_validate(payload)

    async def get_users_by_id(self, *ids: str) -> list[User]:
        mapper.check_bulk(ids)
        data = await self.custom_query(queries.USERS_BY_ID, {"ids": mapper.to_ids(ids)})
        return [User.model_validate(node) for node in mapper.compact(mapper.unwrap(data, "users"))]

    async def get_users_by_login(self, *logins: str) -> list[User]:
        mapper.check_bulk(logins)
        data = await self.custom_query(queries.USERS_BY_LOGIN, {"logins": mapper.to_strings(logins)})
        return [User.model_validate(node) for node in mapper.compact(mapper.unwrap(data, "users"))]

    async def get_channels_by_id(self, *ids: str) -> list[Channel]:
        mapper.check_bulk(ids)
        data = await self.custom_query(queries.CHANNELS_BY_ID, {"ids": mapper.to_ids(ids)})
        return [Channel.model_validate(node) for node in mapper.compact(mapper.unwrap(data, "users"))]

    async def get_channels_by_name(self, *names: str) -> list[Channel]:
        mapper.check_bulk(names)
        data = await self.custom_query(queries.CHANNELS_BY_NAME, {"names": mapper.to_strings(names)})
        return [Channel.model_validate(node) for node in mapper.compact(mapper.unwrap(data, "users"))]

    # ------------------------------------------------------------------
    # Listings
    # ------------------------------------------------------------------

    async def get_streams(self, opts: StreamQueryOpts | None = None) -> StreamsQuery | None:
        opts = opts or StreamQueryOpts()
        variables = mapper.page_variables(opts)
        variables["options"] = opts.options.to_variables() if opts.options else None
        data = await self.custom_query(queries.STREAMS, variables)
        payload = mapper.unwrap(data, "streams")
        return StreamsQuery.model_validate(payload) if payload is not None else None

    async def get_videos(self, opts: VideoQueryOpts | None = None) -> VideosQuery | None:
        data = await self.custom_query(queries.VIDEOS, mapper.page_variables(opts or VideoQueryOpts()))
        payload = mapper.unwrap(data, "videos")
        return VideosQuery.model_validate(payload) if payload is not None else None

    async def get_games(self, opts: GameQueryOpts | None = None) -> GamesQuery | None:
        opts = opts or GameQueryOpts()
        variables = mapper.page_variables(opts)
        variables["options"] = opts.options.to_variables() if opts.options else None
        data = await self.custom_query(queries.GAMES, variables)
        payload = mapper.unwrap(data, "games")
        return GamesQuery.model_validate(payload) if payload is not None else None

    async def get_clip_by_slug(self, slug: str) -> Clip | None:
        data = await self.custom_query(queries.CLIP_BY_SLUG, {"slug": slug})
        payload = mapper.unwrap(data, "clip")
        return Clip.model_validate(payload) if payload is not None else None

    # ------------------------------------------------------------------
    # Subject-scoped listings
    # ------------------------------------------------------------------

    async def get_videos_by_user(self, user: User, opts: VideoQueryOpts | None = None) -> VideosQuery | None:
        # No subject check: an unset ID is left for the server to reject.
        variables = {"id": user.id, **mapper.page_variables(opts or VideoQueryOpts())}
        data = await self.custom_query(queries.USER_VIDEOS, variables)
        payload = mapper.unwrap(data, "user", "videos")
        return VideosQuery.model_validate(payload) if payload is not None else None

    async def get_videos_by_channel(self, channel: Channel, opts: VideoQueryOpts | None = None) -> VideosQuery | None:
        return await self.get_videos_by_user(_user_for_channel(channel), opts)

    async def get_followers_for_user(self, user: User, opts: FollowQueryOpts | None = None) -> FollowersQuery | None:
        variables = {"id": mapper.require_subject_id(user.id), **mapper.page_variables(opts or FollowQueryOpts())}
        data = await self.custom_query(queries.FOLLOWERS, variables)
        payload = mapper.unwrap(data, "user", "followers")
        return FollowersQuery.model_validate(payload) if payload is not None else None

    async def get_followers_for_channel(
        self, channel: Channel, opts: FollowQueryOpts | None = None
    ) -> FollowersQuery | None:
        return await self.get_followers_for_user(_user_for_channel(channel), opts)

    async def get_mods_for_user(self, user: User, opts: ModsQueryOpts | None = None) -> ModsQuery | None:
        variables = {"id": mapper.require_subject_id(user.id), **mapper.page_variables(opts or ModsQueryOpts())}
        data = await self.custom_query(queries.MODS, variables)
        payload = mapper.unwrap(data, "user", "mods")
        return ModsQuery.model_validate(payload) if payload is not None else None

    async def get_mods_for_channel(self, channel: Channel, opts: ModsQueryOpts | None = None) -> ModsQuery | None:
        return await self.get_mods_for_user(_user_for_channel(channel), opts)

    async def get_vips_for_user(self, user: User, opts: VIPsQueryOpts | None = None) -> VIPsQuery | None:
        variables = {"id": mapper.require_subject_id(user.id), **mapper.page_variables(opts or VIPsQueryOpts())}
        data = await self.custom_query(queries.VIPS, variables)
        payload = mapper.unwrap(data, "user", "vips")
        return VIPsQuery.model_validate(payload) if payload is not None else None

    async def get_vips_for_channel(self, channel: Channel, opts: VIPsQueryOpts | None = None) -> VIPsQuery | None:
        return await self.get_vips_for_user(_user_for_channel(channel), opts)
