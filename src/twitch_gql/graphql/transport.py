"""httpx-backed GraphQL transport."""

from __future__ import annotations

import logging
from collections.abc import Generator, Mapping
from types import TracebackType
from typing import Any

import httpx

from twitch_gql.contracts.config import URL
from twitch_gql.contracts.credentials import Credentials
from twitch_gql.contracts.exceptions import GraphQLError
from twitch_gql.contracts.transport import Transport

_LOG = logging.getLogger(__name__)


class CredentialsAuth(httpx.Auth):
    """Injects the client identity and bearer headers into a single request."""

    def __init__(self, credentials: Credentials) -> None:
        self._credentials = credentials

    def auth_flow(self, request: httpx.Request) -> Generator[httpx.Request, httpx.Response, None]:
        request.headers.update(self._credentials.headers())
        yield request


class HttpxTransport(Transport):
    """POSTs GraphQL documents to the endpoint with an ``httpx.AsyncClient``.

    An injected ``http_client`` is borrowed and never closed by this
    transport; one created here is owned and closed by :meth:`aclose`.
    """

    def __init__(
        self,
        *,
        url: str = URL,
        http_client: httpx.AsyncClient | None = None,
        timeout: float = 30.0,
    ) -> None:
        self._url = url
        self._owns_client = http_client is None
        self._client = http_client or httpx.AsyncClient(timeout=httpx.Timeout(timeout))

    @property
    def url(self) -> str:
        return self._url

    async def __aenter__(self) -> HttpxTransport:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    async def execute(
        self,
        document: str,
        variables: Mapping[str, Any],
        *,
        credentials: Credentials,
    ) -> dict[str, Any]:
        response = await self._client.post(
            self._url,
            json={"query": document, "variables": dict(variables)},
            auth=CredentialsAuth(credentials),
        )
        response.raise_for_status()

        payload = response.json()
        if not isinstance(payload, dict):
            raise GraphQLError("GraphQL response is not a JSON object")

        errors = payload.get("errors") or []
        if errors:
            messages = [str(error.get("message", error)) if isinstance(error, dict) else str(error) for error in errors]
            _LOG.debug("GraphQL returned %d error(s)", len(errors))
            raise GraphQLError(f"GraphQL returned errors: {'; '.join(messages)}", errors=errors)

        data = payload.get("data")
        if not isinstance(data, dict):
            raise GraphQLError("GraphQL response missing data payload")
        return data
