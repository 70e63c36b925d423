"""In-memory transport recording every call."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from twitch_gql.contracts.credentials import Credentials
from twitch_gql.contracts.transport import Transport


@dataclass
class RecordedCall:
    document: str
    variables: dict[str, Any]
    credentials: Credentials


@dataclass
class FakeTransport(Transport):
    """Returns queued ``data`` payloads (or raises queued exceptions) in order."""

    responses: list[dict[str, Any] | Exception] = field(default_factory=list)
    calls: list[RecordedCall] = field(default_factory=list)

    def queue(self, response: dict[str, Any] | Exception) -> FakeTransport:
        self.responses.append(response)
        return self

    async def execute(
        self,
        document: str,
        variables: Mapping[str, Any],
        *,
        credentials: Credentials,
    ) -> dict[str, Any]:
        self.calls.append(RecordedCall(document=document, variables=dict(variables), credentials=credentials))
        response = self.responses.pop(0) if self.responses else {}
        if isinstance(response, Exception):
            raise response
        return response
