"""Transport capability contract."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import Any

from twitch_gql.contracts.credentials import Credentials


class Transport(ABC):
    """Executes one GraphQL document and returns the decoded ``data`` object.

    Implementations own the network round trip and GraphQL error decoding.
    They must raise rather than return partial data when the server reports
    errors.
    """

    @abstractmethod
    async def execute(
        self,
        document: str,
        variables: Mapping[str, Any],
        *,
        credentials: Credentials,
    ) -> dict[str, Any]: ...  # pragma: no cover
