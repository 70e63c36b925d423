"""Per-call credentials sent with every GraphQL request."""

from __future__ import annotations

from pydantic import BaseModel

CLIENT_ID_HEADER = "Client-ID"
AUTHORIZATION_HEADER = "Authorization"


class Credentials(BaseModel):
    """Immutable snapshot of the identity a single request is sent with."""

    client_id: str
    bearer: str = ""

    model_config = {"frozen": True}

    @property
    def authenticated(self) -> bool:
        return bool(self.bearer)

    def headers(self) -> dict[str, str]:
        headers = {CLIENT_ID_HEADER: self.client_id}
        if self.bearer:
            headers[AUTHORIZATION_HEADER] = f"OAuth {self.bearer}"
        return headers

    def with_bearer(self, token: str) -> Credentials:
        return self.model_copy(update={"bearer": token})
