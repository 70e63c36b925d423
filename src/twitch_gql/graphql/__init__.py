"""GraphQL documents, marshalling helpers and the default transport."""

from twitch_gql.graphql.transport import CredentialsAuth, HttpxTransport

__all__ = ["CredentialsAuth", "HttpxTransport"]
