"""Infrastructure layer: HTTP transport, GraphQL client, settings."""

from .errors import TransportError
from .http_client import AsyncHTTPClient, HTTPResponse
from .leetcode_client import LeetCodeGraphQLClient
from .settings import Settings

__all__ = [
    "AsyncHTTPClient",
    "HTTPResponse",
    "LeetCodeGraphQLClient",
    "Settings",
    "TransportError",
]
