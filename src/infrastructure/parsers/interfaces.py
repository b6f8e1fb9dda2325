"""Protocol interfaces for infrastructure components."""

from typing import Any, Protocol

from domain.models import FetchOutcome

from ..http_client import HTTPResponse


class ParsingError(ValueError):
    """Error decoding a response body."""

    pass


class HTTPClientProtocol(Protocol):
    """Protocol for HTTP client."""

    async def post_json(
        self,
        url: str,
        payload: dict[str, Any],
        headers: dict[str, str] | None = None,
        timeout: float | None = None,
    ) -> HTTPResponse:
        """POST JSON payload and return the response."""
        ...


class StatsClientProtocol(Protocol):
    """Protocol for the submission stats GraphQL client."""

    async def fetch_submission_counts(self, username: str, timeout_ms: int) -> FetchOutcome:
        """Fetch accepted-submission counts for a user."""
        ...
