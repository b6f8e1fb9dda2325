"""GraphQL client for LeetCode accepted-submission statistics."""

import json

from loguru import logger

from domain.models import (
    TRANSPORT_FAILURE_CODE,
    FailureKind,
    FetchFailure,
    FetchOutcome,
    FetchSuccess,
)

from .errors import TransportError
from .parsers.interfaces import HTTPClientProtocol, ParsingError
from .parsers.submission_stats_parser import SubmissionStatsParser

DEFAULT_ENDPOINT = "https://leetcode.com/graphql"
DEFAULT_USER_AGENT = "Mozilla/5.0 (iPhone; CPU iPhone OS 15_0 like Mac OS X)"
DEFAULT_TIMEOUT_MS = 10_000

SUBMISSION_STATS_QUERY = """
{
    matchedUser(username: %s) {
        submitStats: submitStatsGlobal {
            acSubmissionNum {
                difficulty
                count
                submissions
            }
        }
    }
}
"""


class LeetCodeGraphQLClient:
    """Fetches per-difficulty accepted-submission counts for one user."""

    def __init__(
        self,
        http_client: HTTPClientProtocol,
        *,
        endpoint: str = DEFAULT_ENDPOINT,
        user_agent: str = DEFAULT_USER_AGENT,
        parser: type[SubmissionStatsParser] = SubmissionStatsParser,
    ):
        """
        Initialize client.

        Args:
            http_client: Async HTTP client used for the single POST
            endpoint: GraphQL endpoint URL
            user_agent: Value for the User-Agent header
            parser: Response body parser
        """
        self.http_client = http_client
        self.endpoint = endpoint
        self.user_agent = user_agent
        self.parser = parser

    @staticmethod
    def build_query(username: str) -> str:
        """Build the GraphQL document with the username as a string literal."""
        # JSON string escaping is a valid GraphQL string literal
        return SUBMISSION_STATS_QUERY % json.dumps(username)

    def build_payload(self, username: str) -> dict[str, str]:
        return {"query": self.build_query(username)}

    @property
    def headers(self) -> dict[str, str]:
        return {
            "Content-Type": "application/json",
            "User-Agent": self.user_agent,
        }

    async def fetch_submission_counts(
        self, username: str, timeout_ms: int = DEFAULT_TIMEOUT_MS
    ) -> FetchOutcome:
        """
        Fetch accepted-submission counts. Never raises for network or payload problems.

        Returns:
            FetchSuccess with counts in response order, or FetchFailure with
            the HTTP status, or 499 for transport errors and undecodable
            200 responses.
        """
        if timeout_ms <= 0:
            raise ValueError(f"timeout_ms must be positive, got {timeout_ms}")

        logger.info(f"Fetching submission stats for {username}")

        try:
            response = await self.http_client.post_json(
                self.endpoint,
                self.build_payload(username),
                headers=self.headers,
                timeout=timeout_ms / 1000,
            )
        except TransportError as e:
            logger.warning(f"Submission stats request failed: {e}")
            return FetchFailure.transport()

        if response.status_code != 200:
            logger.warning(f"Submission stats request returned HTTP {response.status_code}")
            return FetchFailure(status_code=response.status_code, kind=FailureKind.HTTP_STATUS)

        try:
            counts = self.parser.parse(response.text)
        except ParsingError as e:
            logger.warning(f"Failed to decode submission stats for {username}: {e}")
            return FetchFailure(status_code=TRANSPORT_FAILURE_CODE, kind=FailureKind.DECODE)

        logger.info(f"Fetched {len(counts)} submission bucket(s) for {username}")
        return FetchSuccess(counts=counts)
