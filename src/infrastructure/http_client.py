"""Async HTTP client built on curl_cffi."""

from dataclasses import dataclass
from typing import Any

from curl_cffi import CurlError
from curl_cffi.requests import AsyncSession
from loguru import logger

from .errors import TransportError


@dataclass(frozen=True)
class HTTPResponse:
    """Status and body of a completed request."""

    status_code: int
    text: str


class AsyncHTTPClient:
    """Thin async wrapper around curl_cffi sessions.

    Status codes are returned as-is; only transport-level failures raise.
    """

    def __init__(self, timeout: float = 10.0, impersonate: str | None = None):
        """
        Initialize client.

        Args:
            timeout: Default request timeout in seconds
            impersonate: Optional curl_cffi browser fingerprint (e.g. "chrome")
        """
        self.timeout = timeout
        self.impersonate = impersonate

    async def post_json(
        self,
        url: str,
        payload: dict[str, Any],
        headers: dict[str, str] | None = None,
        timeout: float | None = None,
    ) -> HTTPResponse:
        """POST a JSON payload and return the raw response."""
        effective_timeout = timeout if timeout is not None else self.timeout
        logger.debug(f"POST {url} (timeout={effective_timeout}s)")

        try:
            async with AsyncSession(impersonate=self.impersonate) as session:
                response = await session.post(
                    url,
                    json=payload,
                    headers=headers,
                    timeout=effective_timeout,
                )
        except CurlError as e:
            logger.warning(f"Transport failure for {url}: {e}")
            raise TransportError(f"Request to {url} failed: {e}", url=url) from e

        logger.debug(f"POST {url} -> {response.status_code}")
        return HTTPResponse(status_code=response.status_code, text=response.text)
