"""Infrastructure-level errors."""

from domain.exceptions import SubmissionStatsError


class TransportError(SubmissionStatsError):
    """Request never produced an HTTP response (timeout, DNS, refused connection)."""

    def __init__(self, message: str, url: str | None = None):
        self.url = url
        super().__init__(message)
