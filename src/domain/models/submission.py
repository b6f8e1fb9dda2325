"""Value objects for accepted-submission statistics."""

from dataclasses import dataclass
from enum import Enum

# Synthetic status for client-side failures; no real server returns it here.
TRANSPORT_FAILURE_CODE = 499


@dataclass(frozen=True)
class SubmissionCount:
    """Accepted-submission tally for one difficulty bucket."""

    difficulty: str
    count: int


class FailureKind(str, Enum):
    """Why a fetch did not produce counts."""

    HTTP_STATUS = "http_status"
    TRANSPORT = "transport"
    DECODE = "decode"


@dataclass(frozen=True)
class FetchSuccess:
    counts: tuple[SubmissionCount, ...]


@dataclass(frozen=True)
class FetchFailure:
    status_code: int
    kind: FailureKind = FailureKind.HTTP_STATUS

    @classmethod
    def transport(cls) -> "FetchFailure":
        return cls(status_code=TRANSPORT_FAILURE_CODE, kind=FailureKind.TRANSPORT)


FetchOutcome = FetchSuccess | FetchFailure
