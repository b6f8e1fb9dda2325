"""Domain models package."""

from .submission import (
    TRANSPORT_FAILURE_CODE,
    FailureKind,
    FetchFailure,
    FetchOutcome,
    FetchSuccess,
    SubmissionCount,
)
from .view_state import Idle, Loading, Resolved, ViewState

__all__ = [
    "TRANSPORT_FAILURE_CODE",
    "FailureKind",
    "FetchFailure",
    "FetchOutcome",
    "FetchSuccess",
    "Idle",
    "Loading",
    "Resolved",
    "SubmissionCount",
    "ViewState",
]
