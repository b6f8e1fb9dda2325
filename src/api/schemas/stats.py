"""Pydantic schemas for submission stats API endpoints."""

from pydantic import BaseModel


class SubmissionCountResponse(BaseModel):
    """Accepted-submission count for one difficulty bucket."""

    difficulty: str
    count: int

    class Config:
        from_attributes = True


class ViewStateResponse(BaseModel):
    """Snapshot of the view state machine."""

    state: str  # idle | loading | success | error
    counts: list[SubmissionCountResponse] = []
    code: int | None = None  # Status code for the error state
    failure_kind: str | None = None  # http_status | transport | decode
    can_fetch: bool
    can_retry: bool


class ErrorResponse(BaseModel):
    detail: str
