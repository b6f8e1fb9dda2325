"""Parser for LeetCode accepted-submission statistics responses."""

from loguru import logger
from pydantic import BaseModel, Field, ValidationError

from domain.models import SubmissionCount

from .interfaces import ParsingError


class _AcSubmission(BaseModel):
    difficulty: str
    count: int
    submissions: int | None = None


class _SubmitStats(BaseModel):
    ac_submission_num: list[_AcSubmission] = Field(alias="acSubmissionNum")


class _MatchedUser(BaseModel):
    submit_stats: _SubmitStats = Field(alias="submitStats")


class _ResponseData(BaseModel):
    matched_user: _MatchedUser = Field(alias="matchedUser")


class _GraphQLError(BaseModel):
    message: str


class _GraphQLResponse(BaseModel):
    data: _ResponseData
    errors: list[_GraphQLError] | None = None


class _ErrorsOnly(BaseModel):
    errors: list[_GraphQLError] = []


class SubmissionStatsParser:
    """Decodes `data.matchedUser.submitStats.acSubmissionNum` into domain counts."""

    @classmethod
    def parse(cls, body: str | bytes) -> tuple[SubmissionCount, ...]:
        """
        Parse GraphQL response body.

        Args:
            body: Raw JSON response text

        Returns:
            Submission counts in response order

        Raises:
            ParsingError: If the body is not JSON or lacks the expected shape
        """
        try:
            response = _GraphQLResponse.model_validate_json(body)
        except ValidationError as e:
            messages = cls.extract_error_messages(body)
            if messages:
                logger.warning(f"GraphQL errors in response: {'; '.join(messages)}")
            raise ParsingError(f"Unexpected submission stats payload: {e.error_count()} error(s)") from e

        counts = tuple(
            SubmissionCount(difficulty=item.difficulty, count=item.count)
            for item in response.data.matched_user.submit_stats.ac_submission_num
        )
        logger.debug(f"Parsed {len(counts)} difficulty bucket(s)")
        return counts

    @staticmethod
    def extract_error_messages(body: str | bytes) -> list[str]:
        """Return GraphQL `errors[].message` values, or an empty list."""
        try:
            return [error.message for error in _ErrorsOnly.model_validate_json(body).errors]
        except ValidationError:
            return []
