from api.schemas.stats import ErrorResponse, SubmissionCountResponse, ViewStateResponse

__all__ = ["ErrorResponse", "SubmissionCountResponse", "ViewStateResponse"]
