"""API routes for the submission stats view state."""

from litestar import Controller, get, post
from litestar.datastructures import State
from litestar.status_codes import HTTP_200_OK
from loguru import logger

from api.schemas.stats import SubmissionCountResponse, ViewStateResponse
from domain.models import FetchFailure, FetchSuccess, Resolved
from services.view_state import ViewStateController


def to_response(controller: ViewStateController) -> ViewStateResponse:
    """Map the controller's current state to its API representation."""
    state = controller.state
    counts: list[SubmissionCountResponse] = []
    code = None
    failure_kind = None

    if isinstance(state, Resolved):
        outcome = state.outcome
        if isinstance(outcome, FetchSuccess):
            counts = [SubmissionCountResponse.model_validate(c) for c in outcome.counts]
        elif isinstance(outcome, FetchFailure):
            code = outcome.status_code
            failure_kind = outcome.kind.value

    return ViewStateResponse(
        state=state.name,
        counts=counts,
        code=code,
        failure_kind=failure_kind,
        can_fetch=controller.can_fetch,
        can_retry=controller.can_retry,
    )


class StatsController(Controller):
    """Controller for submission stats endpoints."""

    path = "/stats"

    @get("/", status_code=HTTP_200_OK)
    async def get_state(self, state: State) -> ViewStateResponse:
        """Return the current view state."""
        return to_response(state.view_controller)

    @post("/fetch", status_code=HTTP_200_OK)
    async def fetch(self, state: State) -> ViewStateResponse:
        """
        Trigger the first fetch.

        Only allowed from the idle state; returns 409 otherwise.
        """
        logger.debug("API request to fetch submission stats")
        controller: ViewStateController = state.view_controller
        await controller.fetch()
        return to_response(controller)

    @post("/retry", status_code=HTTP_200_OK)
    async def retry(self, state: State) -> ViewStateResponse:
        """
        Retry after a failed fetch.

        Only allowed from the error state; returns 409 otherwise.
        """
        logger.debug("API request to retry submission stats")
        controller: ViewStateController = state.view_controller
        await controller.retry()
        return to_response(controller)
