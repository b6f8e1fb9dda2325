"""Litestar application factory."""

import sys

from litestar import Litestar, Request, Response
from litestar.datastructures import State
from litestar.status_codes import HTTP_409_CONFLICT
from loguru import logger

from api.routes import StatsController
from api.schemas.stats import ErrorResponse
from domain.exceptions import InvalidTransitionError
from infrastructure.settings import Settings
from services import create_view_state_controller
from services.view_state import ViewStateController


def invalid_transition_handler(request: Request, exc: InvalidTransitionError) -> Response:
    logger.info(f"Rejected {request.method} {request.url.path}: {exc}")
    return Response(
        content=ErrorResponse(detail=str(exc)).model_dump(),
        status_code=HTTP_409_CONFLICT,
    )


def create_app(
    controller: ViewStateController | None = None,
    settings: Settings | None = None,
) -> Litestar:
    """
    Create the application with a single view state controller.

    Args:
        controller: Pre-built controller (tests inject one with a mocked client)
        settings: Settings to use; read from the environment when omitted
    """
    settings = settings or Settings.from_env()

    logger.remove()
    logger.add(sys.stderr, level=settings.log_level)

    if controller is None:
        controller = create_view_state_controller(settings)

    logger.info(f"Serving submission stats for {controller.username} from {settings.endpoint}")

    return Litestar(
        route_handlers=[StatsController],
        exception_handlers={InvalidTransitionError: invalid_transition_handler},
        state=State({"view_controller": controller}),
    )
