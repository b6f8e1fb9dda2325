"""Controller owning the submission stats view state machine."""

import asyncio
from collections.abc import Callable

from loguru import logger

from domain.exceptions import InvalidTransitionError
from domain.models import FetchFailure, FetchOutcome, Idle, Loading, Resolved, ViewState
from infrastructure.leetcode_client import DEFAULT_TIMEOUT_MS
from infrastructure.parsers import StatsClientProtocol

StateListener = Callable[[ViewState], None]


class ViewStateController:
    """Drives Idle -> Loading -> Resolved transitions for one session.

    Transitions:
        Idle          --fetch-->  Loading
        Resolved/err  --retry-->  Loading
        Loading       --result--> Resolved(outcome)

    Resolved/success has no outgoing transition.
    """

    def __init__(
        self,
        *,
        stats_client: StatsClientProtocol,
        username: str,
        timeout_ms: int = DEFAULT_TIMEOUT_MS,
    ):
        """Initialize controller with dependencies."""
        if timeout_ms <= 0:
            raise ValueError(f"timeout_ms must be positive, got {timeout_ms}")
        self.stats_client = stats_client
        self.username = username
        self.timeout_ms = timeout_ms
        self._state: ViewState = Idle()
        self._listeners: list[StateListener] = []

    @property
    def state(self) -> ViewState:
        return self._state

    @property
    def can_fetch(self) -> bool:
        return isinstance(self._state, Idle)

    @property
    def can_retry(self) -> bool:
        return isinstance(self._state, Resolved) and self._state.failed

    def subscribe(self, listener: StateListener) -> Callable[[], None]:
        """Register a listener called with every new state. Returns an unsubscribe callable."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    async def fetch(self) -> ViewState:
        """Start the first fetch. Only valid from Idle."""
        if not self.can_fetch:
            raise InvalidTransitionError("fetch", self._state.name)
        return await self._load()

    async def retry(self) -> ViewState:
        """Fetch again after a failure. Only valid from Resolved/error."""
        if not self.can_retry:
            raise InvalidTransitionError("retry", self._state.name)
        return await self._load()

    async def _load(self) -> ViewState:
        previous = self._state
        self._set_state(Loading())

        try:
            outcome = await self.stats_client.fetch_submission_counts(self.username, self.timeout_ms)
        except asyncio.CancelledError:
            logger.info("Submission stats fetch cancelled")
            self._set_state(previous)
            raise
        except Exception:
            logger.exception("Stats client raised unexpectedly, treating as transport failure")
            outcome = FetchFailure.transport()

        self._set_state(Resolved(outcome=outcome))
        return self._state

    def _set_state(self, new_state: ViewState) -> None:
        logger.debug(f"View state: {self._state.name} -> {new_state.name}")
        self._state = new_state

        if isinstance(new_state, Resolved):
            self._log_outcome(new_state.outcome)

        for listener in list(self._listeners):
            try:
                listener(new_state)
            except Exception:
                logger.exception(f"View state listener {listener!r} failed")

    @staticmethod
    def _log_outcome(outcome: FetchOutcome) -> None:
        if isinstance(outcome, FetchFailure):
            logger.warning(f"Fetch failed [CODE: {outcome.status_code}] ({outcome.kind.value})")
        else:
            summary = ", ".join(f"{c.difficulty}: {c.count}" for c in outcome.counts)
            logger.info(f"Fetch succeeded: {summary}")
