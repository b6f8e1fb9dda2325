"""View states for the submission stats screen."""

from dataclasses import dataclass

from .submission import FetchFailure, FetchOutcome, FetchSuccess


@dataclass(frozen=True)
class Idle:
    """Nothing fetched yet."""

    @property
    def name(self) -> str:
        return "idle"


@dataclass(frozen=True)
class Loading:
    """A fetch is in flight."""

    @property
    def name(self) -> str:
        return "loading"


@dataclass(frozen=True)
class Resolved:
    """The last fetch completed with an outcome."""

    outcome: FetchOutcome

    @property
    def succeeded(self) -> bool:
        return isinstance(self.outcome, FetchSuccess)

    @property
    def failed(self) -> bool:
        return isinstance(self.outcome, FetchFailure)

    @property
    def name(self) -> str:
        return "success" if self.succeeded else "error"


ViewState = Idle | Loading | Resolved
