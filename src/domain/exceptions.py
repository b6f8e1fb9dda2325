"""Domain exceptions."""


class SubmissionStatsError(Exception):
    """Base error for the submission stats application."""

    pass


class InvalidTransitionError(SubmissionStatsError):
    """Action is not allowed from the current view state."""

    def __init__(self, action: str, state_name: str):
        self.action = action
        self.state_name = state_name
        super().__init__(f"Cannot {action} while view state is '{state_name}'")


class ConfigurationError(SubmissionStatsError, ValueError):
    """Invalid application configuration."""

    pass
