from infrastructure.settings import Settings
from services.view_state import ViewStateController


def create_view_state_controller(settings: Settings | None = None) -> ViewStateController:
    """Factory function to create the view state controller with all dependencies."""
    from infrastructure.http_client import AsyncHTTPClient
    from infrastructure.leetcode_client import LeetCodeGraphQLClient

    settings = settings or Settings.from_env()

    # Create infrastructure dependencies
    http_client = AsyncHTTPClient(timeout=settings.timeout_ms / 1000)
    stats_client = LeetCodeGraphQLClient(
        http_client,
        endpoint=settings.endpoint,
        user_agent=settings.user_agent,
    )

    return ViewStateController(
        stats_client=stats_client,
        username=settings.username,
        timeout_ms=settings.timeout_ms,
    )


__all__ = ["ViewStateController", "create_view_state_controller"]
