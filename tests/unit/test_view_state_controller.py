"""Unit tests for the view state controller."""

import asyncio
from unittest.mock import AsyncMock, MagicMock

import pytest

from domain.exceptions import InvalidTransitionError
from domain.models import (
    FailureKind,
    FetchFailure,
    FetchSuccess,
    Idle,
    Loading,
    Resolved,
)
from services.view_state import ViewStateController


@pytest.fixture
def stats_client():
    return AsyncMock()


@pytest.fixture
def controller(stats_client):
    return ViewStateController(stats_client=stats_client, username="alice", timeout_ms=5000)


def test_starts_idle(controller):
    assert controller.state == Idle()
    assert controller.state.name == "idle"
    assert controller.can_fetch
    assert not controller.can_retry


def test_rejects_non_positive_timeout(stats_client):
    with pytest.raises(ValueError):
        ViewStateController(stats_client=stats_client, username="alice", timeout_ms=0)


@pytest.mark.asyncio
async def test_fetch_success(controller, stats_client, expected_counts):
    """Scenario A: well-formed 200 response ends in success with counts in order."""
    stats_client.fetch_submission_counts.return_value = FetchSuccess(counts=expected_counts)

    state = await controller.fetch()

    assert state == Resolved(outcome=FetchSuccess(counts=expected_counts))
    assert state.name == "success"
    assert controller.state is state
    stats_client.fetch_submission_counts.assert_awaited_once_with("alice", 5000)


@pytest.mark.asyncio
async def test_fetch_http_failure(controller, stats_client):
    """Scenario B: 404 ends in error with the status code."""
    stats_client.fetch_submission_counts.return_value = FetchFailure(status_code=404)

    state = await controller.fetch()

    assert state.name == "error"
    assert state.outcome.status_code == 404
    assert controller.can_retry
    assert not controller.can_fetch


@pytest.mark.asyncio
async def test_fetch_transport_failure(controller, stats_client):
    """Scenario C: timeout ends in error with the 499 sentinel."""
    stats_client.fetch_submission_counts.return_value = FetchFailure.transport()

    state = await controller.fetch()

    assert state == Resolved(outcome=FetchFailure(status_code=499, kind=FailureKind.TRANSPORT))


@pytest.mark.asyncio
async def test_retry_after_error_reaches_success(controller, stats_client, expected_counts):
    """Scenario D: retry from a 404 error discards the error on success."""
    stats_client.fetch_submission_counts.side_effect = [
        FetchFailure(status_code=404),
        FetchSuccess(counts=expected_counts),
    ]

    await controller.fetch()
    state = await controller.retry()

    assert state == Resolved(outcome=FetchSuccess(counts=expected_counts))
    assert not controller.can_retry
    assert stats_client.fetch_submission_counts.await_count == 2


@pytest.mark.asyncio
async def test_retry_with_same_outcome_is_idempotent(controller, stats_client):
    stats_client.fetch_submission_counts.return_value = FetchFailure(status_code=503)

    first = await controller.fetch()
    second = await controller.retry()
    third = await controller.retry()

    assert first == second == third


@pytest.mark.asyncio
async def test_retry_not_allowed_from_idle(controller, stats_client):
    with pytest.raises(InvalidTransitionError, match="retry"):
        await controller.retry()

    stats_client.fetch_submission_counts.assert_not_awaited()


@pytest.mark.asyncio
async def test_fetch_not_allowed_from_error(controller, stats_client):
    stats_client.fetch_submission_counts.return_value = FetchFailure(status_code=500)
    await controller.fetch()

    with pytest.raises(InvalidTransitionError, match="fetch"):
        await controller.fetch()


@pytest.mark.asyncio
async def test_success_is_terminal(controller, stats_client, expected_counts):
    stats_client.fetch_submission_counts.return_value = FetchSuccess(counts=expected_counts)
    await controller.fetch()

    with pytest.raises(InvalidTransitionError):
        await controller.fetch()
    with pytest.raises(InvalidTransitionError):
        await controller.retry()

    assert stats_client.fetch_submission_counts.await_count == 1


@pytest.mark.asyncio
async def test_no_concurrent_fetch_while_loading(controller, stats_client, expected_counts):
    release = asyncio.Event()

    async def slow_fetch(username, timeout_ms):
        await release.wait()
        return FetchSuccess(counts=expected_counts)

    stats_client.fetch_submission_counts.side_effect = slow_fetch

    task = asyncio.create_task(controller.fetch())
    await asyncio.sleep(0)

    assert controller.state == Loading()
    assert not controller.can_fetch
    assert not controller.can_retry
    with pytest.raises(InvalidTransitionError, match="loading"):
        await controller.fetch()
    with pytest.raises(InvalidTransitionError, match="loading"):
        await controller.retry()

    release.set()
    state = await task

    assert state.name == "success"
    assert stats_client.fetch_submission_counts.await_count == 1


@pytest.mark.asyncio
async def test_cancelled_fetch_restores_previous_state(controller, stats_client):
    started = asyncio.Event()

    async def hanging_fetch(username, timeout_ms):
        started.set()
        await asyncio.Event().wait()

    stats_client.fetch_submission_counts.side_effect = hanging_fetch

    task = asyncio.create_task(controller.fetch())
    await started.wait()
    assert controller.state == Loading()

    task.cancel()
    with pytest.raises(asyncio.CancelledError):
        await task

    assert controller.state == Idle()
    assert controller.can_fetch


@pytest.mark.asyncio
async def test_unexpected_client_error_is_transport_failure(controller, stats_client):
    stats_client.fetch_submission_counts.side_effect = RuntimeError("boom")

    state = await controller.fetch()

    assert state == Resolved(outcome=FetchFailure.transport())
    assert controller.can_retry


@pytest.mark.asyncio
async def test_listeners_see_every_transition(controller, stats_client):
    stats_client.fetch_submission_counts.side_effect = [
        FetchFailure(status_code=404),
        FetchFailure(status_code=404),
    ]
    seen = []
    unsubscribe = controller.subscribe(lambda state: seen.append(state.name))

    await controller.fetch()
    unsubscribe()
    await controller.retry()

    assert seen == ["loading", "error"]


@pytest.mark.asyncio
async def test_failing_listener_does_not_break_transitions(controller, stats_client, expected_counts):
    stats_client.fetch_submission_counts.return_value = FetchSuccess(counts=expected_counts)
    broken = MagicMock(side_effect=RuntimeError("render failed"))
    healthy = MagicMock()
    controller.subscribe(broken)
    controller.subscribe(healthy)

    state = await controller.fetch()

    assert state.name == "success"
    assert broken.call_count == 2
    assert healthy.call_count == 2
