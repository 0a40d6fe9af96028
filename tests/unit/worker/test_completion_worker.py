"""Unit tests for CompletionWorker

Tests that queued completion events are handed to the notify use case and
that a failing event does not stop the loop.
"""
import asyncio
import pytest
from datetime import datetime
from unittest.mock import AsyncMock, MagicMock, patch
from libs.result import Error, Return
from src.adapter.services.in_memory_event_bus import InMemoryEventBus
from src.domain import ProjectScope
from src.domain.events import ProjectCompletedEvent
from src.worker.completion_worker import CompletionWorker


def completion_event(event_id="event-1"):
    return ProjectCompletedEvent(
        event_id=event_id,
        project_id="project-1",
        account_id="student-1",
        scope=ProjectScope.ADVANCED,
        hours_contributed=80,
        completed_at=datetime(2026, 3, 1),
    )


@pytest.fixture
def mock_session_factory():
    session = MagicMock()
    context = MagicMock()
    context.__aenter__ = AsyncMock(return_value=session)
    context.__aexit__ = AsyncMock(return_value=None)
    return MagicMock(return_value=context)


@pytest.fixture
def worker(mock_session_factory):
    return CompletionWorker(
        event_bus=InMemoryEventBus(),
        stats_notifier=MagicMock(),
        session_factory=mock_session_factory,
        poll_interval=0.01,
    )


@pytest.mark.asyncio
async def test_handle_runs_notify_use_case(worker, mock_session_factory):
    event = completion_event()

    with patch("src.worker.completion_worker.NotifyProjectCompletionUseCase") as use_case_cls:
        use_case_cls.return_value.execute = AsyncMock(return_value=Return.ok(event))
        await worker.handle(event)

    use_case_cls.return_value.execute.assert_called_once_with(event)
    assert use_case_cls.call_args[1]["stats_notifier"] is worker.stats_notifier
    mock_session_factory.assert_called_once()


@pytest.mark.asyncio
async def test_handle_tolerates_failed_delivery(worker):
    event = completion_event()

    with patch("src.worker.completion_worker.NotifyProjectCompletionUseCase") as use_case_cls:
        use_case_cls.return_value.execute = AsyncMock(
            return_value=Return.err(Error(code="STATS_DELIVERY_FAILED", message="down"))
        )
        await worker.handle(event)

    use_case_cls.return_value.execute.assert_called_once()


@pytest.mark.asyncio
async def test_loop_continues_after_handler_error(worker):
    handled = []

    async def handle(event):
        handled.append(event.event_id)
        if event.event_id == "bad":
            raise RuntimeError("boom")
        if len(handled) == 2:
            await worker.stop()

    worker.handle = handle
    await worker.event_bus.publish(completion_event("bad"))
    await worker.event_bus.publish(completion_event("good"))

    await asyncio.wait_for(worker.start(), timeout=1.0)

    assert handled == ["bad", "good"]
    assert worker.running is False
    assert worker.event_bus.pending() == 0
