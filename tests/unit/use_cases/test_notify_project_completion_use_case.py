"""Unit tests for NotifyProjectCompletionUseCase

Completion events are delivered to the stats service; failures end up as
dead letter rows and never propagate to the caller.
"""
import pytest
from datetime import datetime
from unittest.mock import AsyncMock, MagicMock
from src.app.services.stats_notifier import StatsNotifierError, StatsServiceUnavailable
from src.app.use_cases.stats import NotifyProjectCompletionUseCase
from src.domain import ProjectScope
from src.domain.events import ProjectCompletedEvent


@pytest.fixture
def stats_notifier():
    notifier = MagicMock()
    notifier.increment_stats = AsyncMock()
    notifier.recalculate_badges = AsyncMock()
    return notifier


@pytest.fixture
def completed_event():
    return ProjectCompletedEvent(
        event_id="event-1",
        project_id="project-1",
        account_id="student-1",
        scope=ProjectScope.INTERMEDIATE,
        hours_contributed=40,
        completed_at=datetime(2026, 3, 1, 12, 0),
    )


@pytest.mark.asyncio
class TestNotifyProjectCompletion:

    async def test_increments_stats_then_badges(self, mock_uow, stats_notifier, completed_event):
        calls = []
        stats_notifier.increment_stats.side_effect = lambda **kw: calls.append("stats")
        stats_notifier.recalculate_badges.side_effect = lambda **kw: calls.append("badges")

        result = await NotifyProjectCompletionUseCase(mock_uow, stats_notifier).execute(
            completed_event
        )

        assert result.is_ok()
        assert calls == ["stats", "badges"]
        stats_notifier.increment_stats.assert_called_once_with(
            account_id="student-1",
            projects_completed=1,
            hours_contributed=40,
            idempotency_key="event-1",
        )
        stats_notifier.recalculate_badges.assert_called_once_with(
            account_id="student-1", idempotency_key="event-1"
        )
        mock_uow.dead_letter_events.create.assert_not_called()

    async def test_unavailable_service_is_dead_lettered(
        self, mock_uow, stats_notifier, completed_event
    ):
        stats_notifier.increment_stats.side_effect = StatsServiceUnavailable()

        result = await NotifyProjectCompletionUseCase(mock_uow, stats_notifier).execute(
            completed_event
        )

        assert result.is_err()
        assert result.error.code == "STATS_DELIVERY_FAILED"
        assert result.error.reason == "503"
        stats_notifier.recalculate_badges.assert_not_called()

        dead_letter = mock_uow.dead_letter_events.create.call_args[0][0]
        assert dead_letter.event_type == "project_completed"
        assert dead_letter.event_id == "event-1"
        assert dead_letter.account_id == "student-1"
        assert dead_letter.payload["hours_contributed"] == 40
        assert dead_letter.payload["scope"] == "INTERMEDIATE"
        mock_uow.commit.assert_called_once()

    async def test_badge_rejection_is_dead_lettered(
        self, mock_uow, stats_notifier, completed_event
    ):
        stats_notifier.recalculate_badges.side_effect = StatsNotifierError(
            "Unknown account", status_code=404
        )

        result = await NotifyProjectCompletionUseCase(mock_uow, stats_notifier).execute(
            completed_event
        )

        assert result.error.message == "Unknown account"
        assert mock_uow.dead_letter_events.create.call_args[0][0].failure_reason == "Unknown account"

    async def test_unexpected_error_does_not_raise(
        self, mock_uow, stats_notifier, completed_event
    ):
        stats_notifier.increment_stats.side_effect = RuntimeError("boom")

        result = await NotifyProjectCompletionUseCase(mock_uow, stats_notifier).execute(
            completed_event
        )

        assert result.error.code == "STATS_DELIVERY_FAILED"
        mock_uow.dead_letter_events.create.assert_called_once()

    async def test_dead_letter_storage_failure_is_swallowed(
        self, mock_uow, stats_notifier, completed_event
    ):
        stats_notifier.increment_stats.side_effect = StatsServiceUnavailable()
        mock_uow.dead_letter_events.create.side_effect = RuntimeError("database down")

        result = await NotifyProjectCompletionUseCase(mock_uow, stats_notifier).execute(
            completed_event
        )

        assert result.is_err()
        mock_uow.commit.assert_not_called()
