"""
Notify Project Completion Use Case

Delivers a ProjectCompletedEvent to the stats/badge service: first the
per-account counters, then a badge recalculation. Delivery is best-effort.
The project is already COMPLETED when this runs, so a failure only leaves a
dead letter row behind for manual replay.
"""
import logging
from libs.result import Result, Error, Return
from src.app.services.unit_of_work import UnitOfWork
from src.app.services.stats_notifier import StatsNotifier, StatsNotifierError
from src.domain.dead_letter_event import DeadLetterEvent
from src.domain.events import ProjectCompletedEvent

logger = logging.getLogger(__name__)


async def deliver_completion(stats_notifier: StatsNotifier, event: ProjectCompletedEvent) -> None:
    """Counters first, then badges; both keyed by event.event_id"""
    await stats_notifier.increment_stats(
        account_id=event.account_id,
        projects_completed=1,
        hours_contributed=event.hours_contributed,
        idempotency_key=event.event_id,
    )
    await stats_notifier.recalculate_badges(
        account_id=event.account_id,
        idempotency_key=event.event_id,
    )


class NotifyProjectCompletionUseCase:

    def __init__(self, uow: UnitOfWork, stats_notifier: StatsNotifier):
        self.uow = uow
        self.stats_notifier = stats_notifier

    async def execute(self, event: ProjectCompletedEvent) -> Result[ProjectCompletedEvent]:
        """
        Send the completion to the stats service.

        Both calls reuse event.event_id as idempotency key, so replaying a
        dead-lettered event does not double count.

        Returns:
            Result[ProjectCompletedEvent]: err with STATS_DELIVERY_FAILED when
            the service could not be updated; never raises for downstream errors
        """
        try:
            await deliver_completion(self.stats_notifier, event)
        except StatsNotifierError as e:
            logger.error(
                f"Stats update failed for project {event.project_id}, "
                f"account {event.account_id}: {e.message}"
            )
            await self._dead_letter(event, e.message)
            return Return.err(
                Error(code="STATS_DELIVERY_FAILED", message=e.message, reason=str(e.status_code))
            )
        except Exception as e:
            logger.error(f"Unexpected error notifying stats for project {event.project_id}: {e}")
            await self._dead_letter(event, str(e))
            return Return.err(Error(code="STATS_DELIVERY_FAILED", message=str(e)))

        logger.info(
            f"Stats updated for account {event.account_id}: "
            f"+1 project, +{event.hours_contributed} hours"
        )
        return Return.ok(event)

    async def _dead_letter(self, event: ProjectCompletedEvent, reason: str) -> None:
        try:
            async with self.uow:
                await self.uow.dead_letter_events.create(
                    DeadLetterEvent(
                        event_type=event.event_type,
                        event_id=event.event_id,
                        account_id=event.account_id,
                        payload=event.model_dump(mode="json"),
                        failure_reason=reason,
                    )
                )
                await self.uow.commit()
            logger.info(f"Created dead letter event for completion event {event.event_id}")
        except Exception as e:
            logger.error(f"Failed to store dead letter event {event.event_id}: {e}")
