"""
Replay Dead Letter Events Use Case

Operators resend undelivered completion events once the stats/badge
service is back. Delivery reuses the original event id as idempotency key,
so a row that was in fact applied downstream is not counted twice.
"""
import logging
from typing import Dict, List, Optional, Tuple
from pydantic import ValidationError
from libs.result import Result, Return
from src.app.services.audit_service import AuditService, record_event
from src.app.services.authorization import Capability, require
from src.app.services.stats_notifier import StatsNotifier, StatsNotifierError
from src.app.services.unit_of_work import UnitOfWork
from src.domain import Actor
from src.domain.events import PROJECT_COMPLETED, ProjectCompletedEvent
from .dtos import (
    DeadLetterEventDTO,
    ListDeadLetterEventsResponse,
    ReplayDeadLetterEventsResponse,
)
from .notify_project_completion_use_case import deliver_completion

logger = logging.getLogger(__name__)

REPLAY_BATCH_SIZE = 50


class ListDeadLetterEventsUseCase:

    def __init__(self, uow: UnitOfWork, actor: Optional[Actor]):
        self.uow = uow
        self.actor = actor

    async def execute(self, limit: Optional[int] = None) -> Result[ListDeadLetterEventsResponse]:
        error = require(self.actor, Capability.REPLAY_DEAD_LETTERS)
        if error:
            return Return.err(error)

        async with self.uow:
            events = await self.uow.dead_letter_events.list_unresolved(limit)
            return Return.ok(
                ListDeadLetterEventsResponse(
                    events=[DeadLetterEventDTO.from_entity(event) for event in events]
                )
            )


class ReplayDeadLetterEventsUseCase:
    """
    Use case: Replay Dead Letter Events

    Rows are read in one transaction, delivered with no transaction open and
    updated in a second one. A failed replay keeps the row unresolved with
    the new failure reason.
    """

    def __init__(
        self,
        uow: UnitOfWork,
        actor: Optional[Actor],
        stats_notifier: StatsNotifier,
        audit_service: AuditService,
    ):
        self.uow = uow
        self.actor = actor
        self.stats_notifier = stats_notifier
        self.audit_service = audit_service

    async def execute(
        self, limit: int = REPLAY_BATCH_SIZE
    ) -> Result[ReplayDeadLetterEventsResponse]:
        error = require(self.actor, Capability.REPLAY_DEAD_LETTERS)
        if error:
            return Return.err(error)

        async with self.uow:
            pending: List[Tuple[str, str, Optional[dict]]] = [
                (event.id, event.event_type, event.payload)
                for event in await self.uow.dead_letter_events.list_unresolved(limit)
            ]

        # Failure reason per row, None once delivered
        outcomes: Dict[str, Optional[str]] = {}
        for dead_letter_id, event_type, payload in pending:
            outcomes[dead_letter_id] = await self._deliver(event_type, payload)

        replayed = []
        async with self.uow:
            for dead_letter_id, failure in outcomes.items():
                dead_letter = await self.uow.dead_letter_events.get_by_id(dead_letter_id)
                if dead_letter is None or dead_letter.resolved:
                    continue
                if failure is None:
                    dead_letter.mark_resolved("Delivered on replay")
                else:
                    dead_letter.record_replay_failure(failure)
                replayed.append(await self.uow.dead_letter_events.update(dead_letter))
            await self.uow.commit()

        resolved = [event for event in replayed if event.resolved]
        logger.info(
            f"Replayed {len(replayed)} dead letter events: "
            f"{len(resolved)} resolved, {len(replayed) - len(resolved)} still failing"
        )

        for event in resolved:
            await record_event(
                self.audit_service,
                event_type="dead_letter_replayed",
                actor_id=self.actor.account_id,
                resource_type="dead_letter_event",
                resource_id=event.id,
                metadata={"event_id": event.event_id, "attempts": event.replay_attempts},
            )

        return Return.ok(
            ReplayDeadLetterEventsResponse(
                resolved=len(resolved),
                failed=len(replayed) - len(resolved),
                events=[DeadLetterEventDTO.from_entity(event) for event in replayed],
            )
        )

    async def _deliver(self, event_type: str, payload: Optional[dict]) -> Optional[str]:
        if event_type != PROJECT_COMPLETED:
            return f"Unsupported event type {event_type}"
        try:
            event = ProjectCompletedEvent.model_validate(payload or {})
        except ValidationError as e:
            return f"Invalid payload: {e.error_count()} validation errors"

        try:
            await deliver_completion(self.stats_notifier, event)
        except StatsNotifierError as e:
            logger.warning(f"Replay of {event.event_id} failed: {e.message}")
            return e.message
        except Exception as e:
            logger.error(f"Unexpected error replaying {event.event_id}: {e}")
            return str(e)
        return None
