"""
Advance Project Status Use Case

Moves an assigned project along ASSIGNED -> IN_PROGRESS -> IN_REVIEW ->
COMPLETED. The owner or the assigned student may advance; only the owner
may complete. Reaching COMPLETED publishes a ProjectCompletedEvent after
the commit; stats and badges are updated by its consumer, so a downstream
failure can never undo the transition.
"""
import logging
from datetime import datetime
from typing import Mapping, Optional
from libs.result import Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.app.services.audit_service import AuditService, record_event
from src.app.services.event_publisher import EventPublisher
from src.app.services.authorization import Capability, require, require_participant
from src.app.services.scope_hours import hours_for_scope
from src.domain import Actor, ProjectCompletedEvent
from src.domain.enums import value_of
from src.domain.lifecycle import apply_transition, decide_advance, invalid_transition
from .dtos import AdvanceProjectStatusRequest, ProjectDTO

logger = logging.getLogger(__name__)


class AdvanceProjectStatusUseCase:

    def __init__(
        self,
        uow: UnitOfWork,
        actor: Optional[Actor],
        audit_service: AuditService,
        event_publisher: EventPublisher,
        scope_hours: Optional[Mapping[str, int]] = None,
    ):
        self.uow = uow
        self.actor = actor
        self.audit_service = audit_service
        self.event_publisher = event_publisher
        self.scope_hours = scope_hours

    async def execute(
        self, project_id: str, request: AdvanceProjectStatusRequest
    ) -> Result[ProjectDTO]:
        """
        Advance a project to the requested status

        Args:
            project_id: The project to advance
            request: Target status, must be the unique successor of the current one

        Returns:
            Result[ProjectDTO]: The project as committed
        """
        error = require(self.actor, Capability.ADVANCE_PROJECT)
        if error:
            return Return.err(error)

        async with self.uow:
            project = await self.uow.projects.get_by_id(project_id)

            error = require_participant(self.actor, project)
            if error:
                return Return.err(error)

            decision = decide_advance(project, self.actor, request.status)
            if decision.is_err():
                return Return.err(decision.error)
            transition = decision.value

            now = datetime.utcnow()
            changes = apply_transition(project, transition, now)
            updated = await self.uow.projects.compare_and_set_status(
                project.id, transition.source, changes
            )
            if not updated:
                await self.uow.rollback()
                return Return.err(
                    invalid_transition(
                        "Project status was changed by another request",
                        transition.source,
                        transition.target,
                    )
                )
            await self.uow.commit()

        if transition.fires_completion:
            await self._publish_completion(project, now)

        await record_event(
            self.audit_service,
            event_type="project_status_changed",
            actor_id=self.actor.account_id,
            resource_type="project",
            resource_id=project.id,
            metadata={
                "from_status": value_of(transition.source),
                "to_status": value_of(transition.target),
            },
        )

        return Return.ok(ProjectDTO.from_entity(project))

    async def _publish_completion(self, project, completed_at: datetime) -> None:
        if project.assigned_student_id is None:
            logger.warning(f"Project {project.id} completed without an assigned student")
            return

        event = ProjectCompletedEvent(
            project_id=project.id,
            account_id=project.assigned_student_id,
            scope=project.scope,
            hours_contributed=hours_for_scope(project.scope, self.scope_hours),
            completed_at=completed_at,
        )
        try:
            await self.event_publisher.publish(event)
        except Exception as e:
            logger.error(f"Failed to publish {event.event_type} for project {project.id}: {e}")
            return
        logger.info(
            f"Published {event.event_type} {event.event_id} for project {project.id}"
        )
