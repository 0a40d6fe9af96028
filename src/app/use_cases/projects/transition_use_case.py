"""Shared flow for owner-driven project status changes (publish, archive, ...)"""
from datetime import datetime
from typing import Optional
from libs.result import Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.app.services.audit_service import AuditService, record_event
from src.app.services.authorization import Capability, require, require_owner
from src.domain import Actor, Project
from src.domain.enums import value_of
from src.domain.lifecycle import Transition, apply_transition, invalid_transition
from .dtos import ProjectDTO


class OwnerProjectTransitionUseCase:
    """
    Guard, decide, compare-and-swap, commit, audit.

    Subclasses name the audit event and supply the lifecycle decision.
    """

    event_type: str = None

    def __init__(self, uow: UnitOfWork, actor: Optional[Actor], audit_service: AuditService):
        self.uow = uow
        self.actor = actor
        self.audit_service = audit_service

    def decide(self, project: Project) -> Result[Transition]:
        raise NotImplementedError

    async def execute(self, project_id: str) -> Result[ProjectDTO]:
        error = require(self.actor, Capability.MANAGE_PROJECT)
        if error:
            return Return.err(error)

        async with self.uow:
            project = await self.uow.projects.get_by_id(project_id)

            error = require_owner(self.actor, project)
            if error:
                return Return.err(error)

            decision = self.decide(project)
            if decision.is_err():
                return Return.err(decision.error)
            transition = decision.value

            changes = apply_transition(project, transition, datetime.utcnow())
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

            await record_event(
                self.audit_service,
                event_type=self.event_type,
                actor_id=self.actor.account_id,
                resource_type="project",
                resource_id=project.id,
                metadata={
                    "from_status": value_of(transition.source),
                    "to_status": value_of(transition.target),
                },
            )

            return Return.ok(ProjectDTO.from_entity(project))
