"""
Acknowledge Application Use Case

The applicant marks the latest status change of their application as seen.
"""
from typing import Optional
from libs.result import Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.app.services.authorization import Capability, require, require_applicant
from src.domain import Actor
from .dtos import ApplicationDTO


class AcknowledgeApplicationUseCase:

    def __init__(self, uow: UnitOfWork, actor: Optional[Actor]):
        self.uow = uow
        self.actor = actor

    async def execute(self, application_id: str) -> Result[ApplicationDTO]:
        error = require(self.actor, Capability.VIEW_OWN_APPLICATIONS)
        if error:
            return Return.err(error)

        async with self.uow:
            application = await self.uow.applications.get_by_id(application_id)

            error = require_applicant(self.actor, application)
            if error:
                return Return.err(error)

            if not application.seen_by_applicant:
                application.acknowledge()
                application = await self.uow.applications.update(application)
                await self.uow.commit()

            return Return.ok(ApplicationDTO.from_entity(application))
