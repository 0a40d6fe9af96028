from typing import Optional
from libs.result import Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.app.services.authorization import Capability, require
from src.domain import Actor, ProjectCategory, ProjectScope
from .dtos import GetProjectsResponse, ProjectDTO

DEFAULT_PAGE_SIZE = 6


class GetOpenProjectsUseCase:
    """Use case for the public listing of projects accepting applications"""

    def __init__(self, uow: UnitOfWork, page_size: int = DEFAULT_PAGE_SIZE):
        self.uow = uow
        self.page_size = page_size

    async def execute(
        self,
        page: int = 1,
        category: Optional[ProjectCategory] = None,
        scope: Optional[ProjectScope] = None,
    ) -> Result[GetProjectsResponse]:
        """
        Execute the get open projects use case

        Args:
            page: 1-based page number, values below 1 are treated as 1
            category: Optional category filter
            scope: Optional scope filter

        Returns:
            Result[GetProjectsResponse]: One page of OPEN projects, newest first
        """
        page = max(page or 1, 1)
        offset = self.page_size * (page - 1)

        async with self.uow:
            projects, total = await self.uow.projects.list_open(
                offset=offset, limit=self.page_size, category=category, scope=scope
            )

            return Return.ok(
                GetProjectsResponse(
                    projects=[ProjectDTO.from_entity(p) for p in projects],
                    total=total,
                    page=page,
                    page_size=self.page_size,
                )
            )


class GetOwnerProjectsUseCase:
    """Use case for a business owner's own projects, in every status"""

    def __init__(self, uow: UnitOfWork, actor: Optional[Actor]):
        self.uow = uow
        self.actor = actor

    async def execute(self) -> Result[GetProjectsResponse]:
        error = require(self.actor, Capability.MANAGE_PROJECT)
        if error:
            return Return.err(error)

        async with self.uow:
            projects = await self.uow.projects.list_by_owner(self.actor.account_id)

            return Return.ok(
                GetProjectsResponse(
                    projects=[ProjectDTO.from_entity(p) for p in projects],
                    total=len(projects),
                    page_size=len(projects),
                )
            )


class GetCompletedProjectsUseCase:
    """Use case for the projects an account has completed (public portfolio)"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, account_id: str) -> Result[GetProjectsResponse]:
        async with self.uow:
            projects = await self.uow.projects.list_completed_by_student(account_id)

            return Return.ok(
                GetProjectsResponse(
                    projects=[ProjectDTO.from_entity(p) for p in projects],
                    total=len(projects),
                    page_size=len(projects),
                )
            )
