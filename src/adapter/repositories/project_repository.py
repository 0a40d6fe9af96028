from typing import Any, Dict, List, Optional, Tuple
from sqlmodel.ext.asyncio.session import AsyncSession
from sqlmodel import select
from sqlalchemy import func, update
from src.app.repositories import ProjectRepository
from src.domain import Project, ProjectStatus, ProjectCategory, ProjectScope
from src.domain.enums import value_of


class SqlAlchemyProjectRepository(ProjectRepository):
    """SQLAlchemy implementation of ProjectRepository"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, project: Project) -> Project:
        """Create a new project"""
        self.session.add(project)
        await self.session.flush()
        await self.session.refresh(project)
        return project

    async def get_by_id(self, project_id: str) -> Optional[Project]:
        statement = select(Project).where(Project.id == project_id)
        result = await self.session.exec(statement)
        return result.first()

    async def list_open(
        self,
        offset: int,
        limit: int,
        category: Optional[ProjectCategory] = None,
        scope: Optional[ProjectScope] = None,
    ) -> Tuple[List[Project], int]:
        filters = [Project.status == ProjectStatus.OPEN.value]
        if category is not None:
            filters.append(Project.category == value_of(category))
        if scope is not None:
            filters.append(Project.scope == value_of(scope))

        count_statement = select(func.count()).select_from(Project).where(*filters)
        total = (await self.session.exec(count_statement)).one()

        statement = (
            select(Project)
            .where(*filters)
            .order_by(Project.created_at.desc())
            .offset(offset)
            .limit(limit)
        )
        result = await self.session.exec(statement)
        return list(result.all()), total

    async def list_by_owner(self, owner_id: str) -> List[Project]:
        statement = (
            select(Project)
            .where(Project.business_owner_id == owner_id)
            .order_by(Project.created_at.desc())
        )
        result = await self.session.exec(statement)
        return list(result.all())

    async def list_completed_by_student(self, account_id: str) -> List[Project]:
        statement = (
            select(Project)
            .where(Project.assigned_student_id == account_id)
            .where(Project.status == ProjectStatus.COMPLETED.value)
            .order_by(Project.completed_at.desc())
        )
        result = await self.session.exec(statement)
        return list(result.all())

    async def compare_and_set_status(
        self, project_id: str, expected_status: ProjectStatus, changes: Dict[str, Any]
    ) -> bool:
        """Conditional UPDATE; rowcount 0 means the status moved underneath us"""
        values = {
            key: value_of(value) if key == "status" else value for key, value in changes.items()
        }
        statement = (
            update(Project)
            .where(Project.id == project_id)
            .where(Project.status == value_of(expected_status))
            .values(**values)
            .execution_options(synchronize_session=False)
        )
        with self.session.no_autoflush:
            result = await self.session.execute(statement)
        return result.rowcount == 1

    async def delete(self, project: Project) -> None:
        await self.session.delete(project)
        await self.session.flush()
