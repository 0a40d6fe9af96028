from datetime import datetime
from typing import Any, Dict, List, Optional
from sqlmodel.ext.asyncio.session import AsyncSession
from sqlmodel import select
from sqlalchemy import delete, update
from sqlalchemy.exc import IntegrityError
from src.app.repositories import (
    IApplicationRepository,
    DuplicateApplicationError,
    AcceptedApplicationConflict,
)
from src.domain import Application, ApplicationStatus
from src.domain.enums import value_of


class SqlAlchemyApplicationRepository(IApplicationRepository):
    """SQLAlchemy implementation of Application repository"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, application: Application) -> Application:
        self.session.add(application)
        try:
            await self.session.flush()
        except IntegrityError as e:
            raise DuplicateApplicationError(str(e.orig)) from e
        await self.session.refresh(application)
        return application

    async def get_by_id(self, application_id: str) -> Optional[Application]:
        statement = select(Application).where(Application.id == application_id)
        result = await self.session.exec(statement)
        return result.first()

    async def get_active(self, project_id: str, applicant_id: str) -> Optional[Application]:
        statement = (
            select(Application)
            .where(Application.project_id == project_id)
            .where(Application.applicant_id == applicant_id)
            .where(Application.status != ApplicationStatus.WITHDRAWN.value)
        )
        result = await self.session.exec(statement)
        return result.first()

    async def list_by_project(self, project_id: str) -> List[Application]:
        statement = (
            select(Application)
            .where(Application.project_id == project_id)
            .order_by(Application.applied_at.asc())
        )
        result = await self.session.exec(statement)
        return list(result.all())

    async def list_by_applicant(self, applicant_id: str) -> List[Application]:
        statement = (
            select(Application)
            .where(Application.applicant_id == applicant_id)
            .order_by(Application.status_changed_at.desc())
        )
        result = await self.session.exec(statement)
        return list(result.all())

    async def update(self, application: Application) -> Application:
        self.session.add(application)
        await self.session.flush()
        await self.session.refresh(application)
        return application

    async def compare_and_set_status(
        self, application_id: str, expected_status: ApplicationStatus, changes: Dict[str, Any]
    ) -> bool:
        values = {
            key: value_of(value) if key == "status" else value for key, value in changes.items()
        }
        statement = (
            update(Application)
            .where(Application.id == application_id)
            .where(Application.status == value_of(expected_status))
            .values(**values)
            .execution_options(synchronize_session=False)
        )
        with self.session.no_autoflush:
            try:
                result = await self.session.execute(statement)
            except IntegrityError as e:
                raise AcceptedApplicationConflict(str(e.orig)) from e
        return result.rowcount == 1

    async def reject_pending(self, project_id: str, exclude_id: str, now: datetime) -> int:
        statement = (
            update(Application)
            .where(Application.project_id == project_id)
            .where(Application.id != exclude_id)
            .where(Application.status == ApplicationStatus.PENDING.value)
            .values(
                status=ApplicationStatus.REJECTED.value,
                status_changed_at=now,
                seen_by_applicant=False,
            )
            .execution_options(synchronize_session=False)
        )
        with self.session.no_autoflush:
            result = await self.session.execute(statement)
        return result.rowcount

    async def delete_by_project(self, project_id: str) -> None:
        statement = delete(Application).where(Application.project_id == project_id)
        await self.session.execute(statement)
