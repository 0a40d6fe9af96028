"""Application Entity

A student's request to be assigned to a project. Withdrawal is a status,
not a row deletion, so the history stays auditable.
"""
from datetime import datetime
from sqlmodel import Field
from sqlalchemy import Index, text
from src.domain.base import BaseModel, generate_uuid
from src.domain.enums import ApplicationStatus


class Application(BaseModel, table=True):
    __tablename__ = "applications"
    __table_args__ = (
        # One non-withdrawn application per (project, applicant)
        Index(
            "uq_applications_active_pair",
            "project_id",
            "applicant_id",
            unique=True,
            postgresql_where=text("status <> 'WITHDRAWN'"),
            sqlite_where=text("status <> 'WITHDRAWN'"),
        ),
        # One accepted application per project
        Index(
            "uq_applications_accepted_project",
            "project_id",
            unique=True,
            postgresql_where=text("status = 'ACCEPTED'"),
            sqlite_where=text("status = 'ACCEPTED'"),
        ),
    )

    id: str = Field(default_factory=generate_uuid, primary_key=True)
    project_id: str = Field(foreign_key="projects.id", index=True, nullable=False)
    applicant_id: str = Field(foreign_key="accounts.id", index=True, nullable=False)

    status: ApplicationStatus = Field(default=ApplicationStatus.PENDING, nullable=False, index=True)
    cover_letter: str = Field(nullable=False)
    seen_by_applicant: bool = Field(default=True, nullable=False)

    applied_at: datetime = Field(default_factory=datetime.utcnow, nullable=False)
    status_changed_at: datetime = Field(default_factory=datetime.utcnow, nullable=False)

    class Config:
        use_enum_values = True

    def is_active(self) -> bool:
        return self.status != ApplicationStatus.WITHDRAWN

    def accept(self, now: datetime) -> None:
        """Mark application as accepted by the project owner"""
        self._change_status(ApplicationStatus.ACCEPTED, now)
        self.seen_by_applicant = False

    def reject(self, now: datetime) -> None:
        """Mark application as rejected by the project owner"""
        self._change_status(ApplicationStatus.REJECTED, now)
        self.seen_by_applicant = False

    def withdraw(self, now: datetime) -> None:
        """Applicant withdraws; frees the pair for a new application"""
        self._change_status(ApplicationStatus.WITHDRAWN, now)

    def acknowledge(self) -> None:
        self.seen_by_applicant = True

    def _change_status(self, status: ApplicationStatus, now: datetime) -> None:
        self.status = status
        self.status_changed_at = now
