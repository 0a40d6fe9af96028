"""Project Entity

A unit of work posted by a business owner, moving through a fixed lifecycle.
"""
from datetime import datetime
from typing import List, Optional
from sqlmodel import Field, Column
from sqlalchemy import JSON as SQLJSON
from src.domain.base import BaseModel, generate_uuid
from src.domain.enums import ProjectStatus, ProjectScope, ProjectCategory


class Project(BaseModel, table=True):
    __tablename__ = "projects"

    id: str = Field(default_factory=generate_uuid, primary_key=True)
    business_owner_id: str = Field(foreign_key="accounts.id", index=True, nullable=False)
    assigned_student_id: Optional[str] = Field(
        default=None, foreign_key="accounts.id", index=True, nullable=True
    )

    title: str = Field(max_length=100, nullable=False)
    description: str = Field(nullable=False)
    required_skills: List[str] = Field(default_factory=list, sa_column=Column(SQLJSON, nullable=False))
    category: ProjectCategory = Field(nullable=False, index=True)
    scope: ProjectScope = Field(nullable=False, index=True)
    budget: float = Field(default=0, nullable=False)
    start_date: datetime = Field(nullable=False)
    estimated_end_date: datetime = Field(nullable=False)
    application_deadline: datetime = Field(nullable=False)
    is_public: bool = Field(default=False, nullable=False)

    status: ProjectStatus = Field(default=ProjectStatus.DRAFT, nullable=False, index=True)

    # Lifecycle timestamps, each written once by its transition
    created_at: datetime = Field(default_factory=datetime.utcnow, nullable=False)
    updated_at: datetime = Field(default_factory=datetime.utcnow, nullable=False)
    assigned_at: Optional[datetime] = Field(default=None)
    in_progress_at: Optional[datetime] = Field(default=None)
    in_review_at: Optional[datetime] = Field(default=None)
    completed_at: Optional[datetime] = Field(default=None)

    class Config:
        use_enum_values = True

    def is_owned_by(self, account_id: str) -> bool:
        return self.business_owner_id == account_id

    def is_assigned_to(self, account_id: str) -> bool:
        return self.assigned_student_id is not None and self.assigned_student_id == account_id
