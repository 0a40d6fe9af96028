"""Account Entities

Internal account records mapped from the external identity provider.
Profile fields are maintained elsewhere; this service only reads them.
"""
from datetime import datetime
from typing import List, Optional
from sqlmodel import Field, Column
from sqlalchemy import JSON as SQLJSON
from src.domain.base import BaseModel, generate_uuid
from src.domain.enums import UserRole


class Account(BaseModel, table=True):
    __tablename__ = "accounts"

    id: str = Field(default_factory=generate_uuid, primary_key=True)
    external_id: str = Field(index=True, unique=True, nullable=False)
    role: UserRole = Field(default=UserRole.USER, nullable=False)

    first_name: Optional[str] = Field(default=None, max_length=100)
    last_name: Optional[str] = Field(default=None, max_length=100)
    bio: Optional[str] = Field(default=None)
    intro: Optional[str] = Field(default=None)
    skills: List[str] = Field(default_factory=list, sa_column=Column(SQLJSON, nullable=False))

    created_at: datetime = Field(default_factory=datetime.utcnow, nullable=False)

    class Config:
        use_enum_values = True


class Education(BaseModel, table=True):
    __tablename__ = "educations"

    id: str = Field(default_factory=generate_uuid, primary_key=True)
    account_id: str = Field(foreign_key="accounts.id", index=True, nullable=False)
    institution: str = Field(max_length=255, nullable=False)
    degree: Optional[str] = Field(default=None, max_length=255)
    created_at: datetime = Field(default_factory=datetime.utcnow, nullable=False)
