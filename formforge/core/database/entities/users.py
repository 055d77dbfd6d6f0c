"""
User entity models.

This module contains the database entity for user accounts. Emails are stored
lower-cased so that lookups are case-insensitive, and only a bcrypt hash of
the password is persisted.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from sqlalchemy import DateTime
from sqlmodel import Field

from formforge.core.models.domain.enums import UserRole

from ..base import Base, _new_id, _utc_now_naive


class User(Base, table=True):
    """Entity for user accounts.

    Table: ff_users
    """

    __tablename__ = "ff_users"

    id: str = Field(default_factory=_new_id, primary_key=True, max_length=36)
    email: str = Field(max_length=255, unique=True, index=True)
    first_name: str = Field(max_length=50)
    last_name: str = Field(max_length=50)
    password_hash: str = Field(max_length=255)
    role: UserRole = Field(default=UserRole.VIEWER)
    organization_id: Optional[str] = Field(default=None, foreign_key="ff_organizations.id", index=True)
    is_email_verified: bool = Field(default=False)

    created_at: datetime = Field(default_factory=_utc_now_naive, sa_type=DateTime)
    updated_at: datetime = Field(
        default_factory=_utc_now_naive, sa_type=DateTime, sa_column_kwargs={"onupdate": _utc_now_naive}
    )

    def __repr__(self) -> str:
        return f"User(id={self.id}, email={self.email}, role={self.role})"
