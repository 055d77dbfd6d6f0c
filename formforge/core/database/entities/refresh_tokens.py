"""
Refresh token entity models.

Every refresh token handed to a client is persisted here. A token is only
accepted while its row exists and has not expired; rotation rewrites the row
in place and logout deletes it.
"""

from __future__ import annotations

from datetime import datetime

from sqlalchemy import DateTime, Text
from sqlmodel import Field

from ..base import Base, _new_id, _utc_now_naive


class RefreshToken(Base, table=True):
    """Entity for issued refresh tokens.

    Table: ff_refresh_tokens
    """

    __tablename__ = "ff_refresh_tokens"

    id: str = Field(default_factory=_new_id, primary_key=True, max_length=36)
    token: str = Field(sa_type=Text, unique=True, index=True)
    user_id: str = Field(foreign_key="ff_users.id", index=True, ondelete="CASCADE")
    expires_at: datetime = Field(sa_type=DateTime, index=True)

    created_at: datetime = Field(default_factory=_utc_now_naive, sa_type=DateTime)

    def is_expired(self, now: datetime) -> bool:
        return self.expires_at < now

    def __repr__(self) -> str:
        return f"RefreshToken(id={self.id}, user_id={self.user_id}, expires_at={self.expires_at})"
