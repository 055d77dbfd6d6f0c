"""
Email verification entity models.

Holds the six-digit codes sent to users to confirm their email address.
"""

from __future__ import annotations

from datetime import datetime

from sqlalchemy import DateTime, UniqueConstraint
from sqlmodel import Field

from ..base import Base, _new_id, _utc_now_naive


class EmailVerification(Base, table=True):
    """Entity for pending email verification codes.

    Table: ff_email_verifications
    """

    __tablename__ = "ff_email_verifications"
    __table_args__ = (UniqueConstraint("email", "code", name="uq_ff_email_verifications_email_code"),)

    id: str = Field(default_factory=_new_id, primary_key=True, max_length=36)
    email: str = Field(max_length=255, index=True)
    code: str = Field(max_length=6)
    expires_at: datetime = Field(sa_type=DateTime)

    created_at: datetime = Field(default_factory=_utc_now_naive, sa_type=DateTime)

    def __repr__(self) -> str:
        return f"EmailVerification(id={self.id}, email={self.email}, expires_at={self.expires_at})"
