"""
Form submission entity models.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, Optional

from sqlalchemy import DateTime
from sqlmodel import JSON, Field

from formforge.core.models.domain.enums import SubmissionStatus

from ..base import Base, _new_id, _utc_now_naive


class Submission(Base, table=True):
    """Entity for submitted form data.

    Table: ff_submissions
    """

    __tablename__ = "ff_submissions"

    id: str = Field(default_factory=_new_id, primary_key=True, max_length=36)
    form_id: str = Field(foreign_key="ff_forms.id", index=True, ondelete="CASCADE")
    data: Dict[str, Any] = Field(default_factory=dict, sa_type=JSON)
    submitted_by: Optional[str] = Field(default=None, foreign_key="ff_users.id")
    submitted_at: datetime = Field(default_factory=_utc_now_naive, sa_type=DateTime, index=True)
    ip_address: str = Field(max_length=45)
    user_agent: str = Field(default="", max_length=512)
    status: SubmissionStatus = Field(default=SubmissionStatus.PENDING)

    def __repr__(self) -> str:
        return f"Submission(id={self.id}, form_id={self.form_id}, status={self.status})"
