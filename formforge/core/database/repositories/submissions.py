"""
Submission repository implementation.
"""

from __future__ import annotations

from typing import List, Optional

from sqlalchemy import func
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from formforge.core.models.domain.enums import SubmissionStatus

from ..entities.submissions import Submission
from .base import AsyncBaseRepository


class SubmissionRepository(AsyncBaseRepository[Submission]):
    """Repository for form submission data access operations using SQLModel."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, Submission)

    def _default_order(self):
        return Submission.submitted_at.desc()

    async def list_by_form(
        self,
        form_id: str,
        status: Optional[SubmissionStatus] = None,
        limit: int = 100,
        offset: int = 0,
    ) -> List[Submission]:
        """List submissions for a form, newest first, optionally by status."""
        return await self.list(limit=limit, offset=offset, filters={"form_id": form_id, "status": status})

    async def update_status(self, submission_id: str, status: SubmissionStatus) -> Optional[Submission]:
        submission = await self.get_by_id(submission_id)
        if submission is None:
            return None
        submission.status = status
        return await self.update(submission)

    async def count_by_form(self, form_id: str) -> int:
        stmt = select(func.count()).select_from(Submission).where(Submission.form_id == form_id)
        result = await self.session.exec(stmt)
        return int(result.one())
