"""
Email verification repository implementation.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from ..entities.email_verifications import EmailVerification
from .base import AsyncBaseRepository


class EmailVerificationRepository(AsyncBaseRepository[EmailVerification]):
    """Repository for email verification codes using SQLModel."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, EmailVerification)

    def _default_order(self):
        return EmailVerification.created_at.desc()

    async def replace_code(self, email: str, code: str, expires_at: datetime) -> EmailVerification:
        """Store ``code`` as the only pending code for ``email``.

        Earlier codes for the same address are removed so that a resend
        invalidates the previous one.
        """
        stmt = select(EmailVerification).where(EmailVerification.email == email)
        result = await self.session.exec(stmt)
        for row in result.all():
            await self.session.delete(row)
        await self.session.flush()
        return await self.create(EmailVerification(email=email, code=code, expires_at=expires_at))

    async def find_valid(self, email: str, code: str, now: datetime) -> Optional[EmailVerification]:
        """Get the unexpired row matching ``email`` and ``code``."""
        stmt = select(EmailVerification).where(
            (EmailVerification.email == email)
            & (EmailVerification.code == code)
            & (EmailVerification.expires_at > now)
        )
        result = await self.session.exec(stmt)
        return result.first()

    async def delete_by_email(self, email: str) -> int:
        stmt = select(EmailVerification).where(EmailVerification.email == email)
        result = await self.session.exec(stmt)
        return await self._delete_all(list(result.all()))

    async def purge_expired(self, now: datetime) -> int:
        stmt = select(EmailVerification).where(EmailVerification.expires_at <= now)
        result = await self.session.exec(stmt)
        return await self._delete_all(list(result.all()))
