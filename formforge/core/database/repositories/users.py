"""
User repository implementation.

Data access for user accounts. Callers pass emails in any case; they are
lower-cased before every lookup to match how they are stored.
"""

from __future__ import annotations

from typing import Optional

from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from ..base import _utc_now_naive
from ..entities.users import User
from .base import AsyncBaseRepository


def normalize_email(email: str) -> str:
    return email.strip().lower()


class UserRepository(AsyncBaseRepository[User]):
    """Repository for user data access operations using SQLModel."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, User)

    def _default_order(self):
        return User.created_at.desc()

    async def get_by_email(self, email: str) -> Optional[User]:
        """Get a user by email address, ignoring case."""
        stmt = select(User).where(User.email == normalize_email(email))
        result = await self.session.exec(stmt)
        return result.first()

    async def mark_email_verified(self, email: str) -> Optional[User]:
        """Flag the user owning ``email`` as verified.

        Returns:
            The updated user, or None when no user has that email
        """
        user = await self.get_by_email(email)
        if user is None:
            return None
        user.is_email_verified = True
        user.updated_at = _utc_now_naive()
        return await self.update(user)

    async def update_password(self, user_id: str, password_hash: str) -> Optional[User]:
        user = await self.get_by_id(user_id)
        if user is None:
            return None
        user.password_hash = password_hash
        user.updated_at = _utc_now_naive()
        return await self.update(user)
