"""
Refresh token repository implementation.

This module provides data access for persisted refresh tokens: lookup,
in-place rotation, revocation and purging of expired rows.
"""

from __future__ import annotations

from datetime import datetime
from typing import List, Optional

from sqlalchemy import update
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from ..entities.refresh_tokens import RefreshToken
from .base import AsyncBaseRepository


class RefreshTokenRepository(AsyncBaseRepository[RefreshToken]):
    """Repository for refresh token data access operations using SQLModel."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, RefreshToken)

    def _default_order(self):
        return RefreshToken.created_at.desc()

    async def get_by_token(self, token: str) -> Optional[RefreshToken]:
        """Get the stored row for an encoded refresh token.

        Args:
            token: Encoded JWT exactly as issued

        Returns:
            RefreshToken instance or None
        """
        stmt = select(RefreshToken).where(RefreshToken.token == token)
        result = await self.session.exec(stmt)
        return result.first()

    async def list_by_user(self, user_id: str) -> List[RefreshToken]:
        stmt = select(RefreshToken).where(RefreshToken.user_id == user_id).order_by(self._default_order())
        result = await self.session.exec(stmt)
        return list(result.all())

    async def rotate(self, stored: RefreshToken, new_token: str, expires_at: datetime) -> Optional[RefreshToken]:
        """Replace the token value of an existing row, if it still holds the old token.

        The update matches on both the row id and the token that was presented,
        so of two concurrent rotations of the same token only one can succeed.

        Args:
            stored: Row currently holding the token being exchanged
            new_token: Newly issued encoded refresh token
            expires_at: Expiry of the new token

        Returns:
            The updated row, or None when the old token was already rotated or revoked
        """
        stmt = (
            update(RefreshToken)
            .where((RefreshToken.id == stored.id) & (RefreshToken.token == stored.token))
            .values(token=new_token, expires_at=expires_at)
            .execution_options(synchronize_session=False)
        )
        result = await self.session.execute(stmt)
        await self.session.commit()
        if result.rowcount != 1:
            return None
        await self.session.refresh(stored)
        return stored

    async def delete_by_token(self, token: str) -> int:
        """Delete every row holding ``token``. Deleting an unknown token is not an error."""
        stmt = select(RefreshToken).where(RefreshToken.token == token)
        result = await self.session.exec(stmt)
        return await self._delete_all(list(result.all()))

    async def delete_by_user(self, user_id: str) -> int:
        """Revoke all refresh tokens of a user."""
        return await self._delete_all(await self.list_by_user(user_id))

    async def purge_expired(self, now: datetime) -> int:
        """Delete rows whose expiry is before ``now``."""
        stmt = select(RefreshToken).where(RefreshToken.expires_at < now)
        result = await self.session.exec(stmt)
        return await self._delete_all(list(result.all()))
