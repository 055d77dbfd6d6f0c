"""
Organization repository implementation.

Domains are stored trimmed and lower-cased, and looked up the same way.
"""

from __future__ import annotations

from typing import Optional

from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from ..entities.organizations import Organization
from .base import AsyncBaseRepository


def normalize_domain(domain: Optional[str]) -> Optional[str]:
    if domain is None:
        return None
    return domain.strip().lower()


class OrganizationRepository(AsyncBaseRepository[Organization]):
    """Repository for organization data access operations using SQLModel."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, Organization)

    def _default_order(self):
        return Organization.name.asc()

    async def create(self, entity: Organization) -> Organization:
        entity.domain = normalize_domain(entity.domain)
        return await super().create(entity)

    async def update(self, entity: Organization) -> Organization:
        entity.domain = normalize_domain(entity.domain)
        return await super().update(entity)

    async def get_by_domain(self, domain: str) -> Optional[Organization]:
        stmt = select(Organization).where(Organization.domain == normalize_domain(domain))
        result = await self.session.exec(stmt)
        return result.first()
