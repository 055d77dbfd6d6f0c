"""
Form and form element repository implementations.

This module provides data access for forms, their publication state and the
elements placed on them.
"""

from __future__ import annotations

from typing import Iterable, List, Optional

from sqlmodel.ext.asyncio.session import AsyncSession

from ..base import _utc_now_naive
from ..entities.forms import Form, FormElement
from .base import AsyncBaseRepository


class FormRepository(AsyncBaseRepository[Form]):
    """Repository for form data access operations using SQLModel."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, Form)

    def _default_order(self):
        return Form.created_at.desc()

    async def list_by_organization(
        self, organization_id: str, published_only: bool = False, limit: int = 100, offset: int = 0
    ) -> List[Form]:
        """List forms owned by an organization, newest first.

        Args:
            organization_id: Owning organization
            published_only: Only return published forms
            limit: Maximum records to return
            offset: Records to skip

        Returns:
            List of Form instances
        """
        filters = {"organization_id": organization_id}
        if published_only:
            filters["is_published"] = True
        return await self.list(limit=limit, offset=offset, filters=filters)

    async def publish(self, form_id: str) -> Optional[Form]:
        form = await self.get_by_id(form_id)
        if form is None:
            return None
        if not form.is_published:
            form.is_published = True
            form.published_at = _utc_now_naive()
            form.updated_at = _utc_now_naive()
            form = await self.update(form)
        return form

    async def unpublish(self, form_id: str) -> Optional[Form]:
        form = await self.get_by_id(form_id)
        if form is None:
            return None
        form.is_published = False
        form.published_at = None
        form.updated_at = _utc_now_naive()
        return await self.update(form)


class FormElementRepository(AsyncBaseRepository[FormElement]):
    """Repository for form element data access operations using SQLModel."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, FormElement)

    def _default_order(self):
        return FormElement.created_at.asc()

    async def list_by_form(self, form_id: str) -> List[FormElement]:
        """List the elements of a form in creation order."""
        return await self.list(filters={"form_id": form_id})

    async def replace_elements(self, form_id: str, elements: Iterable[FormElement]) -> List[FormElement]:
        """Replace every element of a form with ``elements`` in one commit.

        Args:
            form_id: Form whose elements are replaced
            elements: New elements; their ``form_id`` is overwritten

        Returns:
            The persisted elements
        """
        for existing in await self.list_by_form(form_id):
            await self.session.delete(existing)

        created = []
        for element in elements:
            element.form_id = form_id
            self.session.add(element)
            created.append(element)
        await self.session.commit()
        for element in created:
            await self.session.refresh(element)
        return created
