"""
Organization entity models.

An organization groups users and owns forms. Its limits and branding live in
a JSON settings column shaped like ``OrganizationSettings``.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, Optional

from sqlalchemy import DateTime
from sqlmodel import JSON, Field

from formforge.core.models.domain.settings import OrganizationSettings

from ..base import Base, _new_id, _utc_now_naive


def _default_settings() -> Dict[str, Any]:
    return OrganizationSettings().model_dump()


class Organization(Base, table=True):
    """Entity for organizations.

    Table: ff_organizations
    """

    __tablename__ = "ff_organizations"

    id: str = Field(default_factory=_new_id, primary_key=True, max_length=36)
    name: str = Field(max_length=100)
    domain: Optional[str] = Field(default=None, max_length=255, unique=True, index=True)
    settings: Dict[str, Any] = Field(default_factory=_default_settings, sa_type=JSON)

    created_at: datetime = Field(default_factory=_utc_now_naive, sa_type=DateTime)
    updated_at: datetime = Field(
        default_factory=_utc_now_naive, sa_type=DateTime, sa_column_kwargs={"onupdate": _utc_now_naive}
    )

    @property
    def parsed_settings(self) -> OrganizationSettings:
        return OrganizationSettings.model_validate(self.settings or {})

    def __repr__(self) -> str:
        return f"Organization(id={self.id}, name={self.name}, domain={self.domain})"
