"""
Form and form element entity models.

A form belongs to an organization and is made of positioned elements. The
element position and properties are free-form JSON documents produced by the
form-builder front end.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, Optional

from sqlalchemy import DateTime
from sqlmodel import JSON, Field

from formforge.core.models.domain.enums import ElementType
from formforge.core.models.domain.settings import FormSettings

from ..base import Base, _new_id, _utc_now_naive


def _default_form_settings() -> Dict[str, Any]:
    return FormSettings().model_dump()


class Form(Base, table=True):
    """Entity for forms.

    Table: ff_forms
    """

    __tablename__ = "ff_forms"

    id: str = Field(default_factory=_new_id, primary_key=True, max_length=36)
    name: str = Field(max_length=100)
    description: Optional[str] = Field(default=None, max_length=500)
    settings: Dict[str, Any] = Field(default_factory=_default_form_settings, sa_type=JSON)

    organization_id: str = Field(foreign_key="ff_organizations.id", index=True)
    created_by: str = Field(foreign_key="ff_users.id", index=True)

    is_published: bool = Field(default=False)
    published_at: Optional[datetime] = Field(default=None, sa_type=DateTime)

    created_at: datetime = Field(default_factory=_utc_now_naive, sa_type=DateTime, index=True)
    updated_at: datetime = Field(
        default_factory=_utc_now_naive, sa_type=DateTime, sa_column_kwargs={"onupdate": _utc_now_naive}
    )

    @property
    def parsed_settings(self) -> FormSettings:
        return FormSettings.model_validate(self.settings or {})

    def __repr__(self) -> str:
        return f"Form(id={self.id}, name={self.name}, published={self.is_published})"


class FormElement(Base, table=True):
    """Entity for a single element placed on a form.

    Table: ff_form_elements
    """

    __tablename__ = "ff_form_elements"

    id: str = Field(default_factory=_new_id, primary_key=True, max_length=36)
    form_id: str = Field(foreign_key="ff_forms.id", index=True, ondelete="CASCADE")
    type: ElementType

    # x, y, width, height, z_index
    position: Dict[str, Any] = Field(default_factory=dict, sa_type=JSON)
    # label, placeholder, help_text, options, validation, ...
    properties: Dict[str, Any] = Field(default_factory=dict, sa_type=JSON)

    created_at: datetime = Field(default_factory=_utc_now_naive, sa_type=DateTime)
    updated_at: datetime = Field(
        default_factory=_utc_now_naive, sa_type=DateTime, sa_column_kwargs={"onupdate": _utc_now_naive}
    )

    def __repr__(self) -> str:
        return f"FormElement(id={self.id}, form_id={self.form_id}, type={self.type})"
