"""
Value models stored in the JSON settings columns of forms and organizations.
"""

from __future__ import annotations

from typing import Dict, List, Optional

from pydantic import BaseModel, Field


class SalesforceIntegration(BaseModel):
    """Mapping of form fields onto a Salesforce object."""

    enabled: bool = False
    object_type: str
    field_mappings: Dict[str, str] = Field(default_factory=dict)


class FormSettings(BaseModel):
    """Per-form behaviour settings."""

    submit_redirect_url: Optional[str] = None
    email_notifications: List[str] = Field(default_factory=list)
    salesforce_integration: Optional[SalesforceIntegration] = None
    allow_duplicate_submissions: bool = True
    require_authentication: bool = False


class CustomBranding(BaseModel):
    logo_url: Optional[str] = None
    primary_color: Optional[str] = None
    secondary_color: Optional[str] = None


class OrganizationSettings(BaseModel):
    """Organization-wide limits and branding."""

    allow_public_forms: bool = True
    max_forms_per_user: int = 50
    max_submissions_per_form: int = 10000
    custom_branding: Optional[CustomBranding] = None
