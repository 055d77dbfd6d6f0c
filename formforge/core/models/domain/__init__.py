"""Domain enums and value models.

These types are shared between the database entities (enum columns and JSON
settings columns), the authentication service and the API edge.
"""

from .enums import ElementType, SubmissionStatus, UserRole
from .settings import (
    CustomBranding,
    FormSettings,
    OrganizationSettings,
    SalesforceIntegration,
)

__all__ = [
    "CustomBranding",
    "ElementType",
    "FormSettings",
    "OrganizationSettings",
    "SalesforceIntegration",
    "SubmissionStatus",
    "UserRole",
]
