"""Core domain and I/O models shared across the FormForge backend."""

from __future__ import annotations

from .domain import (
    ElementType,
    FormSettings,
    OrganizationSettings,
    SubmissionStatus,
    UserRole,
)

__all__ = [
    "ElementType",
    "FormSettings",
    "OrganizationSettings",
    "SubmissionStatus",
    "UserRole",
]
