"""
Database entity models.

This package contains all database entity models organized by business domain.
Each module represents a single table or a small group of tightly related
tables.

Modules:
- organizations: Organizations and their settings
- users: User accounts
- refresh_tokens: Persisted refresh tokens (rotation and revocation)
- email_verifications: Pending email verification codes
- forms: Forms and their positioned elements
- submissions: Submitted form data
"""

from . import (
    email_verifications,
    forms,
    organizations,
    refresh_tokens,
    submissions,
    users,
)
from .email_verifications import EmailVerification
from .forms import Form, FormElement
from .organizations import Organization
from .refresh_tokens import RefreshToken
from .submissions import Submission
from .users import User

__all__ = [
    "EmailVerification",
    "Form",
    "FormElement",
    "Organization",
    "RefreshToken",
    "Submission",
    "User",
    "email_verifications",
    "forms",
    "organizations",
    "refresh_tokens",
    "submissions",
    "users",
]
