"""
Database repository layer using SQLModel.

This package contains all repository classes organized by business domain.
Each module provides async data access operations for its corresponding
SQLModel entity models on top of the shared ``AsyncBaseRepository`` CRUD.

Modules:
- base: AsyncBaseRepository and QueryBuilder utilities
- users: User accounts
- refresh_tokens: Refresh token storage, rotation and revocation
- email_verifications: Verification code storage
- organizations: Organizations
- forms: Forms and form elements
- submissions: Form submissions
- bundle: SqlRepoBundle for dependency injection
"""

from .base import AsyncBaseRepository, QueryBuilder
from .bundle import SqlRepoBundle, build_sql_repos_from_session
from .email_verifications import EmailVerificationRepository
from .forms import FormElementRepository, FormRepository
from .organizations import OrganizationRepository, normalize_domain
from .refresh_tokens import RefreshTokenRepository
from .submissions import SubmissionRepository
from .users import UserRepository, normalize_email

__all__ = [
    "AsyncBaseRepository",
    "EmailVerificationRepository",
    "FormElementRepository",
    "FormRepository",
    "OrganizationRepository",
    "QueryBuilder",
    "RefreshTokenRepository",
    "SqlRepoBundle",
    "SubmissionRepository",
    "UserRepository",
    "build_sql_repos_from_session",
    "normalize_domain",
    "normalize_email",
]
