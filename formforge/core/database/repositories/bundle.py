"""
Repository bundle for dependency injection.

This module provides a convenience bundle of all repository instances
for easy dependency injection in services and application components.
"""

from __future__ import annotations

from dataclasses import dataclass

from sqlmodel.ext.asyncio.session import AsyncSession

from .email_verifications import EmailVerificationRepository
from .forms import FormElementRepository, FormRepository
from .organizations import OrganizationRepository
from .refresh_tokens import RefreshTokenRepository
from .submissions import SubmissionRepository
from .users import UserRepository


@dataclass(frozen=True)
class SqlRepoBundle:
    """Convenience bundle of all SQL repositories sharing one session."""

    users: UserRepository
    refresh_tokens: RefreshTokenRepository
    email_verifications: EmailVerificationRepository
    organizations: OrganizationRepository
    forms: FormRepository
    form_elements: FormElementRepository
    submissions: SubmissionRepository


def build_sql_repos_from_session(*, session: AsyncSession) -> SqlRepoBundle:
    """Build a SqlRepoBundle from an existing session.

    Args:
        session: Existing async session

    Returns:
        Bundle containing all repository instances
    """
    return SqlRepoBundle(
        users=UserRepository(session),
        refresh_tokens=RefreshTokenRepository(session),
        email_verifications=EmailVerificationRepository(session),
        organizations=OrganizationRepository(session),
        forms=FormRepository(session),
        form_elements=FormElementRepository(session),
        submissions=SubmissionRepository(session),
    )
