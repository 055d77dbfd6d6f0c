"""
Request Authentication Dependencies.

FastAPI dependencies that resolve the ``Authorization: Bearer <token>`` header
to an ``AuthenticatedUser`` and enforce role requirements. Failures raise
``AuthError`` subclasses, which the registered exception handlers turn into
JSON responses.
"""

from typing import Annotated, Callable, Optional

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from redis.asyncio import Redis
from sqlmodel.ext.asyncio.session import AsyncSession

from formforge.auth.errors import InvalidTokenError, PermissionDeniedError, UserNotFoundError
from formforge.auth.service import AuthService
from formforge.core.cache import get_cache
from formforge.core.database.session import get_session
from formforge.core.models.domain.enums import UserRole
from formforge.core.models.io.auth import AuthenticatedUser

bearer_scheme = HTTPBearer(auto_error=False)


async def get_auth_service(
    session: Annotated[AsyncSession, Depends(get_session)],
    cache: Annotated[Redis, Depends(get_cache)],
) -> AuthService:
    """Build an AuthService bound to the request's database session."""
    return AuthService.from_session(session, cache)


AuthServiceDep = Annotated[AuthService, Depends(get_auth_service)]


async def get_current_user(
    service: AuthServiceDep,
    credentials: Annotated[Optional[HTTPAuthorizationCredentials], Depends(bearer_scheme)] = None,
) -> AuthenticatedUser:
    """Require a valid access token on the request."""
    if credentials is None or not credentials.credentials:
        raise InvalidTokenError("Access token is required")
    try:
        return await service.authenticate(credentials.credentials)
    except UserNotFoundError:
        raise InvalidTokenError("User not found")


CurrentUserDep = Annotated[AuthenticatedUser, Depends(get_current_user)]


def require_role(*allowed_roles: UserRole) -> Callable:
    """Build a dependency that only admits users holding one of ``allowed_roles``.

    Usage::

        @router.delete("/{form_id}", dependencies=[Depends(require_role(UserRole.ADMIN))])
    """
    allowed = frozenset(allowed_roles)

    async def _require_role(user: CurrentUserDep) -> AuthenticatedUser:
        if user.role not in allowed:
            raise PermissionDeniedError()
        return user

    return _require_role
