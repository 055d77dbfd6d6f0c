"""Authentication and session core.

- ``passwords``: bcrypt password hashing
- ``tokens``: JWT access/refresh token issuance and verification
- ``verification``: email verification code store and notifier
- ``service``: ``AuthService`` tying them to the repository layer
- ``errors``: the ``AuthError`` hierarchy
"""

from .errors import (
    AuthError,
    EmailAlreadyVerifiedError,
    InvalidCredentialsError,
    InvalidRefreshTokenError,
    InvalidTokenError,
    InvalidVerificationCodeError,
    OrganizationNotFoundError,
    PasswordPolicyError,
    PermissionDeniedError,
    TokenExpiredError,
    UserAlreadyExistsError,
    UserNotFoundError,
)
from .passwords import PasswordHasher
from .service import AuthService
from .tokens import TokenService
from .verification import LoggingVerificationNotifier, VerificationCodeStore, VerificationNotifier

__all__ = [
    "AuthError",
    "AuthService",
    "EmailAlreadyVerifiedError",
    "InvalidCredentialsError",
    "InvalidRefreshTokenError",
    "InvalidTokenError",
    "InvalidVerificationCodeError",
    "LoggingVerificationNotifier",
    "OrganizationNotFoundError",
    "PasswordHasher",
    "PasswordPolicyError",
    "PermissionDeniedError",
    "TokenExpiredError",
    "TokenService",
    "UserAlreadyExistsError",
    "UserNotFoundError",
    "VerificationCodeStore",
    "VerificationNotifier",
]
