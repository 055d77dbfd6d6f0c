"""Pydantic I/O models exchanged with the authentication service."""

from .auth import (
    AuthenticatedUser,
    AuthTokens,
    EmailVerificationRequest,
    LoginRequest,
    LoginResult,
    RegisterRequest,
    RegistrationResult,
    UserPublic,
    VerificationResult,
)

__all__ = [
    "AuthenticatedUser",
    "AuthTokens",
    "EmailVerificationRequest",
    "LoginRequest",
    "LoginResult",
    "RegisterRequest",
    "RegistrationResult",
    "UserPublic",
    "VerificationResult",
]
