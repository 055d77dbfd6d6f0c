"""Error types for the authentication package.

Defines the hierarchy of exceptions raised by the auth service. Each error
carries the HTTP status and short label used when it reaches the server edge.
"""

from __future__ import annotations


class AuthError(Exception):
    """Base error for all authentication exceptions."""

    status_code: int = 400
    error: str = "Authentication error"

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class UserAlreadyExistsError(AuthError):
    """Raised when registering an email that already has an account."""

    status_code = 409
    error = "Registration failed"

    def __init__(self, email: str) -> None:
        super().__init__("User already exists with this email")
        self.email = email


class InvalidCredentialsError(AuthError):
    """Raised for an unknown email or a wrong password; the two are not distinguished."""

    status_code = 401
    error = "Login failed"

    def __init__(self) -> None:
        super().__init__("Invalid email or password")


class InvalidTokenError(AuthError):
    status_code = 401
    error = "Unauthorized"

    def __init__(self, message: str = "Invalid or expired token") -> None:
        super().__init__(message)


class TokenExpiredError(InvalidTokenError):
    def __init__(self, message: str = "Token has expired") -> None:
        super().__init__(message)


class InvalidRefreshTokenError(InvalidTokenError):
    """Raised when a refresh token is unknown, revoked, expired or orphaned."""

    error = "Token refresh failed"

    def __init__(self) -> None:
        super().__init__("Invalid or expired refresh token")


class InvalidVerificationCodeError(AuthError):
    error = "Email verification failed"

    def __init__(self) -> None:
        super().__init__("Invalid or expired verification code")


class EmailAlreadyVerifiedError(AuthError):
    error = "Email verification failed"

    def __init__(self, email: str) -> None:
        super().__init__(f"Email '{email}' is already verified")
        self.email = email


class PasswordPolicyError(AuthError):
    error = "Invalid password"


class UserNotFoundError(AuthError):
    status_code = 404
    error = "Not found"

    def __init__(self, message: str = "User not found") -> None:
        super().__init__(message)


class OrganizationNotFoundError(AuthError):
    status_code = 404
    error = "Not found"

    def __init__(self, organization_id: str) -> None:
        super().__init__(f"Organization not found: '{organization_id}'")
        self.organization_id = organization_id


class PermissionDeniedError(AuthError):
    status_code = 403
    error = "Forbidden"

    def __init__(self, message: str = "Insufficient permissions") -> None:
        super().__init__(message)
