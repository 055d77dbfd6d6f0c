"""
Authentication I/O models.

This module contains the Pydantic schemas passed into and returned from
``formforge.auth.service.AuthService``. Password hashes never appear in any
model defined here.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from ..domain.enums import UserRole


class RegisterRequest(BaseModel):
    """Payload for creating a new account."""

    email: str = Field(description="Login email, stored lower-cased")
    password: str = Field(description="Plain-text password")
    first_name: str
    last_name: str
    organization_id: Optional[str] = Field(default=None, description="Organization to join")


class LoginRequest(BaseModel):
    email: str
    password: str


class EmailVerificationRequest(BaseModel):
    email: str
    code: str = Field(description="Six-digit verification code")


class UserPublic(BaseModel):
    """User as exposed outside the persistence layer."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    email: str
    first_name: str
    last_name: str
    role: UserRole
    organization_id: Optional[str] = None
    is_email_verified: bool
    created_at: datetime
    updated_at: datetime


class AuthTokens(BaseModel):
    """Token pair handed to a client after login or refresh."""

    access_token: str
    refresh_token: str
    expires_in: int = Field(description="Access token lifetime in seconds")


class RegistrationResult(BaseModel):
    user: UserPublic
    message: str


class LoginResult(BaseModel):
    user: UserPublic
    tokens: AuthTokens


class VerificationResult(BaseModel):
    success: bool
    message: str


class AuthenticatedUser(BaseModel):
    """Identity attached to a request after its access token is verified."""

    id: str
    email: str
    role: UserRole
    organization_id: Optional[str] = None
