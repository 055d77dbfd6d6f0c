"""
JWT access and refresh tokens.

Access tokens are short-lived and carry the user's identity claims. Refresh
tokens only carry the subject plus a random ``jti`` and are signed with a
separate secret, so neither kind can be used in place of the other.
"""

from __future__ import annotations

import secrets
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Literal, Optional, Type, TypeVar

import jwt
from pydantic import BaseModel, ValidationError

from formforge.core.models.domain.enums import UserRole
from formforge.server.core.config import JWTConfig

from .errors import InvalidTokenError, TokenExpiredError

ACCESS_TOKEN_TYPE = "access"
REFRESH_TOKEN_TYPE = "refresh"

ClaimsType = TypeVar("ClaimsType", bound=BaseModel)


class AccessTokenClaims(BaseModel):
    """Decoded access token payload."""

    sub: str
    email: str
    role: UserRole
    org_id: Optional[str] = None
    type: Literal["access"]
    iat: int
    exp: int


class RefreshTokenClaims(BaseModel):
    """Decoded refresh token payload."""

    sub: str
    jti: str
    type: Literal["refresh"]
    iat: int
    exp: int


class TokenService:
    """Issue and verify the JWTs used by the auth service."""

    def __init__(self, config: JWTConfig) -> None:
        self.config = config

    @property
    def access_token_expires_in(self) -> int:
        return self.config.access_token_expire_seconds

    @property
    def refresh_token_expires_in(self) -> int:
        return self.config.refresh_token_expire_seconds

    def create_access_token(
        self, user_id: str, email: str, role: UserRole | str, organization_id: Optional[str] = None
    ) -> str:
        payload: Dict[str, Any] = {
            "sub": user_id,
            "email": email,
            "role": UserRole(role).value,
            "org_id": organization_id,
            "type": ACCESS_TOKEN_TYPE,
        }
        return self._encode(payload, self.config.secret, self.access_token_expires_in)

    def create_refresh_token(self, user_id: str) -> str:
        payload: Dict[str, Any] = {
            "sub": user_id,
            "jti": secrets.token_hex(16),
            "type": REFRESH_TOKEN_TYPE,
        }
        return self._encode(payload, self.config.refresh_secret, self.refresh_token_expires_in)

    def decode_access_token(self, token: str) -> AccessTokenClaims:
        """Verify and decode an access token.

        Raises:
            TokenExpiredError: If the token is past its ``exp``
            InvalidTokenError: For any other signature, claim or type problem
        """
        payload = self._decode(token, self.config.secret)
        return self._claims(AccessTokenClaims, payload, ACCESS_TOKEN_TYPE)

    def decode_refresh_token(self, token: str) -> RefreshTokenClaims:
        payload = self._decode(token, self.config.refresh_secret)
        return self._claims(RefreshTokenClaims, payload, REFRESH_TOKEN_TYPE)

    def _encode(self, payload: Dict[str, Any], secret: str, lifetime_seconds: int) -> str:
        now = datetime.now(timezone.utc)
        payload.update(
            {
                "iat": now,
                "exp": now + timedelta(seconds=lifetime_seconds),
                "iss": self.config.issuer,
                "aud": self.config.audience,
            }
        )
        return jwt.encode(payload, secret, algorithm=self.config.algorithm)

    def _decode(self, token: str, secret: str) -> Dict[str, Any]:
        try:
            return jwt.decode(
                token,
                secret,
                algorithms=[self.config.algorithm],
                audience=self.config.audience,
                issuer=self.config.issuer,
                options={"require": ["exp", "iat", "sub"]},
            )
        except jwt.ExpiredSignatureError:
            raise TokenExpiredError()
        except jwt.InvalidTokenError:
            raise InvalidTokenError()

    @staticmethod
    def _claims(model: Type[ClaimsType], payload: Dict[str, Any], expected_type: str) -> ClaimsType:
        if payload.get("type") != expected_type:
            raise InvalidTokenError(f"Token type must be '{expected_type}'")
        try:
            return model.model_validate(payload)
        except ValidationError:
            raise InvalidTokenError()
