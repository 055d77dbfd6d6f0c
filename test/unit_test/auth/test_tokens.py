"""Unit tests for JWT access and refresh tokens."""

from datetime import datetime, timedelta, timezone

import jwt
import pytest

from formforge.auth.errors import InvalidTokenError, TokenExpiredError
from formforge.auth.tokens import AccessTokenClaims, RefreshTokenClaims, TokenService
from formforge.core.models.domain.enums import UserRole
from formforge.server.core.config import JWTConfig


@pytest.fixture
def jwt_config() -> JWTConfig:
    return JWTConfig(
        secret="unit-access-secret-0123456789abcdef0123456789",
        refresh_secret="unit-refresh-secret-0123456789abcdef012345678",
        access_token_expire_seconds=900,
        refresh_token_expire_seconds=3600,
    )


@pytest.fixture
def tokens(jwt_config: JWTConfig) -> TokenService:
    return TokenService(jwt_config)


class TestAccessTokens:
    def test_round_trip_carries_identity_claims(self, tokens: TokenService):
        token = tokens.create_access_token("user-1", "jane@example.com", UserRole.EDITOR, "org-1")

        claims = tokens.decode_access_token(token)

        assert claims.sub == "user-1"
        assert claims.email == "jane@example.com"
        assert claims.role == UserRole.EDITOR
        assert claims.org_id == "org-1"
        assert claims.type == "access"
        assert claims.exp - claims.iat == 900

    def test_token_carries_issuer_and_audience(self, tokens: TokenService, jwt_config: JWTConfig):
        token = tokens.create_access_token("user-1", "jane@example.com", UserRole.VIEWER)

        payload = jwt.decode(token, options={"verify_signature": False})

        assert payload["iss"] == jwt_config.issuer
        assert payload["aud"] == jwt_config.audience
        assert payload["org_id"] is None

    def test_expired_token_raises_token_expired(self, tokens: TokenService, jwt_config: JWTConfig):
        past = datetime.now(timezone.utc) - timedelta(hours=1)
        token = jwt.encode(
            {
                "sub": "user-1",
                "email": "jane@example.com",
                "role": "viewer",
                "type": "access",
                "iat": past,
                "exp": past + timedelta(minutes=1),
                "iss": jwt_config.issuer,
                "aud": jwt_config.audience,
            },
            jwt_config.secret,
            algorithm="HS256",
        )

        with pytest.raises(TokenExpiredError):
            tokens.decode_access_token(token)

    def test_token_signed_with_another_secret_is_rejected(self, tokens: TokenService, jwt_config: JWTConfig):
        forger = TokenService(jwt_config.model_copy(update={"secret": "forged-secret-0123456789abcdef0123456789ab"}))
        tampered = forger.create_access_token("user-1", "jane@example.com", UserRole.ADMIN)

        with pytest.raises(InvalidTokenError):
            tokens.decode_access_token(tampered)

    def test_wrong_audience_is_rejected(self, tokens: TokenService, jwt_config: JWTConfig):
        other = TokenService(jwt_config.model_copy(update={"audience": "someone-else"}))
        token = other.create_access_token("user-1", "jane@example.com", UserRole.VIEWER)

        with pytest.raises(InvalidTokenError):
            tokens.decode_access_token(token)

    def test_refresh_token_is_not_an_access_token(self, tokens: TokenService):
        refresh = tokens.create_refresh_token("user-1")

        with pytest.raises(InvalidTokenError):
            tokens.decode_access_token(refresh)

    def test_access_token_with_refresh_type_claim_is_rejected(self, tokens: TokenService, jwt_config: JWTConfig):
        now = datetime.now(timezone.utc)
        token = jwt.encode(
            {
                "sub": "user-1",
                "jti": "abc",
                "type": "refresh",
                "iat": now,
                "exp": now + timedelta(minutes=5),
                "iss": jwt_config.issuer,
                "aud": jwt_config.audience,
            },
            jwt_config.secret,
            algorithm="HS256",
        )

        with pytest.raises(InvalidTokenError, match="Token type must be .access."):
            tokens.decode_access_token(token)


class TestRefreshTokens:
    def test_round_trip(self, tokens: TokenService):
        claims = tokens.decode_refresh_token(tokens.create_refresh_token("user-1"))

        assert claims.sub == "user-1"
        assert claims.type == "refresh"
        assert claims.exp - claims.iat == 3600

    def test_consecutive_tokens_differ(self, tokens: TokenService):
        assert tokens.create_refresh_token("user-1") != tokens.create_refresh_token("user-1")

    def test_access_token_is_not_a_refresh_token(self, tokens: TokenService):
        access = tokens.create_access_token("user-1", "jane@example.com", UserRole.VIEWER)

        with pytest.raises(InvalidTokenError):
            tokens.decode_refresh_token(access)

    def test_garbage_is_rejected(self, tokens: TokenService):
        with pytest.raises(InvalidTokenError):
            tokens.decode_refresh_token("not.a.jwt")

    def test_expires_in_reflects_configuration(self, tokens: TokenService):
        assert tokens.access_token_expires_in == 900
        assert tokens.refresh_token_expires_in == 3600


class TestClaimsParsing:
    def test_payload_is_parsed_into_the_requested_model(self):
        payload = {"sub": "user-1", "type": "refresh", "iat": 1, "exp": 2, "jti": "abc"}

        claims = TokenService._claims(RefreshTokenClaims, payload, "refresh")

        assert isinstance(claims, RefreshTokenClaims)
        assert claims.sub == "user-1"

    def test_mismatched_type_claim_is_rejected(self):
        payload = {
            "sub": "user-1",
            "email": "jane@example.com",
            "role": "viewer",
            "type": "refresh",
            "iat": 1,
            "exp": 2,
        }

        with pytest.raises(InvalidTokenError):
            TokenService._claims(AccessTokenClaims, payload, "access")

    def test_incomplete_payload_is_rejected(self):
        with pytest.raises(InvalidTokenError):
            TokenService._claims(AccessTokenClaims, {"sub": "user-1", "type": "access"}, "access")
