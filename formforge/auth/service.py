"""
Authentication Service.

``AuthService`` implements the account and session lifecycle on top of the
repository layer:

- register: create an unverified VIEWER account and send a verification code
- verify_email / resend_verification_code: confirm ownership of the address
- login: check the password and issue an access/refresh token pair
- refresh_tokens: exchange a stored refresh token for a new pair (rotation)
- logout: revoke a refresh token
- authenticate: resolve an access token to a live user
- change_password: replace the password and revoke all refresh tokens

The service is constructed per request with the request's database session and
the shared Redis client.
"""

from __future__ import annotations

from datetime import timedelta
from typing import Optional, Tuple

from redis.asyncio import Redis
from sqlmodel.ext.asyncio.session import AsyncSession

from formforge.core.database.base import _utc_now_naive
from formforge.core.database.entities.refresh_tokens import RefreshToken
from formforge.core.database.entities.users import User
from formforge.core.database.repositories.bundle import SqlRepoBundle, build_sql_repos_from_session
from formforge.core.database.repositories.users import normalize_email
from formforge.core.logging_config import get_logger
from formforge.core.models.domain.enums import UserRole
from formforge.core.models.io.auth import (
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
from formforge.server.core.config import Settings, settings as default_settings

from .errors import (
    EmailAlreadyVerifiedError,
    InvalidCredentialsError,
    InvalidRefreshTokenError,
    InvalidVerificationCodeError,
    OrganizationNotFoundError,
    UserAlreadyExistsError,
    UserNotFoundError,
)
from .passwords import PasswordHasher
from .tokens import TokenService
from .verification import LoggingVerificationNotifier, VerificationCodeStore, VerificationNotifier

logger = get_logger(__name__)

REGISTERED_MESSAGE = "User registered successfully. Please check your email for verification code."
VERIFIED_MESSAGE = "Email verified successfully"


class AuthService:
    """Account, session and email-verification operations."""

    def __init__(
        self,
        repos: SqlRepoBundle,
        tokens: TokenService,
        hasher: PasswordHasher,
        verification: VerificationCodeStore,
        notifier: Optional[VerificationNotifier] = None,
    ) -> None:
        self.repos = repos
        self.tokens = tokens
        self.hasher = hasher
        self.verification = verification
        self.notifier = notifier or LoggingVerificationNotifier()

    @classmethod
    def from_session(
        cls,
        session: AsyncSession,
        cache: Optional[Redis],
        settings: Optional[Settings] = None,
        notifier: Optional[VerificationNotifier] = None,
    ) -> "AuthService":
        """Wire a service from a database session, a Redis client and settings."""
        settings = settings or default_settings
        repos = build_sql_repos_from_session(session=session)
        auth_config = settings.auth
        return cls(
            repos=repos,
            tokens=TokenService(settings.jwt),
            hasher=PasswordHasher(rounds=auth_config.bcrypt_rounds),
            verification=VerificationCodeStore(
                repos.email_verifications, cache, ttl_seconds=auth_config.email_code_expire_seconds
            ),
            notifier=notifier,
        )

    # =====================================================================
    # Registration and email verification
    # =====================================================================

    async def register(self, data: RegisterRequest) -> RegistrationResult:
        """Create an unverified account and send its verification code.

        Raises:
            UserAlreadyExistsError: If the email is taken
            OrganizationNotFoundError: If ``organization_id`` does not exist
            PasswordPolicyError: If the password cannot be hashed
        """
        email = normalize_email(data.email)
        if await self.repos.users.get_by_email(email) is not None:
            raise UserAlreadyExistsError(email)

        if data.organization_id is not None:
            if await self.repos.organizations.get_by_id(data.organization_id) is None:
                raise OrganizationNotFoundError(data.organization_id)

        user = User(
            email=email,
            first_name=data.first_name,
            last_name=data.last_name,
            password_hash=await self.hasher.hash_async(data.password),
            role=UserRole.VIEWER,
            organization_id=data.organization_id,
            is_email_verified=False,
        )
        user = await self.repos.users.create(user)
        logger.info(f"Registered user {user.id}")

        await self.generate_email_verification_code(email)
        return RegistrationResult(user=UserPublic.model_validate(user), message=REGISTERED_MESSAGE)

    async def generate_email_verification_code(self, email: str) -> None:
        """Issue a fresh code for ``email`` and hand it to the notifier."""
        email = normalize_email(email)
        code = await self.verification.issue(email)
        await self.notifier.send_verification_code(email, code)

    async def resend_verification_code(self, email: str) -> None:
        """Send a new code to an existing, not yet verified account.

        Raises:
            UserNotFoundError: If no account uses ``email``
            EmailAlreadyVerifiedError: If the account is already verified
        """
        user = await self.repos.users.get_by_email(email)
        if user is None:
            raise UserNotFoundError()
        if user.is_email_verified:
            raise EmailAlreadyVerifiedError(user.email)
        await self.generate_email_verification_code(user.email)

    async def verify_email(self, data: EmailVerificationRequest) -> VerificationResult:
        """Mark the account verified when ``data.code`` matches.

        Raises:
            InvalidVerificationCodeError: For a wrong or expired code
            UserNotFoundError: If the code is valid but the account is gone
        """
        email = normalize_email(data.email)
        if not await self.verification.check(email, data.code.strip()):
            raise InvalidVerificationCodeError()

        user = await self.repos.users.mark_email_verified(email)
        if user is None:
            raise UserNotFoundError()

        await self.verification.clear(email)
        logger.info(f"Verified email for user {user.id}")
        return VerificationResult(success=True, message=VERIFIED_MESSAGE)

    # =====================================================================
    # Sessions
    # =====================================================================

    async def login(self, data: LoginRequest) -> LoginResult:
        """Check credentials and start a session.

        Raises:
            InvalidCredentialsError: Unknown email or wrong password
        """
        user = await self.repos.users.get_by_email(data.email)
        if user is None or not await self.hasher.verify_async(data.password, user.password_hash):
            logger.debug("Rejected login attempt")
            raise InvalidCredentialsError()

        tokens = await self._issue_tokens(user)
        logger.info(f"User {user.id} logged in")
        return LoginResult(user=UserPublic.model_validate(user), tokens=tokens)

    async def refresh_tokens(self, refresh_token: str) -> AuthTokens:
        """Exchange a refresh token for a new token pair.

        The stored row is rewritten with the new refresh token, so the token
        passed in cannot be used again.

        Raises:
            InvalidTokenError: If the JWT itself does not verify
            InvalidRefreshTokenError: If it is not stored, expired, orphaned or
                already rotated by a concurrent request
        """
        claims = self.tokens.decode_refresh_token(refresh_token)

        stored = await self.repos.refresh_tokens.get_by_token(refresh_token)
        if stored is None:
            raise InvalidRefreshTokenError()
        if stored.is_expired(_utc_now_naive()):
            await self.repos.refresh_tokens.delete(stored.id)
            raise InvalidRefreshTokenError()
        if stored.user_id != claims.sub:
            raise InvalidRefreshTokenError()

        user = await self.repos.users.get_by_id(stored.user_id)
        if user is None:
            await self.repos.refresh_tokens.delete(stored.id)
            raise InvalidRefreshTokenError()

        new_refresh_token = self.tokens.create_refresh_token(user.id)
        if await self.repos.refresh_tokens.rotate(stored, new_refresh_token, self._refresh_expiry()) is None:
            logger.warning(f"Refresh token for user {user.id} was rotated or revoked concurrently")
            raise InvalidRefreshTokenError()
        logger.debug(f"Rotated refresh token for user {user.id}")

        return AuthTokens(
            access_token=self._access_token_for(user),
            refresh_token=new_refresh_token,
            expires_in=self.tokens.access_token_expires_in,
        )

    async def logout(self, refresh_token: str) -> None:
        """Revoke ``refresh_token``. Unknown tokens are ignored."""
        removed = await self.repos.refresh_tokens.delete_by_token(refresh_token)
        logger.debug(f"Logout removed {removed} refresh token(s)")

    async def authenticate(self, access_token: str) -> AuthenticatedUser:
        """Resolve an access token to the user it was issued for.

        Raises:
            InvalidTokenError: If the token does not verify
            UserNotFoundError: If the user no longer exists
        """
        claims = self.tokens.decode_access_token(access_token)
        user = await self.repos.users.get_by_id(claims.sub)
        if user is None:
            raise UserNotFoundError()
        return AuthenticatedUser(
            id=user.id,
            email=claims.email,
            role=claims.role,
            organization_id=claims.org_id,
        )

    # =====================================================================
    # Account maintenance
    # =====================================================================

    async def get_user_by_id(self, user_id: str) -> UserPublic:
        user = await self.repos.users.get_by_id(user_id)
        if user is None:
            raise UserNotFoundError()
        return UserPublic.model_validate(user)

    async def change_password(self, user_id: str, current_password: str, new_password: str) -> None:
        """Replace a user's password and end all of their sessions.

        Raises:
            UserNotFoundError: If the user does not exist
            InvalidCredentialsError: If ``current_password`` is wrong
            PasswordPolicyError: If ``new_password`` cannot be hashed
        """
        user = await self.repos.users.get_by_id(user_id)
        if user is None:
            raise UserNotFoundError()
        if not await self.hasher.verify_async(current_password, user.password_hash):
            raise InvalidCredentialsError()

        await self.repos.users.update_password(user.id, await self.hasher.hash_async(new_password))
        revoked = await self.repos.refresh_tokens.delete_by_user(user.id)
        logger.info(f"Password changed for user {user.id}; revoked {revoked} refresh token(s)")

    async def purge_expired(self) -> Tuple[int, int]:
        """Delete expired refresh tokens and verification codes.

        Returns:
            (refresh tokens removed, verification codes removed)
        """
        now = _utc_now_naive()
        tokens = await self.repos.refresh_tokens.purge_expired(now)
        codes = await self.repos.email_verifications.purge_expired(now)
        logger.info(f"Purged {tokens} expired refresh token(s) and {codes} verification code(s)")
        return tokens, codes

    # =====================================================================
    # Helpers
    # =====================================================================

    def _refresh_expiry(self):
        return _utc_now_naive() + timedelta(seconds=self.tokens.refresh_token_expires_in)

    def _access_token_for(self, user: User) -> str:
        return self.tokens.create_access_token(
            user_id=user.id,
            email=user.email,
            role=user.role,
            organization_id=user.organization_id,
        )

    async def _issue_tokens(self, user: User) -> AuthTokens:
        refresh_token = self.tokens.create_refresh_token(user.id)
        await self.repos.refresh_tokens.create(
            RefreshToken(token=refresh_token, user_id=user.id, expires_at=self._refresh_expiry())
        )
        return AuthTokens(
            access_token=self._access_token_for(user),
            refresh_token=refresh_token,
            expires_in=self.tokens.access_token_expires_in,
        )
