"""
Email verification codes.

Codes are six random digits. Each code is written to the database (the source
of truth) and to Redis with the same TTL for fast lookup. When Redis is
unreachable or misses, the database row decides.
"""

from __future__ import annotations

import secrets
from datetime import timedelta
from typing import Optional, Protocol, runtime_checkable

from redis.asyncio import Redis
from redis.exceptions import RedisError

from formforge.core.database.base import _utc_now_naive
from formforge.core.database.repositories.email_verifications import EmailVerificationRepository
from formforge.core.logging_config import get_logger

logger = get_logger(__name__)

CACHE_KEY_PREFIX = "email_verification:"
CODE_LENGTH = 6


def cache_key(email: str) -> str:
    return f"{CACHE_KEY_PREFIX}{email}"


def generate_code() -> str:
    """Return a random code in 100000..999999."""
    return str(100000 + secrets.randbelow(900000))


@runtime_checkable
class VerificationNotifier(Protocol):
    """Delivers a verification code to its owner."""

    async def send_verification_code(self, email: str, code: str) -> None: ...


class LoggingVerificationNotifier:
    """Notifier that only logs the code. Used until a mail transport is wired in."""

    async def send_verification_code(self, email: str, code: str) -> None:
        logger.info(f"Email verification code for {email}: {code}")


class VerificationCodeStore:
    """Issue, check and clear email verification codes."""

    def __init__(
        self,
        repository: EmailVerificationRepository,
        cache: Optional[Redis],
        ttl_seconds: int = 15 * 60,
    ) -> None:
        self.repository = repository
        self.cache = cache
        self.ttl_seconds = ttl_seconds

    async def issue(self, email: str) -> str:
        """Create a new code for ``email``, replacing any pending one.

        Returns:
            The generated code
        """
        code = generate_code()
        expires_at = _utc_now_naive() + timedelta(seconds=self.ttl_seconds)
        await self.repository.replace_code(email, code, expires_at)

        if self.cache is not None:
            try:
                await self.cache.setex(cache_key(email), self.ttl_seconds, code)
            except RedisError as e:
                logger.warning(f"Could not cache verification code for {email}: {e}")
                await self._drop_cached_code(email)
        return code

    async def check(self, email: str, code: str) -> bool:
        """Return True when ``code`` is the current, unexpired code for ``email``."""
        if not (len(code) == CODE_LENGTH and code.isdigit()):
            return False

        cached = await self._cached_code(email)
        if cached is not None and secrets.compare_digest(cached, code):
            return True

        row = await self.repository.find_valid(email, code, _utc_now_naive())
        return row is not None

    async def clear(self, email: str) -> None:
        """Remove every trace of pending codes for ``email``."""
        await self._drop_cached_code(email)
        await self.repository.delete_by_email(email)

    async def _drop_cached_code(self, email: str) -> None:
        if self.cache is None:
            return
        try:
            await self.cache.delete(cache_key(email))
        except RedisError as e:
            logger.warning(f"Could not delete cached verification code for {email}: {e}")

    async def _cached_code(self, email: str) -> Optional[str]:
        if self.cache is None:
            return None
        try:
            return await self.cache.get(cache_key(email))
        except RedisError as e:
            logger.warning(f"Verification cache lookup failed for {email}, using database: {e}")
            return None
