"""
Password hashing.

Wraps the ``bcrypt`` library. bcrypt only looks at the first 72 bytes of a
secret, so longer passwords are refused instead of being silently truncated.
Async callers use ``hash_async`` and ``verify_async``, which run the cost-bound
bcrypt work in a worker thread.
"""

from __future__ import annotations

import asyncio

import bcrypt

from .errors import PasswordPolicyError

BCRYPT_MAX_BYTES = 72


class PasswordHasher:
    """Hash and verify passwords with a fixed bcrypt cost factor."""

    def __init__(self, rounds: int = 12) -> None:
        self.rounds = rounds

    def hash(self, password: str) -> str:
        """Return a bcrypt hash (``$2b$...``) of ``password``.

        Raises:
            PasswordPolicyError: If the password is empty or longer than 72 bytes
        """
        secret = password.encode("utf-8")
        if not secret:
            raise PasswordPolicyError("Password is required")
        if len(secret) > BCRYPT_MAX_BYTES:
            raise PasswordPolicyError(f"Password must be at most {BCRYPT_MAX_BYTES} bytes")
        return bcrypt.hashpw(secret, bcrypt.gensalt(rounds=self.rounds)).decode("ascii")

    def verify(self, password: str, hashed: str) -> bool:
        """Check ``password`` against a stored hash; malformed hashes never match."""
        secret = password.encode("utf-8")
        if not secret or len(secret) > BCRYPT_MAX_BYTES:
            return False
        try:
            return bcrypt.checkpw(secret, hashed.encode("ascii"))
        except ValueError:
            return False

    async def hash_async(self, password: str) -> str:
        """``hash`` executed in a worker thread."""
        return await asyncio.to_thread(self.hash, password)

    async def verify_async(self, password: str, hashed: str) -> bool:
        return await asyncio.to_thread(self.verify, password, hashed)
