"""
Redis Cache Connection.

This module owns the application's Redis client. The client is created lazily
from ``REDIS_URL`` and shared by every request; ``redis.asyncio`` manages its
own connection pool and only connects on first command.
"""

from __future__ import annotations

from typing import Optional

from redis.asyncio import Redis
from redis.exceptions import RedisError

from formforge.core.logging_config import get_logger
from formforge.server.core.config import settings

logger = get_logger(__name__)

_client: Optional[Redis] = None


def create_redis(url: str) -> Redis:
    """Create a Redis client that returns ``str`` values.

    Args:
        url: Redis connection URL (``redis://host:port/db``)

    Returns:
        Unconnected asyncio Redis client
    """
    return Redis.from_url(url, decode_responses=True, socket_connect_timeout=5, retry_on_timeout=True)


def get_cache() -> Redis:
    """Return the shared Redis client, creating it on first use.

    Usable directly as a FastAPI dependency.
    """
    global _client
    if _client is None:
        _client = create_redis(settings.redis_url)
        logger.debug("Redis client created")
    return _client


async def ping_cache() -> bool:
    """Check connectivity; failures are logged and reported as False."""
    try:
        return bool(await get_cache().ping())
    except RedisError as e:
        logger.warning(f"Redis ping failed: {e}")
        return False


async def close_cache() -> None:
    """Close the shared client and its connection pool."""
    global _client
    if _client is not None:
        await _client.aclose()
        _client = None
        logger.info("Redis connection closed")
