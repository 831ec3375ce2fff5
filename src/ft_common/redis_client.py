"""Redis client factory — backs the transaction read cache.

Redis is never a source of truth here: every value can be rebuilt from
PostgreSQL, so callers treat any Redis failure as a cache miss.
"""

import redis.asyncio as aioredis

from config.settings import settings

_redis_pool: aioredis.Redis | None = None


async def get_redis() -> aioredis.Redis:
    """Get or create the Redis connection pool."""
    global _redis_pool  # noqa: PLW0603
    if _redis_pool is None:
        _redis_pool = aioredis.from_url(
            settings.REDIS_URL,
            decode_responses=True,
        )
    return _redis_pool


async def close_redis() -> None:
    """Close the Redis connection pool."""
    global _redis_pool  # noqa: PLW0603
    if _redis_pool is not None:
        await _redis_pool.aclose()
        _redis_pool = None


async def ping_redis() -> bool:
    """Startup check. The app still serves from PostgreSQL when Redis is down."""
    client = await get_redis()
    return bool(await client.ping())
