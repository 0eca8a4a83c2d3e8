"""Redis store for caching.

TTL policies:
- Users listing: 60 seconds
"""

import redis.asyncio as redis

from users_api.settings import Settings

# TTL constants (in seconds)
TTL_USERS = 60  # 1 minute

# Keys
KEY_USERS = "users"


class RedisStore:
    """Async Redis client exposing get/set with expiry."""

    def __init__(self, client: redis.Redis) -> None:
        self._client = client

    @classmethod
    def from_settings(cls, settings: Settings) -> "RedisStore":
        """Build the client. Connections are opened lazily by its pool."""
        client = redis.from_url(
            settings.redis_url,
            encoding="utf-8",
            decode_responses=True,
            socket_connect_timeout=5,
            socket_timeout=5,
        )
        return cls(client)

    async def get(self, key: str) -> str | None:
        """Get value from cache.

        Args:
            key: Cache key.

        Returns:
            Cached value or None if not found.
        """
        return await self._client.get(key)

    async def set(self, key: str, value: str, ttl: int) -> None:
        """Set value in cache with TTL.

        Args:
            key: Cache key.
            value: Value to cache.
            ttl: Time-to-live in seconds.
        """
        await self._client.setex(key, ttl, value)

    async def ping(self) -> None:
        await self._client.ping()

    async def close(self) -> None:
        """Close Redis connection."""
        await self._client.aclose()
