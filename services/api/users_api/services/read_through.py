"""Read-through cache.

Flow:
1. Read the key from the cache
2. Hit -> decode and return, the source is not touched
3. Miss -> call the source, write the result back with a TTL, return it

Failures at any step propagate to the caller. Nothing is retried and a failed
source call never writes to the cache.

Concurrent misses for the same key each call the source and each write the
cache; the last write wins. There is no per-key in-flight deduplication.
"""

import json
import logging
from collections.abc import Awaitable, Callable
from typing import Any, TypeVar

from fastapi.encoders import jsonable_encoder

from users_api.stores import CacheClient

logger = logging.getLogger("uvicorn.error")

T = TypeVar("T")


async def read_through(
    cache: CacheClient,
    key: str,
    ttl: int,
    fetch: Callable[[], Awaitable[T]],
) -> T | Any:
    """Return the value for `key`, fetching and caching it on a miss.

    Args:
        cache: Cache client.
        key: Non-empty cache key identifying the dataset.
        ttl: Time-to-live in seconds for a freshly fetched value.
        fetch: Zero-argument coroutine function producing a JSON-serializable value.

    Returns:
        The decoded cached value on a hit, the fetched value on a miss.

    Raises:
        ValueError: If `key` is empty or `ttl` is not a positive integer.
    """
    if not isinstance(key, str) or not key:
        raise ValueError("Cache key must be a non-empty string")
    if isinstance(ttl, bool) or not isinstance(ttl, int) or ttl <= 0:
        raise ValueError(f"TTL must be a positive integer, got {ttl!r}")

    cached = await cache.get(key)
    if cached:
        logger.debug(f"Cache hit: {key}")
        return json.loads(cached)

    logger.info(f"Cache miss: {key}, fetching from source")
    value = await fetch()

    await cache.set(key, json.dumps(jsonable_encoder(value)), ttl)
    return value
