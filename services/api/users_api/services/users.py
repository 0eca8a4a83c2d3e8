"""Users listing, served through the read-through cache.

Rows are returned as-is; their columns are not interpreted here. Within the
TTL window a cached listing is returned even if the table has changed since.
"""

from typing import Any

from users_api.services.read_through import read_through
from users_api.stores import CacheClient, DatabaseClient
from users_api.stores.redis import KEY_USERS, TTL_USERS

USERS_QUERY = "SELECT * FROM users"


async def list_users(db: DatabaseClient, cache: CacheClient) -> list[dict[str, Any]]:
    """Get all users, from cache when fresh, else from the database."""

    async def fetch() -> list[dict[str, Any]]:
        return await db.query(USERS_QUERY)

    return await read_through(cache, KEY_USERS, TTL_USERS, fetch)
