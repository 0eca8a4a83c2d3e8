"""Data stores for persistence and caching.

Stores handle:
- PostgreSQL: connection pool, raw queries
- Redis: get/set with TTL

No business logic in stores - that belongs in services. Services depend on
the protocols below, so tests can pass in fakes instead of live clients.
"""

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class DatabaseClient(Protocol):
    """Anything that can run a query and hand back rows as mappings."""

    async def query(self, sql: str) -> list[dict[str, Any]]:
        """Run `sql` and return every row as a column -> value dict."""
        ...


@runtime_checkable
class CacheClient(Protocol):
    """Key-value store with per-key expiry."""

    async def get(self, key: str) -> str | None:
        """Return the stored value, or None if the key is absent or expired."""
        ...

    async def set(self, key: str, value: str, ttl: int) -> None:
        """Store `value` under `key` for `ttl` seconds, overwriting any entry."""
        ...


__all__ = ["CacheClient", "DatabaseClient"]
