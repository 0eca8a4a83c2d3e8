"""PostgreSQL store with async SQLAlchemy.

Handles:
- Connection pooling (owned by the engine)
- Raw SQL queries returning plain row mappings
"""

from typing import Any

from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine

from users_api.settings import Settings


class PostgresStore:
    """Thin wrapper around an async engine."""

    def __init__(self, engine: AsyncEngine) -> None:
        self._engine = engine

    @classmethod
    def from_settings(cls, settings: Settings) -> "PostgresStore":
        """Create the engine and its connection pool.

        No connection is opened here; the pool connects lazily on first use.
        """
        engine = create_async_engine(
            settings.async_database_url,
            echo=settings.debug,
            pool_size=5,
            max_overflow=10,
            pool_pre_ping=True,
        )
        return cls(engine)

    async def query(self, sql: str) -> list[dict[str, Any]]:
        """Run a query and return all rows.

        Args:
            sql: SQL statement. No parameters are bound.

        Returns:
            One dict per row, keyed by column name.
        """
        async with self._engine.connect() as conn:
            result = await conn.execute(text(sql))
            return [dict(row) for row in result.mappings()]

    async def ping(self) -> None:
        """Open a connection and run a trivial query."""
        async with self._engine.connect() as conn:
            await conn.execute(text("SELECT 1"))

    async def close(self) -> None:
        """Close database connection pool."""
        await self._engine.dispose()
