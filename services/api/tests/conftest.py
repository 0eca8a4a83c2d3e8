"""Shared fixtures: in-memory fakes for the store protocols and an HTTP client."""

from typing import Any

import pytest
from httpx import ASGITransport, AsyncClient

from users_api.dependencies import get_cache, get_db
from users_api.main import app


class FakeDatabase:
    """DatabaseClient fake that counts queries and can be told to fail."""

    def __init__(self, rows: list[dict[str, Any]] | None = None) -> None:
        self.rows = rows if rows is not None else []
        self.error: Exception | None = None
        self.queries: list[str] = []

    async def query(self, sql: str) -> list[dict[str, Any]]:
        self.queries.append(sql)
        if self.error is not None:
            raise self.error
        return [dict(row) for row in self.rows]


class FakeCache:
    """CacheClient fake backed by a dict. TTLs are recorded, never enforced."""

    def __init__(self) -> None:
        self.data: dict[str, str] = {}
        self.ttls: dict[str, int] = {}
        self.get_error: Exception | None = None
        self.set_error: Exception | None = None
        self.gets: list[str] = []
        self.sets: list[tuple[str, str, int]] = []

    async def get(self, key: str) -> str | None:
        self.gets.append(key)
        if self.get_error is not None:
            raise self.get_error
        return self.data.get(key)

    async def set(self, key: str, value: str, ttl: int) -> None:
        self.sets.append((key, value, ttl))
        if self.set_error is not None:
            raise self.set_error
        self.data[key] = value
        self.ttls[key] = ttl

    def expire(self, key: str) -> None:
        """Simulate the TTL elapsing."""
        self.data.pop(key, None)
        self.ttls.pop(key, None)


@pytest.fixture
def fake_db() -> FakeDatabase:
    return FakeDatabase(
        rows=[
            {"id": 1, "name": "Ada", "email": "ada@example.com"},
            {"id": 2, "name": "Linus", "email": "linus@example.com"},
        ]
    )


@pytest.fixture
def fake_cache() -> FakeCache:
    return FakeCache()


@pytest.fixture
async def client(fake_db: FakeDatabase, fake_cache: FakeCache):
    """Create test client with fake stores injected."""
    app.dependency_overrides[get_db] = lambda: fake_db
    app.dependency_overrides[get_cache] = lambda: fake_cache
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as ac:
        yield ac
    app.dependency_overrides.clear()
