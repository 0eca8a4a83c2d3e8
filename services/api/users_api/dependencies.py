"""Dependency injection for route handlers.

Store clients are created in the lifespan and kept on app.state; the
functions below hand them to routes via Depends. Tests replace them with
app.dependency_overrides.
"""

from typing import Annotated

from fastapi import Depends, Request

from users_api.stores import CacheClient, DatabaseClient


def get_db(request: Request) -> DatabaseClient:
    """Database client from app.state.

    Raises:
        RuntimeError: If the lifespan has not set it up.
    """
    db = getattr(request.app.state, "db", None)
    if db is None:
        raise RuntimeError("Database not initialized. Check lifespan setup.")
    return db


def get_cache(request: Request) -> CacheClient:
    """Cache client from app.state.

    Raises:
        RuntimeError: If the lifespan has not set it up.
    """
    cache = getattr(request.app.state, "cache", None)
    if cache is None:
        raise RuntimeError("Redis not initialized. Check lifespan setup.")
    return cache


DbDep = Annotated[DatabaseClient, Depends(get_db)]
CacheDep = Annotated[CacheClient, Depends(get_cache)]
