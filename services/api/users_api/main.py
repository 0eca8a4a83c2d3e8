"""FastAPI application entry point.

Users API - landing page, health check and a Redis-cached users listing.
"""

from contextlib import asynccontextmanager
from collections.abc import AsyncGenerator
import logging
from pathlib import Path

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles

from users_api.routes import api_router
from users_api.schemas import ErrorResponse, HealthResponse
from users_api.settings import get_settings
from users_api.stores.postgres import PostgresStore
from users_api.stores.redis import RedisStore

logger = logging.getLogger("uvicorn.error")

PUBLIC_DIR = Path(__file__).resolve().parent / "public"


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan manager.

    Creates the store clients and keeps them on app.state. An unreachable
    backend at startup is logged, not fatal: requests that need it fail with 500.
    """
    # Startup
    settings = get_settings()

    db = PostgresStore.from_settings(settings)
    try:
        await db.ping()
        logger.info("Postgres connected")
    except Exception:
        logger.exception("Postgres init failed")

    cache = RedisStore.from_settings(settings)
    try:
        await cache.ping()
        logger.info("Redis connected")
    except Exception:
        logger.exception("Redis init failed")

    app.state.db = db
    app.state.cache = cache
    logger.info(f"Server running on port {settings.port}")

    yield

    # Shutdown
    del app.state.cache
    del app.state.db
    await cache.close()
    await db.close()


def create_app() -> FastAPI:
    """Create and configure FastAPI application."""
    settings = get_settings()

    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        description="Landing page, health check and cached users listing",
        lifespan=lifespan,
    )

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        """Anything unhandled becomes a generic 500."""
        logger.exception(f"Unhandled error on {request.method} {request.url.path}", exc_info=exc)
        return JSONResponse(status_code=500, content=ErrorResponse().model_dump())

    # Health check endpoint
    @app.get("/health", tags=["health"], response_model=HealthResponse)
    async def health_check() -> HealthResponse:
        """Health check endpoint. Touches neither Postgres nor Redis."""
        return HealthResponse()

    app.include_router(api_router)

    # Static assets last, so the routes above take precedence
    app.mount("/", StaticFiles(directory=PUBLIC_DIR), name="public")

    return app


# Application instance
app = create_app()


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "users_api.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
    )
