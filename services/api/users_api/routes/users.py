"""Users endpoint.

GET /users - JSON array of user rows, cached in Redis for 60 seconds.

Routers are thin: call services for business logic.
"""

import logging
from typing import Any

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from users_api.dependencies import CacheDep, DbDep
from users_api.schemas import ErrorResponse
from users_api.services.users import list_users

logger = logging.getLogger("uvicorn.error")

router = APIRouter()


@router.get(
    "/users",
    response_model=None,
    responses={500: {"model": ErrorResponse}},
)
async def get_users(db: DbDep, cache: CacheDep) -> Any:
    """List users.

    Rows come back exactly as stored or queried; they are not validated here.
    Database and cache failures are not told apart: both are logged and
    answered with a generic 500.
    """
    try:
        return await list_users(db, cache)
    except Exception:
        logger.exception("Error listing users")
        return JSONResponse(
            status_code=500,
            content=ErrorResponse().model_dump(),
        )
