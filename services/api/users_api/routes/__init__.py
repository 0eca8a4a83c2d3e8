"""API routes."""

from fastapi import APIRouter

from users_api.routes import pages, users

api_router = APIRouter()

# Landing page
api_router.include_router(pages.router, tags=["pages"])

# Users listing (read-through cache)
api_router.include_router(users.router, tags=["users"])
