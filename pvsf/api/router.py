"""API router aggregation.

Includes all endpoint modules with consistent prefix and tags. Paths mirror
the legacy web app (``/api/users``, ``/api/videos``, ...) so existing
clients keep working.
"""

from fastapi import APIRouter

from pvsf.api.endpoints import admin, health, members, user, users, videos

api_router = APIRouter()

api_router.include_router(health.router, prefix="/health", tags=["health"])
api_router.include_router(admin.router, prefix="/admin", tags=["admin"])
api_router.include_router(members.router, prefix="/members", tags=["members"])
api_router.include_router(user.router, prefix="/user", tags=["user"])
api_router.include_router(users.router, prefix="/users", tags=["users"])
api_router.include_router(videos.router, prefix="/videos", tags=["videos"])
