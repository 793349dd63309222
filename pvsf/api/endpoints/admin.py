"""Admin dashboard API: aggregate statistics and the admin gate check."""

import asyncio
import logging
from typing import Annotated

from fastapi import APIRouter, Depends

from pvsf.api.dependencies import (
    get_event_slot_repo,
    get_user_repo,
    get_video_repo,
    require_admin,
)
from pvsf.application.session import Session
from pvsf.core.api_error import with_api_error_handler
from pvsf.infrastructure.firebase.repositories import (
    FirestoreEventSlotRepository,
    FirestoreUserRepository,
    FirestoreVideoRepository,
)
from pvsf.schemas.admin import AdminCheckResponse, AdminStatsResponse
from pvsf.schemas.error import ErrorResponse

logger = logging.getLogger(__name__)

router = APIRouter()

_AUTH_RESPONSES = {
    401: {"model": ErrorResponse, "description": "No session"},
    403: {"model": ErrorResponse, "description": "Session is not an admin"},
}


@router.get(
    "/stats",
    response_model=AdminStatsResponse,
    responses={**_AUTH_RESPONSES, 500: {"model": ErrorResponse}},
)
@with_api_error_handler("GET /api/admin/stats")
async def get_admin_stats(
    session: Annotated[Session, Depends(require_admin)],
    video_repo: Annotated[FirestoreVideoRepository, Depends(get_video_repo)],
    user_repo: Annotated[FirestoreUserRepository, Depends(get_user_repo)],
    slot_repo: Annotated[FirestoreEventSlotRepository, Depends(get_event_slot_repo)],
) -> AdminStatsResponse:
    """Return document counts for videos, users and event slots.

    The three count() aggregations run concurrently; if any fails the whole
    request fails (no partial results).
    """
    video_count, user_count, slot_count = await asyncio.gather(
        video_repo.count(),
        user_repo.count(),
        slot_repo.count(),
    )
    logger.debug("Admin stats requested by %s", session.user_id)
    return AdminStatsResponse(
        videoCount=video_count,
        userCount=user_count,
        slotCount=slot_count,
    )


@router.get("/check", response_model=AdminCheckResponse, responses=_AUTH_RESPONSES)
async def check_admin(
    session: Annotated[Session, Depends(require_admin)],
) -> AdminCheckResponse:
    """Gate for admin pages: 401 without a session, 403 for non-admins."""
    return AdminCheckResponse()
