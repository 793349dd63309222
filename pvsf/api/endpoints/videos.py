"""Public videos listing and single-video lookup in the legacy shape."""

from typing import Annotated

from fastapi import APIRouter, Depends, Query, Response

from pvsf.api.dependencies import get_session_optional, get_video_repo
from pvsf.application.session import Session, is_admin
from pvsf.application.transformers import transform_video_to_legacy
from pvsf.core.api_error import with_api_error_handler
from pvsf.core.constants import CACHE_CONTROL_PRIVATE, CACHE_CONTROL_VIDEOS
from pvsf.domain.exceptions import ResourceNotFoundException
from pvsf.infrastructure.firebase.repositories import FirestoreVideoRepository
from pvsf.schemas.error import ErrorResponse
from pvsf.schemas.legacy import LegacyVideo

router = APIRouter()


@router.get(
    "",
    response_model=list[LegacyVideo],
    responses={500: {"model": ErrorResponse}},
)
@with_api_error_handler("GET /api/videos")
async def list_videos(
    response: Response,
    video_repo: Annotated[FirestoreVideoRepository, Depends(get_video_repo)],
) -> list[dict]:
    """Return published videos (newest scheduled first) in the legacy shape."""
    docs = await video_repo.list_published()
    videos = [transform_video_to_legacy(doc) for doc in docs]
    response.headers["Cache-Control"] = CACHE_CONTROL_VIDEOS
    return videos


@router.get(
    "/{video_id}",
    response_model=LegacyVideo,
    responses={404: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
@with_api_error_handler("GET /api/videos/{video_id}")
async def get_video(
    video_id: str,
    response: Response,
    session: Annotated[Session | None, Depends(get_session_optional)],
    video_repo: Annotated[FirestoreVideoRepository, Depends(get_video_repo)],
    include_deleted: Annotated[
        str | None,
        Query(alias="includeDeleted", description="\"true\" lets an admin read a soft-deleted video"),
    ] = None,
) -> dict:
    """Return one video in the legacy shape.

    Soft-deleted videos are not found, except for an admin session that asks
    with ``includeDeleted=true``; that view is never publicly cached.
    """
    doc = await video_repo.get_by_id(video_id)
    if doc is None:
        raise ResourceNotFoundException("Video", video_id)
    if doc.get("isDeleted") is True:
        if not (is_admin(session) and include_deleted == "true"):
            raise ResourceNotFoundException("Video", video_id)
        response.headers["Cache-Control"] = CACHE_CONTROL_PRIVATE
        return transform_video_to_legacy(doc)
    response.headers["Cache-Control"] = CACHE_CONTROL_VIDEOS
    return transform_video_to_legacy(doc)
