"""Signed-in user API: icon lookup by X handle and own profile."""

from typing import Annotated

from fastapi import APIRouter, Depends, Query, Request

from pvsf.api.dependencies import get_user_repo, get_video_repo, require_session
from pvsf.application.session import Session
from pvsf.application.transformers import format_time
from pvsf.core.api_error import with_api_error_handler
from pvsf.core.constants import ICON_LOOKUP_LIMIT, ROLE_USER
from pvsf.domain.exceptions import ResourceNotFoundException, ValidationException
from pvsf.infrastructure.firebase.repositories import (
    FirestoreUserRepository,
    FirestoreVideoRepository,
)
from pvsf.schemas.error import ErrorResponse
from pvsf.schemas.user import IconsResponse, UserProfileResponse, XLinkInfo


router = APIRouter()


def distinct_icons(videos: list[dict]) -> list[str]:
    """Distinct non-empty authorIconUrl values, first occurrence first."""
    seen: set[str] = set()
    icons: list[str] = []
    for video in videos:
        url = video.get("authorIconUrl")
        if isinstance(url, str) and url and url not in seen:
            seen.add(url)
            icons.append(url)
    return icons


def require_xid(
    request: Request,
    xid: Annotated[str | None, Query(description="Author X handle (case-insensitive)")] = None,
) -> str:
    """The single non-empty ``xid`` query value; 400 otherwise.

    Declared ahead of the repository dependency so a bad request is rejected
    before the data store is touched.
    """
    if not xid or len(request.query_params.getlist("xid")) != 1:
        raise ValidationException("xid query parameter is required", field="xid")
    return xid


@router.get(
    "/icons",
    response_model=IconsResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
@with_api_error_handler("GET /api/user/icons")
async def get_user_icons(
    xid: Annotated[str, Depends(require_xid)],
    video_repo: Annotated[FirestoreVideoRepository, Depends(get_video_repo)],
) -> IconsResponse:
    """Return the icons used on the author's most recent videos, most recent first."""
    videos = await video_repo.list_recent_by_author(xid.lower(), ICON_LOOKUP_LIMIT)
    return IconsResponse(icons=distinct_icons(videos))


@router.get(
    "/me",
    response_model=UserProfileResponse,
    responses={
        401: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
)
@with_api_error_handler("GET /api/user/me")
async def get_me(
    session: Annotated[Session, Depends(require_session)],
    user_repo: Annotated[FirestoreUserRepository, Depends(get_user_repo)],
) -> UserProfileResponse:
    """Return the signed-in user's profile."""
    doc = await user_repo.get_by_id(session.user_id)
    if doc is None:
        raise ResourceNotFoundException("User", session.user_id)
    x_link = doc.get("xLink") if isinstance(doc.get("xLink"), dict) else {}
    role = doc.get("role")
    return UserProfileResponse(
        id=doc["id"],
        name=doc.get("name") or "",
        iconUrl=doc.get("iconUrl") or "",
        role=role if isinstance(role, str) and role else ROLE_USER,
        xLink=XLinkInfo(
            status=x_link.get("status") or "none",
            xid=x_link.get("xid") or None,
            linkedAt=format_time(x_link.get("linkedAt")) or None,
        ),
    )
