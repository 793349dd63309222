"""Public users listing in the legacy shape."""

from typing import Annotated

from fastapi import APIRouter, Depends, Response

from pvsf.api.dependencies import get_user_repo
from pvsf.application.transformers import transform_user_to_legacy
from pvsf.core.api_error import with_api_error_handler
from pvsf.core.constants import CACHE_CONTROL_USERS
from pvsf.infrastructure.firebase.repositories import FirestoreUserRepository
from pvsf.schemas.error import ErrorResponse
from pvsf.schemas.legacy import LegacyUser

router = APIRouter()


@router.get(
    "",
    response_model=list[LegacyUser],
    responses={500: {"model": ErrorResponse}},
)
@with_api_error_handler("GET /api/users")
async def list_users(
    response: Response,
    user_repo: Annotated[FirestoreUserRepository, Depends(get_user_repo)],
) -> list[dict]:
    """Return every user with a linked X account, mapped to the legacy shape."""
    docs = await user_repo.list_linked()
    users = [transform_user_to_legacy(doc) for doc in docs]
    response.headers["Cache-Control"] = CACHE_CONTROL_USERS
    return users
