"""Member autocomplete for the entry form."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, Query

from pvsf.api.dependencies import get_suggestion_cache, get_video_repo
from pvsf.application.member_suggestions import (
    MODE_PREFIX,
    MemberSuggestion,
    collect_member_suggestions,
    filter_suggestions,
    normalize_query,
)
from pvsf.core.api_error import with_api_error_handler
from pvsf.core.constants import MEMBER_SUGGESTIONS_CACHE_KEY, MEMBER_SUGGESTIONS_TTL_SECONDS
from pvsf.infrastructure.cache import MemoryCache
from pvsf.infrastructure.firebase.repositories import FirestoreVideoRepository
from pvsf.schemas.error import ErrorResponse
from pvsf.schemas.member import MemberSuggestionItem

logger = logging.getLogger(__name__)

router = APIRouter()


async def _load_suggestions(
    cache: MemoryCache, video_repo: FirestoreVideoRepository
) -> list[MemberSuggestion]:
    cached = await cache.get(MEMBER_SUGGESTIONS_CACHE_KEY)
    if cached is not None:
        return cached
    suggestions = collect_member_suggestions(await video_repo.list_member_sources())
    await cache.set(MEMBER_SUGGESTIONS_CACHE_KEY, suggestions, ttl=MEMBER_SUGGESTIONS_TTL_SECONDS)
    logger.debug("Member suggestion list rebuilt (%d entries)", len(suggestions))
    return suggestions


@router.get(
    "/suggestions",
    response_model=list[MemberSuggestionItem],
    response_model_exclude_none=True,
    responses={500: {"model": ErrorResponse}},
)
@with_api_error_handler("GET /api/members/suggestions")
async def get_member_suggestions(
    cache: Annotated[MemoryCache, Depends(get_suggestion_cache)],
    video_repo: Annotated[FirestoreVideoRepository, Depends(get_video_repo)],
    q: Annotated[str | None, Query(description="Name or X handle fragment; leading '@' ignored")] = None,
    mode: Annotated[str, Query(description="'prefix' (default) or 'fuzzy'; anything else searches as prefix")] = MODE_PREFIX,
) -> list[MemberSuggestionItem]:
    """Return known (xid, name) pairs matching q.

    Without q the first 100 pairs by name. Prefix mode returns up to 20
    substring matches; fuzzy mode up to 20 matches with a similarity score.
    """
    suggestions = await _load_suggestions(cache, video_repo)
    return [
        MemberSuggestionItem(xid=s.xid, name=s.name, similarity=s.similarity)
        for s in filter_suggestions(suggestions, normalize_query(q), mode)
    ]
