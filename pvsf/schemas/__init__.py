"""Pydantic response schemas for the API."""

from pvsf.schemas.admin import AdminCheckResponse, AdminStatsResponse
from pvsf.schemas.error import ErrorResponse
from pvsf.schemas.health import HealthResponse
from pvsf.schemas.legacy import LegacyUser, LegacyVideo
from pvsf.schemas.member import MemberSuggestionItem
from pvsf.schemas.user import IconsResponse, UserProfileResponse, XLinkInfo

__all__ = [
    "AdminCheckResponse",
    "AdminStatsResponse",
    "ErrorResponse",
    "HealthResponse",
    "IconsResponse",
    "LegacyUser",
    "LegacyVideo",
    "MemberSuggestionItem",
    "UserProfileResponse",
    "XLinkInfo",
]
