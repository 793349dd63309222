"""Signed-in user API schemas."""

from pydantic import BaseModel, Field


class IconsResponse(BaseModel):
    """Response for GET /api/user/icons."""

    icons: list[str] = Field(default_factory=list)


class XLinkInfo(BaseModel):
    status: str = "none"
    xid: str | None = None
    linkedAt: str | None = None


class UserProfileResponse(BaseModel):
    """Response for GET /api/user/me."""

    id: str
    name: str = ""
    iconUrl: str = ""
    role: str = "user"
    xLink: XLinkInfo = Field(default_factory=XLinkInfo)
