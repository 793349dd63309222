"""Admin dashboard API schemas."""

from pydantic import BaseModel, Field


class AdminStatsResponse(BaseModel):
    """Response for GET /api/admin/stats."""

    videoCount: int = Field(..., ge=0)
    userCount: int = Field(..., ge=0)
    slotCount: int = Field(..., ge=0)


class AdminCheckResponse(BaseModel):
    """Response for GET /api/admin/check."""

    isAdmin: bool = True
