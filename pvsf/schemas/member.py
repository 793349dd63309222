"""Member autocomplete API schemas."""

from pydantic import BaseModel, Field


class MemberSuggestionItem(BaseModel):
    """One entry of GET /api/members/suggestions."""

    xid: str = Field(..., description="Lower-cased X handle without '@'")
    name: str
    similarity: int | None = Field(
        default=None, description="0-100, only present in fuzzy mode"
    )
