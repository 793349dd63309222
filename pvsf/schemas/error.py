"""Error envelope returned by every route."""

from pydantic import BaseModel


class ErrorResponse(BaseModel):
    error: str
