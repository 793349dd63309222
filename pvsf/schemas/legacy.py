"""Legacy API shapes served by GET /api/videos and GET /api/users.

Field names are frozen: the legacy frontend reads them verbatim.
"""

from pydantic import BaseModel, Field


class LegacyVideo(BaseModel):
    """One entry of the legacy videos list."""

    timestamp: str = ""
    type1: str = ""
    type2: str = ""
    type: str = ""
    creator: str = ""
    movieyear: int = 0
    tlink: str = Field(default="", description="Author X handle")
    ychlink: str = Field(default="", description="Author YouTube channel URL")
    icon: str = ""
    member: str = Field(default="", description="Comma-separated member names")
    memberid: str = Field(default="", description="Comma-separated member X handles")
    data: str = ""
    time: str = Field(default="", description="Scheduled premiere time (ISO-8601)")
    title: str = ""
    music: str = ""
    credit: str = ""
    ymulink: str = ""
    ywatch: str = ""
    othersns: str = ""
    righttype: str = ""
    comment: str = ""
    ylink: str = Field(default="", description="Video URL")
    eventid: str = ""
    status: str = "public"
    smallThumbnail: str = ""
    largeThumbnail: str = ""
    viewCount: str = "0"
    likeCount: str = "0"
    daysSincePublished: int | float = 0
    videoScore: int | float | None = None
    deterministicScore: int | float | None = None
    fu: str = ""
    beforecomment: str = ""
    aftercomment: str = ""
    soft: str = ""
    listen: str = ""
    episode: str = ""
    end: str = ""
    createdBy: str = ""


class LegacyUser(BaseModel):
    """One entry of the legacy users list."""

    username: str = Field(default="", description="Linked X handle")
    icon: str = ""
    creatorName: str = ""
    ychlink: str = ""
    iylink: list[str] = Field(default_factory=list, description="Individual works")
    cylink: list[str] = Field(default_factory=list, description="Collaboration works")
    mylink: list[str] = Field(default_factory=list, description="MV / main program works")
    creatorScore: int | float = 0
