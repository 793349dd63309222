"""Firestore document -> legacy JSON transformers.

The legacy frontend still consumes the field layout of the old
``videos_data.json`` / ``users_data.json`` dumps, so the public listing
routes map every stored document through these functions.

Both transformers are pure and total: no I/O, and every legacy key has a
source field or a default, so a document with missing (or oddly typed)
optional fields still maps cleanly instead of raising.
"""

import math
import re
from collections.abc import Mapping
from datetime import datetime
from typing import Any

from pvsf.shared.utils.datetime import from_timestamp_utc, to_js_iso

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")

DEFAULT_TYPE2 = "個人"
DEFAULT_VIDEO_STATUS = "public"


def _as_dict(value: Any) -> Mapping[str, Any]:
    return value if isinstance(value, Mapping) else {}


def _text(value: Any) -> str:
    """Legacy string field: falsy -> '', non-strings stringified."""
    if isinstance(value, str):
        return value
    if not value:
        return ""
    return str(value)


def _is_number(value: Any) -> bool:
    # NaN and ±Infinity decode from Firestore doubles; treat them as missing.
    return (
        isinstance(value, int | float)
        and not isinstance(value, bool)
        and (not isinstance(value, float) or math.isfinite(value))
    )


def _number_text(value: Any) -> str:
    """Stringified counter (viewCount, likeCount); missing or zero -> '0'."""
    if isinstance(value, str) and value:
        return value
    if not _is_number(value) or not value:
        return "0"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def _movie_year(value: Any) -> int:
    if _is_number(value):
        return int(value)
    if isinstance(value, str):
        match = _LEADING_INT.match(value)
        if match:
            return int(match.group(1))
    return 0


def _string_list(value: Any) -> list[str]:
    if not isinstance(value, list | tuple):
        return []
    return [item for item in value if isinstance(item, str)]


def format_time(value: Any) -> str:
    """Render a stored timestamp as an ISO-8601 string ('' when absent).

    Accepts datetimes (naive treated as UTC), strings (returned unchanged),
    objects with to_datetime()/ToDatetime() and {seconds|_seconds, nanos}
    mappings. Anything else renders as ''.
    """
    if not value:
        return ""
    if isinstance(value, str):
        return value
    if isinstance(value, datetime):
        return to_js_iso(value)
    for attr in ("to_datetime", "ToDatetime"):
        convert = getattr(value, attr, None)
        if callable(convert):
            try:
                converted = convert()
            except (TypeError, ValueError, OverflowError):
                return ""
            return to_js_iso(converted) if isinstance(converted, datetime) else ""
    if isinstance(value, Mapping):
        seconds = value.get("seconds", value.get("_seconds"))
        nanos = value.get("nanos", value.get("nanoseconds", value.get("_nanoseconds", 0)))
        if _is_number(seconds):
            extra = nanos / 1e9 if _is_number(nanos) else 0.0
            try:
                return to_js_iso(from_timestamp_utc(seconds + extra))
            except (OverflowError, OSError, ValueError):
                return ""
    return ""


def transform_video_to_legacy(doc: Mapping[str, Any]) -> dict[str, Any]:
    """Map a video document (merged with its id) to the legacy video shape."""
    author = _as_dict(doc.get("author"))
    music = _as_dict(doc.get("music"))
    members = doc.get("members")
    member_list = [_as_dict(m) for m in members] if isinstance(members, list) else []
    type1 = _text(author.get("division"))
    video_score = doc.get("videoScore")
    deterministic_score = doc.get("deterministicScore")
    days = doc.get("daysSincePublished")

    return {
        "timestamp": format_time(doc.get("timestamp") or doc.get("createdAt")),
        "type1": type1,
        "type2": _text(doc.get("type2")) or DEFAULT_TYPE2,
        "type": type1,
        "creator": _text(author.get("name")),
        "movieyear": _movie_year(doc.get("movieYear")),
        "tlink": _text(author.get("xid")),
        "ychlink": _text(author.get("youtubeChannelUrl")),
        "icon": _text(author.get("iconUrl")),
        "member": ",".join(_text(m.get("name")) for m in member_list),
        "memberid": ",".join(_text(m.get("xid")) for m in member_list),
        "data": _text(doc.get("data")),
        "time": format_time(doc.get("scheduledAt") or doc.get("createdAt")),
        "title": _text(doc.get("title")),
        "music": _text(music.get("title")),
        "credit": _text(music.get("artist")),
        "ymulink": _text(music.get("url")),
        "ywatch": _text(doc.get("ywatch")),
        "othersns": _text(doc.get("otherSns")),
        "righttype": _text(doc.get("rightType")),
        "comment": _text(doc.get("description")),
        "ylink": _text(doc.get("videoUrl")),
        "eventid": _text(doc.get("eventId")),
        "status": _text(doc.get("privacyStatus")) or _text(doc.get("status")) or DEFAULT_VIDEO_STATUS,
        "smallThumbnail": _text(doc.get("smallThumbnail")),
        "largeThumbnail": _text(doc.get("largeThumbnail")),
        "viewCount": _number_text(doc.get("viewCount")),
        "likeCount": _number_text(doc.get("likeCount")),
        "daysSincePublished": days if _is_number(days) else 0,
        "videoScore": video_score if _is_number(video_score) else None,
        "deterministicScore": deterministic_score if _is_number(deterministic_score) else None,
        "fu": "",
        "beforecomment": _text(doc.get("beforeComment")),
        "aftercomment": _text(doc.get("afterComment")),
        "soft": _text(doc.get("software")),
        "listen": _text(doc.get("listen")),
        "episode": _text(doc.get("episode")),
        "end": _text(doc.get("endMessage")),
        "createdBy": _text(doc.get("createdBy")),
    }


def transform_user_to_legacy(doc: Mapping[str, Any]) -> dict[str, Any]:
    """Map a user document (merged with its id) to the legacy user shape."""
    x_link = _as_dict(doc.get("xLink"))
    videos = _as_dict(doc.get("videos"))
    score = doc.get("creatorScore")

    return {
        "username": _text(x_link.get("xid")),
        "icon": _text(doc.get("iconUrl")),
        "creatorName": _text(doc.get("name")),
        "ychlink": _text(doc.get("youtubeChannelUrl")),
        "iylink": _string_list(videos.get("individual")),
        "cylink": _string_list(videos.get("collaboration")),
        "mylink": _string_list(videos.get("mvHonpen")),
        "creatorScore": score if _is_number(score) and score else 0,
    }
