"""Member autocomplete: collect (xid, name) pairs from videos and search them.

Pure code, no I/O. The route loads the video documents (only the author and
member fields), builds the suggestion list once, caches it, and filters it
per request.

Search modes:

* ``prefix`` (default): case-insensitive substring match on xid or name.
* ``fuzzy``: Levenshtein similarity (0-100) against name and xid; results
  above the threshold, best first, carry their ``similarity``.
"""

import math
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Any

from pvsf.core.constants import (
    MEMBER_SUGGESTIONS_LIST_LIMIT,
    MEMBER_SUGGESTIONS_MATCH_LIMIT,
    MEMBER_SUGGESTIONS_MIN_SIMILARITY,
)

MODE_PREFIX = "prefix"
MODE_FUZZY = "fuzzy"


@dataclass(frozen=True)
class MemberSuggestion:
    xid: str
    name: str
    similarity: int | None = None


def normalize_query(raw: str | None) -> str:
    """Lower-case, trim, and drop one leading '@'."""
    query = (raw or "").lower().strip()
    return query[1:] if query.startswith("@") else query


def _normalize_xid(xid: str) -> str:
    xid = xid.lower()
    return xid[1:] if xid.startswith("@") else xid


def levenshtein_distance(a: str, b: str) -> int:
    """Case-insensitive edit distance (insert, delete, substitute)."""
    a, b = a.lower(), b.lower()
    previous = list(range(len(a) + 1))
    for i, cb in enumerate(b, start=1):
        current = [i]
        for j, ca in enumerate(a, start=1):
            if ca == cb:
                current.append(previous[j - 1])
            else:
                current.append(min(previous[j - 1], current[j - 1], previous[j]) + 1)
        previous = current
    return previous[len(a)]


def similarity(a: str, b: str) -> int:
    """Similarity percentage, 100 for identical (or both empty) strings."""
    longer, shorter = (a, b) if len(a) > len(b) else (b, a)
    if not longer:
        return 100
    ratio = 1 - levenshtein_distance(longer, shorter) / len(longer)
    # Round half up.
    return math.floor(ratio * 100 + 0.5)


def _pair(xid: Any, name: Any) -> tuple[str, str] | None:
    if isinstance(xid, str) and xid and isinstance(name, str) and name:
        return _normalize_xid(xid), name
    return None


def collect_member_suggestions(videos: Iterable[Mapping[str, Any]]) -> list[MemberSuggestion]:
    """Distinct (xid, name) pairs from authors and members, sorted by name.

    Authors are read from ``author.{xid,name}`` and the older top-level
    ``authorXid``/``authorName``; members from ``members[].{xid,name}``.
    Pairs are distinct on (lower-cased name, normalized xid); the first
    spelling of the name wins.
    """
    found: dict[tuple[str, str], MemberSuggestion] = {}
    for video in videos:
        author = video.get("author")
        candidates = []
        if isinstance(author, Mapping):
            candidates.append(_pair(author.get("xid"), author.get("name")))
        candidates.append(_pair(video.get("authorXid"), video.get("authorName")))
        members = video.get("members")
        if isinstance(members, list):
            candidates.extend(
                _pair(m.get("xid"), m.get("name")) for m in members if isinstance(m, Mapping)
            )
        for pair in candidates:
            if pair is None:
                continue
            xid, name = pair
            found.setdefault((name.lower(), xid), MemberSuggestion(xid=xid, name=name))
    return sorted(found.values(), key=lambda s: (s.name.casefold(), s.name, s.xid))


def filter_suggestions(
    suggestions: list[MemberSuggestion], query: str, mode: str = MODE_PREFIX
) -> list[MemberSuggestion]:
    """Apply the search to an already normalized query."""
    if not query:
        return suggestions[:MEMBER_SUGGESTIONS_LIST_LIMIT]

    if mode == MODE_FUZZY:
        scored = [
            MemberSuggestion(
                xid=s.xid,
                name=s.name,
                similarity=max(similarity(s.name.lower(), query), similarity(s.xid, query)),
            )
            for s in suggestions
        ]
        matches = [s for s in scored if s.similarity > MEMBER_SUGGESTIONS_MIN_SIMILARITY]
        matches.sort(key=lambda s: s.similarity, reverse=True)
        return matches[:MEMBER_SUGGESTIONS_MATCH_LIMIT]

    matches = [s for s in suggestions if query in s.xid or query in s.name.lower()]
    return matches[:MEMBER_SUGGESTIONS_MATCH_LIMIT]
