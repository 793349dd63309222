"""Firestore-backed video repository (read-only)."""

from __future__ import annotations

from typing import Any

from pvsf.core.constants import VIDEO_STATUS_PUBLISHED
from pvsf.infrastructure.firebase._rest_client import (
    DESCENDING,
    DocumentSnapshot,
    FirestoreRESTClient,
)
from pvsf.infrastructure.firebase.collections import COLLECTION_VIDEOS


def _with_id(snapshot: DocumentSnapshot) -> dict[str, Any]:
    return {**snapshot.to_dict(), "id": snapshot.id}


class FirestoreVideoRepository:
    """Queries over the ``videos`` collection. Documents come back merged with their id."""

    def __init__(self, client: FirestoreRESTClient) -> None:
        self._client = client
        self._coll = client.collection(COLLECTION_VIDEOS)

    async def get_by_id(self, video_id: str) -> dict[str, Any] | None:
        """Return the video document, or None if it does not exist."""
        doc = await self._coll.document(video_id).get()
        if not doc:
            return None
        return _with_id(doc)

    async def list_published(self) -> list[dict[str, Any]]:
        """Return published videos, newest scheduled slot first."""
        q = self._coll.where("status", "==", VIDEO_STATUS_PUBLISHED).order_by(
            "scheduledAt", DESCENDING
        )
        return [_with_id(snapshot) async for snapshot in q.stream()]

    async def list_recent_by_author(
        self, xid_lower: str, limit: int
    ) -> list[dict[str, Any]]:
        """Return the author's most recently created videos (lower-cased handle match)."""
        q = (
            self._coll.where("authorXidLower", "==", xid_lower)
            .order_by("createdAt", DESCENDING)
            .limit(limit)
        )
        return [_with_id(snapshot) async for snapshot in q.stream()]

    async def list_member_sources(self) -> list[dict[str, Any]]:
        """Author and member fields of every video not soft-deleted.

        Firestore's ``!=`` also drops documents that lack ``isDeleted``.
        """
        q = self._coll.where("isDeleted", "!=", True).select(
            "members", "authorXid", "authorName", "author"
        )
        return [_with_id(snapshot) async for snapshot in q.stream()]

    async def count(self) -> int:
        return await self._coll.count().get()
