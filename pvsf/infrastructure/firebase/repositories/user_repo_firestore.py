"""Firestore-backed user repository (read-only)."""

from __future__ import annotations

from typing import Any

from pvsf.core.constants import XLINK_STATUS_LINKED
from pvsf.infrastructure.firebase._rest_client import (
    ASCENDING,
    DocumentSnapshot,
    FirestoreRESTClient,
)
from pvsf.infrastructure.firebase.collections import COLLECTION_USERS


def _with_id(snapshot: DocumentSnapshot) -> dict[str, Any]:
    return {**snapshot.to_dict(), "id": snapshot.id}


class FirestoreUserRepository:
    """Queries over the ``users`` collection. Documents come back merged with their id."""

    def __init__(self, client: FirestoreRESTClient) -> None:
        self._client = client
        self._coll = client.collection(COLLECTION_USERS)

    async def get_by_id(self, user_id: str) -> dict[str, Any] | None:
        """Return the user document, or None if it does not exist."""
        doc = await self._coll.document(user_id).get()
        if not doc:
            return None
        return _with_id(doc)

    async def list_linked(self) -> list[dict[str, Any]]:
        """Return every user whose X account link is confirmed, by document id."""
        q = self._coll.where("xLink.status", "==", XLINK_STATUS_LINKED).order_by(
            "__name__", ASCENDING
        )
        return [_with_id(snapshot) async for snapshot in q.stream()]

    async def count(self) -> int:
        return await self._coll.count().get()
