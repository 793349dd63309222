"""Firestore-backed event slot repository. Slots are opaque here; only counted."""

from __future__ import annotations

from pvsf.infrastructure.firebase._rest_client import FirestoreRESTClient
from pvsf.infrastructure.firebase.collections import COLLECTION_EVENT_SLOTS


class FirestoreEventSlotRepository:
    def __init__(self, client: FirestoreRESTClient) -> None:
        self._client = client
        self._coll = client.collection(COLLECTION_EVENT_SLOTS)

    async def count(self) -> int:
        return await self._coll.count().get()
