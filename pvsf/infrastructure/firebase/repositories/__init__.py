"""Firestore-backed read repositories."""

from pvsf.infrastructure.firebase.repositories.event_slot_repo_firestore import (
    FirestoreEventSlotRepository,
)
from pvsf.infrastructure.firebase.repositories.user_repo_firestore import (
    FirestoreUserRepository,
)
from pvsf.infrastructure.firebase.repositories.video_repo_firestore import (
    FirestoreVideoRepository,
)

__all__ = [
    "FirestoreEventSlotRepository",
    "FirestoreUserRepository",
    "FirestoreVideoRepository",
]
