"""Firestore collection names (schema-in-code).

Firestore has no DDL or migrations. Collections are created automatically
when the first document is written. Use these constants so collection names
stay consistent with the web frontend that writes them.
"""

COLLECTION_USERS = "users"
COLLECTION_VIDEOS = "videos"
COLLECTION_EVENT_SLOTS = "eventSlots"
