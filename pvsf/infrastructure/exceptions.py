"""Infrastructure exceptions for the Firestore data store.

Both extend PvsfException with a 5xx status so the shared error responder
turns them into a generic "Internal server error" envelope.
"""

from pvsf.domain.exceptions import PvsfException


class FirestoreUnavailableError(PvsfException):
    """Firestore client is not configured or failed to initialize."""

    def __init__(self) -> None:
        super().__init__(
            "Firestore not configured (set FIREBASE_SERVICE_ACCOUNT_KEY or PATH)",
            status_code=500,
        )


class FirestoreQueryError(PvsfException):
    """Firestore REST API returned a non-success status."""

    def __init__(self, upstream_status: int, body: str = "") -> None:
        self.upstream_status = upstream_status
        self.body = body
        super().__init__(
            f"Firestore request failed with HTTP {upstream_status}: {body}",
            status_code=500,
        )
