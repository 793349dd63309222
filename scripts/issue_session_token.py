"""Print a session token for local testing of the authenticated routes.

Usage:
    python -m scripts.issue_session_token <user_id> [role]
If role is omitted and Firestore is configured, the role stored on
users/<user_id> is used (default 'user').
"""

import asyncio
import sys

from pvsf.core.config import get_settings
from pvsf.core.constants import ROLE_USER
from pvsf.infrastructure.firebase.client import (
    close_firebase,
    get_firestore_client,
    init_firebase,
)
from pvsf.infrastructure.firebase.repositories import FirestoreUserRepository
from pvsf.infrastructure.security.jwt import create_session_token


async def _stored_role(user_id: str) -> str | None:
    if not init_firebase():
        return None
    client = get_firestore_client()
    assert client is not None
    try:
        doc = await FirestoreUserRepository(client).get_by_id(user_id)
    finally:
        await close_firebase()
    if doc is None:
        print(f"Warning: users/{user_id} not found", file=sys.stderr)
        return None
    role = doc.get("role")
    return role if isinstance(role, str) and role else None


async def main() -> None:
    """Issue a token for the given user id and role."""
    if len(sys.argv) < 2:
        print(
            "Usage: python -m scripts.issue_session_token <user_id> [role]",
            file=sys.stderr,
        )
        sys.exit(1)
    user_id = sys.argv[1]
    role = sys.argv[2] if len(sys.argv) > 2 else None

    get_settings()
    if role is None:
        role = await _stored_role(user_id) or ROLE_USER
    print(create_session_token(user_id, role))


if __name__ == "__main__":
    asyncio.run(main())
