"""Presentation-layer dependency injection (composition root).

Provides FastAPI Depends() for the session and the Firestore repositories.
Routes depend only on these, never on the infrastructure modules directly.
"""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import Annotated

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from pvsf.application.session import Session, is_admin, is_authenticated
from pvsf.domain.exceptions import AuthenticationException, AuthorizationException
from pvsf.infrastructure.cache import MemoryCache
from pvsf.infrastructure.firebase._rest_client import FirestoreRESTClient
from pvsf.infrastructure.firebase.client import require_firestore_client
from pvsf.infrastructure.firebase.repositories import (
    FirestoreEventSlotRepository,
    FirestoreUserRepository,
    FirestoreVideoRepository,
)
from pvsf.infrastructure.security.jwt import verify_token

logger = logging.getLogger(__name__)

_http_bearer = HTTPBearer(auto_error=False)


def get_firestore() -> FirestoreRESTClient:
    """Process-wide Firestore client; raises FirestoreUnavailableError (500) when unset."""
    return require_firestore_client()


def get_user_repo(
    client: Annotated[FirestoreRESTClient, Depends(get_firestore)],
) -> FirestoreUserRepository:
    return FirestoreUserRepository(client)


def get_video_repo(
    client: Annotated[FirestoreRESTClient, Depends(get_firestore)],
) -> FirestoreVideoRepository:
    return FirestoreVideoRepository(client)


def get_event_slot_repo(
    client: Annotated[FirestoreRESTClient, Depends(get_firestore)],
) -> FirestoreEventSlotRepository:
    return FirestoreEventSlotRepository(client)


@lru_cache
def get_suggestion_cache() -> MemoryCache:
    """Process-wide cache for the member suggestion list."""
    return MemoryCache()


async def get_session_optional(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(_http_bearer)],
) -> Session | None:
    """Return the session from the bearer token if present and valid; else None."""
    if not credentials:
        return None
    try:
        payload = verify_token(credentials.credentials)
        return Session.from_claims(payload)
    except (ValueError, KeyError) as e:
        logger.debug("Rejected session token: %s", e)
        return None


async def require_session(
    session: Annotated[Session | None, Depends(get_session_optional)],
) -> Session:
    """Return the session; raise 401 if missing or invalid."""
    if not is_authenticated(session):
        raise AuthenticationException()
    assert session is not None
    return session


async def require_admin(
    session: Annotated[Session, Depends(require_session)],
) -> Session:
    """Return the session; raise 403 unless it is an admin session."""
    if not is_admin(session):
        raise AuthorizationException()
    return session
