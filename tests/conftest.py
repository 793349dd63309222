"""Pytest configuration and fixtures for the PVSF API.

Uses pvsf.main:app for HTTP tests. Firestore is replaced by the in-memory
REST stub in tests/firestore_stub.py, injected through the get_firestore
dependency, so no credentials or network are needed.
"""

import os

os.environ.setdefault("SECRET_KEY", "test-secret-key-for-session-tokens")

import pytest
from httpx import ASGITransport, AsyncClient

from pvsf.api.dependencies import get_firestore, get_suggestion_cache
from pvsf.core.config import get_settings
from pvsf.core.constants import ROLE_ADMIN, ROLE_USER
from pvsf.infrastructure.cache import MemoryCache
from pvsf.infrastructure.firebase._rest_client import FirestoreRESTClient
from pvsf.infrastructure.security.jwt import create_session_token
from pvsf.main import app
from tests.firestore_stub import FirestoreStub

get_settings.cache_clear()


@pytest.fixture
def firestore_stub() -> FirestoreStub:
    """Empty in-memory Firestore; tests seed it with stub.add()."""
    return FirestoreStub()


@pytest.fixture
async def firestore_client(firestore_stub: FirestoreStub) -> FirestoreRESTClient:
    """FirestoreRESTClient talking to the stub over httpx.MockTransport."""
    fs = firestore_stub.client()
    yield fs
    await fs._http.aclose()


@pytest.fixture
def suggestion_cache() -> MemoryCache:
    """Fresh member-suggestion cache per test."""
    return MemoryCache()


@pytest.fixture
async def client(
    firestore_client: FirestoreRESTClient, suggestion_cache: MemoryCache
) -> AsyncClient:
    """Async HTTP client against the FastAPI app (ASGI) with Firestore stubbed."""
    app.dependency_overrides[get_firestore] = lambda: firestore_client
    app.dependency_overrides[get_suggestion_cache] = lambda: suggestion_cache
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()


@pytest.fixture
async def unconfigured_client() -> AsyncClient:
    """Async HTTP client with no Firestore client configured."""
    app.dependency_overrides.clear()
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest.fixture
def admin_headers() -> dict[str, str]:
    """Bearer session for an admin."""
    token = create_session_token("admin-1", ROLE_ADMIN, name="Admin")
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def user_headers() -> dict[str, str]:
    """Bearer session for a regular user (document id user-1)."""
    token = create_session_token("user-1", ROLE_USER, name="Creator")
    return {"Authorization": f"Bearer {token}"}
