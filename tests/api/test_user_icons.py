"""Tests for GET /api/user/icons."""

from datetime import UTC, datetime, timedelta

import pytest
from httpx import AsyncClient

from pvsf.api.endpoints.user import distinct_icons
from tests.firestore_stub import FirestoreStub

_BASE = datetime(2024, 7, 1, tzinfo=UTC)


def _video(xid_lower: str, icon: str | None, minutes: int) -> dict:
    doc = {"authorXidLower": xid_lower, "createdAt": _BASE + timedelta(minutes=minutes)}
    if icon is not None:
        doc["authorIconUrl"] = icon
    return doc


class TestDistinctIcons:
    def test_first_occurrence_order(self) -> None:
        videos = [
            {"authorIconUrl": "b"},
            {"authorIconUrl": "a"},
            {"authorIconUrl": "b"},
            {"authorIconUrl": ""},
            {},
            {"authorIconUrl": None},
            {"authorIconUrl": "c"},
        ]
        assert distinct_icons(videos) == ["b", "a", "c"]

    def test_empty(self) -> None:
        assert distinct_icons([]) == []


class TestUserIcons:
    @pytest.mark.parametrize("query", ["", "?xid=", "?xid=a&xid=b"])
    async def test_xid_required(
        self, client: AsyncClient, firestore_stub: FirestoreStub, query: str
    ) -> None:
        response = await client.get(f"/api/user/icons{query}")
        assert response.status_code == 400
        assert response.json() == {"error": "xid query parameter is required"}
        assert firestore_stub.requests == []

    async def test_missing_xid_is_rejected_before_store_lookup(
        self, unconfigured_client: AsyncClient
    ) -> None:
        response = await unconfigured_client.get("/api/user/icons")
        assert response.status_code == 400
        assert response.json() == {"error": "xid query parameter is required"}

    async def test_unknown_author_has_no_icons(self, client: AsyncClient) -> None:
        response = await client.get("/api/user/icons", params={"xid": "nobody"})
        assert response.status_code == 200
        assert response.json() == {"icons": []}

    async def test_distinct_icons_newest_first(
        self, client: AsyncClient, firestore_stub: FirestoreStub
    ) -> None:
        firestore_stub.add("videos", "v1", _video("alice", "https://img/old.png", 1))
        firestore_stub.add("videos", "v2", _video("alice", "https://img/new.png", 3))
        firestore_stub.add("videos", "v3", _video("alice", "https://img/old.png", 2))
        firestore_stub.add("videos", "v4", _video("alice", None, 4))
        firestore_stub.add("videos", "v5", _video("bob", "https://img/bob.png", 5))
        response = await client.get("/api/user/icons", params={"xid": "alice"})
        assert response.status_code == 200
        assert response.json() == {"icons": ["https://img/new.png", "https://img/old.png"]}

    async def test_xid_is_case_insensitive(
        self, client: AsyncClient, firestore_stub: FirestoreStub
    ) -> None:
        firestore_stub.add("videos", "v1", _video("alice_x", "https://img/a.png", 1))
        response = await client.get("/api/user/icons", params={"xid": "Alice_X"})
        assert response.json() == {"icons": ["https://img/a.png"]}
        where = firestore_stub.bodies(":runQuery")[0]["structuredQuery"]["where"]
        assert where["fieldFilter"]["value"] == {"stringValue": "alice_x"}

    async def test_looks_at_fifty_most_recent(
        self, client: AsyncClient, firestore_stub: FirestoreStub
    ) -> None:
        """Only the 50 newest videos are consulted; older icons are not returned."""
        firestore_stub.add("videos", "oldest", _video("carol", "https://img/ancient.png", 0))
        for i in range(1, 51):
            firestore_stub.add("videos", f"v{i}", _video("carol", "https://img/current.png", i))
        response = await client.get("/api/user/icons", params={"xid": "carol"})
        assert response.json() == {"icons": ["https://img/current.png"]}
        query = firestore_stub.bodies(":runQuery")[0]["structuredQuery"]
        assert query["limit"] == 50
        assert query["orderBy"] == [
            {"field": {"fieldPath": "createdAt"}, "direction": "DESCENDING"}
        ]

    async def test_store_failure_is_500(
        self, client: AsyncClient, firestore_stub: FirestoreStub
    ) -> None:
        firestore_stub.fail("videos")
        response = await client.get("/api/user/icons", params={"xid": "alice"})
        assert response.status_code == 500
        assert response.json() == {"error": "Internal server error"}
