"""Tests for the public legacy listings: GET /api/videos, /api/videos/{id}, /api/users."""

from datetime import UTC, datetime

from httpx import AsyncClient

from tests.firestore_stub import FirestoreStub

USERS_CACHE = "public, s-maxage=300, stale-while-revalidate=600"
VIDEOS_CACHE = "public, s-maxage=60, stale-while-revalidate=300"


def _published(title: str, day: int, **extra: object) -> dict:
    return {
        "title": title,
        "status": "published",
        "scheduledAt": datetime(2024, 8, day, 12, tzinfo=UTC),
        **extra,
    }


class TestVideos:
    async def test_published_only_newest_first(
        self, client: AsyncClient, firestore_stub: FirestoreStub
    ) -> None:
        firestore_stub.add("videos", "a", _published("First", 1))
        firestore_stub.add("videos", "b", _published("Third", 3))
        firestore_stub.add("videos", "c", _published("Second", 2))
        firestore_stub.add("videos", "d", {"title": "Draft", "status": "draft", "scheduledAt": datetime(2024, 9, 1, tzinfo=UTC)})
        response = await client.get("/api/videos")
        assert response.status_code == 200
        assert [v["title"] for v in response.json()] == ["Third", "Second", "First"]
        assert response.headers["Cache-Control"] == VIDEOS_CACHE
        query = firestore_stub.bodies(":runQuery")[0]["structuredQuery"]
        assert query["where"]["fieldFilter"]["field"] == {"fieldPath": "status"}
        assert query["orderBy"][0]["field"] == {"fieldPath": "scheduledAt"}

    async def test_legacy_shape(self, client: AsyncClient, firestore_stub: FirestoreStub) -> None:
        firestore_stub.add(
            "videos",
            "a",
            _published(
                "Song",
                5,
                author={"name": "Alice", "xid": "alice"},
                members=[{"name": "Bob", "xid": "bob"}],
                viewCount=10,
            ),
        )
        video = (await client.get("/api/videos")).json()[0]
        assert video["creator"] == "Alice"
        assert video["tlink"] == "alice"
        assert video["member"] == "Bob"
        assert video["viewCount"] == "10"
        assert video["time"] == "2024-08-05T12:00:00.000Z"
        assert video["type2"] == "個人"
        assert video["status"] == "published"

    async def test_empty(self, client: AsyncClient) -> None:
        response = await client.get("/api/videos")
        assert response.status_code == 200
        assert response.json() == []

    async def test_failure_has_envelope_and_no_cache_header(
        self, client: AsyncClient, firestore_stub: FirestoreStub
    ) -> None:
        firestore_stub.fail("videos")
        response = await client.get("/api/videos")
        assert response.status_code == 500
        assert response.json() == {"error": "Internal server error"}
        assert "cache-control" not in response.headers

    async def test_get_one(self, client: AsyncClient, firestore_stub: FirestoreStub) -> None:
        firestore_stub.add("videos", "abc", _published("One", 4))
        response = await client.get("/api/videos/abc")
        assert response.status_code == 200
        assert response.json()["title"] == "One"
        assert response.headers["Cache-Control"] == VIDEOS_CACHE

    async def test_get_one_missing(self, client: AsyncClient) -> None:
        response = await client.get("/api/videos/missing")
        assert response.status_code == 404
        assert response.json() == {"error": "Video not found"}
        assert "cache-control" not in response.headers

    async def test_get_one_soft_deleted(
        self, client: AsyncClient, firestore_stub: FirestoreStub
    ) -> None:
        firestore_stub.add("videos", "gone", _published("Gone", 4, isDeleted=True))
        response = await client.get("/api/videos/gone")
        assert response.status_code == 404

    async def test_admin_can_read_soft_deleted(
        self, client: AsyncClient, firestore_stub: FirestoreStub, admin_headers: dict[str, str]
    ) -> None:
        firestore_stub.add("videos", "gone", _published("Gone", 4, isDeleted=True))
        response = await client.get(
            "/api/videos/gone", params={"includeDeleted": "true"}, headers=admin_headers
        )
        assert response.status_code == 200
        assert response.json()["title"] == "Gone"
        assert response.headers["Cache-Control"] == "private, no-store"

    async def test_include_deleted_needs_admin(
        self, client: AsyncClient, firestore_stub: FirestoreStub, user_headers: dict[str, str]
    ) -> None:
        firestore_stub.add("videos", "gone", _published("Gone", 4, isDeleted=True))
        for headers in ({}, user_headers):
            response = await client.get(
                "/api/videos/gone", params={"includeDeleted": "true"}, headers=headers
            )
            assert response.status_code == 404
            assert response.json() == {"error": "Video not found"}

    async def test_admin_without_flag_gets_404(
        self, client: AsyncClient, firestore_stub: FirestoreStub, admin_headers: dict[str, str]
    ) -> None:
        firestore_stub.add("videos", "gone", _published("Gone", 4, isDeleted=True))
        for params in ({}, {"includeDeleted": "1"}):
            response = await client.get("/api/videos/gone", params=params, headers=admin_headers)
            assert response.status_code == 404

    async def test_admin_flag_on_live_video_keeps_public_cache(
        self, client: AsyncClient, firestore_stub: FirestoreStub, admin_headers: dict[str, str]
    ) -> None:
        firestore_stub.add("videos", "abc", _published("One", 4))
        response = await client.get(
            "/api/videos/abc", params={"includeDeleted": "true"}, headers=admin_headers
        )
        assert response.status_code == 200
        assert response.headers["Cache-Control"] == VIDEOS_CACHE

    async def test_non_finite_numbers_in_listing(
        self, client: AsyncClient, firestore_stub: FirestoreStub
    ) -> None:
        firestore_stub.add(
            "videos",
            "a",
            _published("Odd", 6, movieYear=float("nan"), viewCount=float("inf"), videoScore=float("-inf")),
        )
        response = await client.get("/api/videos")
        assert response.status_code == 200
        video = response.json()[0]
        assert video["movieyear"] == 0
        assert video["viewCount"] == "0"
        assert video["videoScore"] is None


class TestUsers:
    async def test_linked_users_by_id(
        self, client: AsyncClient, firestore_stub: FirestoreStub
    ) -> None:
        firestore_stub.add("users", "u2", {"name": "Bea", "xLink": {"status": "linked", "xid": "bea"}})
        firestore_stub.add("users", "u1", {"name": "Al", "xLink": {"status": "linked", "xid": "al"}})
        firestore_stub.add("users", "u3", {"name": "Cy", "xLink": {"status": "pending", "xid": "cy"}})
        firestore_stub.add("users", "u4", {"name": "Di"})
        response = await client.get("/api/users")
        assert response.status_code == 200
        assert [u["username"] for u in response.json()] == ["al", "bea"]
        assert response.headers["Cache-Control"] == USERS_CACHE
        where = firestore_stub.bodies(":runQuery")[0]["structuredQuery"]["where"]
        assert where["fieldFilter"]["field"] == {"fieldPath": "xLink.status"}
        assert where["fieldFilter"]["value"] == {"stringValue": "linked"}

    async def test_legacy_shape(self, client: AsyncClient, firestore_stub: FirestoreStub) -> None:
        firestore_stub.add(
            "users",
            "u1",
            {
                "name": "Al",
                "iconUrl": "https://img/al.png",
                "xLink": {"status": "linked", "xid": "al"},
                "videos": {"individual": ["v1"]},
                "creatorScore": 7,
            },
        )
        assert (await client.get("/api/users")).json() == [
            {
                "username": "al",
                "icon": "https://img/al.png",
                "creatorName": "Al",
                "ychlink": "",
                "iylink": ["v1"],
                "cylink": [],
                "mylink": [],
                "creatorScore": 7,
            }
        ]

    async def test_failure(self, client: AsyncClient, firestore_stub: FirestoreStub) -> None:
        firestore_stub.fail("users")
        response = await client.get("/api/users")
        assert response.status_code == 500
        assert response.json() == {"error": "Internal server error"}
        assert "cache-control" not in response.headers

    async def test_unconfigured_store(self, unconfigured_client: AsyncClient) -> None:
        response = await unconfigured_client.get("/api/users")
        assert response.status_code == 500
        assert response.json() == {"error": "Internal server error"}
