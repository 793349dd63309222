"""Thin Firestore REST API client (no firebase-admin).

Uses google-auth for service account tokens and Firestore REST v1.
Keeps the deployment bundle small (avoids grpcio / firebase-admin).
All HTTP calls use httpx.AsyncClient so they do not block the event loop.

Read-only surface: document get, structured queries (one ==/!= field filter,
field projection, one order, limit) and count() aggregation queries.
"""

from __future__ import annotations

import asyncio
import json
from collections.abc import AsyncIterator
from typing import Any

import httpx

from pvsf.infrastructure.exceptions import FirestoreQueryError
from pvsf.infrastructure.firebase._rest_encoding import decode_fields, encode_filter_value

_FIRESTORE_SCOPE = "https://www.googleapis.com/auth/datastore"
_BASE = "https://firestore.googleapis.com/v1"

ASCENDING = "ASCENDING"
DESCENDING = "DESCENDING"

_DIRECTION_MAP: dict[str, str] = {
    "asc": ASCENDING,
    "ascending": ASCENDING,
    "desc": DESCENDING,
    "descending": DESCENDING,
}


def _get_credentials(key_dict: dict):
    """Return google.oauth2.service_account.Credentials for Firestore."""
    from google.oauth2 import service_account

    return service_account.Credentials.from_service_account_info(
        key_dict, scopes=[_FIRESTORE_SCOPE]
    )


def _get_access_token(credentials) -> str:
    from google.auth.transport.requests import Request

    if not credentials.valid:
        credentials.refresh(Request())
    return credentials.token


async def _request_async(
    client: httpx.AsyncClient,
    url: str,
    method: str = "GET",
    body: dict | None = None,
    access_token: str | None = None,
) -> Any:
    """Perform async HTTP request to Firestore REST API. 404 returns None."""
    headers = {"Content-Type": "application/json"}
    if access_token:
        headers["Authorization"] = f"Bearer {access_token}"
    if method == "GET":
        resp = await client.get(url, headers=headers)
    elif method == "POST":
        resp = await client.post(url, headers=headers, json=body)
    else:
        raise ValueError(f"Unsupported method: {method!r}")
    if resp.status_code == 404:
        return None
    if resp.status_code != 200:
        raise FirestoreQueryError(resp.status_code, resp.text[:500])
    raw = resp.content
    return json.loads(raw.decode()) if raw else {}


def _doc_id(name: str) -> str:
    return name.split("/")[-1] if name else ""


class DocumentSnapshot:
    """Snapshot of a document (id + data)."""

    def __init__(self, id_: str, data: dict):
        self.id = id_
        self._data = data

    def to_dict(self) -> dict:
        return self._data


class DocumentReference:
    """Reference to a single document; matches firestore API style."""

    def __init__(self, client: FirestoreRESTClient, path: str):
        self._client = client
        self._path = path

    @property
    def id(self) -> str:
        return _doc_id(self._path)

    async def get(self) -> DocumentSnapshot | None:
        """Fetch the document; returns None if not found."""
        url = f"{_BASE}/{self._path}"
        out = await _request_async(
            self._client._http, url, access_token=await self._client.get_token()
        )
        if not out:
            return None
        return DocumentSnapshot(self.id, decode_fields(out.get("fields")))


_OP_MAP: dict[str, str] = {
    "==": "EQUAL",
    "!=": "NOT_EQUAL",
}


class Query:
    """Fluent query builder for a collection; runs via runQuery on the server."""

    def __init__(
        self,
        client: FirestoreRESTClient,
        parent: str,
        collection_id: str,
    ):
        self._client = client
        self._parent = parent
        self._collection_id = collection_id
        self._where: tuple[str, str, Any] | None = None
        self._order_by_field: str | None = None
        self._order_direction: str = ASCENDING
        self._limit: int | None = None
        self._select: tuple[str, ...] | None = None

    def where(self, field: str, op: str, value: Any) -> Query:
        if op not in _OP_MAP:
            raise ValueError(f"Unsupported filter operator: {op!r}")
        self._where = (field, _OP_MAP[op], value)
        return self

    def order_by(self, field: str, direction: str = ASCENDING) -> Query:
        self._order_by_field = field
        self._order_direction = _DIRECTION_MAP.get(direction.lower(), direction)
        return self

    def limit(self, n: int) -> Query:
        self._limit = n
        return self

    def select(self, *fields: str) -> Query:
        """Only return these top-level fields of each document."""
        self._select = fields
        return self

    def structured_query(self) -> dict[str, Any]:
        """Return the StructuredQuery body for the REST API."""
        structured: dict[str, Any] = {
            "from": [{"collectionId": self._collection_id}],
        }
        if self._select:
            structured["select"] = {
                "fields": [{"fieldPath": field} for field in self._select]
            }
        if self._where is not None:
            field, op, value = self._where
            structured["where"] = {
                "fieldFilter": {
                    "field": {"fieldPath": field},
                    "op": op,
                    "value": encode_filter_value(value),
                }
            }
        if self._order_by_field is not None:
            structured["orderBy"] = [
                {
                    "field": {"fieldPath": self._order_by_field},
                    "direction": self._order_direction,
                }
            ]
        if self._limit:
            structured["limit"] = self._limit
        return structured

    async def stream(self) -> AsyncIterator[DocumentSnapshot]:
        """Execute the query and yield document snapshots in server order."""
        url = f"{_BASE}/{self._parent}:runQuery"
        resp = await _request_async(
            self._client._http,
            url,
            method="POST",
            body={"structuredQuery": self.structured_query()},
            access_token=await self._client.get_token(),
        )
        items = resp if isinstance(resp, list) else ([resp] if resp else [])
        for item in items:
            if "document" not in item:
                continue
            doc = item["document"]
            yield DocumentSnapshot(_doc_id(doc.get("name", "")), decode_fields(doc.get("fields")))

    async def get(self) -> list[DocumentSnapshot]:
        """Execute the query and return all snapshots."""
        return [snapshot async for snapshot in self.stream()]

    def count(self) -> AggregateQuery:
        """Server-side count over this query (documents are not downloaded)."""
        return AggregateQuery(self)


class AggregateQuery:
    """count() aggregation; runs via runAggregationQuery."""

    _ALIAS = "count"

    def __init__(self, query: Query):
        self._query = query

    async def get(self) -> int:
        """Return the number of documents matching the underlying query."""
        query = self._query
        url = f"{_BASE}/{query._parent}:runAggregationQuery"
        body = {
            "structuredAggregationQuery": {
                "structuredQuery": query.structured_query(),
                "aggregations": [{"alias": self._ALIAS, "count": {}}],
            }
        }
        resp = await _request_async(
            query._client._http,
            url,
            method="POST",
            body=body,
            access_token=await query._client.get_token(),
        )
        items = resp if isinstance(resp, list) else ([resp] if resp else [])
        for item in items:
            fields = item.get("result", {}).get("aggregateFields", {})
            if self._ALIAS in fields:
                return int(fields[self._ALIAS].get("integerValue", 0))
        return 0


class CollectionReference:
    """Reference to a collection; matches firestore API style."""

    def __init__(self, client: FirestoreRESTClient, path: str):
        self._client = client
        self._path = path.rstrip("/")

    @property
    def id(self) -> str:
        return _doc_id(self._path)

    def document(self, document_id: str) -> DocumentReference:
        return DocumentReference(self._client, f"{self._path}/{document_id}")

    def _query(self) -> Query:
        parent = self._path.rsplit("/", 1)[0]
        return Query(self._client, parent, self.id)

    def where(self, field: str, op: str, value: Any) -> Query:
        """Start a query with a filter. Chain .order_by(), .limit(), then .stream()."""
        return self._query().where(field, op, value)

    def order_by(self, field: str, direction: str = ASCENDING) -> Query:
        return self._query().order_by(field, direction)

    def count(self) -> AggregateQuery:
        return self._query().count()


class FirestoreRESTClient:
    """Lightweight Firestore client using REST API (no firebase-admin)."""

    def __init__(
        self,
        project_id: str,
        credentials,
        *,
        http_client: httpx.AsyncClient | None = None,
        timeout: float = 30.0,
    ) -> None:
        self._project_id = project_id
        self._credentials = credentials
        self._prefix = f"projects/{project_id}/databases/(default)/documents"
        self._http = http_client if http_client is not None else httpx.AsyncClient(timeout=timeout)
        self._owns_http = http_client is None

    @property
    def project_id(self) -> str:
        return self._project_id

    async def aclose(self) -> None:
        """Close the HTTP client only if we created it (do not close injected client)."""
        if self._owns_http:
            await self._http.aclose()

    async def get_token(self) -> str:
        """Return a valid access token; refreshes in thread pool to avoid blocking."""
        return await asyncio.to_thread(_get_access_token, self._credentials)

    def collection(self, collection_id: str) -> CollectionReference:
        return CollectionReference(self, f"{self._prefix}/{collection_id}")
