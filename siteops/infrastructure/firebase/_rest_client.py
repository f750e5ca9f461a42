"""Thin Firestore REST API client (no firebase-admin).

Uses google-auth for service account tokens and Firestore REST v1.
All HTTP calls use httpx.AsyncClient so they do not block the event loop.
Only the operations siteops needs are implemented: document get, paged
keys-only collection listing, count aggregation, and atomic commit.
"""

from __future__ import annotations

import asyncio
import json
from collections.abc import AsyncIterator, Sequence
from typing import Any

import httpx

from siteops.infrastructure.firebase._rest_encoding import decode_document, resource_id

_FIRESTORE_SCOPE = "https://www.googleapis.com/auth/datastore"
_BASE = "https://firestore.googleapis.com/v1"
_COUNT_ALIAS = "total"


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
    params: dict[str, Any] | None = None,
    access_token: str | None = None,
    allow_not_found: bool = True,
) -> Any:
    """Perform async HTTP request to Firestore REST API.

    404 returns None when allow_not_found, otherwise it raises like any other
    non-2xx response (httpx.HTTPStatusError).
    """
    headers = {"Content-Type": "application/json"}
    if access_token:
        headers["Authorization"] = f"Bearer {access_token}"
    if method == "GET":
        resp = await client.get(url, headers=headers, params=params)
    elif method == "POST":
        resp = await client.post(url, headers=headers, params=params, json=body)
    else:
        raise ValueError(f"Unsupported method: {method!r}")
    if resp.status_code == 404 and allow_not_found:
        return None
    if resp.status_code not in (200, 204):
        resp.raise_for_status()
    raw = resp.content
    return json.loads(raw.decode()) if raw else {}


class DocumentSnapshot:
    """Snapshot of a document (id + data)."""

    def __init__(self, id_: str, data: dict):
        self.id = id_
        self._data = data

    def to_dict(self) -> dict:
        return self._data


class DocumentReference:
    """Reference to a single document; matches firestore API style."""

    def __init__(self, client: "FirestoreRESTClient", path: str):
        self._client = client
        self._path = path

    @property
    def id(self) -> str:
        return self._path.split("/")[-1]

    async def get(self) -> DocumentSnapshot | None:
        """Fetch the document; returns None if not found."""
        out = await _request_async(
            self._client._http,
            f"{_BASE}/{self._path}",
            access_token=await self._client.get_token(),
        )
        if not out:
            return None
        return DocumentSnapshot(self.id, decode_document(out))


class CollectionReference:
    """Reference to a collection; matches firestore API style."""

    def __init__(self, client: "FirestoreRESTClient", path: str):
        self._client = client
        self._path = path.rstrip("/")

    @property
    def id(self) -> str:
        return self._path.split("/")[-1]

    def document(self, document_id: str) -> DocumentReference:
        return DocumentReference(self._client, f"{self._path}/{document_id}")

    async def list_ids(self, page_size: int = 300) -> AsyncIterator[str]:
        """Yield every document id in the collection without reading contents.

        Runs a keys-only (__name__ projection) query ordered by name, one page
        at a time. Later pages are read at the readTime of the first page, so
        every page comes from the same snapshot.
        """
        parent = self._path.rsplit("/", 1)[0]
        url = f"{_BASE}/{parent}:runQuery"
        read_time: str | None = None
        last_name: str | None = None
        while True:
            query: dict[str, Any] = {
                "from": [{"collectionId": self.id}],
                "select": {"fields": [{"fieldPath": "__name__"}]},
                "orderBy": [{"field": {"fieldPath": "__name__"}, "direction": "ASCENDING"}],
                "limit": page_size,
            }
            if last_name is not None:
                query["startAt"] = {"values": [{"referenceValue": last_name}], "before": False}
            body: dict[str, Any] = {"structuredQuery": query}
            if read_time is not None:
                body["readTime"] = read_time
            out = await _request_async(
                self._client._http,
                url,
                method="POST",
                body=body,
                access_token=await self._client.get_token(),
            )
            items = out if isinstance(out, list) else ([out] if out else [])
            docs: list[dict] = []
            for item in items:
                if read_time is None and item.get("readTime"):
                    read_time = item["readTime"]
                doc = item.get("document")
                if doc:
                    docs.append(doc)
            for doc in docs:
                yield resource_id(doc)
            if len(docs) < page_size:
                return
            last_name = docs[-1]["name"]

    async def count(self) -> int:
        """Return the number of documents via a server-side count aggregation."""
        parent = self._path.rsplit("/", 1)[0]
        body = {
            "structuredAggregationQuery": {
                "structuredQuery": {"from": [{"collectionId": self.id}]},
                "aggregations": [{"alias": _COUNT_ALIAS, "count": {}}],
            }
        }
        resp = await _request_async(
            self._client._http,
            f"{_BASE}/{parent}:runAggregationQuery",
            method="POST",
            body=body,
            allow_not_found=False,
            access_token=await self._client.get_token(),
        )
        items = resp if isinstance(resp, list) else ([resp] if resp else [])
        for item in items:
            fields = item.get("result", {}).get("aggregateFields", {})
            if _COUNT_ALIAS in fields:
                return int(fields[_COUNT_ALIAS].get("integerValue", 0))
        return 0


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
        self._database = f"projects/{project_id}/databases/(default)"
        self._prefix = f"{self._database}/documents"
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

    def document_name(self, collection_id: str, document_id: str) -> str:
        """Full resource name used in commit writes."""
        return f"{self._prefix}/{collection_id}/{document_id}"

    async def commit_deletes(self, document_names: Sequence[str]) -> dict:
        """Delete the named documents in a single atomic commit.

        Either every delete is applied or none is. Deleting a missing
        document is not an error.
        """
        body = {"writes": [{"delete": name} for name in document_names]}
        out = await _request_async(
            self._http,
            f"{_BASE}/{self._prefix}:commit",
            method="POST",
            body=body,
            allow_not_found=False,
            access_token=await self.get_token(),
        )
        return out or {}
