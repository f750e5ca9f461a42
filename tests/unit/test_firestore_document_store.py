"""Unit tests for the Firestore REST client and FirestoreDocumentStore (httpx.MockTransport)."""

import json

import httpx
import pytest

from siteops.domain.exceptions import (
    BatchCommitError,
    CollectionReadError,
    ValidationException,
)
from siteops.infrastructure.firebase._rest_client import FirestoreRESTClient
from siteops.infrastructure.firebase.document_store import FirestoreDocumentStore
from siteops.infrastructure.firebase.repositories import FirestoreTeamMemberRepository

_PREFIX = "projects/demo/databases/(default)/documents"


class _StaticCredentials:
    """Stands in for service-account credentials that already hold a token."""

    valid = True
    token = "test-token"


def _doc(collection: str, doc_id: str, fields: dict | None = None) -> dict:
    return {"name": f"{_PREFIX}/{collection}/{doc_id}", "fields": fields or {}}


def _client(handler) -> FirestoreRESTClient:
    http = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    return FirestoreRESTClient("demo", _StaticCredentials(), http_client=http)


async def test_list_document_ids_pages_by_name_at_one_read_time() -> None:
    bodies: list[dict] = []
    ids = ["a", "b", "c"]

    def handler(request: httpx.Request) -> httpx.Response:
        assert request.method == "POST"
        assert request.headers["Authorization"] == "Bearer test-token"
        assert request.url.path.endswith("/documents:runQuery")
        body = json.loads(request.content)
        bodies.append(body)
        start = body["structuredQuery"].get("startAt")
        after = start["values"][0]["referenceValue"].rsplit("/", 1)[-1] if start else None
        remaining = [i for i in ids if after is None or i > after][:1]
        read_time = f"2026-01-01T00:00:0{len(bodies)}Z"
        if not remaining:
            return httpx.Response(200, json=[{"readTime": read_time}])
        return httpx.Response(
            200,
            json=[{"document": _doc("sites", i), "readTime": read_time} for i in remaining],
        )

    store = FirestoreDocumentStore(_client(handler), page_size=1)

    assert await store.list_document_ids("sites") == ["a", "b", "c"]
    assert len(bodies) == 4
    assert "readTime" not in bodies[0]
    assert [b["readTime"] for b in bodies[1:]] == ["2026-01-01T00:00:01Z"] * 3
    assert bodies[1]["structuredQuery"]["startAt"] == {
        "values": [{"referenceValue": f"{_PREFIX}/sites/a"}],
        "before": False,
    }


async def test_list_document_ids_requests_names_only() -> None:
    queries: list[dict] = []

    def handler(request: httpx.Request) -> httpx.Response:
        queries.append(json.loads(request.content)["structuredQuery"])
        photo = {"stringValue": "data:image/jpeg;base64," + "A" * 200_000}
        return httpx.Response(
            200,
            json=[{"document": _doc("sites", "s1", {"photos": photo}), "readTime": "t"}],
        )

    store = FirestoreDocumentStore(_client(handler))

    assert await store.list_document_ids("sites") == ["s1"]
    assert queries[0]["select"] == {"fields": [{"fieldPath": "__name__"}]}
    assert queries[0]["from"] == [{"collectionId": "sites"}]
    assert queries[0]["limit"] == 300


async def test_list_document_ids_of_missing_collection_is_empty() -> None:
    store = FirestoreDocumentStore(
        _client(lambda request: httpx.Response(200, json=[{"readTime": "t"}]))
    )
    assert await store.list_document_ids("jobCards") == []


async def test_list_document_ids_http_error_raises_collection_read_error() -> None:
    store = FirestoreDocumentStore(_client(lambda request: httpx.Response(503)))

    with pytest.raises(CollectionReadError) as exc_info:
        await store.list_document_ids("inventory")

    assert exc_info.value.error_code == "COLLECTION_READ_ERROR"
    assert exc_info.value.details == {"collection": "inventory"}
    assert "HTTP 503" in exc_info.value.message


async def test_commit_deletes_sends_one_atomic_commit() -> None:
    bodies: list[dict] = []

    def handler(request: httpx.Request) -> httpx.Response:
        assert request.method == "POST"
        assert request.url.path.endswith("/documents:commit")
        bodies.append(json.loads(request.content))
        return httpx.Response(200, json={"commitTime": "2026-01-01T00:00:00Z"})

    store = FirestoreDocumentStore(_client(handler))
    await store.commit_deletes("transporters", ["t1", "t2"])

    assert bodies == [
        {
            "writes": [
                {"delete": f"{_PREFIX}/transporters/t1"},
                {"delete": f"{_PREFIX}/transporters/t2"},
            ]
        }
    ]


async def test_commit_deletes_failure_raises_batch_commit_error() -> None:
    store = FirestoreDocumentStore(_client(lambda request: httpx.Response(500)))

    with pytest.raises(BatchCommitError) as exc_info:
        await store.commit_deletes("sites", ["a", "b", "c"])

    assert exc_info.value.details == {"collection": "sites", "batch_size": 3}


async def test_commit_deletes_404_is_an_error_not_a_silent_success() -> None:
    store = FirestoreDocumentStore(_client(lambda request: httpx.Response(404)))

    with pytest.raises(BatchCommitError):
        await store.commit_deletes("sites", ["a"])


async def test_commit_deletes_rejects_more_than_500_without_calling_firestore() -> None:
    calls: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        calls.append(request)
        return httpx.Response(200, json={})

    store = FirestoreDocumentStore(_client(handler))

    with pytest.raises(ValidationException):
        await store.commit_deletes("sites", [str(i) for i in range(501)])
    assert calls == []


async def test_count_documents_reads_aggregation_result() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        assert request.url.path.endswith("/documents:runAggregationQuery")
        body = json.loads(request.content)
        query = body["structuredAggregationQuery"]
        assert query["structuredQuery"]["from"] == [{"collectionId": "paymentRequests"}]
        return httpx.Response(
            200,
            json=[{"result": {"aggregateFields": {"total": {"integerValue": "42"}}}}],
        )

    store = FirestoreDocumentStore(_client(handler))
    assert await store.count_documents("paymentRequests") == 42


async def test_team_member_repository_decodes_document() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        if request.url.path.endswith("/teamMembers/m1"):
            return httpx.Response(
                200,
                json=_doc(
                    "teamMembers",
                    "m1",
                    {
                        "name": {"stringValue": "Asha"},
                        "role": {"stringValue": "Admin"},
                        "mobile": {"stringValue": "9876543210"},
                        "passwordChanged": {"booleanValue": True},
                    },
                ),
            )
        return httpx.Response(404)

    repo = FirestoreTeamMemberRepository(_client(handler))

    member = await repo.get_by_id("m1")
    assert member is not None
    assert (member.id, member.name, member.role, member.mobile) == (
        "m1",
        "Asha",
        "Admin",
        "9876543210",
    )
    assert await repo.get_by_id("missing") is None
