"""Pytest configuration and fixtures for siteops.

SECRET_KEY is set before siteops.main is imported so settings validate.
API tests replace the Firestore-backed dependencies with in-memory fakes via
app.dependency_overrides; no test talks to real Firestore.
"""

import os

os.environ.setdefault("SECRET_KEY", "test-secret-key-not-for-production")

from collections.abc import Sequence  # noqa: E402

import pytest  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402

from siteops.api.v1.dependencies import (  # noqa: E402
    get_document_store,
    get_team_member_repository,
)
from siteops.application.dtos.team_member import TeamMemberResult  # noqa: E402
from siteops.core.limiter import limiter  # noqa: E402
from siteops.domain.exceptions import BatchCommitError, CollectionReadError  # noqa: E402
from siteops.infrastructure.security.jwt import create_access_token  # noqa: E402
from siteops.main import app  # noqa: E402


class FakeDocumentStore:
    """In-memory IDocumentStore that records every call.

    docs maps collection -> list of ids. fail_list names collections whose
    listing raises; fail_commit maps collection -> 1-based commit number that
    raises (earlier commits succeed).
    """

    def __init__(
        self,
        docs: dict[str, list[str]] | None = None,
        fail_list: set[str] | None = None,
        fail_commit: dict[str, int] | None = None,
    ) -> None:
        self.docs = {k: list(v) for k, v in (docs or {}).items()}
        self.fail_list = fail_list or set()
        self.fail_commit = fail_commit or {}
        self.listed: list[str] = []
        self.commits: list[tuple[str, int]] = []
        self._commit_counts: dict[str, int] = {}

    async def list_document_ids(self, collection: str) -> list[str]:
        self.listed.append(collection)
        if collection in self.fail_list:
            raise CollectionReadError(collection, "HTTP 503")
        return list(self.docs.get(collection, []))

    async def count_documents(self, collection: str) -> int:
        if collection in self.fail_list:
            raise CollectionReadError(collection, "HTTP 503")
        return len(self.docs.get(collection, []))

    async def commit_deletes(self, collection: str, document_ids: Sequence[str]) -> None:
        n = self._commit_counts.get(collection, 0) + 1
        self._commit_counts[collection] = n
        if self.fail_commit.get(collection) == n:
            raise BatchCommitError(collection, len(document_ids), "HTTP 500")
        remaining = set(document_ids)
        self.docs[collection] = [d for d in self.docs.get(collection, []) if d not in remaining]
        self.commits.append((collection, len(document_ids)))


class FakeTeamMemberRepository:
    """In-memory ITeamMemberRepository."""

    def __init__(self, members: list[TeamMemberResult] | None = None) -> None:
        self._members = {m.id: m for m in (members or [])}

    async def get_by_id(self, member_id: str) -> TeamMemberResult | None:
        return self._members.get(member_id)


def make_ids(prefix: str, n: int) -> list[str]:
    return [f"{prefix}-{i}" for i in range(n)]


ADMIN = TeamMemberResult(id="admin", name="Admin", role="Admin", mobile="9000000000")
SUPERVISOR = TeamMemberResult(id="sup-1", name="Ravi", role="Supervisor", mobile="9000000001")


@pytest.fixture(autouse=True)
def _reset_rate_limits():
    """Rate limits are per client address; every test starts with a clean window."""
    limiter.reset()
    yield


@pytest.fixture
def fake_store() -> FakeDocumentStore:
    return FakeDocumentStore()


@pytest.fixture
def team_members() -> FakeTeamMemberRepository:
    return FakeTeamMemberRepository([ADMIN, SUPERVISOR])


@pytest.fixture
async def client(fake_store: FakeDocumentStore, team_members: FakeTeamMemberRepository) -> AsyncClient:
    """Async HTTP client against the FastAPI app with Firestore replaced by fakes."""
    app.dependency_overrides[get_document_store] = lambda: fake_store
    app.dependency_overrides[get_team_member_repository] = lambda: team_members
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()


@pytest.fixture
def admin_headers() -> dict[str, str]:
    return {"Authorization": f"Bearer {create_access_token(ADMIN.id)}"}


@pytest.fixture
def supervisor_headers() -> dict[str, str]:
    return {"Authorization": f"Bearer {create_access_token(SUPERVISOR.id)}"}
