"""Firestore-backed team member repository (implements ITeamMemberRepository)."""

from __future__ import annotations

from siteops.application.dtos.team_member import TeamMemberResult
from siteops.domain.collections import COLLECTION_TEAM_MEMBERS
from siteops.infrastructure.firebase._rest_client import FirestoreRESTClient


class FirestoreTeamMemberRepository:
    """Reads team members from the teamMembers collection."""

    def __init__(self, client: FirestoreRESTClient) -> None:
        self._client = client
        self._coll = client.collection(COLLECTION_TEAM_MEMBERS)

    def _to_result(self, doc_id: str, data: dict) -> TeamMemberResult:
        return TeamMemberResult(
            id=doc_id,
            name=data.get("name", ""),
            role=data.get("role", ""),
            mobile=data.get("mobile", ""),
        )

    async def get_by_id(self, member_id: str) -> TeamMemberResult | None:
        """Return team member by document ID."""
        doc = await self._coll.document(member_id).get()
        if not doc:
            return None
        return self._to_result(doc.id, doc.to_dict())
