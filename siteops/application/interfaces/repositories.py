"""Store and repository interfaces (ports) for the application layer.

Protocols define contracts that infrastructure implementations must fulfill (DIP).
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from siteops.application.dtos.team_member import TeamMemberResult


# Document store interface (used by the collection purge)
class IDocumentStore(Protocol):
    """Protocol for the minimal document-store surface the purge needs."""

    async def list_document_ids(self, collection: str) -> list[str]:
        """Return the ids of every document currently in the collection.

        Raises CollectionReadError when the listing fails.
        """

    async def count_documents(self, collection: str) -> int:
        """Return the number of documents in the collection without reading them."""

    async def commit_deletes(
        self, collection: str, document_ids: Sequence[str]
    ) -> None:
        """Delete the given documents in one atomic batch (at most 500).

        Raises BatchCommitError when the commit is rejected; nothing in the
        batch is deleted in that case.
        """


# Team member repository interface
class ITeamMemberRepository(Protocol):
    """Protocol for reading team members (role checks)."""

    async def get_by_id(self, member_id: str) -> TeamMemberResult | None:
        """Return the team member, or None if no such document exists."""
