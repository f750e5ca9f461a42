"""Application interfaces (ports): store and repository protocols.

Define contracts for infrastructure implementations (DIP).
No runtime imports from siteops.infrastructure.
"""

from siteops.application.interfaces.repositories import (
    IDocumentStore,
    ITeamMemberRepository,
)

__all__ = [
    "IDocumentStore",
    "ITeamMemberRepository",
]
