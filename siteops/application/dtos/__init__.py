"""Application DTOs (plain dataclasses, no infrastructure types)."""

from siteops.application.dtos.purge import CollectionPurgeOutcome, PurgeReport
from siteops.application.dtos.team_member import TeamMemberResult

__all__ = [
    "CollectionPurgeOutcome",
    "PurgeReport",
    "TeamMemberResult",
]
