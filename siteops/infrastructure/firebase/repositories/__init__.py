"""Firestore repository implementations."""

from siteops.infrastructure.firebase.repositories.team_member_repo_firestore import (
    FirestoreTeamMemberRepository,
)

__all__ = [
    "FirestoreTeamMemberRepository",
]
