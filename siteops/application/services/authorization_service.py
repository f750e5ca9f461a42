"""Authorization service: role checks for administrative operations."""

from __future__ import annotations

from collections.abc import Iterable

from siteops.application.dtos.team_member import TeamMemberResult
from siteops.application.interfaces.repositories import ITeamMemberRepository
from siteops.domain.exceptions import AuthorizationException


class AuthorizationService:
    """Checks a team member's role against the roles allowed for an action."""

    def __init__(
        self,
        team_members: ITeamMemberRepository,
        allowed_roles: Iterable[str],
    ) -> None:
        self.team_members = team_members
        self.allowed_roles = frozenset(allowed_roles)

    async def check_role(self, member_id: str) -> TeamMemberResult | None:
        """Return the member if they exist and hold an allowed role, else None."""
        member = await self.team_members.get_by_id(member_id)
        if member is None or member.role not in self.allowed_roles:
            return None
        return member

    async def require_role(
        self, member_id: str, resource: str, action: str
    ) -> TeamMemberResult:
        """Return the member or raise AuthorizationException."""
        member = await self.check_role(member_id)
        if member is None:
            raise AuthorizationException(resource=resource, action=action)
        return member
