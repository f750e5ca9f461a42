"""DTOs for team members (read-model of teamMembers documents)."""

from dataclasses import dataclass


@dataclass(frozen=True)
class TeamMemberResult:
    """Team member read-model. Password fields are never loaded."""

    id: str
    name: str
    role: str
    mobile: str
