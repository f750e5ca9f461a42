"""Print a signed access token for a team member (for the admin API).

Usage:
    python -m scripts.issue_admin_token <team_member_id> [minutes]
The API still checks the member's role in teamMembers on every request.
"""

import sys
from datetime import timedelta

from siteops.infrastructure.security.jwt import create_access_token


def main() -> None:
    if len(sys.argv) < 2:
        print(
            "Usage: python -m scripts.issue_admin_token <team_member_id> [minutes]",
            file=sys.stderr,
        )
        sys.exit(1)
    member_id = sys.argv[1]
    expires = timedelta(minutes=int(sys.argv[2])) if len(sys.argv) > 2 else None
    print(create_access_token(member_id, expires_delta=expires))


if __name__ == "__main__":
    main()
