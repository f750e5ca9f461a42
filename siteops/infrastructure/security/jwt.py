"""JWT access tokens for the admin API.

The subject claim is the team member id (document id in teamMembers).
"""

from datetime import UTC, datetime, timedelta
from typing import Any, cast

from jose import JWTError, jwt

from siteops.core.config import get_settings


def create_access_token(
    member_id: str,
    expires_delta: timedelta | None = None,
    extra_claims: dict[str, Any] | None = None,
) -> str:
    """Create a signed access token for a team member.

    Args:
        member_id: Team member id, stored as the sub claim.
        expires_delta: Optional TTL; else uses settings.access_token_expire_minutes.
        extra_claims: Optional additional claims.

    Returns:
        Encoded JWT string.
    """
    settings = get_settings()
    to_encode: dict[str, Any] = dict(extra_claims or {})
    to_encode["sub"] = member_id
    if expires_delta is not None:
        expire = datetime.now(UTC) + expires_delta
    else:
        expire = datetime.now(UTC) + timedelta(
            minutes=settings.access_token_expire_minutes
        )
    to_encode["exp"] = expire
    encoded = jwt.encode(
        to_encode,
        settings.secret_key.get_secret_value(),
        algorithm=settings.algorithm,
    )
    return cast(str, encoded)


def verify_token(token: str) -> dict[str, Any]:
    """Verify and decode a JWT. Returns the payload.

    Raises:
        ValueError: If token is invalid, expired, or missing exp/sub.
    """
    settings = get_settings()
    try:
        payload = jwt.decode(
            token,
            settings.secret_key.get_secret_value(),
            algorithms=[settings.algorithm],
            options={"require_exp": True, "require_sub": True},
        )
    except JWTError as e:
        raise ValueError(f"Invalid token: {e!s}") from e
    if not payload.get("sub"):
        raise ValueError("Token missing required claim: sub")
    return payload
