"""Presentation-layer dependency injection (composition root).

Provides FastAPI Depends() for the Firestore client, the document store,
the purge service and the admin role gate. Routes depend only on these;
tests replace them through app.dependency_overrides.
"""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from siteops.application.dtos.team_member import TeamMemberResult
from siteops.application.interfaces.repositories import (
    IDocumentStore,
    ITeamMemberRepository,
)
from siteops.application.services.authorization_service import AuthorizationService
from siteops.application.services.collection_purge_service import (
    CollectionPurgeService,
)
from siteops.core.config import get_settings
from siteops.domain.exceptions import (
    AuthenticationException,
    FirestoreNotConfiguredException,
)
from siteops.infrastructure.firebase._rest_client import FirestoreRESTClient
from siteops.infrastructure.firebase.client import get_firestore_client
from siteops.infrastructure.firebase.document_store import FirestoreDocumentStore
from siteops.infrastructure.firebase.repositories import FirestoreTeamMemberRepository
from siteops.infrastructure.security.jwt import verify_token

_bearer = HTTPBearer(auto_error=False)


def require_firestore() -> FirestoreRESTClient:
    """Return the initialized Firestore client or raise 503."""
    client = get_firestore_client()
    if client is None:
        raise FirestoreNotConfiguredException()
    return client


def get_document_store(
    client: Annotated[FirestoreRESTClient, Depends(require_firestore)],
) -> IDocumentStore:
    """Firestore document store used by the purge (composition root)."""
    return FirestoreDocumentStore(client, page_size=get_settings().firestore_page_size)


def get_team_member_repository(
    client: Annotated[FirestoreRESTClient, Depends(require_firestore)],
) -> ITeamMemberRepository:
    """Team member repository used for role checks (composition root)."""
    return FirestoreTeamMemberRepository(client)


def get_collection_purge_service(
    store: Annotated[IDocumentStore, Depends(get_document_store)],
) -> CollectionPurgeService:
    """Purge service over the fixed collection allowlist."""
    return CollectionPurgeService(store)


def get_current_member_id(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(_bearer)],
) -> str:
    """Return the team member id (sub) from a valid bearer token, else 401."""
    if credentials is None or not credentials.credentials:
        raise AuthenticationException("Missing bearer token")
    try:
        payload = verify_token(credentials.credentials)
    except ValueError as e:
        raise AuthenticationException(str(e)) from e
    return str(payload["sub"])


async def require_cleanup_role(
    member_id: Annotated[str, Depends(get_current_member_id)],
    team_members: Annotated[ITeamMemberRepository, Depends(get_team_member_repository)],
) -> TeamMemberResult:
    """Return the calling team member if their role may run the cleanup, else 403."""
    authz = AuthorizationService(team_members, get_settings().cleanup_roles)
    return await authz.require_role(member_id, resource="cleanup", action="run")
