"""Application services (no infrastructure imports)."""

from siteops.application.services.authorization_service import AuthorizationService
from siteops.application.services.collection_purge_service import (
    CollectionPurgeService,
    ProgressSink,
)

__all__ = [
    "AuthorizationService",
    "CollectionPurgeService",
    "ProgressSink",
]
