"""Cleanup API: administrative purge of operational data (team members kept).

Restricted to team members whose role is in CLEANUP_ALLOWED_ROLES. Running
the purge requires both confirmations in the request body.
"""

import hmac
import logging
from typing import Annotated

from fastapi import APIRouter, Depends, Request

from siteops.api.v1.dependencies import (
    get_collection_purge_service,
    require_cleanup_role,
)
from siteops.application.dtos.team_member import TeamMemberResult
from siteops.application.services.collection_purge_service import (
    CollectionPurgeService,
)
from siteops.core.config import get_settings
from siteops.core.limiter import limit_cleanup, limit_preview
from siteops.domain.collections import PRESERVED_COLLECTIONS
from siteops.domain.exceptions import ValidationException
from siteops.schemas.cleanup import (
    CleanupPreviewResponse,
    CleanupRequest,
    CleanupRunResponse,
    CollectionOutcomeResponse,
)
from siteops.shared.request_audit import get_audit_request_context

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/preview", response_model=CleanupPreviewResponse)
@limit_preview
async def preview_cleanup(
    request: Request,
    member: Annotated[TeamMemberResult, Depends(require_cleanup_role)],
    service: Annotated[CollectionPurgeService, Depends(get_collection_purge_service)],
):
    """Count the documents a cleanup would delete. Deletes nothing."""
    messages: list[str] = []
    counts = await service.preview(messages.append)
    return CleanupPreviewResponse(
        counts=counts,
        preserved_collections=list(PRESERVED_COLLECTIONS),
        messages=messages,
    )


@router.post("", response_model=CleanupRunResponse)
@limit_cleanup
async def run_cleanup(
    request: Request,
    body: CleanupRequest,
    member: Annotated[TeamMemberResult, Depends(require_cleanup_role)],
    service: Annotated[CollectionPurgeService, Depends(get_collection_purge_service)],
):
    """Delete every document in the operational collections.

    Best-effort: a failing collection is reported in the response and the
    remaining collections are still processed. Deletions are irreversible.
    """
    if not body.confirm:
        raise ValidationException("Cleanup must be confirmed", "confirm")
    expected = get_settings().cleanup_confirmation_text.strip()
    if not hmac.compare_digest(
        body.confirmation_text.strip().encode(), expected.encode()
    ):
        raise ValidationException(
            f"Type {expected} to confirm the cleanup", "confirmation_text"
        )

    request_id, ip_address = get_audit_request_context(request)
    logger.warning(
        "Cleanup started by team member %s (%s) request_id=%s ip=%s",
        member.id,
        member.role,
        request_id,
        ip_address,
    )
    messages: list[str] = []
    report = await service.purge_with_report(messages.append)
    logger.warning(
        "Cleanup finished request_id=%s total_deleted=%s failed=%s",
        request_id,
        report.total_deleted,
        report.failed_collections,
    )
    return CleanupRunResponse(
        total_deleted=report.total_deleted,
        collections=[
            CollectionOutcomeResponse(
                collection=o.collection,
                found=o.found,
                deleted=o.deleted,
                batches=o.batches,
                completed=o.completed,
                error=o.error,
            )
            for o in report.outcomes
        ],
        failed_collections=report.failed_collections,
        messages=messages,
    )
