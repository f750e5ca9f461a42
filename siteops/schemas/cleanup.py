"""Cleanup (collection purge) API schemas."""

from pydantic import BaseModel, Field


class CleanupRequest(BaseModel):
    """Body for POST /admin/cleanup. Both confirmations are required."""

    confirm: bool = Field(
        default=False, description="First confirmation: delete all data except team members"
    )
    confirmation_text: str = Field(
        default="", description="Second confirmation: the configured phrase (default YES)"
    )


class CollectionOutcomeResponse(BaseModel):
    """Outcome of one collection in a cleanup run."""

    collection: str
    found: int | None
    deleted: int
    batches: int
    completed: bool
    error: str | None = None


class CleanupRunResponse(BaseModel):
    """Response after a cleanup run (best-effort across all collections)."""

    total_deleted: int
    collections: list[CollectionOutcomeResponse]
    failed_collections: list[str]
    messages: list[str]


class CleanupPreviewResponse(BaseModel):
    """Document counts per collection that a cleanup would delete."""

    counts: dict[str, int | None]
    preserved_collections: list[str]
    messages: list[str]
