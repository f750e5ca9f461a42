"""DTOs for the collection purge (per-collection outcome and run report)."""

from dataclasses import dataclass


@dataclass(frozen=True)
class CollectionPurgeOutcome:
    """What happened to one collection during a purge run.

    found is None when the listing itself failed. completed is False for
    empty collections (skipped before any batch) and for failed ones.
    """

    collection: str
    found: int | None
    deleted: int
    batches: int
    completed: bool
    error: str | None = None


@dataclass(frozen=True)
class PurgeReport:
    """Ordered outcomes of a purge run and the grand total of committed deletes."""

    outcomes: tuple[CollectionPurgeOutcome, ...]
    total_deleted: int

    @property
    def failed_collections(self) -> list[str]:
        return [o.collection for o in self.outcomes if o.error is not None]
