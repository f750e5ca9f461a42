"""Administrative bulk purge of the operational Firestore collections.

Deletes every document in each collection of a fixed allowlist, one
collection at a time, in atomic batches of at most MAX_BATCH_SIZE deletes.
A failure in one collection is reported through the progress sink and
never stops the remaining collections. Committed batches are final.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence

from siteops.application.dtos.purge import CollectionPurgeOutcome, PurgeReport
from siteops.application.interfaces.repositories import IDocumentStore
from siteops.core.constants import MAX_BATCH_SIZE
from siteops.domain.collections import PURGE_COLLECTIONS
from siteops.domain.exceptions import ValidationException

logger = logging.getLogger(__name__)

ProgressSink = Callable[[str], None]


def _chunks(ids: Sequence[str], size: int) -> list[Sequence[str]]:
    return [ids[i : i + size] for i in range(0, len(ids), size)]


class CollectionPurgeService:
    """Purges the allowlisted collections and reports progress as text.

    The collection list defaults to PURGE_COLLECTIONS. It is a constructor
    argument only so tests can drive a smaller list; the API and CLI never
    pass one.
    """

    def __init__(
        self,
        store: IDocumentStore,
        collections: Sequence[str] = PURGE_COLLECTIONS,
    ) -> None:
        if not collections:
            raise ValidationException("At least one collection is required", "collections")
        if len(set(collections)) != len(collections):
            raise ValidationException("Collections must not repeat", "collections")
        self._store = store
        self._collections = tuple(collections)

    @property
    def collections(self) -> tuple[str, ...]:
        return self._collections

    @staticmethod
    def _emit(progress: ProgressSink | None, message: str) -> None:
        logger.info(message)
        if progress is not None:
            progress(message)

    async def purge(self, progress: ProgressSink | None = None) -> int:
        """Delete all documents in every collection; return the number deleted."""
        report = await self.purge_with_report(progress)
        return report.total_deleted

    async def purge_with_report(
        self, progress: ProgressSink | None = None
    ) -> PurgeReport:
        """Run the purge and return per-collection outcomes plus the total.

        Collections are processed strictly in order and batches strictly one
        after another. Only committed batches count towards the totals.
        """
        outcomes: list[CollectionPurgeOutcome] = []
        total_deleted = 0
        for name in self._collections:
            outcome = await self._purge_collection(name, progress)
            total_deleted += outcome.deleted
            outcomes.append(outcome)

        self._emit(progress, f"Cleanup complete! Total documents deleted: {total_deleted}")
        return PurgeReport(outcomes=tuple(outcomes), total_deleted=total_deleted)

    async def _purge_collection(
        self, name: str, progress: ProgressSink | None
    ) -> CollectionPurgeOutcome:
        found: int | None = None
        deleted = 0
        batches = 0
        self._emit(progress, f"Processing collection: {name}...")
        try:
            ids = await self._store.list_document_ids(name)
            found = len(ids)
            self._emit(progress, f"Found {found} documents in {name}")
            if not ids:
                return CollectionPurgeOutcome(
                    collection=name, found=0, deleted=0, batches=0, completed=False
                )

            for chunk in _chunks(ids, MAX_BATCH_SIZE):
                await self._store.commit_deletes(name, chunk)
                deleted += len(chunk)
                batches += 1
                self._emit(
                    progress,
                    f"Deleted {len(chunk)} documents from {name} ({deleted} so far)",
                )

            self._emit(progress, f"Completed {name}")
            return CollectionPurgeOutcome(
                collection=name,
                found=found,
                deleted=deleted,
                batches=batches,
                completed=True,
            )
        except Exception as exc:
            logger.exception("Purge of collection %s failed after %s deletes", name, deleted)
            self._emit(
                progress,
                f"Error in {name}: {exc} ({deleted} documents already deleted)",
            )
            return CollectionPurgeOutcome(
                collection=name,
                found=found,
                deleted=deleted,
                batches=batches,
                completed=False,
                error=str(exc),
            )

    async def preview(
        self, progress: ProgressSink | None = None
    ) -> dict[str, int | None]:
        """Count the documents a purge would delete, without deleting anything.

        A collection whose count fails maps to None.
        """
        counts: dict[str, int | None] = {}
        for name in self._collections:
            try:
                count = await self._store.count_documents(name)
            except Exception as exc:
                logger.exception("Counting collection %s failed", name)
                self._emit(progress, f"Error counting {name}: {exc}")
                counts[name] = None
                continue
            counts[name] = count
            self._emit(progress, f"Collection {name} has {count} documents")
        return counts
