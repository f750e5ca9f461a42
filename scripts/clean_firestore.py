"""Purge operational data from Firestore (team members are preserved).

Usage:
    python -m scripts.clean_firestore [--dry-run]
Set DRY_RUN=1 (or pass --dry-run) to only count the documents that would be
deleted. Uses FIREBASE_SERVICE_ACCOUNT_KEY or FIREBASE_SERVICE_ACCOUNT_PATH.
CAUTION: without --dry-run this permanently deletes documents.
"""

import asyncio
import os
import sys

from siteops.application.services.collection_purge_service import (
    CollectionPurgeService,
)
from siteops.core.config import get_settings
from siteops.domain.collections import PRESERVED_COLLECTIONS, PURGE_COLLECTIONS
from siteops.infrastructure.firebase import (
    FirestoreDocumentStore,
    close_firebase,
    get_firestore_client,
    init_firebase,
)
from siteops.shared.telemetry import setup_logging


def _dry_run_requested() -> bool:
    if "--dry-run" in sys.argv[1:]:
        return True
    return os.environ.get("DRY_RUN", "").lower() in ("1", "true")


async def main() -> int:
    """Preview or run the purge; return the process exit code."""
    settings = get_settings()
    setup_logging()
    dry_run = _dry_run_requested()

    if not init_firebase():
        print("Firestore not configured", file=sys.stderr)
        return 1
    client = get_firestore_client()
    service = CollectionPurgeService(
        FirestoreDocumentStore(client, page_size=settings.firestore_page_size)
    )

    print(f"Starting cleanup. DRY_RUN = {dry_run}")
    print(f"Collections that will be deleted: {', '.join(PURGE_COLLECTIONS)}")
    print(f"Collections that will be preserved: {', '.join(PRESERVED_COLLECTIONS)}")
    try:
        if dry_run:
            print("*** DRY RUN - no documents will be deleted ***")
            counts = await service.preview(print)
            return 1 if any(c is None for c in counts.values()) else 0
        report = await service.purge_with_report(print)
        if report.failed_collections:
            print(
                f"Failed collections: {', '.join(report.failed_collections)}",
                file=sys.stderr,
            )
            return 1
        return 0
    finally:
        await close_firebase()


if __name__ == "__main__":
    sys.exit(asyncio.run(main()))
