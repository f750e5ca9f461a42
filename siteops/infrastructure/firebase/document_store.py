"""Firestore-backed document store (implements IDocumentStore)."""

from __future__ import annotations

import logging
from collections.abc import Sequence

import httpx

from siteops.core.constants import MAX_BATCH_SIZE
from siteops.domain.exceptions import (
    BatchCommitError,
    CollectionReadError,
    ValidationException,
)
from siteops.infrastructure.firebase._rest_client import FirestoreRESTClient

logger = logging.getLogger(__name__)


def _describe(exc: Exception) -> str:
    if isinstance(exc, httpx.HTTPStatusError):
        return f"HTTP {exc.response.status_code}"
    return str(exc) or exc.__class__.__name__


class FirestoreDocumentStore:
    """Lists, counts and batch-deletes documents through the REST client.

    Transport and HTTP failures are raised as CollectionReadError (reads)
    or BatchCommitError (commits).
    """

    def __init__(self, client: FirestoreRESTClient, page_size: int = 300) -> None:
        self._client = client
        self._page_size = page_size

    async def list_document_ids(self, collection: str) -> list[str]:
        """Return every document id in the collection (all pages, one snapshot)."""
        ids: list[str] = []
        try:
            async for doc_id in self._client.collection(collection).list_ids(
                page_size=self._page_size
            ):
                ids.append(doc_id)
        except httpx.HTTPError as exc:
            raise CollectionReadError(collection, _describe(exc)) from exc
        logger.debug("Listed %s documents in %s", len(ids), collection)
        return ids

    async def count_documents(self, collection: str) -> int:
        try:
            return await self._client.collection(collection).count()
        except httpx.HTTPError as exc:
            raise CollectionReadError(collection, _describe(exc)) from exc

    async def commit_deletes(
        self, collection: str, document_ids: Sequence[str]
    ) -> None:
        """Delete the documents in one atomic commit."""
        if len(document_ids) > MAX_BATCH_SIZE:
            raise ValidationException(
                f"A batch holds at most {MAX_BATCH_SIZE} deletes, got {len(document_ids)}",
                "document_ids",
            )
        if not document_ids:
            return
        names = [self._client.document_name(collection, doc_id) for doc_id in document_ids]
        try:
            await self._client.commit_deletes(names)
        except httpx.HTTPError as exc:
            raise BatchCommitError(collection, len(document_ids), _describe(exc)) from exc
