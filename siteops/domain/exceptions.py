"""Domain exceptions for siteops.

Defines domain-level exceptions for authorization, validation and document
store failures. These are independent of the HTTP layer; the presentation
layer maps them to responses in siteops.core.exception_handlers.
"""

from typing import Any


class SiteOpsException(Exception):
    """Base exception for all siteops errors.

    Attributes:
        message: Human-readable error description.
        error_code: Machine-readable error code.
        details: Additional error context (e.g. collection, field).
    """

    def __init__(
        self,
        message: str,
        error_code: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize the exception.

        Args:
            message: Human-readable error description.
            error_code: Optional machine-readable code; defaults to class name.
            details: Optional dict of extra context.
        """
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON error body used by the API."""
        body: dict[str, Any] = {"error": self.error_code, "message": self.message}
        if self.details:
            body["details"] = self.details
        return body


class ValidationException(SiteOpsException):
    """Raised when input validation fails (e.g. missing confirmation)."""

    def __init__(self, message: str, field: str | None = None) -> None:
        """Initialize with message and optional field name.

        Args:
            message: Description of the validation failure.
            field: Optional field or attribute that failed validation.
        """
        details = {"field": field} if field else {}
        super().__init__(message, "VALIDATION_ERROR", details)


class AuthenticationException(SiteOpsException):
    """Raised when the bearer token is missing, invalid or expired."""

    def __init__(self, message: str = "Authentication failed") -> None:
        super().__init__(message, "AUTHENTICATION_ERROR")


class AuthorizationException(SiteOpsException):
    """Raised when the team member lacks the role required for the operation."""

    def __init__(
        self,
        resource: str | None = None,
        action: str | None = None,
        message: str = "Permission denied",
    ) -> None:
        """Initialize with optional resource, action, and message.

        Args:
            resource: Optional resource (e.g. 'cleanup').
            action: Optional action that was attempted (e.g. 'run').
            message: Human-readable message; default used when resource/action omitted.
        """
        if resource and action:
            message = f"Permission denied: {action} on {resource}"
        details: dict[str, Any] = {}
        if resource:
            details["resource"] = resource
        if action:
            details["action"] = action
        super().__init__(message, "PERMISSION_DENIED", details)


class FirestoreNotConfiguredException(SiteOpsException):
    """Raised when an operation needs Firestore but no credentials were loaded."""

    def __init__(self) -> None:
        super().__init__(
            message=(
                "Firestore is not configured. Set FIREBASE_SERVICE_ACCOUNT_KEY "
                "or FIREBASE_SERVICE_ACCOUNT_PATH."
            ),
            error_code="FIRESTORE_NOT_CONFIGURED",
        )


class DocumentStoreException(SiteOpsException):
    """Base for failures reported by the document store (read or write)."""


class CollectionReadError(DocumentStoreException):
    """Raised when listing or counting the documents of a collection fails."""

    def __init__(self, collection: str, reason: str) -> None:
        """Initialize with the collection and the underlying failure.

        Args:
            collection: Collection that could not be read.
            reason: Description of the transport or HTTP failure.
        """
        self.collection = collection
        super().__init__(
            f"Failed to read collection {collection}: {reason}",
            "COLLECTION_READ_ERROR",
            {"collection": collection},
        )


class BatchCommitError(DocumentStoreException):
    """Raised when an atomic batch of deletes could not be committed."""

    def __init__(self, collection: str, batch_size: int, reason: str) -> None:
        """Initialize with the collection, the rejected batch size and the failure.

        Args:
            collection: Collection the batch targeted.
            batch_size: Number of deletes staged in the failed batch.
            reason: Description of the transport or HTTP failure.
        """
        self.collection = collection
        self.batch_size = batch_size
        super().__init__(
            f"Failed to commit {batch_size} deletes in {collection}: {reason}",
            "BATCH_COMMIT_ERROR",
            {"collection": collection, "batch_size": batch_size},
        )
